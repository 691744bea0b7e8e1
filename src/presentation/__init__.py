"""HTTP layer: routers, schemas and middleware."""
