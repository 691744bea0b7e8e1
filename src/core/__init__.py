"""Cross-cutting configuration, logging, metrics and dependency wiring."""
