"""Domain layer: entities, exceptions and client interfaces."""
