"""Domain Interfaces - Abstract contracts for external collaborators."""

from .clients import CollectionClient

__all__ = [
    "CollectionClient",
]
