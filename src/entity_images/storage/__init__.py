# ABOUTME: Storage adapters and file URL generation
# ABOUTME: Concrete collaborators for the extractor's storage and routing interfaces

"""
Storage Layer: Concrete collaborators behind the entity interfaces

This layer handles:
- Loading records, files and field configuration from a JSON snapshot
- UUID lookup and field usage maps over that snapshot
- Public URL generation for file URIs

Data Flow: JSON snapshot → Hydrated records → extraction/
"""

from .errors import EntityNotFoundError, EntityStorageError, FileUrlError
from .memory import ContentSnapshot, InMemoryEntityStorage, StaticRouteMatch
from .urls import StreamWrapperUrlGenerator

__all__ = [
    "ContentSnapshot",
    "EntityNotFoundError",
    "EntityStorageError",
    "FileUrlError",
    "InMemoryEntityStorage",
    "StaticRouteMatch",
    "StreamWrapperUrlGenerator",
]
