"""Content record models and collaborator interfaces."""

from .interfaces import (
    ContentEntity,
    EntityFieldManager,
    EntityRepository,
    EntityTypeManager,
    FileUrlGenerator,
    RouteMatch,
)
from .models import (
    ContentRecord,
    EntityInfo,
    FieldUsage,
    FieldValue,
    FileEntity,
    ImageSource,
    MultiValueTextField,
    ReferenceListField,
    TextItem,
)

__all__ = [
    "ContentEntity", "EntityFieldManager", "EntityRepository", "EntityTypeManager",
    "FileUrlGenerator", "RouteMatch",
    "ContentRecord", "EntityInfo", "FieldUsage", "FieldValue", "FileEntity",
    "ImageSource", "MultiValueTextField", "ReferenceListField", "TextItem",
]
