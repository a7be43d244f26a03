# ABOUTME: Protocol interfaces for the storage, routing and file URL collaborators
# ABOUTME: The extractor depends only on these, never on a concrete storage layer

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .models import FieldUsage, MultiValueTextField, ReferenceListField


@runtime_checkable
class ContentEntity(Protocol):
    """A content record with a type, a bundle and fields."""

    entity_type_id: str
    bundle: str

    def has_field(self, name: str) -> bool: ...

    def get(self, name: str) -> ReferenceListField | MultiValueTextField: ...


class EntityFieldManager(Protocol):
    """Directory of which fields of a given kind exist on which bundles."""

    def get_field_map_by_field_type(self, field_type: str) -> dict[str, dict[str, FieldUsage]]:
        """Return ``entity_type -> field_name -> usage`` for fields of the given kind."""
        ...


class EntityTypeManager(Protocol):
    """Registry of known entity types."""

    def get_definitions(self) -> Mapping[str, Any]:
        """Return entity type definitions keyed by entity type id."""
        ...


class EntityRepository(Protocol):
    """UUID-keyed entity lookup."""

    def load_entity_by_uuid(self, entity_type_id: str, uuid: str) -> Any | None:
        """Load an entity by UUID.

        Returns:
            The entity, or None when nothing matches

        Raises:
            EntityStorageError: If the storage backend fails
        """
        ...


class RouteMatch(Protocol):
    """Named parameters of the route handling the current request."""

    def get_parameters(self) -> Mapping[str, Any]: ...


class FileUrlGenerator(Protocol):
    """Turns a file URI into a publicly accessible URL."""

    def generate_absolute_string(self, uri: str) -> str: ...
