# ABOUTME: Exceptions raised by storage adapters and file URL generation
# ABOUTME: Storage failures are fatal for an extraction call and propagate to the caller


class EntityStorageError(Exception):
    """Raised when the storage backend fails."""

    pass


class EntityNotFoundError(EntityStorageError):
    """Raised when a record requested by id does not exist."""

    def __init__(self, entity_type_id: str, entity_id: int | str):
        super().__init__(f"No {entity_type_id} entity with id {entity_id}")
        self.entity_type_id = entity_type_id
        self.entity_id = entity_id


class FileUrlError(EntityStorageError):
    """Raised when a file URI cannot be turned into a public URL."""

    pass
