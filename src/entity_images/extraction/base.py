# ABOUTME: Exceptions raised while extracting images from a content record
# ABOUTME: Storage failures are not wrapped here; they propagate as EntityStorageError


class ExtractionError(Exception):
    """Raised when image extraction fails."""

    pass


class MissingEmbedReferenceError(ExtractionError):
    """Raised when an embedded <img> tag carries no file UUID and the policy is 'error'."""

    def __init__(self, field_name: str, attributes: dict[str, str], attribute: str = "data-entity-uuid"):
        src = attributes.get("src", "<no src>")
        super().__init__(f"<img> in field {field_name} has no {attribute} attribute (src: {src})")
        self.field_name = field_name
        self.attributes = attributes
        self.attribute = attribute
