# ABOUTME: Pydantic models for content records, their field values and file entities
# ABOUTME: Field values are a tagged union so callers dispatch on ``kind`` instead of class checks

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class FileEntity(BaseModel):
    """A stored binary asset, such as an uploaded image."""

    id: int = Field(..., description="File identity")
    uuid: str = Field(..., description="Universally unique id used by embedded references")
    uri: str = Field(..., description="Stream wrapper URI, absolute URL or site-relative path")
    mime_type: str = Field(default="application/octet-stream", description="Declared MIME type")
    filename: str | None = Field(default=None, description="Original file name")
    entity_type_id: Literal["file"] = "file"

    model_config = ConfigDict(frozen=True)


class EntityInfo(BaseModel):
    """Snapshot of the entity type and bundle of the record being processed."""

    entity_type: str
    bundle: str

    model_config = ConfigDict(frozen=True)


class FieldUsage(BaseModel):
    """Where a field of a given kind is used within one entity type."""

    type: str = Field(..., description="Field kind, e.g. 'image' or 'text_long'")
    bundles: list[str] = Field(default_factory=list, description="Bundles the field is attached to")


class TextItem(BaseModel):
    """One value of a (possibly multi-valued) text field."""

    value: str | None = None
    format: str | None = None
    summary: str | None = None


class ReferenceListField(BaseModel):
    """Field value referencing other entities, as image fields do."""

    kind: Literal["reference_list"] = "reference_list"
    entities: list[FileEntity] = Field(default_factory=list)

    def referenced_entities(self) -> list[FileEntity]:
        return list(self.entities)

    def is_empty(self) -> bool:
        return not self.entities


class MultiValueTextField(BaseModel):
    """Field value holding one or more text items."""

    kind: Literal["text"] = "text"
    items: list[TextItem] = Field(default_factory=list)

    def get_value(self) -> list[TextItem]:
        return list(self.items)

    def is_empty(self) -> bool:
        return not any(item.value for item in self.items)


FieldValue = Annotated[ReferenceListField | MultiValueTextField, Field(discriminator="kind")]


class ContentRecord(BaseModel):
    """A content item with a type, a bundle and named field values."""

    entity_type_id: str
    bundle: str
    id: int | str
    uuid: str | None = None
    label: str | None = None
    fields: dict[str, FieldValue] = Field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def get(self, name: str) -> ReferenceListField | MultiValueTextField:
        """Return the value of a field.

        Raises:
            KeyError: If the record has no such field
        """
        try:
            return self.fields[name]
        except KeyError:
            raise KeyError(f"Field {name} is unknown on {self.entity_type_id}:{self.bundle}") from None


class ImageSource(BaseModel):
    """Public URL and MIME type of an image file."""

    url: str
    type: str
