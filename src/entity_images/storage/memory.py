# ABOUTME: In-memory storage adapter built from a JSON content snapshot
# ABOUTME: Implements the field directory, type registry, UUID lookup and route parameters

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from entity_images.entities.models import (
    ContentRecord,
    FieldUsage,
    FileEntity,
    MultiValueTextField,
    ReferenceListField,
    TextItem,
)
from entity_images.utils.logging import get_logger

from .errors import EntityNotFoundError


class FieldStorageDefinition(BaseModel):
    """A field of one entity type and the bundles it is attached to."""

    entity_type: str
    field_name: str
    field_type: str
    bundles: list[str] = Field(default_factory=list)


class ReferenceFieldData(BaseModel):
    """Stored value of a reference field: ids of the referenced files."""

    target_ids: list[int]

    model_config = ConfigDict(extra="forbid")


class TextFieldData(BaseModel):
    """Stored value of a text field."""

    items: list[TextItem]

    model_config = ConfigDict(extra="forbid")


class RecordData(BaseModel):
    """A content record as stored in the snapshot."""

    entity_type: str
    bundle: str
    id: int | str
    uuid: str | None = None
    label: str | None = None
    fields: dict[str, ReferenceFieldData | TextFieldData] = Field(default_factory=dict)


class ContentSnapshot(BaseModel):
    """Serializable export of records, files and field configuration."""

    entity_types: list[str] = Field(default_factory=list)
    field_storage: list[FieldStorageDefinition] = Field(default_factory=list)
    files: list[FileEntity] = Field(default_factory=list)
    records: list[RecordData] = Field(default_factory=list)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "ContentSnapshot":
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


class InMemoryEntityStorage:
    """Storage adapter over a ContentSnapshot.

    Entity types are taken from ``snapshot.entity_types`` when given, otherwise
    they are collected from field storage and records in first-seen order.
    """

    def __init__(self, snapshot: ContentSnapshot):
        self.snapshot = snapshot
        self.logger = get_logger(__name__)

        self._files_by_id = {file.id: file for file in snapshot.files}
        self._files_by_uuid = {file.uuid: file for file in snapshot.files}
        self._records = {(record.entity_type, str(record.id)): record for record in snapshot.records}
        self._records_by_uuid = {record.uuid: record for record in snapshot.records if record.uuid}

        entity_types = list(snapshot.entity_types)
        if not entity_types:
            seen = [definition.entity_type for definition in snapshot.field_storage]
            seen += [record.entity_type for record in snapshot.records]
            entity_types = list(dict.fromkeys(seen))
        self._entity_types = entity_types

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryEntityStorage":
        return cls(ContentSnapshot.from_json_file(path))

    def get_definitions(self) -> dict[str, dict[str, str]]:
        return {entity_type: {"id": entity_type} for entity_type in self._entity_types}

    def get_field_map_by_field_type(self, field_type: str) -> dict[str, dict[str, FieldUsage]]:
        field_map: dict[str, dict[str, FieldUsage]] = {}
        for definition in self.snapshot.field_storage:
            if definition.field_type != field_type:
                continue
            field_map.setdefault(definition.entity_type, {})[definition.field_name] = FieldUsage(
                type=definition.field_type, bundles=list(definition.bundles)
            )
        return field_map

    def load_entity_by_uuid(self, entity_type_id: str, uuid: str) -> FileEntity | ContentRecord | None:
        if entity_type_id == "file":
            return self._files_by_uuid.get(uuid)

        record = self._records_by_uuid.get(uuid)
        if record is None or record.entity_type != entity_type_id:
            return None
        return self._hydrate(record)

    def load(self, entity_type_id: str, entity_id: int | str) -> ContentRecord:
        """Load a record by entity type and id.

        Raises:
            EntityNotFoundError: If no such record exists
        """
        record = self._records.get((entity_type_id, str(entity_id)))
        if record is None:
            raise EntityNotFoundError(entity_type_id, entity_id)
        return self._hydrate(record)

    def _hydrate(self, record: RecordData) -> ContentRecord:
        fields: dict[str, ReferenceListField | MultiValueTextField] = {}
        for name, data in record.fields.items():
            if isinstance(data, ReferenceFieldData):
                fields[name] = ReferenceListField(entities=self._resolve_targets(record, name, data.target_ids))
            else:
                fields[name] = MultiValueTextField(items=data.items)

        return ContentRecord(
            entity_type_id=record.entity_type,
            bundle=record.bundle,
            id=record.id,
            uuid=record.uuid,
            label=record.label,
            fields=fields,
        )

    def _resolve_targets(self, record: RecordData, field_name: str, target_ids: list[int]) -> list[FileEntity]:
        files = []
        for target_id in target_ids:
            file = self._files_by_id.get(target_id)
            if file is None:
                self.logger.warning(
                    "Dropping dangling file reference",
                    entity_type=record.entity_type,
                    entity_id=record.id,
                    field_name=field_name,
                    target_id=target_id,
                )
                continue
            files.append(file)
        return files


class StaticRouteMatch:
    """Route match with a fixed set of named parameters."""

    def __init__(self, parameters: Mapping[str, Any] | None = None):
        self.parameters = dict(parameters or {})

    def get_parameters(self) -> Mapping[str, Any]:
        return self.parameters
