# ABOUTME: Collects image files referenced by a content record
# ABOUTME: Reads image fields directly and resolves <img data-entity-uuid> tags in rich text fields

from entity_images.config import Config, get_config
from entity_images.entities.interfaces import (
    ContentEntity,
    EntityFieldManager,
    EntityRepository,
    EntityTypeManager,
    FileUrlGenerator,
    RouteMatch,
)
from entity_images.entities.models import (
    EntityInfo,
    FieldUsage,
    FileEntity,
    ImageSource,
    MultiValueTextField,
)
from entity_images.storage.urls import StreamWrapperUrlGenerator
from entity_images.utils.logging import get_logger, with_operation_context

from .base import MissingEmbedReferenceError
from .html import extract_image_attributes, extract_images


class EntityImagesExtractor:
    """Extract every image file referenced by a content record.

    The record is either set explicitly with ``set_entity`` or taken from the
    current route with ``set_entity_from_request``. Images come from two places:

    1. Image fields attached to the record's bundle.
    2. ``<img>`` tags embedded in text fields, resolved through the UUID in
       their ``data-entity-uuid`` attribute.

    Results are keyed by file id, so a file referenced several times (in either
    place) is returned once, at the position it was first seen.
    """

    def __init__(
        self,
        field_manager: EntityFieldManager,
        entity_type_manager: EntityTypeManager,
        entity_repository: EntityRepository,
        route_match: RouteMatch,
        config: Config | None = None,
    ):
        self.field_manager = field_manager
        self.entity_type_manager = entity_type_manager
        self.entity_repository = entity_repository
        self.route_match = route_match
        self.config = config or get_config()
        self.logger = get_logger(__name__)

        self._entity: object | None = None
        self._entity_info: EntityInfo | None = None

    @property
    def entity(self) -> object | None:
        return self._entity

    @property
    def entity_info(self) -> EntityInfo | None:
        return self._entity_info

    def set_entity_from_request(self) -> None:
        """Use the first route parameter named after a known entity type."""
        self._entity = None
        parameters = self.route_match.get_parameters()
        for entity_type in self.entity_type_manager.get_definitions():
            if entity_type in parameters:
                self._entity = parameters[entity_type]
                break
        self.set_entity_info()

        self.logger.debug(
            "Resolved entity from request",
            found=self._entity is not None,
            entity_type=self._entity_info.entity_type if self._entity_info else None,
        )

    def set_entity(self, entity: ContentEntity) -> None:
        """Override the record to process."""
        self._entity = entity
        self.set_entity_info()

    def set_entity_info(self) -> None:
        """Refresh the cached entity type and bundle from the current record."""
        if isinstance(self._entity, ContentEntity):
            self._entity_info = EntityInfo(
                entity_type=str(self._entity.entity_type_id),
                bundle=str(self._entity.bundle),
            )
        else:
            self._entity_info = None

    @with_operation_context("extract_image_entities")
    def extract_image_entities(self) -> list[FileEntity]:
        """Return the image files referenced by the current record.

        Returns:
            Files in first-seen order, image fields before text fields

        Raises:
            EntityStorageError: If resolving an embedded image fails in storage
            MissingEmbedReferenceError: If an <img> has no UUID and the policy is 'error'
        """
        # Nothing to do on pages without a content record
        if not isinstance(self._entity, ContentEntity) or self._entity_info is None:
            return []

        entities: dict[int, FileEntity] = {}
        self.process_image_fields(entities)
        self.process_text_fields(entities)
        return list(entities.values())

    @staticmethod
    def get_image_url_and_type(file: FileEntity, url_generator: FileUrlGenerator | None = None) -> ImageSource:
        """Get an image's public URL and MIME type."""
        generator = url_generator or StreamWrapperUrlGenerator.from_config()
        return ImageSource(url=generator.generate_absolute_string(file.uri), type=file.mime_type)

    def collect_fields_by_type(self, field_type: str) -> list[str]:
        """Names of fields of the given kind attached to the current bundle."""
        if self._entity_info is None:
            return []

        bundle = self._entity_info.bundle
        return [name for name, usage in self._get_fields_map(field_type).items() if bundle in usage.bundles]

    def process_image_fields(self, entities: dict[int, FileEntity]) -> None:
        for field_name in self.collect_fields_by_type(self.config.image_field_type):
            if not self._entity.has_field(field_name):
                continue

            field = self._entity.get(field_name)
            if field.kind != "reference_list":
                continue

            for file in field.referenced_entities():
                if isinstance(file, FileEntity):
                    entities[file.id] = file

    def process_text_fields(self, entities: dict[int, FileEntity]) -> None:
        for field_name in self._prepare_text_fields():
            if not self._entity.has_field(field_name):
                continue

            field = self._entity.get(field_name)
            # Do not operate on empty fields
            if field.kind != "text" or field.is_empty():
                continue

            html = self._get_html_value_from_text_field(field)
            if not html:
                continue

            for image in extract_images(html):
                attributes = extract_image_attributes(image)
                file = self._get_file_from_image_attributes(field_name, attributes)
                if file is not None:
                    entities[file.id] = file

    def _get_fields_map(self, field_type: str) -> dict[str, FieldUsage]:
        field_map = self.field_manager.get_field_map_by_field_type(field_type)
        if not field_map:
            return {}
        return field_map.get(self._entity_info.entity_type) or {}

    def _prepare_text_fields(self) -> list[str]:
        text_fields: dict[str, None] = {}
        for field_type in self.config.text_field_types:
            text_fields.update(dict.fromkeys(self.collect_fields_by_type(field_type)))
        return list(text_fields)

    @staticmethod
    def _get_html_value_from_text_field(field: MultiValueTextField) -> str:
        # Concatenate all values into one fragment
        return "".join(item.value for item in field.get_value() if item.value)

    def _get_file_from_image_attributes(self, field_name: str, attributes: dict[str, str]) -> FileEntity | None:
        uuid = (attributes.get(self.config.uuid_attribute) or "").strip()
        if not uuid:
            if self.config.missing_uuid_policy == "error":
                raise MissingEmbedReferenceError(field_name, attributes, self.config.uuid_attribute)
            self.logger.warning(
                "Skipping embedded image without file UUID",
                field_name=field_name,
                src=attributes.get("src"),
                attribute=self.config.uuid_attribute,
            )
            return None

        return self._get_file_by_uuid(uuid)

    def _get_file_by_uuid(self, uuid: str) -> FileEntity | None:
        entity = self.entity_repository.load_entity_by_uuid("file", uuid)
        if not isinstance(entity, FileEntity):
            self.logger.debug("No file matches embedded UUID", uuid=uuid, found=entity is not None)
            return None
        return entity
