"""Extract the image files referenced by a content record."""

from entity_images.entities.models import ContentRecord, FileEntity, ImageSource
from entity_images.extraction import EntityImagesExtractor, ExtractionError, MissingEmbedReferenceError

__all__ = [
    "ContentRecord",
    "EntityImagesExtractor",
    "ExtractionError",
    "FileEntity",
    "ImageSource",
    "MissingEmbedReferenceError",
]
