# ABOUTME: Image extraction from content records
# ABOUTME: Image fields and <img> tags embedded in rich text, resolved to file entities

"""
Extraction Layer: Find the image files a content record refers to

This layer handles:
- Resolving the record to process from the current route or an override
- Classifying the record's fields into image fields and text fields
- Scanning rich text for embedded <img> tags and resolving their UUIDs

Data Flow: Route/record → Field classification → File entities
"""

from .base import ExtractionError, MissingEmbedReferenceError
from .extractor import EntityImagesExtractor

__all__ = [
    "EntityImagesExtractor",
    "ExtractionError",
    "MissingEmbedReferenceError",
]
