# ABOUTME: Shared fixtures: a small content snapshot and extractors wired to it
# ABOUTME: Articles carry image fields and rich text; pages and landing pages exercise the empty cases

import pytest

from entity_images.config import Config
from entity_images.extraction import EntityImagesExtractor
from entity_images.storage import ContentSnapshot, InMemoryEntityStorage, StaticRouteMatch

CAT_UUID = "0b6c4d7e-1111-4a1a-9c1e-000000000001"
DOG_UUID = "0b6c4d7e-2222-4a1a-9c1e-000000000002"
INLINE_UUID = "0b6c4d7e-3333-4a1a-9c1e-000000000003"
PORTRAIT_UUID = "0b6c4d7e-4444-4a1a-9c1e-000000000004"
ARTICLE_UUID = "7f0e3c2a-aaaa-4b2b-8d2d-00000000000a"
UNKNOWN_UUID = "deadbeef-0000-4000-8000-000000000000"


def build_snapshot_data() -> dict:
    return {
        "entity_types": ["node", "taxonomy_term", "user"],
        "field_storage": [
            {"entity_type": "node", "field_name": "field_image", "field_type": "image", "bundles": ["article"]},
            {
                "entity_type": "node",
                "field_name": "field_gallery",
                "field_type": "image",
                "bundles": ["article", "page"],
            },
            {
                "entity_type": "node",
                "field_name": "body",
                "field_type": "text_with_summary",
                "bundles": ["article", "page"],
            },
            {"entity_type": "node", "field_name": "field_caption", "field_type": "text_long", "bundles": ["article"]},
            {"entity_type": "node", "field_name": "field_subtitle", "field_type": "text", "bundles": ["page"]},
            {
                "entity_type": "taxonomy_term",
                "field_name": "description",
                "field_type": "text_long",
                "bundles": ["tags"],
            },
        ],
        "files": [
            {"id": 1, "uuid": CAT_UUID, "uri": "public://2024-01/cat.png", "mime_type": "image/png"},
            {"id": 2, "uuid": DOG_UUID, "uri": "public://2024-01/dog.jpg", "mime_type": "image/jpeg"},
            {"id": 3, "uuid": INLINE_UUID, "uri": "public://inline-images/chart.gif", "mime_type": "image/gif"},
            {"id": 4, "uuid": PORTRAIT_UUID, "uri": "public://people/me and you.png", "mime_type": "image/png"},
        ],
        "records": [
            {
                "entity_type": "node",
                "bundle": "article",
                "id": 1,
                "uuid": ARTICLE_UUID,
                "label": "Cats and dogs",
                "fields": {
                    "field_image": {"target_ids": [1, 2]},
                    "body": {
                        "items": [
                            {
                                "value": f'<p>Sales<img data-entity-uuid="{INLINE_UUID}" src="/chart.gif"></p>',
                                "format": "full_html",
                            }
                        ]
                    },
                    "field_caption": {"items": [{"value": f'<img data-entity-uuid="{CAT_UUID}">'}]},
                },
            },
            {
                "entity_type": "node",
                "bundle": "page",
                "id": 2,
                "label": "About",
                "fields": {
                    "body": {"items": [{"value": ""}, {"value": None}]},
                    "field_subtitle": {"items": [{"value": "Plain text, no images"}]},
                },
            },
            {"entity_type": "node", "bundle": "landing", "id": 3, "label": "Home", "fields": {}},
            {
                "entity_type": "node",
                "bundle": "article",
                "id": 4,
                "label": "Broken embeds",
                "fields": {
                    "body": {
                        "items": [
                            {
                                "value": (
                                    f'<div><img data-entity-uuid="{UNKNOWN_UUID}">'
                                    f'<img data-entity-uuid="{ARTICLE_UUID}">'
                                    '<img src="/hotlinked.png">'
                                    f'<p><span><img data-entity-uuid="{PORTRAIT_UUID}" class="align-left">'
                                )
                            }
                        ]
                    },
                },
            },
            {
                "entity_type": "taxonomy_term",
                "bundle": "tags",
                "id": 7,
                "label": "Animals",
                "fields": {"description": {"items": [{"value": f'<img data-entity-uuid="{DOG_UUID}">'}]}},
            },
        ],
    }


@pytest.fixture
def snapshot() -> ContentSnapshot:
    return ContentSnapshot.model_validate(build_snapshot_data())


@pytest.fixture
def storage(snapshot) -> InMemoryEntityStorage:
    return InMemoryEntityStorage(snapshot)


@pytest.fixture
def config() -> Config:
    return Config(_env_file=None)


@pytest.fixture
def make_extractor(storage, config):
    """Build an extractor over the snapshot storage with optional route parameters."""

    def _make(route_parameters: dict | None = None, **overrides) -> EntityImagesExtractor:
        return EntityImagesExtractor(
            field_manager=storage,
            entity_type_manager=storage,
            entity_repository=storage,
            route_match=StaticRouteMatch(route_parameters),
            config=config.model_copy(update=overrides),
        )

    return _make
