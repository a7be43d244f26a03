# ABOUTME: Main CLI application entry point using asyncclick
# ABOUTME: Extracts the images of a record from a JSON content snapshot and shows logging status

import json
from pathlib import Path

import asyncclick as click
from pydantic import ValidationError
from rich.console import Console

from entity_images.config import get_config
from entity_images.entities.models import FileEntity, ImageSource
from entity_images.extraction import EntityImagesExtractor, ExtractionError
from entity_images.storage import (
    EntityStorageError,
    InMemoryEntityStorage,
    StaticRouteMatch,
    StreamWrapperUrlGenerator,
)
from entity_images.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_entity_context,
)
from entity_images.utils.rich_tables import create_images_table, create_logging_status_table, print_rich_table

console = Console()


def _image_to_dict(file: FileEntity, source: ImageSource | None) -> dict:
    data = file.model_dump(exclude={"entity_type_id"})
    if source is not None:
        data["url"] = source.url
    return data


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("entity_type")
@click.argument("entity_id")
@click.option("--urls/--no-urls", default=True, help="Resolve public URLs for every image")
@click.pass_context
async def extract(ctx, snapshot: Path, entity_type: str, entity_id: str, urls: bool):
    """
    Extract the images referenced by one record of a content snapshot.

    The record is routed in as the ENTITY_TYPE route parameter and picked up
    the same way a page request would pick it up.
    """
    ok = await _extract_async(snapshot, entity_type, entity_id, urls, ctx.obj["json_output"])
    if not ok:
        ctx.exit(1)


async def _extract_async(snapshot: Path, entity_type: str, entity_id: str, urls: bool, json_output: bool) -> bool:
    """Run one extraction and print its result, returning False on failure."""
    with with_entity_context(entity_type, entity_id) as logger:
        config = get_config()

        try:
            storage = InMemoryEntityStorage.from_json_file(snapshot)
            record = storage.load(entity_type, entity_id)

            extractor = EntityImagesExtractor(
                field_manager=storage,
                entity_type_manager=storage,
                entity_repository=storage,
                route_match=StaticRouteMatch({entity_type: record}),
                config=config,
            )
            extractor.set_entity_from_request()
            files = extractor.extract_image_entities()

            url_generator = StreamWrapperUrlGenerator.from_config(config) if urls else None
            images = [
                (file, EntityImagesExtractor.get_image_url_and_type(file, url_generator) if url_generator else None)
                for file in files
            ]
        except (EntityStorageError, ExtractionError, ValidationError) as e:
            logger.error("Extraction failed", error=str(e), error_type=type(e).__name__)
            if json_output:
                click.echo(json.dumps({"error": str(e)}))
            else:
                console.print(f"[red]❌ {e}[/red]")
            return False

        logger.info("Extraction complete", image_count=len(images))

        if json_output:
            payload = {
                "entity_type": entity_type,
                "entity_id": entity_id,
                "images": [_image_to_dict(file, source) for file, source in images],
            }
            click.echo(json.dumps(payload, indent=2))
        elif images:
            print_rich_table(console, create_images_table(f"Images of {entity_type} {entity_id}", images))
        else:
            console.print(f"[yellow]No images found for {entity_type} {entity_id}.[/yellow]")

        return True


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    Entity Images - find the images a content record refers to.

    Reads image fields and <img data-entity-uuid> tags embedded in rich text.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(extract)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
