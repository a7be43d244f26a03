# ABOUTME: Rich table helpers for command line output
# ABOUTME: Renders extracted images and logging status as styled tables

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from entity_images.entities.models import FileEntity, ImageSource


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two column key/value table.

    Args:
        title: Table title
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    box_style=ROUNDED,
) -> Table:
    """Create a zebra-striped table with one row per item."""
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_images_table(title: str, images: list[tuple[FileEntity, ImageSource | None]]) -> Table:
    """Create a table of extracted image files.

    Args:
        title: Table title, usually naming the record
        images: Files paired with their resolved URL/MIME type, or None when URLs were not requested

    Returns:
        Styled images table
    """
    columns = [("ID", "bold blue"), ("UUID", "dim"), ("URI", "white"), ("MIME type", "green")]
    with_urls = any(source is not None for _, source in images)
    if with_urls:
        columns.append(("URL", "cyan"))

    rows = []
    for file, source in images:
        row = [str(file.id), file.uuid, file.uri, file.mime_type]
        if with_urls:
            row.append(source.url if source else "")
        rows.append(row)

    return create_multi_column_table(title=title, columns=columns, rows=rows)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table."""
    logging_data = {
        "Mode": status["mode"].title(),
        "Log Directory": status["log_directory"] or "N/A (production mode)",
        "Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing."""
    console.print()
    console.print(table)
    console.print()
