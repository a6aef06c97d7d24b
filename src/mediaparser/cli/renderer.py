"""Renderer for CLI output.

This module renders classification results as a rich table, or as plain
JSON-ready dicts for ``--json`` output.
"""

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.table import Table

from mediaparser.models.core import MediaDetails, MediaType, media_type_to_label

Classification = tuple[str, MediaType, Optional[MediaDetails]]

# Reason: unresolved verdicts are highlighted so they stand out in long listings.
TYPE_STYLES = {
    MediaType.UNKNOWN: "yellow",
    MediaType.AMBIGUOUS: "red bold",
}


def _format_details(details: Optional[MediaDetails]) -> str:
    if details is None:
        return ""
    fields = details.model_dump(exclude={"type"}, exclude_none=True)
    return ", ".join(f"{key}={value!r}" for key, value in fields.items())


def classification_to_dict(
    name: str, media_type: MediaType, details: Optional[MediaDetails]
) -> dict[str, Any]:
    """Convert one classification to a JSON-serializable dict."""
    return {
        "name": name,
        "type": media_type.value,
        "label": media_type_to_label(media_type),
        "details": (
            details.model_dump(mode="json", exclude_none=True)
            if details is not None
            else None
        ),
    }


def render_classifications(
    results: Sequence[Classification], console: Console | None = None
) -> None:
    """Render classification results as a rich table followed by a summary.

    Args:
        results: (name, media type, details) tuples in input order.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    table = Table(title="Media Classification")
    table.add_column("Name", style="cyan", overflow="fold")
    table.add_column("Type", style="bold", no_wrap=True)
    table.add_column("Details", style="green")

    for name, media_type, details in results:
        table.add_row(
            name,
            media_type_to_label(media_type),
            _format_details(details),
            style=TYPE_STYLES.get(media_type, ""),
        )

    console.print(table)

    unknown = sum(1 for _, media_type, _ in results if media_type == MediaType.UNKNOWN)
    ambiguous = sum(
        1 for _, media_type, _ in results if media_type == MediaType.AMBIGUOUS
    )
    console.print(f"Total: {len(results)} | Unknown: {unknown} | Ambiguous: {ambiguous}")
