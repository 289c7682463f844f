# ABOUTME: Renders the holdings view as a Rich table for terminal output.
# ABOUTME: Book details appear on each book's first copy row only.

from rich.markup import escape
from rich.table import Table

from bookarchive.render.view import HoldingsView, StatusCategory

_STATUS_STYLES = {
    StatusCategory.AVAILABLE: "green",
    StatusCategory.UNAVAILABLE: "red",
}


def render_table(view: HoldingsView) -> Table:
    """Build a Rich table with one row per copy."""
    table = Table(show_lines=True)
    table.add_column("Book Details", style="bold")
    table.add_column("Copy ID", style="cyan")
    table.add_column("Location")
    table.add_column("History (max 5)")
    table.add_column("Status")

    for block in view.blocks:
        details = (
            f"{escape(block.title)}\n[dim]{escape(block.author)}[/dim]\n"
            f"ID: {escape(block.book_id)}"
        )
        for index, row in enumerate(block.rows):
            style = _STATUS_STYLES[row.category]
            table.add_row(
                details if index == 0 else "",
                escape(row.copy_id),
                escape(row.location),
                escape("\n".join(row.history)),
                f"[{style}]{escape(row.status)}[/{style}]",
            )

    return table
