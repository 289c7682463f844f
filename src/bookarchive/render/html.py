# ABOUTME: Renders the holdings view as an HTML table fragment.
# ABOUTME: Book details span their copy rows; status cells carry a category class.

from html import escape

from bookarchive.render.view import EMPTY_MESSAGE, BookBlock, HoldingsView

_HEADER = (
    '<table class="archive-table">\n'
    "  <thead>\n"
    "    <tr>\n"
    "      <th>Book Details</th>\n"
    "      <th>Copy ID</th>\n"
    "      <th>Location</th>\n"
    "      <th>History (max 5)</th>\n"
    "      <th>Status</th>\n"
    "    </tr>\n"
    "  </thead>\n"
    "  <tbody>\n"
)
_FOOTER = "  </tbody>\n</table>\n"


def _details_cell(block: BookBlock) -> str:
    return (
        f'<td rowspan="{block.row_span}" class="details-cell">'
        f'<div class="book-details"><b>{escape(block.title)}</b><br>'
        f"{escape(block.author)}<br>ID: {escape(block.book_id)}</div></td>"
    )


def _block_rows(block: BookBlock) -> list[str]:
    lines = []
    for index, row in enumerate(block.rows):
        history = "".join(f"<li>{escape(entry)}</li>" for entry in row.history)
        cells = [
            f"<td>{escape(row.copy_id)}</td>",
            f"<td>{escape(row.location)}</td>",
            f'<td><ul class="history-list">{history}</ul></td>',
            f'<td class="status status-{row.category.value}">{escape(row.status)}</td>',
        ]
        if index == 0:
            cells.insert(0, _details_cell(block))
        lines.append(f'    <tr class="copy-row">{"".join(cells)}</tr>\n')
    return lines


def render_html(view: HoldingsView) -> str:
    """Render the view as HTML, or a placeholder paragraph when it is empty."""
    if view.is_empty:
        return f"<p>{EMPTY_MESSAGE}</p>\n"

    parts = [_HEADER]
    for block in view.blocks:
        parts.extend(_block_rows(block))
    parts.append(_FOOTER)
    return "".join(parts)
