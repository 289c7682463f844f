# ABOUTME: Display layer for the archive holdings table.
# ABOUTME: Exports the view model builder and its HTML and Rich renderers.

from bookarchive.render.html import render_html
from bookarchive.render.terminal import render_table
from bookarchive.render.view import (
    EMPTY_MESSAGE,
    HISTORY_LIMIT,
    BookBlock,
    CopyRow,
    HoldingsView,
    StatusCategory,
    build_holdings_view,
    classify_status,
)

__all__ = [
    "EMPTY_MESSAGE",
    "HISTORY_LIMIT",
    "BookBlock",
    "CopyRow",
    "HoldingsView",
    "StatusCategory",
    "build_holdings_view",
    "classify_status",
    "render_html",
    "render_table",
]
