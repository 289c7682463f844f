# ABOUTME: The `bookarchive export-html` command.
# ABOUTME: Writes the holdings table as an HTML fragment to a file or stdout.

from pathlib import Path

import click

from bookarchive.cli.options import db_option, open_service
from bookarchive.render.html import render_html
from bookarchive.render.view import build_holdings_view


@click.command("export-html")
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to write (default: stdout).",
)
@db_option
def export_html(output: Path | None, db_path: Path | None) -> None:
    """Render the holdings table as HTML."""
    with open_service(db_path) as service:
        markup = render_html(build_holdings_view(service.catalog))

    if output is None:
        click.echo(markup, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markup, encoding="utf-8")
    click.echo(f"Wrote {output}")
