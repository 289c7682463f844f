# ABOUTME: CLI package for Bookarchive, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from bookarchive.cli.commands import book_cmd, copy_cmd, export_cmd, ls_cmd, shelves_cmd


@click.group()
@click.version_option(package_name="bookarchive")
@click.option("-v", "--verbose", is_flag=True, help="Log catalog operations to stderr.")
def cli(verbose: bool) -> None:
    """Bookarchive - track books and their physical copies."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


cli.add_command(book_cmd.add)
cli.add_command(book_cmd.rm)
cli.add_command(book_cmd.edit)
cli.add_command(book_cmd.info)
cli.add_command(copy_cmd.add_copies)
cli.add_command(copy_cmd.rm_copy)
cli.add_command(copy_cmd.rm_copies)
cli.add_command(ls_cmd.ls)
cli.add_command(export_cmd.export_html)
cli.add_command(shelves_cmd.shelves)
