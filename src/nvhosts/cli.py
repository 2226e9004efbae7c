"""Root Typer application for the nvhosts CLI."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from nvhosts import __version__
from nvhosts.commands import generate, sites

app = typer.Typer(
    name="nvhosts",
    help="Generate NGINX vhosts that serve sites from object-storage buckets.",
    no_args_is_help=True,
)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_print_version, is_eager=True, help="Show the version"
    ),
) -> None:
    setup_logging(verbose)


app.command(name="generate")(generate.generate)
app.command(name="show")(sites.show)
app.command(name="list")(sites.list_sites)
app.command(name="example")(sites.example)

if __name__ == "__main__":
    app()
