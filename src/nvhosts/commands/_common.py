"""Helpers shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from nvhosts_common import RenderedSite, SitesDocument, TemplateVariant
from nvhosts.errors import NvhostsError
from nvhosts.services import compiler, loader, validation
from nvhosts.services.vhost_renderer import VhostRenderer

err_console = Console(stderr=True)


@contextmanager
def exit_on_error() -> Generator[None, None, None]:
    """Print NvhostsError in red and exit with its exit code."""
    try:
        yield
    except NvhostsError as exc:
        err_console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(exc.exit_code) from exc


def load_and_compile(
    config_path: Path,
    *,
    variant: TemplateVariant,
    backend_url: str,
    pad_width: int,
) -> tuple[SitesDocument, list[RenderedSite]]:
    """Load, validate and compile the sites document. Nothing is written."""
    document = loader.load_sites(config_path)
    validation.validate_sites(document.sites, variant)
    renderer = VhostRenderer(pad_width=pad_width)
    rendered = compiler.compile_sites(
        document.sites,
        variant=variant,
        renderer=renderer,
        backend_url=backend_url,
    )
    return document, rendered
