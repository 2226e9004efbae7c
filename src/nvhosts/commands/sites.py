"""Inspect the sites document: list, show, example."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from nvhosts_common import TemplateVariant
from nvhosts.commands._common import exit_on_error, load_and_compile
from nvhosts.config import get_config
from nvhosts.services import loader

console = Console()


def list_sites(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Sites document"),
) -> None:
    """List the sites defined in the sites document."""
    with exit_on_error():
        cfg = get_config()
        config_path = config or cfg.config_path
        document = loader.load_sites(config_path)

    table = Table(title=f"Sites in {config_path}")
    table.add_column("Domain", style="cyan")
    table.add_column("Headers", justify="right")
    table.add_column("Redirects", justify="right")
    table.add_column("Cache rules", justify="right")

    for site in document.sites:
        table.add_row(
            site.domain,
            str(len(site.headers or ())),
            str(len(site.redirects or ())),
            str(len(site.cache_control or ())),
        )

    console.print(table)


def show(
    domain: str = typer.Argument(help="Domain name to render"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Sites document"),
    variant: Optional[TemplateVariant] = typer.Option(None, help="Vhost template variant"),
) -> None:
    """Render and display the NGINX vhost for one domain."""
    with exit_on_error():
        cfg = get_config()
        _, rendered = load_and_compile(
            config or cfg.config_path,
            variant=variant or cfg.variant,
            backend_url=cfg.backend_url,
            pad_width=cfg.pad_width,
        )

    for site in rendered:
        if site.domain == domain:
            console.print(Syntax(site.text, "nginx", theme="monokai"))
            return

    console.print(f"[red]No site defined for {domain}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def example() -> None:
    """Print an example sites document."""
    typer.echo(loader.dump_example(), nl=False)
