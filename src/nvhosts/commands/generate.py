"""Compile the sites document into vhost files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax

from nvhosts_common import TemplateVariant
from nvhosts.commands._common import exit_on_error, load_and_compile
from nvhosts.config import get_config
from nvhosts.services import nginx, writer

console = Console()


def generate(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Sites document (.yaml, .yml or .toml)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory receiving <domain>.conf files"),
    variant: Optional[TemplateVariant] = typer.Option(None, help="Vhost template variant"),
    backend: Optional[str] = typer.Option(None, help="Object-storage base URL"),
    prune: bool = typer.Option(False, "--prune", help="Remove .conf files for sites no longer defined"),
    check: bool = typer.Option(False, "--check", help="Run nginx -t after writing"),
    reload: bool = typer.Option(False, "--reload", help="Validate and reload NGINX after writing"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the vhosts instead of writing them"),
) -> None:
    """Generate NGINX vhosts from the sites document."""
    with exit_on_error():
        cfg = get_config()
        config_path = config or cfg.config_path
        output_dir = output or cfg.output_dir
        variant = variant or cfg.variant

        console.print(f"[bold][1/3][/bold] Compiling {config_path} ({variant.value} template)")
        document, rendered = load_and_compile(
            config_path,
            variant=variant,
            backend_url=backend or cfg.backend_url,
            pad_width=cfg.pad_width,
        )

        if dry_run:
            for site in rendered:
                console.rule(site.filename)
                console.print(Syntax(site.text, "nginx", theme="monokai"))
            console.print(f"[green]{len(rendered)} vhost(s) compiled (dry run, nothing written).[/green]")
            return

        console.print(f"[bold][2/3][/bold] Writing {len(rendered)} vhost(s) to {output_dir}")
        for path in writer.write_sites(rendered, output_dir, prune=prune):
            console.print(f"  {path}")

        if reload:
            console.print("[bold][3/3][/bold] Validating and reloading NGINX")
            nginx.reload(cfg.nginx_bin)
        elif check:
            console.print("[bold][3/3][/bold] Validating NGINX config")
            nginx.validate_config(cfg.nginx_bin)
        else:
            console.print("[bold][3/3][/bold] Skipping NGINX validation (use --check or --reload)")

        console.print(f"\n[green bold]Done![/green bold] {len(document.sites)} site(s) generated.")
