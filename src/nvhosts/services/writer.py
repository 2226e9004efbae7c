"""Write rendered vhosts to disk."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from nvhosts_common import RenderedSite

log = logging.getLogger(__name__)


def write_vhost(path: Path, content: str) -> None:
    """Write vhost config to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def write_sites(rendered: Sequence[RenderedSite], output_dir: Path, *, prune: bool = False) -> list[Path]:
    """Write one ``<domain>.conf`` per rendered site.

    With ``prune``, other ``*.conf`` files in ``output_dir`` are removed so the
    directory holds exactly the current set.
    """
    written: list[Path] = []
    for site in rendered:
        path = output_dir / site.filename
        write_vhost(path, site.text)
        log.info("Wrote %s", path)
        written.append(path)

    if prune and output_dir.exists():
        keep = {p.name for p in written}
        for stale in sorted(output_dir.glob("*.conf")):
            if stale.name not in keep:
                stale.unlink()
                log.info("Removed stale %s", stale)

    return written
