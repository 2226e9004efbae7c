"""Read the sites document from YAML or TOML."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from nvhosts_common import CacheRule, HeaderRule, RedirectRule, SiteDefinition, SitesDocument
from nvhosts.errors import ConfigLoadError

log = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
TOML_SUFFIXES = {".toml"}


def _parse(path: Path, content: str) -> Any:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigLoadError(path, f"invalid YAML: {e}") from e
    if suffix in TOML_SUFFIXES:
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(path, f"invalid TOML: {e}") from e
    raise ConfigLoadError(path, f"unsupported file type {path.suffix or '(none)'!r}; use .yaml, .yml or .toml")


def load_sites(path: Path) -> SitesDocument:
    """Load and parse the sites document.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.toml`` file.

    Returns:
        The parsed document, with sites in file order.

    Raises:
        ConfigLoadError: If the file is missing, malformed, or has the wrong shape.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigLoadError(path, "file not found") from e
    except OSError as e:
        raise ConfigLoadError(path, str(e)) from e

    data = _parse(path, content)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(path, "expected a mapping with a 'sites' list at the top level")

    try:
        document = SitesDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(path, str(e)) from e

    log.info("Loaded %d site(s) from %s", len(document.sites), path)
    return document


def example_document() -> SitesDocument:
    """Sample document shown by ``nvhosts example``."""
    return SitesDocument(
        sites=[
            SiteDefinition(
                domain="www.example.com",
                headers=[
                    HeaderRule(
                        pattern="/*",
                        values={
                            "Referrer-Policy": "strict-origin-when-cross-origin",
                            "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
                        },
                    )
                ],
                redirects=[RedirectRule(source="/example", to="http://example.com", status_code=301)],
                cache_control=[CacheRule(mime="text/html", value="public, max-age=300")],
            )
        ]
    )


def dump_example() -> str:
    """Serialize the example document as YAML, using the document's field names."""
    data = example_document().model_dump(mode="json", by_alias=True, exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
