"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from nvhosts_common import NvhostsConfig, SiteDefinition
from nvhosts.config import get_config
from nvhosts.services.vhost_renderer import VhostRenderer

SITES_YAML = """\
sites:
  - domain: www.example.com
    headers:
      - for: /*
        values:
          X-Frame-Options: DENY
          Referrer-Policy: strict-origin-when-cross-origin
    redirects:
      - from: /old
        to: /new
        status_code: 301
    cache_control:
      - mime: text/html
        value: public, max-age=300
  - domain: docs.example.org
"""


@pytest.fixture(autouse=True)
def _fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(scope="session")
def renderer() -> VhostRenderer:
    return VhostRenderer()


@pytest.fixture
def tmp_config(tmp_path: Path) -> NvhostsConfig:
    """Return an NvhostsConfig pointing at temp paths."""
    return NvhostsConfig(
        config_path=tmp_path / "nvhosts.yaml",
        output_dir=tmp_path / "sites-available",
        backend_url="https://storage.example.net",
        nginx_bin="nginx",
    )


@pytest.fixture
def sites_file(tmp_path: Path) -> Path:
    path = tmp_path / "nvhosts.yaml"
    path.write_text(SITES_YAML)
    return path


@pytest.fixture
def full_site() -> SiteDefinition:
    return SiteDefinition.model_validate(
        {
            "domain": "www.example.com",
            "headers": [
                {"for": "/*", "values": {"X-Frame-Options": "DENY"}},
                {"for": "/assets/*", "values": {"X-Content-Type-Options": "nosniff"}},
            ],
            "redirects": [
                {"from": "/old", "to": "/new", "status_code": 301},
                {"from": "/gone", "to": "https://example.org/", "status_code": 302},
            ],
            "cache_control": [
                {"mime": "text/html", "value": "no-cache"},
                {"mime": "image/png", "value": "public, max-age=86400"},
            ],
            "extra": "    error_page 404 /404.html;",
        }
    )
