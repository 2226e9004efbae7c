"""Tests for loading the sites document."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from nvhosts_common import SitesDocument
from nvhosts.errors import ConfigLoadError
from nvhosts.services.loader import dump_example, example_document, load_sites

SITES_TOML = """\
[[sites]]
domain = "www.example.com"
extra = \"\"\"
    error_page 404 /404.html;
\"\"\"

[[sites.headers]]
for = "/*"
values = { "X-Frame-Options" = "DENY" }

[[sites.redirects]]
from = "/old"
to = "/new"

[[sites]]
domain = "docs.example.org"
"""


class TestLoadSites:
    def test_yaml(self, sites_file: Path):
        document = load_sites(sites_file)
        assert [s.domain for s in document.sites] == ["www.example.com", "docs.example.org"]
        site = document.sites[0]
        assert site.headers[0].pattern == "/*"
        assert site.headers[0].values == {
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
        }
        assert site.redirects[0].source == "/old"
        assert site.redirects[0].status_code == 301
        assert site.cache_control[0].value == "public, max-age=300"
        assert document.sites[1].headers is None

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "nvhosts.toml"
        path.write_text(SITES_TOML)
        document = load_sites(path)
        site = document.sites[0]
        assert site.headers[0].values == {"X-Frame-Options": "DENY"}
        assert site.redirects[0].status_code == 302
        assert "error_page 404 /404.html;" in site.extra
        assert document.sites[1].domain == "docs.example.org"

    def test_empty_yaml(self, tmp_path: Path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_sites(path) == SitesDocument()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError, match="file not found") as exc_info:
            load_sites(tmp_path / "nope.yaml")
        assert exc_info.value.path == tmp_path / "nope.yaml"

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "sites.json"
        path.write_text("{}")
        with pytest.raises(ConfigLoadError, match="unsupported file type"):
            load_sites(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("sites: [\n")
        with pytest.raises(ConfigLoadError, match="invalid YAML"):
            load_sites(path)

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("[[sites]\n")
        with pytest.raises(ConfigLoadError, match="invalid TOML"):
            load_sites(path)

    def test_top_level_list(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- domain: a.com\n")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_sites(path)

    def test_bad_status_code(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("sites:\n  - domain: a.com\n    redirects:\n      - {from: /a, to: /b, status_code: 200}\n")
        with pytest.raises(ConfigLoadError, match="status_code"):
            load_sites(path)


class TestExample:
    def test_example_document(self):
        document = example_document()
        assert document.sites[0].domain == "www.example.com"
        assert document.sites[0].redirects[0].status_code == 301

    def test_dump_uses_document_keys(self):
        data = yaml.safe_load(dump_example())
        site = data["sites"][0]
        assert site["headers"][0]["for"] == "/*"
        assert site["redirects"][0]["from"] == "/example"
        assert "bucket" not in site

    def test_dump_loads_back(self, tmp_path: Path):
        path = tmp_path / "example.yaml"
        path.write_text(dump_example())
        assert load_sites(path) == example_document()
