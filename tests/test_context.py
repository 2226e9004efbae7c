"""Tests for the site context builder."""

from __future__ import annotations

import pytest

from nvhosts_common import DEFAULT_BACKEND_URL, SiteDefinition
from nvhosts.errors import InvalidSiteError
from nvhosts.services.context import build_context


class TestBuildContext:
    def test_minimal_site(self):
        context = build_context(SiteDefinition(domain="ex.com"))
        assert context.domain == "ex.com"
        assert context.identifier == "ex_com"
        assert context.upstream == f"{DEFAULT_BACKEND_URL}/ex.com"
        assert context.headers == ()
        assert context.redirects == ()
        assert context.cache_control == ()
        assert context.extra == ""

    def test_keeps_order(self, full_site: SiteDefinition):
        context = build_context(full_site)
        assert [h.pattern for h in context.headers] == ["/*", "/assets/*"]
        assert [r.source for r in context.redirects] == ["/old", "/gone"]
        assert [c.mime for c in context.cache_control] == ["text/html", "image/png"]
        assert context.extra == "    error_page 404 /404.html;"

    def test_extra_is_verbatim(self):
        extra = "\n    error_page 404 /404.html;\n\n"
        context = build_context(SiteDefinition(domain="ex.com", extra=extra))
        assert context.extra == extra

    def test_bucket_override(self):
        site = SiteDefinition(domain="www.ex.com", bucket="ex-static")
        context = build_context(site, backend_url="https://s3.example.net/")
        assert context.upstream == "https://s3.example.net/ex-static"

    def test_does_not_mutate_site(self, full_site: SiteDefinition):
        before = full_site.model_dump()
        build_context(full_site)
        assert full_site.model_dump() == before

    @pytest.mark.parametrize("domain", ["", "   "])
    def test_empty_domain(self, domain):
        with pytest.raises(InvalidSiteError):
            build_context(SiteDefinition(domain=domain))
