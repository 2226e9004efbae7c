"""Normalize a site definition into a template context."""

from __future__ import annotations

from nvhosts_common import DEFAULT_BACKEND_URL, SiteContext, SiteDefinition
from nvhosts.errors import InvalidSiteError
from nvhosts.services.identifiers import sanitize


def build_context(site: SiteDefinition, *, backend_url: str = DEFAULT_BACKEND_URL) -> SiteContext:
    """Build the render context for one site.

    Absent headers, redirects and cache rules become empty tuples and a
    missing ``extra`` becomes ``""``; input order is kept as-is.

    Raises:
        InvalidSiteError: If the domain is empty.
    """
    domain = site.domain.strip()
    if not domain:
        raise InvalidSiteError("domain must not be empty", domain=site.domain or None)

    bucket = site.bucket or domain
    return SiteContext(
        domain=domain,
        identifier=sanitize(domain),
        upstream=f"{backend_url.rstrip('/')}/{bucket}",
        headers=tuple(site.headers or ()),
        redirects=tuple(site.redirects or ()),
        cache_control=tuple(site.cache_control or ()),
        extra=site.extra or "",
    )
