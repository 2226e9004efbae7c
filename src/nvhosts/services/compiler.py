"""Compile a list of site definitions into rendered vhosts, all or nothing."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence

from nvhosts_common import (
    DEFAULT_BACKEND_URL,
    RenderedSite,
    SiteDefinition,
    TemplateVariant,
)
from nvhosts.errors import DuplicateSiteError, InvalidSiteError, NvhostsError
from nvhosts.services.context import build_context
from nvhosts.services.filters import redirect_domain
from nvhosts.services.identifiers import IdentifierRegistry
from nvhosts.services.vhost_renderer import VhostRenderer, get_renderer

log = logging.getLogger(__name__)


def _site_key(domain: str) -> str:
    return domain.strip().lower()


def find_duplicates(sites: Sequence[SiteDefinition]) -> dict[str, list[int]]:
    """Map each domain declared more than once to its positions."""
    positions: dict[str, list[int]] = defaultdict(list)
    for index, site in enumerate(sites):
        key = _site_key(site.domain)
        if key:
            positions[key].append(index)
    return {domain: found for domain, found in positions.items() if len(found) > 1}


def compile_sites(
    sites: Sequence[SiteDefinition],
    *,
    variant: TemplateVariant = TemplateVariant.SIMPLE,
    renderer: VhostRenderer | None = None,
    backend_url: str = DEFAULT_BACKEND_URL,
) -> list[RenderedSite]:
    """Render every site, in input order.

    Nothing is returned unless every site compiles: the first failure is
    logged and re-raised with the failing domain (or position) attached.

    Raises:
        DuplicateSiteError: If two sites declare the same domain.
        InvalidSiteError: If a site has an empty domain.
        IdentifierCollisionError: If two domains share a Cache-Control map name.
        FilterError, TemplateError: If the templates themselves are broken.
    """
    variant = TemplateVariant(variant)
    renderer = renderer or get_renderer()

    duplicates = find_duplicates(sites)
    if duplicates:
        positions = next(iter(duplicates.values()))
        exc = DuplicateSiteError(sites[positions[0]].domain, positions)
        log.error("Sites failed to compile: %s", exc)
        raise exc

    identifiers = IdentifierRegistry()
    redirect_hosts: dict[str, int] = {_site_key(site.domain): index for index, site in enumerate(sites)}
    rendered: list[RenderedSite] = []

    for index, site in enumerate(sites):
        try:
            context = build_context(site, backend_url=backend_url)
            if variant is TemplateVariant.RELAXED:
                identifiers.claim(context.identifier, context.domain)
                _claim_redirect_host(redirect_hosts, context.domain, index)
            elif context.cache_control:
                log.warning("%s: cache_control is only applied by the relaxed template", context.domain)

            text = renderer.render(variant, context)
        except InvalidSiteError as exc:
            exc.index = index
            log.error("Site #%d failed to compile: %s", index, exc)
            raise
        except NvhostsError as exc:
            log.error("Site %r (#%d) failed to compile: %s", site.domain, index, exc)
            raise

        log.debug("Compiled %s with the %s template", context.domain, variant.value)
        rendered.append(RenderedSite(domain=context.domain, variant=variant, text=text))

    return rendered


def _claim_redirect_host(claimed: dict[str, int], domain: str, index: int) -> None:
    """Register the wildcard redirect host of a relaxed vhost."""
    parent = redirect_domain(domain)
    for host in (parent, f"*.{parent}"):
        owner = claimed.setdefault(_site_key(host), index)
        if owner != index:
            raise DuplicateSiteError(host, sorted((owner, index)))
