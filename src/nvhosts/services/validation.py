"""Pre-compile validation of site definitions."""

from __future__ import annotations

import re
from collections.abc import Sequence

from nvhosts_common import REDIRECT_DOMAIN_LABELS, SiteDefinition, TemplateVariant
from nvhosts.errors import SiteValidationError

DOMAIN_RE = re.compile(r"([a-z0-9]+(-[a-z0-9]+)*\.)+[a-z]{2,}")

# Characters that would break out of an unquoted NGINX token
_UNSAFE_PATH = re.compile(r"[\s\"';{}]")

# HTTP token characters, less the quote and $ that NGINX would interpret
_HEADER_NAME = re.compile(r"[!#%&*+.^_`|~0-9A-Za-z-]+")


def _site_problems(index: int, site: SiteDefinition, variant: TemplateVariant) -> list[str]:
    label = f"sites[{index}] ({site.domain!r})"
    problems: list[str] = []

    if not DOMAIN_RE.fullmatch(site.domain):
        problems.append(f"{label}: domain is not a valid lowercase host name")
    elif variant is TemplateVariant.RELAXED and site.domain.count(".") < REDIRECT_DOMAIN_LABELS + 1:
        problems.append(f"{label}: relaxed template needs a subdomain to redirect from (e.g. www.{site.domain})")

    for rule in site.headers or ():
        if not rule.pattern.startswith("/") or _UNSAFE_PATH.search(rule.pattern):
            problems.append(f"{label}: header pattern {rule.pattern!r} must be an absolute path")
        if any(name.lower() == "cache-control" for name in rule.values):
            problems.append(f"{label}: set Cache-Control through cache_control, not headers[for={rule.pattern!r}]")
        for name in rule.values:
            if not _HEADER_NAME.fullmatch(name):
                problems.append(f"{label}: header name {name!r} is not a valid HTTP field name")

    mimes: set[str] = set()
    for rule in site.cache_control or ():
        if rule.mime == "default":
            problems.append(f"{label}: cache_control mime 'default' is reserved")
        elif not rule.mime or _UNSAFE_PATH.search(rule.mime):
            problems.append(f"{label}: cache_control mime {rule.mime!r} is empty or contains whitespace, quotes or braces")
        if rule.mime in mimes:
            problems.append(f"{label}: cache_control mime {rule.mime!r} is declared more than once")
        mimes.add(rule.mime)

    seen: set[str] = set()
    for rule in site.redirects or ():
        if not rule.source.startswith("/") or _UNSAFE_PATH.search(rule.source):
            problems.append(f"{label}: redirect source {rule.source!r} must be an absolute path")
        if _UNSAFE_PATH.search(rule.to):
            problems.append(f"{label}: redirect target {rule.to!r} contains whitespace, quotes or braces")
        if rule.source in seen:
            problems.append(f"{label}: redirect source {rule.source!r} is declared more than once")
        seen.add(rule.source)

    return problems


def validate_sites(
    sites: Sequence[SiteDefinition],
    variant: TemplateVariant = TemplateVariant.SIMPLE,
) -> None:
    """Check every site and report all problems at once.

    Raises:
        SiteValidationError: Listing every problem found.
    """
    variant = TemplateVariant(variant)
    problems: list[str] = []
    for index, site in enumerate(sites):
        problems.extend(_site_problems(index, site, variant))
    if problems:
        raise SiteValidationError(problems)
