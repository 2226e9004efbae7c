"""Shared Pydantic models."""

from nvhosts_common.models.rendered import RenderedSite, SiteContext, TemplateVariant
from nvhosts_common.models.site import (
    CacheRule,
    HeaderRule,
    RedirectRule,
    SiteDefinition,
    SitesDocument,
)

__all__ = [
    "CacheRule",
    "HeaderRule",
    "RedirectRule",
    "RenderedSite",
    "SiteContext",
    "SiteDefinition",
    "SitesDocument",
    "TemplateVariant",
]
