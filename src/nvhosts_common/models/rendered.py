"""Render-side models: template variants, contexts and rendered output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from nvhosts_common.models.site import CacheRule, HeaderRule, RedirectRule


class TemplateVariant(str, Enum):
    SIMPLE = "simple"
    RELAXED = "relaxed"


class SiteContext(BaseModel):
    """Normalized view of a site definition, ready for a template.

    Every collection is present (possibly empty) so templates never have to
    test for missing values.
    """

    model_config = ConfigDict(frozen=True)

    domain: str
    identifier: str
    upstream: str
    headers: tuple[HeaderRule, ...] = ()
    redirects: tuple[RedirectRule, ...] = ()
    cache_control: tuple[CacheRule, ...] = ()
    extra: str = ""


class RenderedSite(BaseModel):
    """Rendered vhost text for one domain."""

    model_config = ConfigDict(frozen=True)

    domain: str
    variant: TemplateVariant
    text: str

    @property
    def filename(self) -> str:
        return f"{self.domain}.conf"
