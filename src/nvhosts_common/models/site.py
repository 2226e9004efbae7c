"""Site definition models, as loaded from the sites document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from nvhosts_common.constants import DEFAULT_REDIRECT_STATUS_CODE


class HeaderRule(BaseModel):
    """Response headers added for every path matching ``for``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pattern: str = Field(alias="for")
    values: dict[str, str] = Field(default_factory=dict)


class RedirectRule(BaseModel):
    """A single exact-path redirect."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source: str = Field(alias="from")
    to: str
    status_code: int = Field(default=DEFAULT_REDIRECT_STATUS_CODE, ge=300, le=499)


class CacheRule(BaseModel):
    """Cache-Control value applied to responses of one MIME type."""

    model_config = ConfigDict(frozen=True)

    mime: str
    value: str


class SiteDefinition(BaseModel):
    """One domain served from an object-storage bucket."""

    model_config = ConfigDict(frozen=True)

    domain: str
    bucket: str | None = None
    headers: list[HeaderRule] | None = None
    redirects: list[RedirectRule] | None = None
    cache_control: list[CacheRule] | None = None
    extra: str | None = None


class SitesDocument(BaseModel):
    """Top-level shape of the sites document."""

    sites: list[SiteDefinition] = Field(default_factory=list)
