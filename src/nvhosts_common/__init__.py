"""nvhosts common: shared models and constants for the vhost compiler."""

from nvhosts_common.config import NvhostsConfig
from nvhosts_common.constants import (
    DEFAULT_BACKEND_URL,
    DEFAULT_CONFIG_PATH,
    DEFAULT_PAD_WIDTH,
    DEFAULT_REDIRECT_STATUS_CODE,
    FALLBACK_CONFIG_PATH,
    NGINX_BIN,
    OUTPUT_DIR,
    PROXY_SNIPPET,
    REDIRECT_DOMAIN_LABELS,
    SSL_SNIPPET,
    TEMPLATE_VERSION,
)
from nvhosts_common.models import (
    CacheRule,
    HeaderRule,
    RedirectRule,
    RenderedSite,
    SiteContext,
    SiteDefinition,
    SitesDocument,
    TemplateVariant,
)

__all__ = [
    "CacheRule",
    "DEFAULT_BACKEND_URL",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PAD_WIDTH",
    "DEFAULT_REDIRECT_STATUS_CODE",
    "FALLBACK_CONFIG_PATH",
    "HeaderRule",
    "NGINX_BIN",
    "NvhostsConfig",
    "OUTPUT_DIR",
    "PROXY_SNIPPET",
    "REDIRECT_DOMAIN_LABELS",
    "RedirectRule",
    "RenderedSite",
    "SSL_SNIPPET",
    "SiteContext",
    "SiteDefinition",
    "SitesDocument",
    "TEMPLATE_VERSION",
    "TemplateVariant",
]
