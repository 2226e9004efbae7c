"""Jinja2-based NGINX vhost renderer.

Each TemplateVariant has its own render function; ``render`` dispatches on
the variant. Template defects surface as TemplateError, malformed filter
calls as FilterError.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from nvhosts_common import (
    DEFAULT_PAD_WIDTH,
    PROXY_SNIPPET,
    SSL_SNIPPET,
    TEMPLATE_VERSION,
    CacheRule,
    HeaderRule,
    RedirectRule,
    SiteContext,
    TemplateVariant,
)
from nvhosts.errors import TemplateError
from nvhosts.services.filters import make_filters

log = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATES = {
    TemplateVariant.SIMPLE: "vhost_simple.conf.j2",
    TemplateVariant.RELAXED: "vhost_relaxed.conf.j2",
}

# Exercises every loop and filter in both templates.
_SELF_CHECK_CONTEXT = SiteContext(
    domain="www.self-check.example",
    identifier="www_self_check_example",
    upstream="https://storage.example/www.self-check.example",
    headers=(HeaderRule(pattern="/*", values={"X-Check": "1"}),),
    redirects=(RedirectRule(source="/a", to="/b", status_code=301),),
    cache_control=(CacheRule(mime="text/html", value="no-cache"),),
    extra="# self-check",
)


def cache_variable(context: SiteContext) -> str:
    """Name of the per-domain Cache-Control map variable."""
    return f"$cache_control_{context.identifier}"


class VhostRenderer:
    """Renders site contexts with the fixed vhost templates."""

    def __init__(
        self,
        template_dir: Path | None = None,
        *,
        pad_width: int = DEFAULT_PAD_WIDTH,
        self_check: bool = True,
    ):
        self.template_dir = template_dir or _TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,  # NGINX configs don't need HTML escaping
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(make_filters(pad_width=pad_width))
        self._renderers: dict[TemplateVariant, Callable[[SiteContext], str]] = {
            TemplateVariant.SIMPLE: self.render_simple,
            TemplateVariant.RELAXED: self.render_relaxed,
        }
        if self_check:
            self.self_check()

    def render(self, variant: TemplateVariant, context: SiteContext) -> str:
        try:
            renderer = self._renderers[TemplateVariant(variant)]
        except (KeyError, ValueError):
            raise TemplateError(str(variant), "unknown template variant") from None
        return renderer(context)

    def render_simple(self, context: SiteContext) -> str:
        """Single server block: HTTPS redirect, header/redirect stanzas, catch-all."""
        return self._render(TemplateVariant.SIMPLE, site=context, cache_variable=None)

    def render_relaxed(self, context: SiteContext) -> str:
        """Cache-Control map, wildcard redirect host, then the main server block."""
        return self._render(TemplateVariant.RELAXED, site=context, cache_variable=cache_variable(context))

    def self_check(self) -> None:
        """Render every variant once so template defects fail at startup."""
        for variant in TemplateVariant:
            self.render(variant, _SELF_CHECK_CONTEXT)
        log.debug("Templates in %s passed self-check", self.template_dir)

    def _render(self, variant: TemplateVariant, **values: Any) -> str:
        name = TEMPLATES[variant]
        try:
            template = self.env.get_template(name)
            return template.render(
                template_version=TEMPLATE_VERSION,
                ssl_snippet=SSL_SNIPPET,
                proxy_snippet=PROXY_SNIPPET,
                **values,
            )
        except TemplateNotFound as exc:
            raise TemplateError(name, f"template not found: {exc.name}") from exc
        except TemplateSyntaxError as exc:
            raise TemplateError(name, f"line {exc.lineno}: {exc.message}") from exc
        except UndefinedError as exc:
            raise TemplateError(name, exc.message or "undefined value") from exc
        except JinjaTemplateError as exc:
            raise TemplateError(name, exc.message or type(exc).__name__) from exc


@lru_cache(maxsize=1)
def get_renderer() -> VhostRenderer:
    """Return the shared renderer with default settings (self-checked once)."""
    return VhostRenderer()


def render(variant: TemplateVariant, context: SiteContext) -> str:
    """Render ``context`` with the shared renderer."""
    return get_renderer().render(variant, context)
