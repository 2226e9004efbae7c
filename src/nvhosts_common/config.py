"""Central configuration for nvhosts."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from nvhosts_common.constants import (
    DEFAULT_BACKEND_URL,
    DEFAULT_CONFIG_PATH,
    DEFAULT_PAD_WIDTH,
    FALLBACK_CONFIG_PATH,
    NGINX_BIN,
    OUTPUT_DIR,
)
from nvhosts_common.models.rendered import TemplateVariant


def _env_path(name: str, default: Path) -> Path:
    env = os.environ.get(name)
    return Path(env) if env else default


def _default_config_path() -> Path:
    if not DEFAULT_CONFIG_PATH.exists() and FALLBACK_CONFIG_PATH.exists():
        return FALLBACK_CONFIG_PATH
    return DEFAULT_CONFIG_PATH


class NvhostsConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    config_path: Path = Field(default_factory=lambda: _env_path("NVHOSTS_CONFIG", _default_config_path()))
    output_dir: Path = Field(default_factory=lambda: _env_path("NVHOSTS_OUTPUT_DIR", OUTPUT_DIR))
    backend_url: str = Field(default_factory=lambda: os.environ.get("NVHOSTS_BACKEND_URL", DEFAULT_BACKEND_URL))
    variant: TemplateVariant = Field(
        default_factory=lambda: TemplateVariant(os.environ.get("NVHOSTS_VARIANT", TemplateVariant.SIMPLE.value))
    )
    pad_width: int = Field(default=DEFAULT_PAD_WIDTH, gt=0)
    nginx_bin: str = Field(default_factory=lambda: os.environ.get("NVHOSTS_NGINX_BIN", NGINX_BIN))
