"""CLI configuration: singleton NvhostsConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from nvhosts_common import NvhostsConfig
from nvhosts.errors import NvhostsError


@lru_cache(maxsize=1)
def get_config() -> NvhostsConfig:
    """Return the global NvhostsConfig (resolved once, cached).

    Raises:
        NvhostsError: If an NVHOSTS_* environment variable holds a bad value.
    """
    try:
        return NvhostsConfig()
    except ValueError as e:
        raise NvhostsError(f"invalid NVHOSTS_* setting: {e}", exit_code=2) from e
