"""NGINX identifier derivation from domain names."""

from __future__ import annotations

import re

from nvhosts.errors import IdentifierCollisionError

_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")


def sanitize(domain: str) -> str:
    """Turn a domain into a bare NGINX identifier (``www.ex-1.com`` -> ``www_ex_1_com``).

    Distinct domains may map to the same identifier (``a.b`` and ``a_b``);
    use IdentifierRegistry to catch that within a run.
    """
    identifier = _DISALLOWED.sub("_", domain)
    if identifier[:1].isdigit():
        identifier = f"_{identifier}"
    return identifier


class IdentifierRegistry:
    """Per-run mapping of derived identifier -> owning domain."""

    def __init__(self) -> None:
        self._owners: dict[str, str] = {}

    def claim(self, identifier: str, domain: str) -> None:
        owner = self._owners.setdefault(identifier, domain)
        if owner != domain:
            raise IdentifierCollisionError(identifier, [owner, domain])

    def owner(self, identifier: str) -> str | None:
        return self._owners.get(identifier)

    def __len__(self) -> int:
        return len(self._owners)
