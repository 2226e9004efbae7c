"""Custom exceptions for nvhosts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path


class NvhostsError(Exception):
    """Base exception for all nvhosts operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class InvalidSiteError(NvhostsError):
    """A site definition fails a compile precondition (empty domain)."""

    def __init__(self, message: str, *, domain: str | None = None, index: int | None = None):
        super().__init__(message)
        self.domain = domain
        self.index = index

    def __str__(self) -> str:
        if self.domain:
            where = f"site {self.domain!r}"
        elif self.index is not None:
            where = f"site #{self.index}"
        else:
            return super().__str__()
        return f"{where}: {super().__str__()}"


class DuplicateSiteError(NvhostsError):
    """Two site definitions resolve to the same host name."""

    def __init__(self, domain: str, positions: Sequence[int]):
        self.domain = domain
        self.positions = tuple(positions)
        where = ", ".join(str(p) for p in self.positions)
        super().__init__(f"duplicate site {domain!r} at positions {where}")


class IdentifierCollisionError(NvhostsError):
    """Two distinct domains sanitize to the same configuration identifier."""

    def __init__(self, identifier: str, domains: Sequence[str]):
        self.identifier = identifier
        self.domains = tuple(domains)
        super().__init__(
            f"identifier {identifier!r} is derived from both "
            + " and ".join(repr(d) for d in self.domains)
        )


class FilterError(NvhostsError):
    """A template filter was called with malformed arguments."""

    def __init__(self, filter_name: str, message: str):
        self.filter_name = filter_name
        super().__init__(f"filter {filter_name!r}: {message}", exit_code=3)


class TemplateError(NvhostsError):
    """A vhost template could not be loaded or rendered."""

    def __init__(self, template: str, message: str):
        self.template = template
        super().__init__(f"template {template!r}: {message}", exit_code=3)


class ConfigLoadError(NvhostsError):
    """The sites document could not be read or parsed."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"failed to load {path}: {message}")


class SiteValidationError(NvhostsError):
    """One or more site definitions are not valid."""

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        lines = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"{len(self.problems)} invalid site setting(s):\n{lines}", exit_code=2)


class NginxConfigError(NvhostsError):
    """NGINX configuration validation or reload failed."""
