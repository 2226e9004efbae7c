"""Pure string filters registered with the vhost templates."""

from __future__ import annotations

import functools
import inspect
import re
from typing import Any, Callable

from jinja2 import Undefined

from nvhosts_common import DEFAULT_PAD_WIDTH, REDIRECT_DOMAIN_LABELS
from nvhosts.errors import FilterError


def _check_operand(name: str, param: str, value: Any, expected: type) -> None:
    if isinstance(value, Undefined):
        # StrictUndefined raises UndefinedError as soon as it is used
        str(value)
    if isinstance(value, bool) or not isinstance(value, expected):
        raise FilterError(name, f"{param} must be {expected.__name__}, got {type(value).__name__}")


def _strict(name: str, **types: type) -> Callable[[Callable[..., str]], Callable[..., str]]:
    """Reject calls with the wrong arity or operand types as FilterError."""

    def decorator(func: Callable[..., str]) -> Callable[..., str]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                bound = sig.bind(*args, **kwargs)
            except TypeError as exc:
                raise FilterError(name, str(exc)) from None
            for param, expected in types.items():
                if param in bound.arguments:
                    _check_operand(name, param, bound.arguments[param], expected)
            return func(*args, **kwargs)

        return wrapper

    return decorator


@_strict("redirect_domain", value=str, labels=int)
def redirect_domain(value: str, labels: int = REDIRECT_DOMAIN_LABELS) -> str:
    """Strip ``labels`` leading labels: ``www.example.com`` -> ``example.com``."""
    parts = value.split(".")
    if labels < 0 or len(parts) - labels < 2:
        raise FilterError(
            "redirect_domain",
            f"{value!r} has no parent domain {labels} label(s) up",
        )
    return ".".join(parts[labels:])


@_strict("pad_right", value=str, width=int)
def pad_right(value: str, width: int = DEFAULT_PAD_WIDTH) -> str:
    """Pad with spaces up to ``width`` columns. Never truncates."""
    return value.ljust(width)


@_strict("replace", value=str, old=str, new=str)
def replace(value: str, old: str, new: str) -> str:
    if not old:
        raise FilterError("replace", "cannot replace an empty string")
    return value.replace(old, new)


@_strict("location_pattern", value=str)
def location_pattern(value: str) -> str:
    """Turn a header path pattern into an anchored regex (``*`` matches anything)."""
    return "^" + ".*".join(re.escape(part) for part in value.split("*")) + "$"


def make_filters(*, pad_width: int = DEFAULT_PAD_WIDTH) -> dict[str, Callable[..., str]]:
    """Return the filter table for a template environment."""

    @_strict("pad_right", value=str, width=int)
    def configured_pad_right(value: str, width: int = pad_width) -> str:
        return pad_right(value, width)

    return {
        "redirect_domain": redirect_domain,
        "pad_right": configured_pad_right,
        "replace": replace,
        "location_pattern": location_pattern,
    }
