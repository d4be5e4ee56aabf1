"""Route and MatchResult frozen dataclasses."""

import re
from dataclasses import dataclass, field
from typing import Any

# Whole-match, positional, and named captures of a successful match
Captures = dict[int | str, str | None]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    ``key`` is the unescaped base prefix followed by the pattern fragment.
    It identifies the route in the table and decides precedence.
    """

    key: str
    pattern: str
    regex: re.Pattern[str] = field(compare=False)
    handler: Any
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful route match."""

    route: Route
    groups: Captures


def captures_of(match: re.Match[str]) -> Captures:
    """Collect every capture of *match* into one mapping.

    Index ``0`` holds the whole match, ``1..n`` the positional groups,
    and named groups appear under their names as well.
    """
    groups: Captures = {0: match.group(0)}
    for index, value in enumerate(match.groups(), start=1):
        groups[index] = value
    groups.update(match.groupdict())
    return groups


def handler_name(handler: Any) -> str:
    """Display name of a handler reference: the string itself, or the qualified name."""
    if isinstance(handler, str):
        return handler
    return getattr(handler, "__qualname__", None) or repr(handler)
