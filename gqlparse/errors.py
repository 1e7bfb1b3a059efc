"""Error and source-location types shared by the parsers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted literal with escapes applied."""
    parts = ['"']
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


@dataclass(frozen=True)
class Location:
    """A one-based line and column in a source document."""

    line: int = 0
    column: int = 0


class QueryError(Exception):
    """An error reported while parsing or resolving a document."""

    def __init__(
        self,
        message: str,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = path
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = extensions

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text