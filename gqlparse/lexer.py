"""Tokenizer for GraphQL documents and block-string handling."""

from __future__ import annotations

import enum
import re
from typing import Any, Callable, TypeVar

from gqlparse.ast import Ident, PrimitiveValue
from gqlparse.errors import Location, QueryError, quote

T = TypeVar("T")


class TokenKind(enum.IntEnum):
    EOF = -1
    IDENT = -2
    INT = -3
    FLOAT = -4
    STRING = -6


_TOKEN_NAMES = {
    TokenKind.EOF: "EOF",
    TokenKind.IDENT: "Ident",
    TokenKind.INT: "Int",
    TokenKind.FLOAT: "Float",
    TokenKind.STRING: "String",
}

_DECIMAL = "0123456789"
_HEX = "0123456789abcdefABCDEF"
_OCTAL = "01234567"

_UNQUOTE_RE = re.compile(
    r"\\(?:([0-7]{3})|x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|U([0-9a-fA-F]{8})|(.))", re.S
)
_UNQUOTE_SIMPLE = {
    "a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r",
    "t": "\t", "v": "\v", "\\": "\\", '"': '"',
}


def unquote(text: str) -> str:
    """Decode a double-quoted string literal."""
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise ValueError(f"invalid string literal {text!r}")

    def replace(match: re.Match[str]) -> str:
        octal, hex2, hex4, hex8, simple = match.groups()
        if simple is not None:
            if simple not in _UNQUOTE_SIMPLE:
                raise ValueError(f"invalid escape in {text!r}")
            return _UNQUOTE_SIMPLE[simple]
        if octal is not None:
            return chr(int(octal, 8))
        return chr(int(hex2 or hex4 or hex8, 16))

    body = text[1:-1]
    if "\n" in body:
        raise ValueError(f"invalid string literal {text!r}")
    return _UNQUOTE_RE.sub(replace, body)


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _is_blank(line: str) -> bool:
    return _leading_whitespace(line) == len(line)


def _common_indent(lines: list[str]) -> int:
    common: int | None = None
    for line in lines:
        indent = _leading_whitespace(line)
        if indent == len(line):
            continue
        if indent == 0:
            return 0
        if common is None or indent < common:
            common = indent
    return common or 0


def block_string(raw: str) -> str:
    """Return the value of a block string from its raw contents."""
    lines = raw.split("\n")
    indent = _common_indent(lines[1:])
    if indent:
        lines = lines[:1] + [line[indent:] for line in lines[1:]]
    while lines and _is_blank(lines[0]):
        lines.pop(0)
    while len(lines) > 1 and _is_blank(lines[-1]):
        lines.pop()
    return "\n".join(lines)


class _SyntaxError(Exception):
    pass


class _Scanner:
    """Character scanner producing identifiers, numbers, strings and single characters."""

    def __init__(self, source: str, on_error: Callable[[str], None]) -> None:
        self.src = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tok_start = 0
        self.tok_end = 0
        self.tok_line = 1
        self.tok_col = 1
        self.on_error = on_error

    def peek(self) -> str | None:
        return self.src[self.pos] if self.pos < len(self.src) else None

    def peek_in(self, chars: str) -> bool:
        ch = self.peek()
        return ch is not None and ch in chars

    def next(self) -> str | None:
        ch = self.peek()
        if ch is None:
            return None
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def text(self) -> str:
        return self.src[self.tok_start:self.tok_end]

    def scan(self) -> TokenKind | str:
        while self.peek_in(" \t\n\r"):
            self.next()
        self.tok_start = self.tok_end = self.pos
        self.tok_line, self.tok_col = self.line, self.col
        ch = self.peek()
        if ch is None:
            kind: TokenKind | str = TokenKind.EOF
        elif ch.isalpha() or ch == "_":
            while (c := self.peek()) is not None and (c.isalnum() or c == "_"):
                self.next()
            kind = TokenKind.IDENT
        elif ch in _DECIMAL or (
            ch == "." and self.pos + 1 < len(self.src) and self.src[self.pos + 1] in _DECIMAL
        ):
            kind = self._number()
        elif ch == '"':
            self._string()
            kind = TokenKind.STRING
        else:
            self.next()
            kind = ch
        self.tok_end = self.pos
        return kind

    def _digits(self, chars: str) -> bool:
        found = False
        while self.peek_in(chars):
            self.next()
            found = True
        return found

    def _number(self) -> TokenKind:
        if self.peek() == "0" and self.src[self.pos + 1:self.pos + 2] in ("x", "X"):
            self.next()
            self.next()
            if not self._digits(_HEX):
                self.on_error("hexadecimal literal has no digits")
            return TokenKind.INT
        kind = TokenKind.INT
        self._digits(_DECIMAL)
        if self.peek() == ".":
            kind = TokenKind.FLOAT
            self.next()
            self._digits(_DECIMAL)
        if self.peek_in("eE"):
            kind = TokenKind.FLOAT
            self.next()
            if self.peek_in("+-"):
                self.next()
            if not self._digits(_DECIMAL):
                self.on_error("exponent has no digits")
        return kind

    def _string(self) -> None:
        self.next()
        while True:
            ch = self.next()
            if ch is None or ch == "\n":
                self.on_error("literal not terminated")
                return
            if ch == '"':
                return
            if ch == "\\":
                self._escape()

    def _escape(self) -> None:
        ch = self.next()
        if ch is not None and ch in 'abfnrtv\\"':
            return
        if ch is not None and ch in _OCTAL:
            count, chars = 2, _OCTAL
        elif ch == "x":
            count, chars = 2, _HEX
        elif ch == "u":
            count, chars = 4, _HEX
        elif ch == "U":
            count, chars = 8, _HEX
        else:
            self.on_error("invalid char escape")
            return
        for _ in range(count):
            if not self.peek_in(chars):
                self.on_error("invalid char escape")
                return
            self.next()


def _token_string(kind: TokenKind | str) -> str:
    if isinstance(kind, TokenKind):
        return _TOKEN_NAMES[kind]
    return quote(kind)


class Lexer:
    """Token stream over a GraphQL document with comment and description tracking."""

    def __init__(self, source: str, use_string_descriptions: bool = False) -> None:
        self._scanner = _Scanner(source, self.syntax_error)
        self._next: TokenKind | str | None = None
        self._comment = ""
        self.use_string_descriptions = use_string_descriptions

    def catch_syntax_error(self, func: Callable[[], T]) -> T:
        """Run ``func``; turn syntax errors into a located :class:`QueryError`."""
        try:
            return func()
        except _SyntaxError as exc:
            raise QueryError(f"syntax error: {exc}", locations=[self.location()]) from None

    def peek(self) -> Any:
        return self._next

    def token_text(self) -> str:
        return self._scanner.text()

    def consume_whitespace(self) -> None:
        """Advance to the next significant token, collecting comments."""
        self._comment = ""
        while True:
            self._next = self._scanner.scan()
            if self._next == ",":
                continue
            if self._next == "#":
                self._consume_comment()
                continue
            break

    def _consume_description(self) -> str:
        if self._next != TokenKind.STRING:
            return ""
        if self._scanner.peek() == '"':
            desc = self._consume_triple_quote_comment()
        else:
            desc = unquote(self.token_text())
        self.consume_whitespace()
        return desc

    def _consume_triple_quote_comment(self) -> str:
        if self._scanner.next() != '"':
            raise RuntimeError("triple-quote description without a third quote")
        chars: list[str] = []
        quotes = 0
        while True:
            ch = self._scanner.next()
            quotes = quotes + 1 if ch == '"' else 0
            chars.append("\ufffd" if ch is None else ch)
            if quotes == 3 or ch is None:
                break
        value = "".join(chars)
        if quotes:
            value = value[:-quotes]
        return block_string(value)

    def _consume_comment(self) -> None:
        if self._scanner.peek() == " ":
            self._scanner.next()
        if self._comment:
            self._comment += "\n"
        chars: list[str] = []
        while (ch := self._scanner.next()) not in ("\r", "\n", None):
            chars.append(ch)
        self._comment += "".join(chars)

    def consume_ident(self) -> str:
        name = self.token_text()
        self.consume_token(TokenKind.IDENT)
        return name

    def consume_ident_with_loc(self) -> Ident:
        loc = self.location()
        name = self.token_text()
        self.consume_token(TokenKind.IDENT)
        return Ident(name, loc)

    def consume_keyword(self, keyword: str) -> None:
        if self._next != TokenKind.IDENT or self.token_text() != keyword:
            self.syntax_error(f"unexpected {quote(self.token_text())}, expecting {quote(keyword)}")
        self.consume_whitespace()

    def consume_literal(self) -> PrimitiveValue:
        literal = PrimitiveValue(self._next, self.token_text())
        self.consume_whitespace()
        return literal

    def consume_token(self, expected: TokenKind | str) -> None:
        if self._next != expected:
            self.syntax_error(
                f"unexpected {quote(self.token_text())}, expecting {_token_string(expected)}"
            )
        self.consume_whitespace()

    def desc_comment(self) -> str:
        """Return the description for the next definition."""
        comment = self._comment
        desc = self._consume_description()
        return desc if self.use_string_descriptions else comment

    def syntax_error(self, message: str) -> None:
        raise _SyntaxError(message)

    def location(self) -> Location:
        return Location(self._scanner.tok_line, self._scanner.tok_col)