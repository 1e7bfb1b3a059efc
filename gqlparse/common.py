"""Parsing helpers shared by the query and schema parsers."""

from __future__ import annotations

from typing import Any, Callable

from gqlparse.ast import (
    Argument,
    ArgumentList,
    Directive,
    DirectiveList,
    Ident,
    InputValueDefinition,
    List,
    ListValue,
    NonNull,
    NullValue,
    ObjectField,
    ObjectValue,
    Type,
    TypeName,
    Variable,
)
from gqlparse.errors import Location, QueryError, quote
from gqlparse.lexer import Lexer, TokenKind


def parse_directives(lexer: Lexer) -> DirectiveList:
    directives = DirectiveList()
    while lexer.peek() == "@":
        lexer.consume_token("@")
        name = lexer.consume_ident_with_loc()
        name = Ident(name.name, Location(name.loc.line, name.loc.column - 1))
        arguments = parse_argument_list(lexer) if lexer.peek() == "(" else ArgumentList()
        directives.append(Directive(name, arguments))
    return directives


def parse_literal(lexer: Lexer, const_only: bool) -> Any:
    loc = lexer.location()
    token = lexer.peek()
    if token == "$":
        if const_only:
            lexer.syntax_error("variable not allowed")
        lexer.consume_token("$")
        return Variable(lexer.consume_ident(), loc)
    if token in (TokenKind.INT, TokenKind.FLOAT, TokenKind.STRING, TokenKind.IDENT):
        literal = lexer.consume_literal()
        if literal.type == TokenKind.IDENT and literal.text == "null":
            return NullValue(loc)
        literal.loc = loc
        return literal
    if token == "-":
        lexer.consume_token("-")
        literal = lexer.consume_literal()
        literal.text = "-" + literal.text
        literal.loc = loc
        return literal
    if token == "[":
        lexer.consume_token("[")
        values = []
        while lexer.peek() != "]":
            values.append(parse_literal(lexer, const_only))
        lexer.consume_token("]")
        return ListValue(values, loc)
    if token == "{":
        lexer.consume_token("{")
        fields = []
        while lexer.peek() != "}":
            name = lexer.consume_ident_with_loc()
            lexer.consume_token(":")
            fields.append(ObjectField(name, parse_literal(lexer, const_only)))
        lexer.consume_token("}")
        return ObjectValue(fields, loc)
    lexer.syntax_error("invalid value")
    raise AssertionError("unreachable")


def parse_type(lexer: Lexer) -> Type:
    inner = _parse_null_type(lexer)
    if lexer.peek() == "!":
        lexer.consume_token("!")
        return NonNull(inner)
    return inner


def _parse_null_type(lexer: Lexer) -> Type:
    if lexer.peek() == "[":
        lexer.consume_token("[")
        of_type = parse_type(lexer)
        lexer.consume_token("]")
        return List(of_type)
    ident = lexer.consume_ident_with_loc()
    return TypeName(ident.name, ident.loc)


def resolve_type(type_: Type, resolver: Callable[[str], Type | None]) -> Type:
    """Replace type names with the definitions the resolver returns.

    Raises :class:`QueryError` for names the resolver does not know.
    """
    if isinstance(type_, List):
        return List(resolve_type(type_.of_type, resolver))
    if isinstance(type_, NonNull):
        return NonNull(resolve_type(type_.of_type, resolver))
    if isinstance(type_, TypeName):
        resolved = resolver(type_.name)
        if resolved is None:
            raise QueryError(
                f"Unknown type {quote(type_.name)}.",
                locations=[type_.loc],
                rule="KnownTypeNames",
            )
        return resolved
    return type_


def parse_input_value(lexer: Lexer) -> InputValueDefinition:
    value = InputValueDefinition()
    value.loc = lexer.location()
    value.desc = lexer.desc_comment()
    value.name = lexer.consume_ident_with_loc()
    lexer.consume_token(":")
    value.type_loc = lexer.location()
    value.type = parse_type(lexer)
    if lexer.peek() == "=":
        lexer.consume_token("=")
        value.default = parse_literal(lexer, True)
    value.directives = parse_directives(lexer)
    return value


def parse_argument_list(lexer: Lexer) -> ArgumentList:
    args = ArgumentList()
    lexer.consume_token("(")
    while lexer.peek() != ")":
        name = lexer.consume_ident_with_loc()
        lexer.consume_token(":")
        args.append(Argument(name, parse_literal(lexer, False)))
    lexer.consume_token(")")
    return args