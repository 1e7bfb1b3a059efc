"""Parsers for type-system definitions in schema documents."""

from __future__ import annotations

from gqlparse.ast import (
    DirectiveDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    Extension,
    FieldDefinition,
    FieldsDefinition,
    InputObject,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    Schema,
    Union,
)
from gqlparse.common import parse_directives, parse_input_value, parse_type
from gqlparse.errors import quote
from gqlparse.lexer import Lexer, TokenKind

_DEFINITION_KEYWORDS = (
    '"schema", "type", "enum", "interface", "union", "input", "scalar" or "directive"'
)
_EXTENSION_KEYWORDS = '"schema", "type", "enum", "interface", "union" or "input"'


def parse_definitions(schema: Schema, lexer: Lexer) -> None:
    """Read every definition from ``lexer`` into ``schema``."""
    lexer.consume_whitespace()
    while lexer.peek() != TokenKind.EOF:
        desc = lexer.desc_comment()
        keyword = lexer.consume_ident()
        match keyword:
            case "schema":
                _parse_entry_points(schema, lexer)
            case "type":
                obj = parse_object_def(lexer)
                obj.desc = desc
                schema.types[obj.name] = obj
                schema.objects.append(obj)
            case "interface":
                iface = parse_interface_def(lexer)
                iface.desc = desc
                schema.types[iface.name] = iface
            case "union":
                union = parse_union_def(lexer)
                union.desc = desc
                schema.types[union.name] = union
                schema.unions.append(union)
            case "enum":
                enum = parse_enum_def(lexer)
                enum.desc = desc
                schema.types[enum.name] = enum
                schema.enums.append(enum)
            case "input":
                input_obj = parse_input_def(lexer)
                input_obj.desc = desc
                schema.types[input_obj.name] = input_obj
            case "scalar":
                loc = lexer.location()
                name = lexer.consume_ident()
                directives = parse_directives(lexer)
                schema.types[name] = ScalarTypeDefinition(
                    name=name, desc=desc, directives=directives, loc=loc
                )
            case "directive":
                directive = parse_directive_def(lexer)
                directive.desc = desc
                schema.directives[directive.name] = directive
            case "extend":
                parse_extension(schema, lexer)
            case _:
                lexer.syntax_error(
                    f"unexpected {quote(keyword)}, expecting {_DEFINITION_KEYWORDS}"
                )


def _parse_entry_points(schema: Schema, lexer: Lexer) -> None:
    lexer.consume_token("{")
    while lexer.peek() != "}":
        name = lexer.consume_ident()
        lexer.consume_token(":")
        schema.entry_point_names[name] = lexer.consume_ident()
    lexer.consume_token("}")


def parse_object_def(lexer: Lexer) -> ObjectTypeDefinition:
    obj = ObjectTypeDefinition(loc=lexer.location(), name=lexer.consume_ident())
    while lexer.peek() != "{":
        if lexer.peek() == "@":
            obj.directives = parse_directives(lexer)
        elif lexer.peek() == TokenKind.IDENT:
            lexer.consume_keyword("implements")
            while lexer.peek() not in ("{", "@"):
                if lexer.peek() == "&":
                    lexer.consume_token("&")
                obj.interface_names.append(lexer.consume_ident())
        else:
            break
    lexer.consume_token("{")
    obj.fields = parse_fields_def(lexer)
    lexer.consume_token("}")
    return obj


def parse_interface_def(lexer: Lexer) -> InterfaceTypeDefinition:
    iface = InterfaceTypeDefinition(loc=lexer.location(), name=lexer.consume_ident())
    iface.directives = parse_directives(lexer)
    lexer.consume_token("{")
    iface.fields = parse_fields_def(lexer)
    lexer.consume_token("}")
    return iface


def parse_union_def(lexer: Lexer) -> Union:
    union = Union(loc=lexer.location(), name=lexer.consume_ident())
    union.directives = parse_directives(lexer)
    lexer.consume_token("=")
    union.type_names = [lexer.consume_ident()]
    while lexer.peek() == "|":
        lexer.consume_token("|")
        union.type_names.append(lexer.consume_ident())
    return union


def parse_input_def(lexer: Lexer) -> InputObject:
    input_obj = InputObject(loc=lexer.location(), name=lexer.consume_ident())
    input_obj.directives = parse_directives(lexer)
    lexer.consume_token("{")
    while lexer.peek() != "}":
        input_obj.values.append(parse_input_value(lexer))
    lexer.consume_token("}")
    return input_obj


def parse_enum_def(lexer: Lexer) -> EnumTypeDefinition:
    enum = EnumTypeDefinition(loc=lexer.location(), name=lexer.consume_ident())
    enum.directives = parse_directives(lexer)
    lexer.consume_token("{")
    while lexer.peek() != "}":
        desc = lexer.desc_comment()
        loc = lexer.location()
        value = lexer.consume_ident()
        directives = parse_directives(lexer)
        enum.enum_values_definition.append(
            EnumValueDefinition(enum_value=value, directives=directives, desc=desc, loc=loc)
        )
    lexer.consume_token("}")
    return enum


def parse_directive_def(lexer: Lexer) -> DirectiveDefinition:
    lexer.consume_token("@")
    loc = lexer.location()
    directive = DirectiveDefinition(name=lexer.consume_ident(), loc=loc)
    if lexer.peek() == "(":
        lexer.consume_token("(")
        while lexer.peek() != ")":
            directive.arguments.append(parse_input_value(lexer))
        lexer.consume_token(")")

    lexer.consume_keyword("on")
    while True:
        directive.locations.append(lexer.consume_ident())
        if lexer.peek() != "|":
            break
        lexer.consume_token("|")
    return directive


def parse_extension(schema: Schema, lexer: Lexer) -> None:
    """Read an ``extend`` definition; type extensions are queued on the schema."""
    loc = lexer.location()
    keyword = lexer.consume_ident()
    match keyword:
        case "schema":
            _parse_entry_points(schema, lexer)
            return
        case "type":
            extended = parse_object_def(lexer)
        case "interface":
            extended = parse_interface_def(lexer)
        case "union":
            extended = parse_union_def(lexer)
        case "enum":
            extended = parse_enum_def(lexer)
        case "input":
            extended = parse_input_def(lexer)
        case _:
            lexer.syntax_error(f"unexpected {quote(keyword)}, expecting {_EXTENSION_KEYWORDS}")
            return
    schema.extensions.append(Extension(type=extended, loc=loc))


def parse_fields_def(lexer: Lexer) -> FieldsDefinition:
    fields = FieldsDefinition()
    while lexer.peek() != "}":
        field = FieldDefinition()
        field.desc = lexer.desc_comment()
        field.loc = lexer.location()
        field.name = lexer.consume_ident()
        if lexer.peek() == "(":
            lexer.consume_token("(")
            while lexer.peek() != ")":
                field.arguments.append(parse_input_value(lexer))
            lexer.consume_token(")")
        lexer.consume_token(":")
        field.type = parse_type(lexer)
        field.directives = parse_directives(lexer)
        fields.append(field)
    return fields