import pytest

from gqlparse.ast import (
    EnumTypeDefinition,
    InputObject,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    Schema,
    Union,
)
from gqlparse.errors import Location, QueryError
from gqlparse.lexer import Lexer
from gqlparse.sdl import (
    parse_definitions,
    parse_directive_def,
    parse_enum_def,
    parse_extension,
    parse_fields_def,
    parse_input_def,
    parse_interface_def,
    parse_object_def,
    parse_union_def,
)


def _setup(definition):
    lexer = Lexer(definition, False)
    lexer.consume_whitespace()
    return lexer


def _run(definition, func):
    lexer = _setup(definition)
    return lexer.catch_syntax_error(lambda: func(lexer))


def _parse_schema(source, use_string_descriptions=False):
    schema = Schema()
    lexer = Lexer(source, use_string_descriptions)
    lexer.catch_syntax_error(lambda: parse_definitions(schema, lexer))
    return schema


def test_parse_interface_def():
    actual = _run("Greeting { field: String }", parse_interface_def)
    assert actual.name == "Greeting"
    assert actual.loc == Location(1, 1)
    assert [f.name for f in actual.fields] == ["field"]


@pytest.mark.parametrize(
    "definition, names",
    [
        ("Hello implements World { field: String }", ["World"]),
        ("Hello implements Wo & rld { field: String }", ["Wo", "rld"]),
        ("Hello implements & Wo & rld { field: String }", ["Wo", "rld"]),
        ("Hello implements Wo, rld { field: String }", ["Wo", "rld"]),
    ],
)
def test_parse_object_def(definition, names):
    actual = _run(definition, parse_object_def)
    assert actual.name == "Hello"
    assert actual.loc == Location(1, 1)
    assert actual.interface_names == names


def test_parse_object_def_with_directive_and_interface():
    actual = _run("Hello @foo implements World { f: Int }", parse_object_def)
    assert [d.name.name for d in actual.directives] == ["foo"]
    assert actual.interface_names == ["World"]
    assert actual.fields.names() == ["f"]


def test_parse_object_def_wrong_keyword():
    with pytest.raises(QueryError) as info:
        _run("Hello extends World { f: Int }", parse_object_def)
    assert info.value.message == 'syntax error: unexpected "extends", expecting "implements"'


def test_parse_object_def_missing_body():
    with pytest.raises(QueryError) as info:
        _run("Hello", parse_object_def)
    assert info.value.message.startswith("syntax error:")


def test_parse_union_def():
    actual = _run("Foo = Bar | Qux | Quux", parse_union_def)
    assert actual.name == "Foo"
    assert actual.type_names == ["Bar", "Qux", "Quux"]
    assert actual.loc == Location(1, 1)
    assert list(actual.directives) == []


def test_parse_enum_def_single_line():
    actual = _run("Foo { BAR QUX }", parse_enum_def)
    assert actual.name == "Foo"
    assert actual.loc == Location(1, 1)
    assert [(v.enum_value, v.loc) for v in actual.enum_values_definition] == [
        ("BAR", Location(1, 7)),
        ("QUX", Location(1, 11)),
    ]


def test_parse_enum_def_new_lines():
    actual = _run("Foo { \n\t\t\t\tBAR\n\t\t\t\tQUX\n\t\t\t}", parse_enum_def)
    assert actual.name == "Foo"
    assert actual.loc == Location(1, 1)
    assert [(v.enum_value, v.loc) for v in actual.enum_values_definition] == [
        ("BAR", Location(2, 5)),
        ("QUX", Location(3, 5)),
    ]


def test_parse_directive_def():
    actual = _run("@Foo on FIELD", parse_directive_def)
    assert actual.name == "Foo"
    assert actual.locations == ["FIELD"]
    assert actual.loc == Location(1, 2)


def test_parse_directive_def_with_arguments():
    actual = _run("@d(x: Int = 1) on FIELD | OBJECT", parse_directive_def)
    assert actual.locations == ["FIELD", "OBJECT"]
    arg = actual.arguments.get("x")
    assert str(arg.type) == "Int"
    assert arg.default.deserialize(None) == 1


def test_parse_input_def():
    actual = _run("Foo { qux: String }", parse_input_def)
    assert actual.name == "Foo"
    assert actual.loc == Location(1, 1)
    assert [v.name.name for v in actual.values] == ["qux"]


def test_parse_fields_def_with_arguments_and_directives():
    lexer = _setup("a(x: Int!, y: [String]): [ID!]! @deprecated }")
    fields = lexer.catch_syntax_error(lambda: parse_fields_def(lexer))
    assert fields.names() == ["a"]
    field = fields.get("a")
    assert str(field.type) == "[ID!]!"
    assert [str(a.type) for a in field.arguments] == ["Int!", "[String]"]
    assert field.directives.get("deprecated") is not None
    assert lexer.peek() == "}"


def test_parse_definitions_collects_types():
    schema = _parse_schema(
        """
        schema { query: Q }
        # An object
        type Q { a: String }
        interface I { a: String }
        union U = Q
        enum E { A B }
        input In { x: Int }
        scalar Time @d
        directive @d on SCALAR
        """
    )
    assert schema.entry_point_names == {"query": "Q"}
    assert isinstance(schema.types["Q"], ObjectTypeDefinition)
    assert schema.types["Q"].description() == "An object"
    assert isinstance(schema.types["I"], InterfaceTypeDefinition)
    assert isinstance(schema.types["U"], Union)
    assert isinstance(schema.types["E"], EnumTypeDefinition)
    assert isinstance(schema.types["In"], InputObject)
    assert isinstance(schema.types["Time"], ScalarTypeDefinition)
    assert [d.name.name for d in schema.types["Time"].directives] == ["d"]
    assert schema.directives["d"].locations == ["SCALAR"]
    assert [o.name for o in schema.objects] == ["Q"]
    assert [u.name for u in schema.unions] == ["U"]
    assert [e.name for e in schema.enums] == ["E"]


def test_parse_definitions_string_descriptions():
    schema = _parse_schema('"Single line description."\ntype T { f: String }', True)
    assert schema.types["T"].description() == "Single line description."


def test_parse_definitions_unknown_keyword():
    with pytest.raises(QueryError) as info:
        _parse_schema("bogus Foo")
    assert info.value.message == (
        'syntax error: unexpected "bogus", expecting "schema", "type", "enum", '
        '"interface", "union", "input", "scalar" or "directive"'
    )


def test_parse_extension_type():
    schema = Schema()
    lexer = _setup("type Foo { b: Int }")
    lexer.catch_syntax_error(lambda: parse_extension(schema, lexer))
    assert len(schema.extensions) == 1
    ext = schema.extensions[0]
    assert isinstance(ext.type, ObjectTypeDefinition)
    assert ext.type.name == "Foo"
    assert ext.type.fields.names() == ["b"]
    assert ext.loc == Location(1, 1)


def test_parse_extension_schema():
    schema = _parse_schema("extend schema { mutation: Mutation }")
    assert schema.entry_point_names == {"mutation": "Mutation"}
    assert schema.extensions == []


def test_parse_extension_invalid_syntax():
    source = "\n\t\t\textend invalid Node {\n\t\t\t\tid: ID!\n\t\t\t}\n\t\t\t"
    with pytest.raises(QueryError) as info:
        _parse_schema(source)
    assert str(info.value) == (
        'graphql: syntax error: unexpected "invalid", expecting "schema", "type", '
        '"enum", "interface", "union" or "input" (line 2, column 19)'
    )