import pytest

from gqlparse.ast import ListValue, NonNull, NullValue, ObjectTypeDefinition, TypeName, Variable
from gqlparse.common import (
    parse_argument_list,
    parse_directives,
    parse_input_value,
    parse_literal,
    parse_type,
    resolve_type,
)
from gqlparse.errors import QueryError
from gqlparse.lexer import Lexer, TokenKind


def lexer_for(text):
    lex = Lexer(text, False)
    lex.consume_whitespace()
    return lex


def test_parse_type_round_trip():
    lex = lexer_for("[String!]!")
    t = lex.catch_syntax_error(lambda: parse_type(lex))
    assert str(t) == "[String!]!"
    assert t.kind() == "NON_NULL"


def test_parse_literal_round_trip():
    text = '{a: [1, "x", $v], b: null}'
    lex = lexer_for(text)
    value = lex.catch_syntax_error(lambda: parse_literal(lex, False))
    assert str(value) == text
    assert lex.peek() == TokenKind.EOF


def test_literal_deserialize_with_variables():
    lex = lexer_for("[$v, null]")
    value = parse_literal(lex, False)
    assert isinstance(value, ListValue)
    assert value.deserialize({"v": "val"}) == ["val", None]


def test_negative_literal():
    lex = lexer_for("-5")
    value = parse_literal(lex, True)
    assert value.text == "-5"
    assert value.deserialize(None) == -5


def test_variable_not_allowed_in_const():
    lex = lexer_for("$v")
    with pytest.raises(QueryError) as info:
        lex.catch_syntax_error(lambda: parse_literal(lex, True))
    assert info.value.message == "syntax error: variable not allowed"


def test_invalid_value():
    lex = lexer_for(")")
    with pytest.raises(QueryError) as info:
        lex.catch_syntax_error(lambda: parse_literal(lex, False))
    assert info.value.message == "syntax error: invalid value"


def test_parse_directives_location_points_at_at_sign():
    lex = lexer_for('@deprecated(reason: "old") @skip(if: $x)')
    directives = parse_directives(lex)
    assert [d.name.name for d in directives] == ["deprecated", "skip"]
    assert directives[0].name.loc.column == 1
    assert directives.get("skip").arguments.must_get("if") == Variable("x", directives.get("skip").arguments[0].value.loc)


def test_parse_argument_list():
    lex = lexer_for("(a: 1, b: null)")
    args = parse_argument_list(lex)
    assert [a.name.name for a in args] == ["a", "b"]
    assert isinstance(args.get("b"), NullValue)


def test_parse_input_value():
    lex = lexer_for('reason: String = "No longer supported"')
    value = parse_input_value(lex)
    assert value.name.name == "reason"
    assert str(value.type) == "String"
    assert value.default.deserialize(None) == "No longer supported"


def test_resolve_type():
    query = ObjectTypeDefinition(name="Query")
    resolved = resolve_type(NonNull(TypeName("Query")), {"Query": query}.get)
    assert resolved.of_type is query


def test_resolve_unknown_type():
    with pytest.raises(QueryError) as info:
        resolve_type(TypeName("Dimension"), {}.get)
    assert info.value.rule == "KnownTypeNames"
    assert info.value.message == 'Unknown type "Dimension".'