# gqlparse

A parser for GraphQL documents: executable queries and the schema
definition language (SDL). It has no dependencies outside the standard
library.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Parsing a query

```python
from gqlparse.query import parse

doc = parse("query Hero($id: ID!) { hero(id: $id) { name ...Extra } }")
op = doc.operations[0]
print(op.type, op.name.name)      # OperationType.QUERY Hero
print(op.vars[0].type)            # ID!
```

`parse` returns an `ExecutableDefinition` whose `operations` hold
`OperationDefinition` nodes and whose `fragments` hold the document's
`FragmentDefinition` nodes (`doc.fragments.get(name)` looks one up).
Selections are `Field`, `FragmentSpread` and `InlineFragment` nodes from
`gqlparse.ast`. A syntax error raises `gqlparse.errors.QueryError`; its
`message` holds the text and `locations` the `Location` (line and column)
where parsing stopped. `str(error)` gives, for example,
`graphql: syntax error: ... (line 1, column 5)`.

Argument values are kept as literal nodes (`PrimitiveValue`, `Variable`,
`NullValue`, `ListValue`, `ObjectValue`); each has `deserialize(variables)`
that turns it into a Python value, taking `$name` references from the
given dictionary.

## Parsing a schema

```python
from gqlparse.schema import parse_schema

schema = parse_schema('''
    "A greeting."
    type Query {
        hello(name: String = "world"): String!
    }
''', use_string_descriptions=True)

query = schema.types["Query"]
print(query.description())               # A greeting.
print(query.fields.get("hello").type)    # String!
print(schema.entry_points["query"].name) # Query
```

`parse_schema` starts from `new_schema()`, a schema that already holds the
built-in scalars (`Int`, `Float`, `String`, `Boolean`, `ID`), the
`@include`, `@skip` and `@deprecated` directives, and the introspection
types (`__Schema`, `__Type` and the rest). It then reads the given SDL,
merges `extend` definitions, resolves every type reference, links
interfaces to their implementations (`possible_types`) and union members to
their object types (`union_member_types`), and checks directive locations
and arguments, filling in argument defaults. `parse(schema, source,
use_string_descriptions)` does the same into a schema you supply;
`new_meta()` returns a schema with only the built-ins.

Errors:

- syntax errors, unknown types, missing interface fields, unknown
  directives and misplaced directives raise `QueryError`;
- invalid extensions (extending an unknown type, extending with a
  different kind, redeclaring a field, interface, union member or enum
  value) raise `ValueError`.

With `use_string_descriptions=False` descriptions come from `#` comments
placed before a definition. With `True` they come from `"..."` or
`"""..."""` strings, and block strings are dedented as the GraphQL
specification describes.

When no `schema { ... }` block is given, types named `Query`, `Mutation`
and `Subscription` become the entry points.

## Lower-level pieces

- `gqlparse.lexer.Lexer` tokenises a source string (`peek`,
  `consume_token`, `consume_ident`, `desc_comment`, ...);
  `catch_syntax_error(func)` runs a parsing function and turns syntax
  errors into a located `QueryError`. `block_string(raw)` applies the
  block string dedent rules.
- `gqlparse.common` parses types, literals, argument lists, input values
  and directives, and `resolve_type` replaces type names with definitions.
- `gqlparse.sdl` holds the parsers for single SDL definitions
  (`parse_object_def`, `parse_enum_def`, `parse_extension`, ...).
- `gqlparse.ast` defines the syntax tree and the `Schema` class.

## What it does not do

The package parses and resolves documents only. It does not validate a
query against a schema, does not execute queries or call resolvers, does
not answer introspection queries, and has no server or command-line tool.