"""Building and resolving a schema from type-system definition documents."""

from __future__ import annotations

from gqlparse.ast import (
    Argument,
    ArgumentsDefinition,
    DirectiveList,
    EnumTypeDefinition,
    FieldDefinition,
    Ident,
    InputObject,
    InterfaceTypeDefinition,
    NamedType,
    ObjectTypeDefinition,
    Schema,
    Union,
)
from gqlparse.common import resolve_type
from gqlparse.errors import QueryError, quote
from gqlparse.lexer import Lexer
from gqlparse.sdl import parse_definitions

_META_SOURCE = """
	# The `Int` scalar type represents non-fractional signed whole numeric values. Int can represent values between -(2^31) and 2^31 - 1.
	scalar Int

	# The `Float` scalar type represents signed double-precision fractional values as specified by IEEE 754.
	scalar Float

	# The `String` scalar type represents textual data, represented as UTF-8 character sequences. The String type is most often used by GraphQL to represent free-form human-readable text.
	scalar String

	# The `Boolean` scalar type represents `true` or `false`.
	scalar Boolean

	# The `ID` scalar type represents a unique identifier, often used to refetch an object or as key for a cache. The ID type appears in a JSON response as a String; however, it is not intended to be human-readable. When expected as an input type, any string (such as `"4"`) or integer (such as `4`) input value will be accepted as an ID.
	scalar ID

	# Directs the executor to include this field or fragment only when the `if` argument is true.
	directive @include(
		# Included when true.
		if: Boolean!
	) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

	# Directs the executor to skip this field or fragment when the `if` argument is true.
	directive @skip(
		# Skipped when true.
		if: Boolean!
	) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

	# Marks an element of a GraphQL schema as no longer supported.
	directive @deprecated(
		# Explains why this element was deprecated, usually also including a suggestion
		# for how to access supported similar data. Formatted in Markdown.
		reason: String = "No longer supported"
	) on FIELD_DEFINITION | ENUM_VALUE

	# A Directive provides a way to describe alternate runtime execution and type validation behavior in a GraphQL document.
	#
	# In some cases, you need to provide options to alter GraphQL's execution behavior
	# in ways field arguments will not suffice, such as conditionally including or
	# skipping a field. Directives provide this by describing additional information
	# to the executor.
	type __Directive {
		name: String!
		description: String
		locations: [__DirectiveLocation!]!
		args: [__InputValue!]!
	}

	# A Directive can be adjacent to many parts of the GraphQL language, a
	# __DirectiveLocation describes one such possible adjacencies.
	enum __DirectiveLocation {
		# Location adjacent to a query operation.
		QUERY
		# Location adjacent to a mutation operation.
		MUTATION
		# Location adjacent to a subscription operation.
		SUBSCRIPTION
		# Location adjacent to a field.
		FIELD
		# Location adjacent to a fragment definition.
		FRAGMENT_DEFINITION
		# Location adjacent to a fragment spread.
		FRAGMENT_SPREAD
		# Location adjacent to an inline fragment.
		INLINE_FRAGMENT
		# Location adjacent to a schema definition.
		SCHEMA
		# Location adjacent to a scalar definition.
		SCALAR
		# Location adjacent to an object type definition.
		OBJECT
		# Location adjacent to a field definition.
		FIELD_DEFINITION
		# Location adjacent to an argument definition.
		ARGUMENT_DEFINITION
		# Location adjacent to an interface definition.
		INTERFACE
		# Location adjacent to a union definition.
		UNION
		# Location adjacent to an enum definition.
		ENUM
		# Location adjacent to an enum value definition.
		ENUM_VALUE
		# Location adjacent to an input object type definition.
		INPUT_OBJECT
		# Location adjacent to an input object field definition.
		INPUT_FIELD_DEFINITION
	}

	# One possible value for a given Enum. Enum values are unique values, not a
	# placeholder for a string or numeric value. However an Enum value is returned in
	# a JSON response as a string.
	type __EnumValue {
		name: String!
		description: String
		isDeprecated: Boolean!
		deprecationReason: String
	}

	# Object and Interface types are described by a list of Fields, each of which has
	# a name, potentially a list of arguments, and a return type.
	type __Field {
		name: String!
		description: String
		args: [__InputValue!]!
		type: __Type!
		isDeprecated: Boolean!
		deprecationReason: String
	}

	# Arguments provided to Fields or Directives and the input fields of an
	# InputObject are represented as Input Values which describe their type and
	# optionally a default value.
	type __InputValue {
		name: String!
		description: String
		type: __Type!
		# A GraphQL-formatted string representing the default value for this input value.
		defaultValue: String
	}

	# A GraphQL Schema defines the capabilities of a GraphQL server. It exposes all
	# available types and directives on the server, as well as the entry points for
	# query, mutation, and subscription operations.
	type __Schema {
		# A list of all types supported by this server.
		types: [__Type!]!
		# The type that query operations will be rooted at.
		queryType: __Type!
		# If this server supports mutation, the type that mutation operations will be rooted at.
		mutationType: __Type
		# If this server support subscription, the type that subscription operations will be rooted at.
		subscriptionType: __Type
		# A list of all directives supported by this server.
		directives: [__Directive!]!
	}

	# The fundamental unit of any GraphQL Schema is the type. There are many kinds of
	# types in GraphQL as represented by the `__TypeKind` enum.
	#
	# Depending on the kind of a type, certain fields describe information about that
	# type. Scalar types provide no information beyond a name and description, while
	# Enum types provide their values. Object and Interface types provide the fields
	# they describe. Abstract types, Union and Interface, provide the Object types
	# possible at runtime. List and NonNull types compose other types.
	type __Type {
		kind: __TypeKind!
		name: String
		description: String
		fields(includeDeprecated: Boolean = false): [__Field!]
		interfaces: [__Type!]
		possibleTypes: [__Type!]
		enumValues(includeDeprecated: Boolean = false): [__EnumValue!]
		inputFields: [__InputValue!]
		ofType: __Type
	}

	# An enum describing what kind of type a given `__Type` is.
	enum __TypeKind {
		# Indicates this type is a scalar.
		SCALAR
		# Indicates this type is an object. `fields` and `interfaces` are valid fields.
		OBJECT
		# Indicates this type is an interface. `fields` and `possibleTypes` are valid fields.
		INTERFACE
		# Indicates this type is a union. `possibleTypes` is a valid field.
		UNION
		# Indicates this type is an enum. `enumValues` is a valid field.
		ENUM
		# Indicates this type is an input object. `inputFields` is a valid field.
		INPUT_OBJECT
		# Indicates this type is a list. `ofType` is a valid field.
		LIST
		# Indicates this type is a non-null. `ofType` is a valid field.
		NON_NULL
	}
"""

_RUNE_ESCAPES = {
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x27: "\\'",
    0x5C: "\\\\",
}


def _quote_rune(code: int) -> str:
    if code in _RUNE_ESCAPES:
        body = _RUNE_ESCAPES[code]
    elif 0 <= code < 0x110000 and chr(code).isprintable():
        body = chr(code)
    elif 0 <= code < 0x80:
        body = f"\\x{code:02x}"
    elif 0 <= code <= 0xFFFF:
        body = f"\\u{code:04x}"
    elif 0 <= code < 0x110000:
        body = f"\\U{code:08x}"
    else:
        body = "\\ufffd"
    return f"'{body}'"


def _debug_ident(ident: Ident) -> str:
    """Render an identifier with its location in the quoted debug form."""
    return (
        f"{{{quote(ident.name)} "
        f"{{{_quote_rune(ident.loc.line)} {_quote_rune(ident.loc.column)}}}}}"
    )


def new_meta() -> Schema:
    """Return a schema holding only the built-in scalars, directives and introspection types."""
    meta = Schema()
    parse(meta, _META_SOURCE, False)
    return meta


def new_schema() -> Schema:
    """Return an empty schema preloaded with the built-in definitions."""
    schema = Schema()
    meta = new_meta()
    schema.types.update(meta.types)
    schema.directives.update(meta.directives)
    return schema


def parse_schema(source: str, use_string_descriptions: bool = False) -> Schema:
    """Parse ``source`` into a new schema that includes the built-in definitions."""
    schema = new_schema()
    parse(schema, source, use_string_descriptions)
    return schema


def parse(schema: Schema, source: str, use_string_descriptions: bool = False) -> None:
    """Parse ``source`` into ``schema`` and resolve every type reference.

    Raises :class:`QueryError` for syntax and resolution errors and
    :class:`ValueError` for invalid type extensions.
    """
    lexer = Lexer(source, use_string_descriptions)
    lexer.catch_syntax_error(lambda: parse_definitions(schema, lexer))

    _merge_extensions(schema)

    for named in list(schema.types.values()):
        _resolve_named_type(schema, named)
    for directive in schema.directives.values():
        for arg in directive.arguments:
            arg.type = resolve_type(arg.type, schema.resolve)

    if not schema.entry_point_names:
        for key, name in (("query", "Query"), ("mutation", "Mutation"), ("subscription", "Subscription")):
            if name in schema.types:
                schema.entry_point_names[key] = name
    roots: dict[str, NamedType] = {}
    for key, name in schema.entry_point_names.items():
        if name not in schema.types:
            raise QueryError(f"type {quote(name)} not found")
        roots[key] = schema.types[name]
    setattr(schema, "entry_points", roots)

    for obj in schema.objects:
        _resolve_directives(schema, obj.directives, "OBJECT")
        for field in obj.fields:
            _resolve_directives(schema, field.directives, "FIELD_DEFINITION")
        interfaces = []
        for iface_name in obj.interface_names:
            found = schema.types.get(iface_name)
            if found is None:
                raise QueryError(f"interface {quote(iface_name)} not found")
            if not isinstance(found, InterfaceTypeDefinition):
                raise QueryError(f"type {quote(iface_name)} is not an interface")
            for field_name in found.fields.names():
                if obj.fields.get(field_name) is None:
                    raise QueryError(
                        f"interface {quote(iface_name)} expects field {quote(field_name)} "
                        f"but {quote(obj.name)} does not provide it"
                    )
            interfaces.append(found)
            found.possible_types.append(obj)
        obj.interfaces = interfaces

    for union in schema.unions:
        _resolve_directives(schema, union.directives, "UNION")
        members = []
        for name in union.type_names:
            found = schema.types.get(name)
            if found is None:
                raise QueryError(f"object type {quote(name)} not found")
            if not isinstance(found, ObjectTypeDefinition):
                raise QueryError(f"type {quote(name)} is not an object")
            members.append(found)
        union.union_member_types = members

    for enum in schema.enums:
        _resolve_directives(schema, enum.directives, "ENUM")
        for value in enum.enum_values_definition:
            _resolve_directives(schema, value.directives, "ENUM_VALUE")


def _merge_extensions(schema: Schema) -> None:
    for ext in schema.extensions:
        extension = ext.type
        original = schema.types.get(extension.type_name())
        if original is None:
            raise ValueError(f"trying to extend unknown type {quote(extension.type_name())}")
        if original.kind() != extension.kind():
            raise ValueError(
                f"trying to extend type {quote(original.kind())} with type {quote(extension.kind())}"
            )

        if isinstance(original, ObjectTypeDefinition):
            for field in extension.fields:
                if original.fields.get(field.name) is not None:
                    raise ValueError(f"extended field {quote(field.name)} already exists")
            original.fields.extend(extension.fields)
            for name in extension.interface_names:
                if name in original.interface_names:
                    raise ValueError(
                        f"interface {quote(name)} implemented in the extension "
                        f"is already implemented in {quote(original.name)}"
                    )
            original.interface_names.extend(extension.interface_names)
        elif isinstance(original, InputObject):
            for value in extension.values:
                if original.values.get(value.name.name) is not None:
                    raise ValueError(f"extended field {_debug_ident(value.name)} already exists")
            original.values.extend(extension.values)
        elif isinstance(original, InterfaceTypeDefinition):
            for field in extension.fields:
                if original.fields.get(field.name) is not None:
                    raise ValueError(f"extended field {field.name} already exists")
            original.fields.extend(extension.fields)
        elif isinstance(original, Union):
            for name in extension.type_names:
                if name in original.type_names:
                    raise ValueError(
                        f"union type {quote(name)} already declared in {quote(original.name)}"
                    )
            original.type_names.extend(extension.type_names)
        elif isinstance(original, EnumTypeDefinition):
            existing = {v.enum_value for v in original.enum_values_definition}
            for value in extension.enum_values_definition:
                if value.enum_value in existing:
                    raise ValueError(
                        f"enum value {quote(value.enum_value)} already declared "
                        f"in {quote(original.name)}"
                    )
            original.enum_values_definition.extend(extension.enum_values_definition)
        else:
            raise ValueError(
                f"unexpected {quote(original.type_name())}, expecting "
                '"schema", "type", "enum", "interface", "union" or "input"'
            )


def _resolve_named_type(schema: Schema, named: NamedType) -> None:
    if isinstance(named, (ObjectTypeDefinition, InterfaceTypeDefinition)):
        for field in named.fields:
            _resolve_field(schema, field)
    elif isinstance(named, InputObject):
        _resolve_input_values(schema, named.values)


def _resolve_field(schema: Schema, field: FieldDefinition) -> None:
    field.type = resolve_type(field.type, schema.resolve)
    _resolve_directives(schema, field.directives, "FIELD_DEFINITION")
    _resolve_input_values(schema, field.arguments)


def _resolve_directives(schema: Schema, directives: DirectiveList, location: str) -> None:
    for directive in directives:
        name = directive.name.name
        definition = schema.directives.get(name)
        if definition is None:
            raise QueryError(f"directive {quote(name)} not found")
        if location not in definition.locations:
            allowed = " ".join(definition.locations)
            raise QueryError(
                f"invalid location {quote(location)} for directive {quote(name)} "
                f"(must be one of [{allowed}])"
            )
        for arg in directive.arguments:
            if definition.arguments.get(arg.name.name) is None:
                raise QueryError(
                    f"invalid argument {quote(arg.name.name)} for directive {quote(name)}"
                )
        given = {arg.name.name for arg in directive.arguments}
        for arg in definition.arguments:
            if arg.name.name not in given:
                directive.arguments.append(Argument(arg.name, arg.default))
                given.add(arg.name.name)


def _resolve_input_values(schema: Schema, values: ArgumentsDefinition) -> None:
    for value in values:
        value.type = resolve_type(value.type, schema.resolve)