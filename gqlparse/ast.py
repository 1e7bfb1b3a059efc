"""Syntax tree and type-system nodes for GraphQL documents."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable

from gqlparse.errors import Location


class OperationType(str, enum.Enum):
    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"


@dataclass
class Ident:
    name: str
    loc: Location = Location()


# ---- values ---------------------------------------------------------------


@dataclass
class PrimitiveValue:
    type: Any
    text: str
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None) -> Any:
        from gqlparse.lexer import TokenKind, unquote

        if self.type == TokenKind.INT:
            number = int(self.text, 10)
            if not -(2**31) <= number <= 2**31 - 1:
                raise ValueError(f"value out of range: {self.text}")
            return number
        if self.type == TokenKind.FLOAT:
            return float(self.text)
        if self.type == TokenKind.STRING:
            return unquote(self.text)
        if self.type == TokenKind.IDENT:
            return {"true": True, "false": False}.get(self.text, self.text)
        raise ValueError(f"invalid literal {self.text!r}")

    def __str__(self) -> str:
        return self.text


@dataclass
class Variable:
    name: str
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None) -> Any:
        return (variables or {}).get(self.name)

    def __str__(self) -> str:
        return "$" + self.name


@dataclass
class NullValue:
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None) -> Any:
        return None

    def __str__(self) -> str:
        return "null"


@dataclass
class ListValue:
    values: list[Any] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None) -> list[Any]:
        return [v.deserialize(variables) for v in self.values]

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values) + "]"


@dataclass
class ObjectField:
    name: Ident
    value: Any


@dataclass
class ObjectValue:
    fields: list[ObjectField] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None) -> dict[str, Any]:
        return {f.name.name: f.value.deserialize(variables) for f in self.fields}

    def __str__(self) -> str:
        return "{" + ", ".join(f"{f.name.name}: {f.value}" for f in self.fields) + "}"


# ---- arguments and directives --------------------------------------------


@dataclass
class Argument:
    name: Ident
    value: Any


class ArgumentList(list):
    """Arguments given to a field or directive."""

    def get(self, name: str) -> Any:
        return next((a.value for a in self if a.name.name == name), None)

    def must_get(self, name: str) -> Any:
        value = self.get(name)
        if value is None:
            raise KeyError(f"missing argument {name!r}")
        return value


@dataclass
class Directive:
    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)


class DirectiveList(list):
    """Directives applied to a node."""

    def get(self, name: str) -> Directive | None:
        return next((d for d in self if d.name.name == name), None)


# ---- types ----------------------------------------------------------------


class Type:
    """Base of every type reference and definition."""

    KIND = ""

    def kind(self) -> str:
        return self.KIND


@dataclass
class TypeName(Type):
    KIND = "TYPE_NAME"
    name: str
    loc: Location = Location()

    def __str__(self) -> str:
        return self.name


@dataclass
class List(Type):
    KIND = "LIST"
    of_type: Type

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass
class NonNull(Type):
    KIND = "NON_NULL"
    of_type: Type

    def __str__(self) -> str:
        return f"{self.of_type}!"


class NamedType(Type):
    """A type definition that carries a name and description."""

    name: str
    desc: str

    def type_name(self) -> str:
        return self.name

    def description(self) -> str:
        return self.desc

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class InputValueDefinition:
    name: Ident = field(default_factory=lambda: Ident(""))
    type: Any = None
    default: Any = None
    desc: str = ""
    loc: Location = Location()
    type_loc: Location = Location()
    directives: DirectiveList = field(default_factory=DirectiveList)


class ArgumentsDefinition(list):
    """Input value definitions of a field, directive or input object."""

    def get(self, name: str) -> InputValueDefinition | None:
        return next((v for v in self if v.name.name == name), None)


@dataclass(eq=False)
class FieldDefinition:
    name: str = ""
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    type: Any = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = Location()


class FieldsDefinition(list):
    """Field definitions of an object or interface type."""

    def get(self, name: str) -> FieldDefinition | None:
        return next((f for f in self if f.name == name), None)

    def names(self) -> list[str]:
        return [f.name for f in self]


@dataclass(eq=False)
class ScalarTypeDefinition(NamedType):
    KIND = "SCALAR"
    name: str = ""
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class ObjectTypeDefinition(NamedType):
    KIND = "OBJECT"
    name: str = ""
    interfaces: list[Any] = field(default_factory=list, repr=False)
    interface_names: list[str] = field(default_factory=list)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class InterfaceTypeDefinition(NamedType):
    KIND = "INTERFACE"
    name: str = ""
    possible_types: list[ObjectTypeDefinition] = field(default_factory=list, repr=False)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class Union(NamedType):
    KIND = "UNION"
    name: str = ""
    union_member_types: list[ObjectTypeDefinition] = field(default_factory=list, repr=False)
    type_names: list[str] = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class EnumValueDefinition:
    enum_value: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = Location()


@dataclass(eq=False)
class EnumTypeDefinition(NamedType):
    KIND = "ENUM"
    name: str = ""
    enum_values_definition: list[EnumValueDefinition] = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class InputObject(NamedType):
    KIND = "INPUT_OBJECT"
    name: str = ""
    desc: str = ""
    values: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class DirectiveDefinition:
    name: str = ""
    desc: str = ""
    locations: list[str] = field(default_factory=list)
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    loc: Location = Location()


@dataclass(eq=False)
class Extension:
    type: Any = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


# ---- executable documents -------------------------------------------------


@dataclass(eq=False)
class Field:
    alias: Ident = field(default_factory=lambda: Ident(""))
    name: Ident = field(default_factory=lambda: Ident(""))
    arguments: ArgumentList = field(default_factory=ArgumentList)
    directives: DirectiveList = field(default_factory=DirectiveList)
    selection_set: list[Any] = field(default_factory=list)
    selection_set_loc: Location = Location()


@dataclass(eq=False)
class FragmentSpread:
    name: Ident = field(default_factory=lambda: Ident(""))
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class InlineFragment:
    on: TypeName = field(default_factory=lambda: TypeName(""))
    directives: DirectiveList = field(default_factory=DirectiveList)
    selections: list[Any] = field(default_factory=list)
    loc: Location = Location()


@dataclass(eq=False)
class FragmentDefinition:
    name: Ident = field(default_factory=lambda: Ident(""))
    on: TypeName = field(default_factory=lambda: TypeName(""))
    directives: DirectiveList = field(default_factory=DirectiveList)
    selections: list[Any] = field(default_factory=list)
    loc: Location = Location()


class FragmentList(list):
    """Fragment definitions of a document."""

    def get(self, name: str) -> FragmentDefinition | None:
        return next((f for f in self if f.name.name == name), None)


@dataclass(eq=False)
class OperationDefinition:
    type: OperationType = OperationType.QUERY
    name: Ident = field(default_factory=lambda: Ident(""))
    vars: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    selections: list[Any] = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class ExecutableDefinition:
    operations: list[OperationDefinition] = field(default_factory=list)
    fragments: FragmentList = field(default_factory=FragmentList)


@dataclass(eq=False)
class Schema:
    entry_point_names: dict[str, str] = field(default_factory=dict)
    types: dict[str, NamedType] = field(default_factory=dict)
    directives: dict[str, DirectiveDefinition] = field(default_factory=dict)
    use_field_resolvers: bool = False
    entry_points: dict[str, NamedType] = field(default_factory=dict)
    objects: list[ObjectTypeDefinition] = field(default_factory=list)
    unions: list[Union] = field(default_factory=list)
    enums: list[EnumTypeDefinition] = field(default_factory=list)
    extensions: list[Extension] = field(default_factory=list)

    def resolve(self, name: str) -> NamedType | None:
        return self.types.get(name)


Resolver = Callable[[str], "Type | None"]