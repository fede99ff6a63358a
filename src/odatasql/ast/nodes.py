"""Immutable OData query nodes. A parser adapter builds these; the translator only reads them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Name of the implicit range variable bound to the queried document.
IT = "$it"


class BinaryOperatorKind(StrEnum):
    OR = "or"
    AND = "and"
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    GREATER_THAN = "gt"
    GREATER_THAN_OR_EQUAL = "ge"
    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL = "le"
    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"
    MODULO = "mod"
    HAS = "has"


class UnaryOperatorKind(StrEnum):
    NEGATE = "negate"
    NOT = "not"


class QuantifierKind(StrEnum):
    ALL = "all"
    ANY = "any"


class CastKind(StrEnum):
    SINGLE_ENTITY = "single_entity"
    ENTITY_COLLECTION = "entity_collection"
    SINGLE_VALUE = "single_value"
    COLLECTION_PROPERTY = "collection_property"


class FunctionKind(StrEnum):
    SINGLE_VALUE = "single_value"
    SINGLE_ENTITY = "single_entity"
    COLLECTION = "collection"
    ENTITY_COLLECTION = "entity_collection"


class OrderByDirection(StrEnum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class Constant:
    """A literal whose text was already formatted by the parser.

    ``value`` is required: a ``None`` value renders as ``null`` whatever the text.
    """

    literal_text: str
    value: Any
    type_name: str | None = None
    is_enum: bool = False

    @classmethod
    def null(cls) -> Constant:
        return cls(literal_text="null", value=None)

    @classmethod
    def string(cls, v: str) -> Constant:
        escaped = v.replace("'", "''")
        return cls(literal_text=f"'{escaped}'", value=v, type_name="Edm.String")

    @classmethod
    def number(cls, v: int | float) -> Constant:
        type_name = "Edm.Int32" if isinstance(v, int) else "Edm.Double"
        return cls(literal_text=str(v), value=v, type_name=type_name)

    @classmethod
    def boolean(cls, v: bool) -> Constant:
        return cls(literal_text="true" if v else "false", value=v, type_name="Edm.Boolean")

    @classmethod
    def enum(cls, type_name: str, member: str) -> Constant:
        return cls(
            literal_text=f"{type_name}'{member}'",
            value=member,
            type_name=type_name,
            is_enum=True,
        )


@dataclass(frozen=True)
class Convert:
    """Implicit type promotion inserted by the parser. Renders as its source."""

    source: Node
    type_name: str | None = None


@dataclass(frozen=True)
class BinaryOperator:
    """Binary operation: left op right."""

    operator: BinaryOperatorKind
    left: Node
    right: Node


@dataclass(frozen=True)
class UnaryOperator:
    """Unary operation: -operand or not operand."""

    operator: UnaryOperatorKind
    operand: Node


@dataclass(frozen=True)
class PropertyAccess:
    """Declared (schema) property, single-valued or collection."""

    name: str
    source: Node | None = None
    collection: bool = False


@dataclass(frozen=True)
class OpenPropertyAccess:
    """Dynamic property of an open type; the name is taken as written."""

    name: str
    source: Node | None = None
    collection: bool = False


@dataclass(frozen=True)
class NavigationAccess:
    """Navigation property, single-valued or collection."""

    name: str
    source: Node | None = None
    navigation_source: str | None = None
    collection: bool = False


@dataclass(frozen=True)
class Cast:
    """Type cast segment, e.g. ``$it/NS.VipCustomer``."""

    type_name: str
    source: Node | None = None
    kind: CastKind = CastKind.SINGLE_VALUE


@dataclass(frozen=True)
class RangeVariableReference:
    """Reference to a lambda variable or the implicit ``$it``."""

    name: str
    entity: bool = True


@dataclass(frozen=True)
class Quantifier:
    """Lambda ``all``/``any`` over a collection."""

    kind: QuantifierKind
    source: Node
    body: Node
    range_variable: str | None = None


@dataclass(frozen=True)
class FunctionCall:
    """Function call, optionally bound to a receiver."""

    name: str
    arguments: tuple[Node, ...] = ()
    source: Node | None = None
    kind: FunctionKind = FunctionKind.SINGLE_VALUE


@dataclass(frozen=True)
class NamedFunctionParameter:
    """Named argument: name=value."""

    name: str
    value: Node


@dataclass(frozen=True)
class ParameterAlias:
    """Parameter alias such as ``@p1``."""

    alias: str


@dataclass(frozen=True)
class SearchTerm:
    """A raw ``$search`` term."""

    text: str


# The union of all node types.
Node = (
    Constant
    | Convert
    | BinaryOperator
    | UnaryOperator
    | PropertyAccess
    | OpenPropertyAccess
    | NavigationAccess
    | Cast
    | RangeVariableReference
    | Quantifier
    | FunctionCall
    | NamedFunctionParameter
    | ParameterAlias
    | SearchTerm
)


@dataclass(frozen=True)
class OrderByClause:
    """One ``$orderby`` item linked to the next through ``then_by``."""

    expression: Node
    direction: OrderByDirection = OrderByDirection.ASCENDING
    then_by: OrderByClause | None = None

    @classmethod
    def chain(cls, *items: tuple[Node, OrderByDirection]) -> OrderByClause:
        """Link ``(expression, direction)`` pairs in declaration order."""
        if not items:
            raise ValueError("An order-by chain needs at least one item")
        clause: OrderByClause | None = None
        for expression, direction in reversed(items):
            clause = cls(expression=expression, direction=direction, then_by=clause)
        assert clause is not None
        return clause

    def __iter__(self) -> Iterator[OrderByClause]:
        clause: OrderByClause | None = self
        while clause is not None:
            yield clause
            clause = clause.then_by


@dataclass(frozen=True)
class LevelsClause:
    """``$levels`` of an expand item: a depth or ``max``."""

    level: int = 0
    is_max: bool = False
