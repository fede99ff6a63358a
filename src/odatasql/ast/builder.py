"""Fluent builder API for constructing query nodes and option bundles."""

from __future__ import annotations

from typing import Self

from odatasql.ast.nodes import (
    IT,
    BinaryOperator,
    BinaryOperatorKind,
    Constant,
    FunctionCall,
    Node,
    OrderByClause,
    OrderByDirection,
    PropertyAccess,
    Quantifier,
    QuantifierKind,
    RangeVariableReference,
    UnaryOperator,
    UnaryOperatorKind,
)
from odatasql.models.options import QueryOptions


class QueryOptionsBuilder:
    """Fluent builder for ergonomic ``QueryOptions`` construction."""

    def __init__(self) -> None:
        self._filter: Node | None = None
        self._order_by: list[tuple[Node, OrderByDirection]] = []
        self._select: list[str] = []
        self._top: int | None = None
        self._search: Node | None = None

    def select(self, *names: str) -> Self:
        self._select.extend(names)
        return self

    def where(self, condition: Node) -> Self:
        if self._filter is None:
            self._filter = condition
        else:
            self._filter = and_(self._filter, condition)
        return self

    def order_by(self, expr: Node, desc: bool = False) -> Self:
        direction = OrderByDirection.DESCENDING if desc else OrderByDirection.ASCENDING
        self._order_by.append((expr, direction))
        return self

    def top(self, n: int) -> Self:
        self._top = n
        return self

    def search(self, expr: Node) -> Self:
        self._search = expr
        return self

    def build(self) -> QueryOptions:
        return QueryOptions(
            filter=self._filter,
            order_by=OrderByClause.chain(*self._order_by) if self._order_by else None,
            select=",".join(self._select) if self._select else None,
            top=self._top,
            search=self._search,
        )


# Convenience constructors for common nodes.


def it() -> RangeVariableReference:
    """Reference the implicit root document."""
    return RangeVariableReference(name=IT)


def var(name: str) -> RangeVariableReference:
    """Reference a lambda range variable."""
    return RangeVariableReference(name=name)


def prop(name: str, source: Node | None = None) -> PropertyAccess:
    """Access a property of ``source`` (default ``$it``)."""
    return PropertyAccess(name=name, source=it() if source is None else source)


def lit(value: str | int | float | bool | None) -> Constant:
    """Create a constant from a Python value."""
    if value is None:
        return Constant.null()
    if isinstance(value, bool):
        return Constant.boolean(value)
    if isinstance(value, str):
        return Constant.string(value)
    return Constant.number(value)


def binary(op: BinaryOperatorKind, left: Node, right: Node) -> BinaryOperator:
    return BinaryOperator(operator=op, left=left, right=right)


def eq(left: Node, right: Node) -> BinaryOperator:
    """Create an equality comparison."""
    return binary(BinaryOperatorKind.EQUAL, left, right)


def ne(left: Node, right: Node) -> BinaryOperator:
    return binary(BinaryOperatorKind.NOT_EQUAL, left, right)


def gt(left: Node, right: Node) -> BinaryOperator:
    return binary(BinaryOperatorKind.GREATER_THAN, left, right)


def lt(left: Node, right: Node) -> BinaryOperator:
    return binary(BinaryOperatorKind.LESS_THAN, left, right)


def and_(*conditions: Node) -> Node:
    """Chain conditions with ``and``, left-associative."""
    return _fold(BinaryOperatorKind.AND, conditions)


def or_(*conditions: Node) -> Node:
    """Chain conditions with ``or``, left-associative."""
    return _fold(BinaryOperatorKind.OR, conditions)


def not_(operand: Node) -> UnaryOperator:
    return UnaryOperator(operator=UnaryOperatorKind.NOT, operand=operand)


def func(name: str, *args: Node, source: Node | None = None) -> FunctionCall:
    """Create a function call."""
    return FunctionCall(name=name, arguments=args, source=source)


def any_(source: Node, variable: str | None = None, body: Node | None = None) -> Quantifier:
    """``source/any(variable:body)``; without a body, the parameterless ``any()``."""
    if body is None:
        return Quantifier(kind=QuantifierKind.ANY, source=source, body=Constant.boolean(True))
    return Quantifier(kind=QuantifierKind.ANY, source=source, body=body, range_variable=variable)


def all_(source: Node, variable: str, body: Node) -> Quantifier:
    return Quantifier(kind=QuantifierKind.ALL, source=source, body=body, range_variable=variable)


def _fold(op: BinaryOperatorKind, conditions: tuple[Node, ...]) -> Node:
    if not conditions:
        raise ValueError(f"'{op}' needs at least one operand")
    result = conditions[0]
    for cond in conditions[1:]:
        result = binary(op, result, cond)
    return result
