"""Parsed OData system query options handed to the assembler."""

from __future__ import annotations

from dataclasses import dataclass

from odatasql.ast.nodes import Node, OrderByClause


@dataclass(frozen=True)
class QueryOptions:
    """The ``$filter``, ``$orderby``, ``$select``, ``$top`` and ``$search`` of one request.

    ``None`` means the option was absent from the request.
    ``select`` is the raw comma-separated ``$select`` text.
    """

    filter: Node | None = None
    order_by: OrderByClause | None = None
    select: str | None = None
    top: int | None = None
    search: Node | None = None

    @property
    def has_positive_top(self) -> bool:
        return self.top is not None and self.top > 0
