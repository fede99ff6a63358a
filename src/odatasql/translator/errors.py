"""Typed translation failures. Absent clauses are ``None``, never errors."""

from __future__ import annotations

from typing import Any


class TranslationError(Exception):
    """Raised when a query tree cannot be rendered."""


class UnsupportedNodeError(TranslationError):
    """Raised for an object that is not a known query node."""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Unknown query node type: {type(node).__name__}")


class UnsupportedOperatorError(TranslationError):
    """Raised for an operator without a SQL symbol or a precedence level."""

    def __init__(self, operator: Any, reason: str = "has no SQL symbol") -> None:
        self.operator = operator
        super().__init__(f"Operator '{operator}' {reason}")
