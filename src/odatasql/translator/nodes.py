"""Render OData query nodes to DocumentDB SQL fragments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote

from odatasql.ast.nodes import (
    IT,
    BinaryOperator,
    BinaryOperatorKind,
    Cast,
    Constant,
    Convert,
    FunctionCall,
    LevelsClause,
    NamedFunctionParameter,
    NavigationAccess,
    Node,
    OpenPropertyAccess,
    OrderByClause,
    OrderByDirection,
    ParameterAlias,
    PropertyAccess,
    Quantifier,
    QuantifierKind,
    RangeVariableReference,
    SearchTerm,
    UnaryOperator,
    UnaryOperatorKind,
)
from odatasql.formatter.base import FieldFormatter
from odatasql.translator.errors import (
    TranslationError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)

KEYWORD_NULL = "null"
KEYWORD_NOT = "not"
SEARCH_KEYWORD_NOT = "NOT"
SYMBOL_NEGATE = "-"
KEYWORD_ASC = "ASC"
KEYWORD_DESC = "DESC"
KEYWORD_MAX = "max"
ALIAS_SEPARATOR = "&"

_SYMBOLS: dict[BinaryOperatorKind, str] = {
    BinaryOperatorKind.EQUAL: "=",
    BinaryOperatorKind.NOT_EQUAL: "!=",
    BinaryOperatorKind.GREATER_THAN: ">",
    BinaryOperatorKind.GREATER_THAN_OR_EQUAL: ">=",
    BinaryOperatorKind.LESS_THAN: "<",
    BinaryOperatorKind.LESS_THAN_OR_EQUAL: "<=",
    BinaryOperatorKind.AND: "AND",
    BinaryOperatorKind.OR: "OR",
}

# OData operator precedence, higher binds tighter.
PRECEDENCE: dict[BinaryOperatorKind, int] = {
    BinaryOperatorKind.OR: 1,
    BinaryOperatorKind.AND: 2,
    BinaryOperatorKind.EQUAL: 3,
    BinaryOperatorKind.NOT_EQUAL: 3,
    BinaryOperatorKind.GREATER_THAN: 3,
    BinaryOperatorKind.GREATER_THAN_OR_EQUAL: 3,
    BinaryOperatorKind.LESS_THAN: 3,
    BinaryOperatorKind.LESS_THAN_OR_EQUAL: 3,
    BinaryOperatorKind.ADD: 4,
    BinaryOperatorKind.SUBTRACT: 4,
    BinaryOperatorKind.MULTIPLY: 5,
    BinaryOperatorKind.DIVIDE: 5,
    BinaryOperatorKind.MODULO: 5,
    BinaryOperatorKind.HAS: 6,
}


@dataclass(frozen=True)
class TranslationContext:
    """Ambient state of one translation, passed down the recursion."""

    search: bool = False


def precedence(operator: BinaryOperatorKind) -> int:
    """Return the binding strength of ``operator``."""
    try:
        return PRECEDENCE[operator]
    except KeyError:
        raise UnsupportedOperatorError(operator, reason="has no precedence") from None


def unwrap_convert(node: Node) -> Node:
    """Strip implicit ``Convert`` wrappers to reach the node that decides rendering."""
    while isinstance(node, Convert):
        node = node.source
    return node


def requires_parentheses(child: Node, parent: BinaryOperatorKind) -> bool:
    """True when ``child`` binds looser than an enclosing ``parent`` operator."""
    real = unwrap_convert(child)
    return isinstance(real, BinaryOperator) and precedence(real.operator) < precedence(parent)


class NodeTranslator:
    """Translates query trees into DocumentDB SQL using a field formatter.

    The translator holds no per-call state, so one instance can serve
    concurrent callers.
    """

    def __init__(self, formatter: FieldFormatter) -> None:
        self._formatter = formatter

    @property
    def formatter(self) -> FieldFormatter:
        return self._formatter

    # -- clause entry points -------------------------------------------------

    def translate_filter(self, expression: Node) -> str:
        """Translate the root expression of ``$filter``."""
        return self.translate(expression)

    def translate_orderby(self, clause: OrderByClause) -> str:
        """Translate an order-by chain, keeping declaration order."""
        parts = []
        for item in clause:
            keyword = KEYWORD_ASC if item.direction == OrderByDirection.ASCENDING else KEYWORD_DESC
            parts.append(f"{self.translate(item.expression)} {keyword}")
        return ", ".join(parts)

    def translate_search(self, expression: Node) -> str:
        """Translate the root expression of ``$search``."""
        return self.translate(expression, TranslationContext(search=True))

    def translate_alias_map(self, aliases: Mapping[str, Node | None]) -> str | None:
        """Render parameter alias values as a URL query string.

        Entries with no value or an empty translation are dropped; ``None`` when
        nothing is left.
        """
        pairs = []
        for alias_name, value in aliases.items():
            if value is None:
                continue
            rendered = self.translate(value)
            if rendered:
                pairs.append(f"{alias_name}={quote(rendered, safe='')}")
        return ALIAS_SEPARATOR.join(pairs) if pairs else None

    @staticmethod
    def translate_levels(levels: LevelsClause) -> str:
        return KEYWORD_MAX if levels.is_max else str(levels.level)

    # -- nodes ---------------------------------------------------------------

    def translate(self, node: Node, context: TranslationContext | None = None) -> str:
        """Render ``node`` and its children to a SQL fragment."""
        ctx = context if context is not None else TranslationContext()
        match node:
            case Quantifier(kind=QuantifierKind.ANY, source=source, body=body, range_variable=None):
                if not isinstance(body, Constant):
                    raise TranslationError("Parameterless any() must have a constant body")
                return f"{self.translate(source, ctx)}/any()"
            case Quantifier(kind=kind, source=source, body=body, range_variable=var):
                if var is None or not var.strip():
                    raise TranslationError(f"{kind}() over a lambda body needs a range variable")
                return f"{self.translate(source, ctx)}/{kind}({var}:{self.translate(body, ctx)})"
            case BinaryOperator():
                return self._translate_binary(node, ctx)
            case UnaryOperator(operator=op, operand=operand):
                return self._translate_unary(op, operand, ctx)
            case Constant(value=None):
                return KEYWORD_NULL
            case Constant(literal_text=text, type_name=type_name, is_enum=True):
                return self._formatter.enum_literal(text, type_name or "")
            case Constant(literal_text=text):
                return text
            case Convert(source=source):
                return self.translate(source, ctx)
            case Cast(type_name=type_name, source=source):
                return self._translate_property_access(source, type_name, ctx)
            case RangeVariableReference(name=name, entity=True) if name == IT:
                return ""
            case RangeVariableReference(name=name):
                return name
            case PropertyAccess(name=name, source=source):
                return self._translate_property_access(source, name, ctx)
            case OpenPropertyAccess(name=name, source=source):
                return self._translate_property_access(source, name, ctx)
            case NavigationAccess(name=name, source=source, navigation_source=nav):
                return self._translate_property_access(source, name, ctx, navigation_source=nav)
            case FunctionCall(name=name, arguments=arguments, source=source):
                target = name
                if source is not None:
                    target = self._translate_property_access(source, target, ctx)
                args_sql = ",".join(self.translate(a, ctx) for a in arguments)
                return f"{target}({args_sql})"
            case NamedFunctionParameter(name=name, value=value):
                return f"{name}={self.translate(value, ctx)}"
            case ParameterAlias(alias=alias):
                return alias
            case SearchTerm(text=text):
                return text
            case _:
                raise UnsupportedNodeError(node)

    def _translate_binary(self, node: BinaryOperator, ctx: TranslationContext) -> str:
        symbol = _SYMBOLS.get(node.operator)
        if symbol is None:
            raise UnsupportedOperatorError(node.operator)

        left = self.translate(node.left, ctx)
        if requires_parentheses(node.left, node.operator):
            left = f"({left})"

        right = self.translate(node.right, ctx)
        if requires_parentheses(node.right, node.operator):
            right = f"({right})"

        return f"{left} {symbol} {right}"

    def _translate_unary(
        self, op: UnaryOperatorKind, operand: Node, ctx: TranslationContext
    ) -> str:
        if op == UnaryOperatorKind.NEGATE:
            token = SYMBOL_NEGATE
        elif op == UnaryOperatorKind.NOT:
            token = SEARCH_KEYWORD_NOT if ctx.search else KEYWORD_NOT
        else:
            raise UnsupportedOperatorError(op)

        if isinstance(operand, (Constant, SearchTerm)):
            return f"{token} {self.translate(operand, ctx)}"
        return f"{token}({self.translate(operand, ctx)})"

    def _translate_property_access(
        self,
        source: Node | None,
        name: str,
        ctx: TranslationContext,
        navigation_source: str | None = None,
    ) -> str:
        # navigation_source is accepted for formatters that resolve entity sets;
        # DocumentDB renders navigation like any nested property.
        source_sql = self.translate(source, ctx) if source is not None else ""
        if not source_sql:
            return self._formatter.field_name(name)
        return self._formatter.qualify(source_sql, name)
