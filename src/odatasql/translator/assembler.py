"""Assembles SELECT/WHERE/ORDER BY/TOP fragments into one DocumentDB query."""

from __future__ import annotations

import logging
from enum import IntFlag

from odatasql.ast.nodes import BinaryOperatorKind, Node
from odatasql.formatter.base import FieldFormatter
from odatasql.formatter.registry import FormatterRegistry
from odatasql.models.options import QueryOptions
from odatasql.models.paging import FeedOptions
from odatasql.settings import Settings
from odatasql.translator.errors import TranslationError
from odatasql.translator.nodes import NodeTranslator, requires_parentheses
from odatasql.translator.validator import validate_sql

logger = logging.getLogger("odatasql.translator")


class TranslateOptions(IntFlag):
    """Which clauses the flag-driven ``translate`` renders."""

    SELECT_CLAUSE = 0x0001
    WHERE_CLAUSE = 0x0010
    ORDERBY_CLAUSE = 0x0100
    TOP_CLAUSE = 0x1000
    ALL = SELECT_CLAUSE | WHERE_CLAUSE | ORDERBY_CLAUSE | TOP_CLAUSE


class ClauseAssembler:
    """Translates whole option bundles: clause roots → fragments → query string.

    ``formatter`` may be a formatter instance or a registered formatter name;
    by default the one named in settings is used with the configured root alias.
    The ``FROM`` alias always comes from the formatter, so a formatter built
    for another alias still yields a runnable query.
    """

    def __init__(
        self,
        formatter: FieldFormatter | str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        if formatter is None:
            formatter = self._settings.formatter
        if isinstance(formatter, str):
            formatter = FormatterRegistry.create(formatter, self._settings.root_alias)
        self._translator = NodeTranslator(formatter)

    @property
    def translator(self) -> NodeTranslator:
        return self._translator

    @property
    def settings(self) -> Settings:
        return self._settings

    def translate_query(
        self,
        options: QueryOptions,
        type_name: str,
        feed_options: FeedOptions,
    ) -> str:
        """Translate a typed collection query.

        Every query is restricted to documents whose discriminator equals the
        upper-cased ``type_name``. A positive ``$top`` becomes the page size in
        ``feed_options`` instead of a ``TOP`` clause.
        """
        if not type_name:
            raise ValueError("A type name is required for the discriminator predicate")

        discriminator = self._translator.formatter.field_name(self._settings.type_field)
        where = f"{discriminator} = '{type_name.upper()}'"
        if options.filter is not None:
            where = f"{where} AND {self._and_operand(options.filter)}"

        parts = ["SELECT *", self._from_clause(), f"WHERE {where}"]
        if options.order_by is not None:
            parts.append(f"ORDER BY {self._translator.translate_orderby(options.order_by)}")

        # Only touch the caller's options once every clause has translated.
        if options.has_positive_top:
            feed_options.max_item_count = options.top

        return self._finish(" ".join(parts))

    def translate(
        self,
        options: QueryOptions,
        flags: TranslateOptions = TranslateOptions.ALL,
        extra_where: str | None = None,
    ) -> str:
        """Render the clauses selected by ``flags``, in SELECT, WHERE, ORDER BY order.

        ``extra_where`` is a caller-built predicate ANDed before the filter.
        Returns an empty string when no requested clause has content.
        """
        parts: list[str] = []

        if TranslateOptions.SELECT_CLAUSE in flags:
            top = ""
            if TranslateOptions.TOP_CLAUSE in flags and options.has_positive_top:
                top = f"TOP {options.top} "
            projection = self._projection(options.select)
            parts.append(f"SELECT {top}{projection} {self._from_clause()}")

        if TranslateOptions.WHERE_CLAUSE in flags:
            predicates: list[str] = []
            if extra_where:
                predicates.append(extra_where)
            if options.filter is not None:
                if predicates:
                    predicates.append(self._and_operand(options.filter))
                else:
                    predicates.append(self._translator.translate_filter(options.filter))
            predicates = [p for p in predicates if p]
            if predicates:
                parts.append(f"WHERE {' AND '.join(predicates)}")

        if TranslateOptions.ORDERBY_CLAUSE in flags and options.order_by is not None:
            parts.append(f"ORDER BY {self._translator.translate_orderby(options.order_by)}")

        return self._finish(" ".join(parts))

    def try_translate(
        self,
        options: QueryOptions,
        flags: TranslateOptions = TranslateOptions.ALL,
        extra_where: str | None = None,
    ) -> str | None:
        """Like ``translate`` but returns ``None`` when the tree cannot be translated."""
        try:
            return self.translate(options, flags, extra_where)
        except TranslationError as exc:
            logger.warning("Query translation failed: %s", exc)
            return None

    def _from_clause(self) -> str:
        return f"FROM {self._translator.formatter.root_alias}"

    def _projection(self, select: str | None) -> str:
        if select is None:
            return "*"
        names = [name for name in select.split(",") if name.strip()]
        if not names:
            return "*"
        return ", ".join(self._translator.formatter.field_name(name) for name in names)

    def _and_operand(self, expression: Node) -> str:
        sql = self._translator.translate_filter(expression)
        if requires_parentheses(expression, BinaryOperatorKind.AND):
            return f"({sql})"
        return sql

    def _finish(self, sql: str) -> str:
        logger.debug("Translated query: %s", sql)
        if sql and self._settings.validate_sql:
            for error in validate_sql(sql, self._translator.formatter.root_alias):
                logger.warning("SQL validation: %s", error)
        return sql
