"""DocumentDB SQL formatter implementation."""

from __future__ import annotations

import logging

from odatasql.formatter.base import FieldFormatter
from odatasql.formatter.registry import FormatterRegistry

logger = logging.getLogger("odatasql.formatter")

DEFAULT_ROOT_ALIAS = "c"


@FormatterRegistry.register
class DocumentDBFormatter(FieldFormatter):
    """DocumentDB: fields hang off the ``FROM`` alias, enums are stored as member strings."""

    name = "documentdb"

    def __init__(self, root_alias: str = DEFAULT_ROOT_ALIAS) -> None:
        super().__init__(root_alias)

    def field_name(self, name: str) -> str:
        return f"{self.root_alias}.{name.strip()}"

    def qualify(self, source: str, name: str) -> str:
        return f"{source.strip()}.{name.strip()}"

    def enum_literal(self, literal_text: str, type_name: str) -> str:
        """``NS.Color'Red'`` becomes ``'Red'``."""
        prefix = f"{type_name}'"
        if type_name and literal_text.startswith(prefix):
            return literal_text[len(type_name) :]
        logger.debug("Enum literal %r has no %r prefix, kept as is", literal_text, type_name)
        return literal_text
