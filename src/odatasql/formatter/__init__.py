"""Field formatter plugin system for odatasql."""

# Import formatters to trigger registration
import odatasql.formatter.documentdb as _documentdb  # noqa: F401
from odatasql.formatter.base import FieldFormatter
from odatasql.formatter.registry import FormatterRegistry, UnsupportedFormatterError

__all__ = [
    "FieldFormatter",
    "FormatterRegistry",
    "UnsupportedFormatterError",
]
