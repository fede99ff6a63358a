"""Query translation for odatasql: node rendering and clause assembly."""

from odatasql.translator.assembler import ClauseAssembler, TranslateOptions
from odatasql.translator.errors import (
    TranslationError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from odatasql.translator.nodes import NodeTranslator, TranslationContext

__all__ = [
    "ClauseAssembler",
    "NodeTranslator",
    "TranslateOptions",
    "TranslationContext",
    "TranslationError",
    "UnsupportedNodeError",
    "UnsupportedOperatorError",
]
