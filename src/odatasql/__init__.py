"""odatasql: translate parsed OData query options into DocumentDB SQL."""

from odatasql.settings import Settings
from odatasql.translator import (
    ClauseAssembler,
    NodeTranslator,
    TranslateOptions,
    TranslationContext,
    TranslationError,
)

__version__ = "1.0.0"

__all__ = [
    "ClauseAssembler",
    "NodeTranslator",
    "Settings",
    "TranslateOptions",
    "TranslationContext",
    "TranslationError",
    "__version__",
]
