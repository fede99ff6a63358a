"""Named field formatters, resolved when an assembler is configured by name."""

from __future__ import annotations

from odatasql.formatter.base import FieldFormatter


class UnsupportedFormatterError(LookupError):
    """Raised when settings or a caller name a formatter nobody registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.formatter_name = name
        self.available = available
        known = ", ".join(available) or "none"
        super().__init__(f"No field formatter named '{name}' (registered: {known})")


class FormatterRegistry:
    """Maps ``FieldFormatter.name`` to the formatter class.

    Classes are stored rather than instances, because each assembler binds
    its own formatter to the root alias it was configured with.
    """

    _classes: dict[str, type[FieldFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: type[FieldFormatter]) -> type[FieldFormatter]:
        """Class decorator filing ``formatter_class`` under its ``name``."""
        key = formatter_class.name
        taken = cls._classes.get(key)
        if taken is not None and taken is not formatter_class:
            raise ValueError(f"Formatter name '{key}' is already used by {taken.__qualname__}")
        cls._classes[key] = formatter_class
        return formatter_class

    @classmethod
    def create(cls, name: str, root_alias: str) -> FieldFormatter:
        """Build the formatter registered as ``name`` for documents aliased ``root_alias``."""
        try:
            formatter_class = cls._classes[name]
        except KeyError:
            raise UnsupportedFormatterError(name, available=cls.available()) from None
        return formatter_class(root_alias)

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._classes)

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._classes.pop(name, None)
