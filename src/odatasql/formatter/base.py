"""Abstract field formatter: how a dialect spells field references and enum literals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class FieldFormatter(ABC):
    """Abstract base for all field formatters.

    A formatter is bound to the document alias that the assembled query's
    ``FROM`` clause declares, so field references and ``FROM`` always agree.
    """

    #: Registry key; concrete formatters set this as a class attribute.
    name: ClassVar[str]

    def __init__(self, root_alias: str) -> None:
        if not root_alias.strip():
            raise ValueError("A formatter needs a non-blank root alias")
        self._root_alias = root_alias.strip()

    @property
    def root_alias(self) -> str:
        """Alias of the queried document, as declared in ``FROM``."""
        return self._root_alias

    @abstractmethod
    def field_name(self, name: str) -> str:
        """Render a property of the queried document, e.g. ``c.Name``."""

    @abstractmethod
    def qualify(self, source: str, name: str) -> str:
        """Render ``name`` accessed off an already translated, non-empty ``source``."""

    @abstractmethod
    def enum_literal(self, literal_text: str, type_name: str) -> str:
        """Render an enumeration constant of the declared ``type_name``."""
