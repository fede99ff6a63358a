"""Shared test fixtures for odatasql."""

from __future__ import annotations

import pytest

from odatasql.formatter.documentdb import DocumentDBFormatter
from odatasql.settings import Settings
from odatasql.translator.assembler import ClauseAssembler
from odatasql.translator.nodes import NodeTranslator


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local ``.env``."""
    return Settings(_env_file=None)


@pytest.fixture
def formatter() -> DocumentDBFormatter:
    return DocumentDBFormatter()


@pytest.fixture
def translator(formatter: DocumentDBFormatter) -> NodeTranslator:
    return NodeTranslator(formatter)


@pytest.fixture
def assembler(formatter: DocumentDBFormatter, settings: Settings) -> ClauseAssembler:
    return ClauseAssembler(formatter, settings=settings)
