"""Shared test fixtures."""

import pytest

from dzongkha_roman.assembler import RomanAssembler
from dzongkha_roman.overrides import ExceptionResolver
from dzongkha_roman.pipeline import TextPipeline
from dzongkha_roman.syllable import SyllableDecomposer
from dzongkha_roman.tables import DEFAULT_TABLES


@pytest.fixture
def tables():
    return DEFAULT_TABLES


@pytest.fixture
def decomposer():
    return SyllableDecomposer()


@pytest.fixture
def assembler():
    return RomanAssembler()


@pytest.fixture
def pipeline():
    return TextPipeline()


@pytest.fixture
def rules_only():
    """Pipeline with an empty exception table: every syllable goes through the rules."""
    return TextPipeline(resolver=ExceptionResolver(()))


@pytest.fixture
def config_file(tmp_path):
    """Write a dzongkha_roman.toml into tmp_path and return its path."""
    def _write(body: str):
        path = tmp_path / "dzongkha_roman.toml"
        path.write_text(body, encoding="utf-8")
        return path
    return _write
