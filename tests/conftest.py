"""Shared fixtures — extractor and sample symbol lists."""

import pytest

from tests.helpers import make_symbol
from tsdiagram.indexer.parser import ExportedSymbol, SymbolExtractor


@pytest.fixture
def extractor() -> SymbolExtractor:
    return SymbolExtractor()


@pytest.fixture
def two_symbols() -> list[ExportedSymbol]:
    return [
        make_symbol("A", "export function A() { return B(); }"),
        make_symbol("B", "export function B() {}"),
    ]
