"""Reference inference — directed "uses" edges from textual name occurrence.

This is a heuristic, not symbol resolution. A name mentioned in a comment or
string literal still produces an edge, and aliased or renamed references are
missed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from tsdiagram.indexer.parser import ExportedSymbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceEdge:
    source: ExportedSymbol
    target: ExportedSymbol
    source_index: int
    target_index: int


def name_pattern(name: str) -> re.Pattern[str]:
    """Compile a pattern matching *name* as a whole word."""
    return re.compile(rf"\b{re.escape(name)}\b", re.MULTILINE)


def infer(symbols: list[ExportedSymbol]) -> list[ReferenceEdge]:
    """Infer an edge source -> target wherever target's name appears in source's body.

    Edges are ordered source-major, target-minor, following the order of
    *symbols*. Self-references are never produced. Patterns are cached per
    call only.
    """
    patterns: dict[str, re.Pattern[str]] = {}
    edges: list[ReferenceEdge] = []

    for i, source in enumerate(symbols):
        for j, target in enumerate(symbols):
            if i == j:
                continue
            pattern = patterns.get(target.name)
            if pattern is None:
                pattern = patterns[target.name] = name_pattern(target.name)
            if pattern.search(source.body):
                edges.append(ReferenceEdge(source, target, i, j))

    logger.debug("Inferred %d edge(s) among %d symbol(s)", len(edges), len(symbols))
    return edges
