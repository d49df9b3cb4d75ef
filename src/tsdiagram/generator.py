"""Diagram generation — fetch, extract, infer, lay out, and assemble.

Each request is independent: every intermediate list is built fresh and
nothing is cached between calls. The fetch is the only await point.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from tsdiagram.diagram.assembler import assemble
from tsdiagram.diagram.elements import DrawableElement
from tsdiagram.errors import EmptyInput, NoSymbolsFound
from tsdiagram.fetcher import Fetcher, SourceFetcher
from tsdiagram.graph.references import infer
from tsdiagram.indexer.parser import extract
from tsdiagram.layout.grid import ORIGIN, Point, layout

logger = logging.getLogger(__name__)


@dataclass
class DiagramResult:
    """Elements ready to be appended to a scene."""

    elements: list[DrawableElement] = field(default_factory=list)
    symbol_count: int = 0
    edge_count: int = 0


def _new_id_prefix() -> str:
    return uuid.uuid4().hex[:8]


def generate_from_source(
    file_path: str,
    source_text: str,
    origin: Point | None = None,
    id_prefix: str | None = None,
) -> DiagramResult:
    """Build a diagram from source text that is already in hand.

    Raises:
        NoSymbolsFound: If the file has no exported declarations.
        MalformedSource: If the text cannot be parsed.
    """
    symbols = extract(file_path, source_text)
    if not symbols:
        raise NoSymbolsFound()

    edges = infer(symbols)
    nodes = layout(symbols, origin or ORIGIN)
    elements = assemble(nodes, edges, id_prefix=id_prefix or _new_id_prefix())
    return DiagramResult(elements=elements, symbol_count=len(symbols), edge_count=len(edges))


async def generate(
    path: str,
    origin: Point | None = None,
    fetcher: Fetcher | None = None,
    id_prefix: str | None = None,
) -> DiagramResult:
    """Generate a diagram for the source file at *path*.

    Args:
        path: File path or URL of the source file.
        origin: Anchor point for the layout; defaults to (0, 0).
        fetcher: Source fetcher; defaults to a configured SourceFetcher.
        id_prefix: Prefix for element ids; a random one is used if omitted.

    Raises:
        EmptyInput: If *path* is blank.
        FetchFailure: If the source could not be retrieved.
        NoSymbolsFound: If the file has no exported declarations.
        MalformedSource: If the text cannot be parsed.
    """
    if not path or not path.strip():
        raise EmptyInput()
    path = path.strip()

    t0 = time.perf_counter()
    source_text = await (fetcher or SourceFetcher()).fetch(path)
    result = generate_from_source(path, source_text, origin=origin, id_prefix=id_prefix)
    logger.info(
        "Diagram for %s: %d symbol(s), %d edge(s), %d element(s) (%.2fs)",
        path, result.symbol_count, result.edge_count, len(result.elements),
        time.perf_counter() - t0,
    )
    return result
