"""Tree-sitter TypeScript/TSX parser — extract top-level exported symbols."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from urllib.parse import urlparse

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

from tsdiagram.errors import MalformedSource

logger = logging.getLogger(__name__)

TS_LANGUAGE = Language(ts_typescript.language_typescript())
TSX_LANGUAGE = Language(ts_typescript.language_tsx())


class SymbolKind(str, Enum):
    FUNCTION = "function"
    TYPE = "type"
    INTERFACE = "interface"
    CLASS = "class"
    VARIABLE = "variable"


@dataclass(frozen=True)
class ExportedSymbol:
    name: str
    kind: SymbolKind
    body: str


# Map tree-sitter declaration node types to our symbol kinds. Variable
# statements are handled separately since one statement can bind many names.
_DECLARATION_KIND_MAP = {
    "function_declaration": SymbolKind.FUNCTION,
    "generator_function_declaration": SymbolKind.FUNCTION,
    "function_signature": SymbolKind.FUNCTION,
    "interface_declaration": SymbolKind.INTERFACE,
    "type_alias_declaration": SymbolKind.TYPE,
    "class_declaration": SymbolKind.CLASS,
    "abstract_class_declaration": SymbolKind.CLASS,
}

_VARIABLE_STATEMENTS = ("lexical_declaration", "variable_declaration")


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


def _is_tsx(file_path: str) -> bool:
    # URLs carry query strings and fragments that hide the suffix
    path = urlparse(file_path).path or file_path
    return PurePosixPath(path).suffix.lower() == ".tsx"


def _declared_names(declaration: Node) -> list[tuple[str, SymbolKind]]:
    """Return the (name, kind) pairs a top-level declaration introduces."""
    node_type = declaration.type

    if node_type == "ambient_declaration":
        # `export declare ...` wraps the real declaration
        inner = declaration.named_children
        return _declared_names(inner[0]) if inner else []

    kind = _DECLARATION_KIND_MAP.get(node_type)
    if kind is not None:
        name_node = declaration.child_by_field_name("name")
        if name_node is None:
            return []
        return [(_node_text(name_node), kind)]

    if node_type in _VARIABLE_STATEMENTS:
        names = []
        for declarator in declaration.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            # Destructuring patterns are not expanded
            if name_node is not None and name_node.type == "identifier":
                names.append((_node_text(name_node), SymbolKind.VARIABLE))
        return names

    return []


class SymbolExtractor:
    """Collects the exported top-level declarations of one source file.

    Only direct children of the program node are visited. A declaration
    qualifies when it sits inside an ``export`` statement; anonymous default
    exports and re-export clauses carry no declaration and are ignored.
    """

    def __init__(self) -> None:
        self._ts_parser = Parser(TS_LANGUAGE)
        self._tsx_parser = Parser(TSX_LANGUAGE)

    def _get_parser(self, file_path: str) -> Parser:
        if _is_tsx(file_path):
            return self._tsx_parser
        return self._ts_parser

    def extract(self, file_path: str, source_text: str) -> list[ExportedSymbol]:
        """Extract exported symbols from source text, in source order.

        Args:
            file_path: Label used for grammar selection and diagnostics only.
            source_text: Full text of the file.

        Returns:
            One ExportedSymbol per qualifying declaration, each carrying
            that declaration's own text. Overload signatures yield one
            entry each.

        Raises:
            MalformedSource: If the text cannot be handed to the parser.
        """
        try:
            source = source_text.encode("utf-8")
            tree = self._get_parser(file_path).parse(source)
        except (UnicodeEncodeError, ValueError) as e:
            raise MalformedSource(file_path, str(e)) from e

        root = tree.root_node
        if root.has_error:
            logger.warning("%s: syntax errors found, extracting what parsed", file_path)

        symbols: list[ExportedSymbol] = []

        for child in root.children:
            if child.type != "export_statement":
                continue
            declaration = child.child_by_field_name("declaration")
            if declaration is None:
                continue

            body = _node_text(child)
            for name, kind in _declared_names(declaration):
                symbols.append(ExportedSymbol(name=name, kind=kind, body=body))

        logger.debug("%s: %d exported symbol(s)", file_path, len(symbols))
        return symbols


def extract(file_path: str, source_text: str) -> list[ExportedSymbol]:
    """Extract exported symbols with a fresh extractor."""
    return SymbolExtractor().extract(file_path, source_text)
