"""Tests for the Tree-sitter exported-symbol extractor."""

from __future__ import annotations

import pytest

from tests.helpers import CALL_PAIR_TS, ORDERS_TS
from tsdiagram.errors import MalformedSource
from tsdiagram.generator import generate_from_source
from tsdiagram.indexer.parser import ExportedSymbol, SymbolExtractor, SymbolKind, extract


def _names(symbols: list[ExportedSymbol]) -> list[str]:
    return [s.name for s in symbols]


class TestClassification:
    def test_two_functions(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("example.ts", CALL_PAIR_TS)
        assert _names(symbols) == ["A", "B"]
        assert all(s.kind == SymbolKind.FUNCTION for s in symbols)

    def test_all_kinds_in_source_order(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("src/orders.ts", ORDERS_TS)
        assert [(s.name, s.kind) for s in symbols] == [
            ("SignedOrder", SymbolKind.INTERFACE),
            ("OrderId", SymbolKind.TYPE),
            ("SignedOrderBuilder", SymbolKind.CLASS),
            ("DEFAULT_BUILDER", SymbolKind.VARIABLE),
        ]

    def test_body_is_whole_declaration_with_modifier(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("example.ts", CALL_PAIR_TS)
        assert symbols[0].body == "export function A() { return B(); }"
        assert symbols[1].body == "export function B() {}"

    def test_let_and_var(self, extractor: SymbolExtractor) -> None:
        code = "export let counter = 0;\nexport var legacy = 1;\n"
        symbols = extractor.extract("vars.ts", code)
        assert _names(symbols) == ["counter", "legacy"]
        assert {s.kind for s in symbols} == {SymbolKind.VARIABLE}

    def test_abstract_class(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("shape.ts", "export abstract class Shape {}\n")
        assert [(s.name, s.kind) for s in symbols] == [("Shape", SymbolKind.CLASS)]

    def test_generator_function(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("gen.ts", "export function* ids() { yield 1; }\n")
        assert [(s.name, s.kind) for s in symbols] == [("ids", SymbolKind.FUNCTION)]

    def test_declare_function(self, extractor: SymbolExtractor) -> None:
        symbols = extractor.extract("ambient.ts", "export declare function ping(): void;\n")
        assert [(s.name, s.kind) for s in symbols] == [("ping", SymbolKind.FUNCTION)]


class TestVariableStatements:
    def test_one_entry_per_declarator_sharing_body(self, extractor: SymbolExtractor) -> None:
        code = "export const x = 1, y = 2;\n"
        symbols = extractor.extract("multi.ts", code)
        assert _names(symbols) == ["x", "y"]
        assert symbols[0].body == symbols[1].body == "export const x = 1, y = 2;"

    def test_destructuring_skipped(self, extractor: SymbolExtractor) -> None:
        code = (
            "const source = { a: 1, b: 2 };\n"
            "export const { a, b } = source;\n"
            "export const [first] = [1];\n"
            "export const plain = 3;\n"
        )
        symbols = extractor.extract("destructure.ts", code)
        assert _names(symbols) == ["plain"]


class TestIgnored:
    def test_non_exported_declarations(self, extractor: SymbolExtractor) -> None:
        code = "function hidden() {}\ninterface Private {}\nconst local = 1;\n"
        assert extractor.extract("private.ts", code) == []

    def test_anonymous_default_and_reexports(self, extractor: SymbolExtractor) -> None:
        code = (
            "function hello() {}\n"
            "export { hello };\n"
            "export * from './other';\n"
            "export default function () {}\n"
        )
        assert extractor.extract("reexport.ts", code) == []

    def test_nested_declarations_not_visited(self, extractor: SymbolExtractor) -> None:
        code = "export function outer() {\n  function inner() {}\n  return inner;\n}\n"
        assert _names(extractor.extract("nested.ts", code)) == ["outer"]

    def test_empty_source(self, extractor: SymbolExtractor) -> None:
        assert extractor.extract("empty.ts", "") == []


class TestOverloads:
    def test_one_symbol_per_overload_with_own_text(self, extractor: SymbolExtractor) -> None:
        code = (
            "export function parse(a: string): number;\n"
            "export function parse(a: any): number { return 1; }\n"
        )
        symbols = extractor.extract("overloads.ts", code)
        assert [(s.name, s.kind) for s in symbols] == [
            ("parse", SymbolKind.FUNCTION),
            ("parse", SymbolKind.FUNCTION),
        ]
        assert symbols[0].body == "export function parse(a: string): number;"
        assert symbols[1].body == "export function parse(a: any): number { return 1; }"

    def test_overloads_produce_one_node_each(self) -> None:
        code = (
            "export function parse(a: string): number;\n"
            "export function parse(a: number): number;\n"
            "export function parse(a: any): number { return Number(a); }\n"
        )
        result = generate_from_source("overloads.ts", code, id_prefix="o")
        assert result.symbol_count == 3
        # Every overload mentions the shared name, so each pair is linked
        assert result.edge_count == 6
        assert len(result.elements) == 2 * 3 + 6

    def test_same_name_different_kind_kept_apart(self, extractor: SymbolExtractor) -> None:
        code = "export type Mode = 'a' | 'b';\nexport const Mode = { a: 'a' };\n"
        symbols = extractor.extract("mode.ts", code)
        assert [(s.name, s.kind) for s in symbols] == [
            ("Mode", SymbolKind.TYPE),
            ("Mode", SymbolKind.VARIABLE),
        ]


class TestParsing:
    def test_tsx(self, extractor: SymbolExtractor) -> None:
        code = (
            "interface Props {\n  name: string;\n}\n\n"
            "export function Greeting({ name }: Props) {\n"
            "  return <div>Hello {name}</div>;\n"
            "}\n"
        )
        assert _names(extractor.extract("component.tsx", code)) == ["Greeting"]

    def test_tsx_detected_from_url(self, extractor: SymbolExtractor) -> None:
        code = "export const View = () => <span />;\n"
        symbols = extractor.extract("https://example.test/View.tsx?raw=1", code)
        assert _names(symbols) == ["View"]

    def test_syntax_errors_degrade_gracefully(self, extractor: SymbolExtractor) -> None:
        code = "export function ok() {}\n}}}\n"
        symbols = extractor.extract("broken.ts", code)
        assert symbols[0].name == "ok"

    def test_unencodable_text_raises_malformed(self, extractor: SymbolExtractor) -> None:
        with pytest.raises(MalformedSource, match="bad.ts"):
            extractor.extract("bad.ts", "export const s = '\ud800';")

    def test_stable_for_identical_input(self) -> None:
        assert extract("orders.ts", ORDERS_TS) == extract("orders.ts", ORDERS_TS)
