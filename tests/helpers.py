"""Shared test helpers — fake fetchers and sample sources."""

from tsdiagram.errors import FetchFailure
from tsdiagram.indexer.parser import ExportedSymbol, SymbolKind

CALL_PAIR_TS = """\
export function A() { return B(); }
export function B() {}
"""

ORDERS_TS = """\
import { keccak256 } from "viem";

export interface SignedOrder {
  orderId: string;
  signature: string;
}

export type OrderId = SignedOrder["orderId"];

export class SignedOrderBuilder {
  build(order: SignedOrder): string {
    return keccak256(order.signature);
  }
}

export const DEFAULT_BUILDER = new SignedOrderBuilder();

function internalHelper() {
  return DEFAULT_BUILDER;
}
"""


class FakeFetcher:
    """Returns canned source text and records requested locations."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.calls: list[str] = []

    async def fetch(self, location: str) -> str:
        self.calls.append(location)
        return self.text


class FailingFetcher:
    """Fails every fetch with the given transport status."""

    def __init__(self, status: int = 404, status_text: str = "Not Found") -> None:
        self.status = status
        self.status_text = status_text
        self.calls: list[str] = []

    async def fetch(self, location: str) -> str:
        self.calls.append(location)
        raise FetchFailure(self.status, self.status_text)


def make_symbol(name: str, body: str = "", kind: SymbolKind = SymbolKind.FUNCTION) -> ExportedSymbol:
    return ExportedSymbol(name=name, kind=kind, body=body or f"export function {name}() {{}}")
