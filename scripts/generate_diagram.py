#!/usr/bin/env python3
"""CLI: Generate an Excalidraw diagram of a TypeScript file's exported symbols."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Ensure the package is importable when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tsdiagram.diagram.elements import make_scene
from tsdiagram.errors import DiagramError
from tsdiagram.generator import generate
from tsdiagram.layout.grid import Point


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a diagram from a TypeScript file")
    parser.add_argument("path", help="File path (relative to SOURCE_ROOT) or URL")
    parser.add_argument(
        "--origin",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=(0.0, 0.0),
        help="Canvas point the grid is anchored at (default: 0 0)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the .excalidraw scene here instead of stdout",
    )
    args = parser.parse_args()

    try:
        result = asyncio.run(generate(args.path, origin=Point(*args.origin)))
    except DiagramError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    payload = json.dumps(make_scene(result.elements), indent=2)
    if args.output:
        args.output.write_text(payload + "\n")
        print(
            f"Wrote {len(result.elements)} elements "
            f"({result.symbol_count} symbols, {result.edge_count} edges) to {args.output}"
        )
    else:
        print(payload)


if __name__ == "__main__":
    main()
