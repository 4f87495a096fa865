"""Inspect an editor document's block structure and render plan."""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from blockplan import build_render_plan, format_plan, load_document
from blockplan.schemas import ComponentBlock, Node


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect editor block types, components, and the render plan.")
    parser.add_argument("file", help="Document JSON file (a block list or {\"document\": [...]})")
    parser.add_argument("--plan", action="store_true", help="Also print the Markdown render plan preview")
    parser.add_argument("--verbose", action="store_true", help="Log skipped and discarded blocks")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    path = Path(args.file)
    if not path.is_file():
        raise FileNotFoundError(f"Document file not found: {path}")
    blocks = load_document(path.read_text(encoding="utf-8"))
    types, components = collect_stats(blocks)

    print("Node types:")
    for name, count in types.most_common():
        print(f"{name}: {count}")

    print("\nComponents:")
    for name, count in components.most_common():
        print(f"{name}: {count}")

    if args.plan:
        preview = format_plan(build_render_plan(blocks), title=path.stem)
        print("\n" + preview.summary)
        print("\n" + preview.sections_tree)
        print("\n" + preview.content)


def collect_stats(nodes: Iterable[Node]) -> tuple[Counter, Counter]:
    types = Counter()
    components = Counter()

    stack = list(nodes)
    while stack:
        node = stack.pop()
        types[getattr(node, "type", "text")] += 1
        if isinstance(node, ComponentBlock):
            components[node.component] += 1
        stack.extend(getattr(node, "children", []))
    return types, components


if __name__ == "__main__":
    main()
