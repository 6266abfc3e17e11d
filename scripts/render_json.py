#!/usr/bin/env python
"""
Render a parsed MFM document (JSON parser output) to HTML on stdout.

Usage:
    .venv/bin/python scripts/render_json.py <nodes.json> [options]

Options:
    --url HOST           Instance host for mentions, hashtags and emoji images
    --animate            Add animation classes to the first few big/motion nodes
    --code-tag-as-div    Use div/span instead of pre/code
    --root-tag TAG       Wrapper tag name (default: p)
    --highlight          Escape and highlight block code with Pygments

The input file holds a JSON array of nodes, as produced by mfm-js ``parse()``.
Use ``-`` to read from stdin.

Example:
    .venv/bin/python scripts/render_json.py note.json --url misskey.io --animate
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Ensure the package is importable when run from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from mfmhtml.core.errors import RenderError
from mfmhtml.schemas.schemas import RenderConfig
from mfmhtml.services.renderer import render

log = logging.getLogger("render_json")


# ── CLI ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render parsed MFM JSON to HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("json_file", help="Path to the JSON node file, or - for stdin")
    parser.add_argument("--url", default=None, metavar="HOST",
                        help="Instance host (default: none, links stay relative)")
    parser.add_argument("--animate", action="store_true",
                        help="Enable animation classes")
    parser.add_argument("--code-tag-as-div", action="store_true",
                        help="Render code containers as div/span")
    parser.add_argument("--root-tag", default="p", metavar="TAG",
                        help="Root wrapper tag (default: p)")
    parser.add_argument("--highlight", action="store_true",
                        help="Highlight block code with Pygments")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging on stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.json_file == "-":
        raw = sys.stdin.read()
    else:
        path = Path(args.json_file).expanduser().resolve()
        if not path.exists():
            print(f"Error: file not found: {path}", file=sys.stderr)
            return 1
        raw = path.read_text(encoding="utf-8")

    try:
        nodes = json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON: {exc}", file=sys.stderr)
        return 1
    if not isinstance(nodes, list):
        print("Error: expected a JSON array of nodes", file=sys.stderr)
        return 1

    try:
        config = RenderConfig(
            url=args.url,
            animate=args.animate,
            code_tag_as_div=args.code_tag_as_div,
            root_tag_name=args.root_tag,
            highlight_code=args.highlight,
        )
    except ValidationError as exc:
        print(f"Error: invalid options: {exc.errors()[0]['msg']}", file=sys.stderr)
        return 1
    try:
        html = render(nodes, config)
    except RenderError as exc:
        log.debug("Render failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
