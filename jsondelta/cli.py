"""jsondelta CLI.

Entry point for the ``jsondelta`` command-line tool.

Usage:
    jsondelta diff OLD NEW [--side old|new|unified] [--indent N]
                   [--leave-space] [--hide-same] [--format text|json]
                   [--max-cells N] [-v]
    jsondelta side-by-side OLD NEW [--width N] [--indent N] [--hide-same]
                   [--max-cells N] [-v]

Exit status is 0 when the documents are equal, 1 when they differ and 2
when an input cannot be read or parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import zip_longest
from typing import Any, List, Optional, Tuple

from .core.canon import canon, sha256_hex
from .core.json_diff import DiffPolicy, diff_values
from .core.render import DiffLine, RenderOptions, ViewSide, format_lines, render_diff
from .core.types import DiffNode
from .version import DIFF_SCHEMA_VERSION, JSONDELTA_VERSION

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


def _load_json(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc.strerror}", file=sys.stderr)
        sys.exit(2)
    except json.JSONDecodeError as exc:
        print(f"Error: '{path}' is not valid JSON: {exc}", file=sys.stderr)
        sys.exit(2)


def _compute(args: argparse.Namespace) -> Tuple[Any, Any, DiffNode]:
    old = _load_json(args.old)
    new = _load_json(args.new)
    policy = DiffPolicy(max_alignment_cells=args.max_cells or None)
    node = diff_values(old, new, policy)
    logger.debug("diff of %s and %s: %s", args.old, args.new, node.type.value)
    return old, new, node


# Narrowest column that still fits the "..." truncation marker
MIN_COLUMN_WIDTH = 3


def _int_at_least(minimum: int):
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {value}")
        return value

    return parse


# ---------------------------------------------------------------------------
# Side-by-side formatter
# ---------------------------------------------------------------------------


def _cell(line: Optional[DiffLine], width: int) -> str:
    text = line.prefixed() if line is not None else ""
    if len(text) > width:
        text = text[: width - 3] + "..."
    return text.ljust(width)


def _format_columns(left: List[DiffLine], right: List[DiffLine], width: int) -> str:
    rows = [
        f"{_cell(old, width)}  {_cell(new, width).rstrip()}".rstrip()
        for old, new in zip_longest(left, right)
    ]
    return "\n".join(rows)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_diff(args: argparse.Namespace) -> None:
    old, new, node = _compute(args)

    if args.format == "json":
        doc = {
            "schema_version": DIFF_SCHEMA_VERSION,
            "jsondelta_version": JSONDELTA_VERSION,
            "old_sha256": sha256_hex(canon(old)),
            "new_sha256": sha256_hex(canon(new)),
            "diff": node.to_dict(),
        }
        print(json.dumps(doc, indent=2, ensure_ascii=False))
    else:
        options = RenderOptions(
            view_side=args.side,
            indent=" " * args.indent,
            leave_space=args.leave_space,
            hide_same=args.hide_same,
        )
        print(format_lines(render_diff(node, options)))

    if not node.is_same:
        sys.exit(1)


def _cmd_side_by_side(args: argparse.Namespace) -> None:
    _, _, node = _compute(args)
    indent = " " * args.indent
    columns = []
    for side in (ViewSide.OLD, ViewSide.NEW):
        options = RenderOptions(
            view_side=side, indent=indent, leave_space=True, hide_same=args.hide_same
        )
        columns.append(render_diff(node, options))
    left, right = columns
    print(_format_columns(left, right, args.width))

    if not node.is_same:
        sys.exit(1)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("old", help="Path to the old JSON document")
    parser.add_argument("new", help="Path to the new JSON document")
    parser.add_argument(
        "--indent",
        type=_int_at_least(0),
        default=4,
        help="Spaces per indent level (default: 4)",
    )
    parser.add_argument(
        "--hide-same", action="store_true", help="Omit unchanged values"
    )
    parser.add_argument(
        "--max-cells",
        type=_int_at_least(0),
        default=DiffPolicy.default().max_alignment_cells,
        help="Largest array pair (len*len) aligned by LCS, 0 for no limit "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="jsondelta",
        description="jsondelta: structural diffs of JSON documents",
    )
    subparsers = parser.add_subparsers(dest="command")

    diff_parser = subparsers.add_parser("diff", help="Render the diff of two documents")
    _add_common(diff_parser)
    diff_parser.add_argument(
        "--side",
        choices=[s.value for s in ViewSide],
        default=ViewSide.UNIFIED.value,
        help="Which document to render (default: unified)",
    )
    diff_parser.add_argument(
        "--leave-space",
        action="store_true",
        help="Pad hidden content with blank lines",
    )
    diff_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    diff_parser.set_defaults(func=_cmd_diff)

    sbs_parser = subparsers.add_parser(
        "side-by-side", help="Show old and new renderings in aligned columns"
    )
    _add_common(sbs_parser)
    sbs_parser.add_argument(
        "--width",
        type=_int_at_least(MIN_COLUMN_WIDTH),
        default=60,
        help="Column width (default: 60)",
    )
    sbs_parser.set_defaults(func=_cmd_side_by_side)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
