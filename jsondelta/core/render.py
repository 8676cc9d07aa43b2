"""Line-oriented rendering of jsondelta diff trees.

Walks a diff tree and emits pretty-printed JSON lines, each tagged same,
added or removed, for one of three views:

    old      the old document; added content is hidden
    new      the new document; removed content is hidden
    unified  both; a replaced value shows old lines then new lines

With leave_space, hidden content is replaced by blank padding lines so
that the old and new renderings of any node have the same line count and
can be shown side by side, row for row.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union

from .types import DiffNode, DiffType, JsonDeltaError


class ViewSide(Enum):
    OLD = "old"
    NEW = "new"
    UNIFIED = "unified"


class LineTag(Enum):
    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"


class UnsupportedViewSideError(JsonDeltaError, ValueError):
    """Raised when a renderer is configured with an unknown view side."""

    def __init__(self, view_side: Any):
        accepted = ", ".join(s.value for s in ViewSide)
        super().__init__(f"unsupported view side {view_side!r} (expected {accepted})")
        self.view_side = view_side


# Text of a padding line, whatever the indentation unit
PADDING_TEXT = "    "

_PREFIXES = {
    LineTag.SAME: "| ",
    LineTag.ADDED: "+ ",
    LineTag.REMOVED: "- ",
}


@dataclass(frozen=True)
class DiffLine:
    """
    One rendered line.

    Attributes:
        text: Line content, indentation included
        tag: same, added or removed
        filler: True for blank padding emitted under leave_space
    """

    text: str
    tag: LineTag
    filler: bool = False

    def prefixed(self) -> str:
        return _PREFIXES[self.tag] + self.text


@dataclass(frozen=True)
class RenderOptions:
    """
    Configuration for diff rendering.

    Attributes:
        view_side: Which document to render (ViewSide or its string value).
        indent: Indentation unit.
        leave_space: Pad hidden content with blank lines to keep old and
            new renderings aligned.
        hide_same: Drop unchanged values entirely.
    """

    view_side: Union[ViewSide, str] = ViewSide.UNIFIED
    indent: str = "    "
    leave_space: bool = False
    hide_same: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.view_side, ViewSide):
            try:
                side = ViewSide(self.view_side)
            except ValueError:
                raise UnsupportedViewSideError(self.view_side) from None
            object.__setattr__(self, "view_side", side)

    @classmethod
    def unified(cls, indent: str = "    ") -> "RenderOptions":
        """Create options for a single unified rendering."""
        return cls(view_side=ViewSide.UNIFIED, indent=indent)

    @classmethod
    def side_by_side(
        cls, view_side: Union[ViewSide, str], indent: str = "    "
    ) -> "RenderOptions":
        """Create options for one column of an aligned old/new display."""
        return cls(view_side=view_side, indent=indent, leave_space=True)


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------


def _dumps(value: Any, indent: str) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _json_lines(value: Any, tag: LineTag, indent: str, prefix: str) -> List[DiffLine]:
    return [DiffLine(s, tag) for s in (prefix + _dumps(value, indent)).split("\n")]


def _line_count(value: Any, indent: str) -> int:
    return _dumps(value, indent).count("\n") + 1


def _padding(count: int) -> List[DiffLine]:
    return [DiffLine(PADDING_TEXT, LineTag.SAME, filler=True) for _ in range(count)]


def _indented(lines: List[DiffLine], indent: str) -> List[DiffLine]:
    return [ln if ln.filler else replace(ln, text=indent + ln.text) for ln in lines]


def _add_comma(lines: List[DiffLine]) -> None:
    for k in range(len(lines) - 1, -1, -1):
        if not lines[k].filler:
            lines[k] = replace(lines[k], text=lines[k].text + ",")
            return


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_diff(
    node: DiffNode,
    options: Optional[RenderOptions] = None,
    first_line_prefix: str = "",
) -> List[DiffLine]:
    """Render a diff tree to tagged lines.

    first_line_prefix is prepended to the first line of the rendering, as
    is done for the `"key": ` of an object property.

    Raises:
        UnsupportedViewSideError: If options.view_side is not a ViewSide.
    """
    if options is None:
        options = RenderOptions()
    if not isinstance(options.view_side, ViewSide):
        raise UnsupportedViewSideError(options.view_side)
    return _render(node, options, first_line_prefix)


def _render(node: DiffNode, opts: RenderOptions, prefix: str) -> List[DiffLine]:
    side = opts.view_side
    indent = opts.indent
    t = node.type

    if t is DiffType.SAME:
        if opts.hide_same:
            return []
        return _json_lines(node.old_value, LineTag.SAME, indent, prefix)

    if t is DiffType.ADDED:
        if side is not ViewSide.OLD:
            return _json_lines(node.new_value, LineTag.ADDED, indent, prefix)
        if opts.leave_space:
            return _padding(_line_count(node.new_value, indent))
        return []

    if t is DiffType.REMOVED:
        if side is not ViewSide.NEW:
            return _json_lines(node.old_value, LineTag.REMOVED, indent, prefix)
        if opts.leave_space:
            return _padding(_line_count(node.old_value, indent))
        return []

    if t is DiffType.REPLACED:
        old_lines = _json_lines(node.old_value, LineTag.REMOVED, indent, prefix)
        new_lines = _json_lines(node.new_value, LineTag.ADDED, indent, prefix)
        if side is ViewSide.UNIFIED:
            return old_lines + new_lines
        lines = old_lines if side is ViewSide.OLD else new_lines
        if opts.leave_space:
            rows = max(len(old_lines), len(new_lines))
            lines = lines + _padding(rows - len(lines))
        return lines

    if t is DiffType.OBJECT_DIFF:
        children = [
            (json.dumps(key, ensure_ascii=False) + ": ", child)
            for key, child in node.properties.items()
        ]
        return _render_container(children, "{", "}", opts, prefix)

    return _render_container(
        [("", item) for item in node.items], "[", "]", opts, prefix
    )


def _render_container(
    children: List[Tuple[str, DiffNode]],
    opening: str,
    closing: str,
    opts: RenderOptions,
    prefix: str,
) -> List[DiffLine]:
    lines = [DiffLine(prefix + opening, LineTag.SAME)]
    last = len(children) - 1
    for index, (child_prefix, child) in enumerate(children):
        child_lines = _indented(_render(child, opts, child_prefix), opts.indent)
        if index < last:
            _add_comma(child_lines)
        lines.extend(child_lines)
    lines.append(DiffLine(closing, LineTag.SAME))
    return lines


def format_lines(lines: Sequence[DiffLine]) -> str:
    """Join rendered lines with their "| ", "+ ", "- " tag prefixes."""
    return "\n".join(line.prefixed() for line in lines)
