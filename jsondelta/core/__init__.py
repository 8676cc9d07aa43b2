"""Core types and logic for jsondelta."""

from .canon import JsonKind, canon, sha256_hex, value_kind
from .identity import UnknownIdentityError, ValueIdentity
from .json_diff import DiffPolicy, diff_values
from .render import (
    DiffLine,
    LineTag,
    RenderOptions,
    UnsupportedViewSideError,
    ViewSide,
    format_lines,
    render_diff,
)
from .sequence import (
    DEFAULT_MAX_ALIGNMENT_CELLS,
    AlignmentResult,
    CompactKind,
    CompactOp,
    EditKind,
    EditOp,
    align_sequences,
    apply_edit_script,
    compact_edit_script,
    diff_arrays_of_values,
    format_edit_script,
    map_compact_script,
    revert_edit_script,
)
from .types import DiffNode, DiffType, JsonDeltaError, new_side, old_side

__all__ = [
    # Canonicalization
    "JsonKind",
    "canon",
    "sha256_hex",
    "value_kind",
    # Sequence alignment
    "EditKind",
    "EditOp",
    "AlignmentResult",
    "align_sequences",
    "apply_edit_script",
    "revert_edit_script",
    "format_edit_script",
    # Compaction
    "CompactKind",
    "CompactOp",
    "compact_edit_script",
    "map_compact_script",
    # Value identity
    "ValueIdentity",
    "diff_arrays_of_values",
    "DEFAULT_MAX_ALIGNMENT_CELLS",
    # Diff tree
    "DiffType",
    "DiffNode",
    "DiffPolicy",
    "diff_values",
    "old_side",
    "new_side",
    # Rendering
    "ViewSide",
    "LineTag",
    "DiffLine",
    "RenderOptions",
    "render_diff",
    "format_lines",
    # Exceptions
    "JsonDeltaError",
    "UnknownIdentityError",
    "UnsupportedViewSideError",
]
