from .core import (
    DEFAULT_MAX_ALIGNMENT_CELLS,
    # Sequence alignment
    AlignmentResult,
    # Compaction
    CompactKind,
    CompactOp,
    # Rendering
    DiffLine,
    # Diff tree
    DiffNode,
    DiffPolicy,
    DiffType,
    EditKind,
    EditOp,
    # Exceptions
    JsonDeltaError,
    # Canonicalization
    JsonKind,
    LineTag,
    RenderOptions,
    UnknownIdentityError,
    UnsupportedViewSideError,
    # Value identity
    ValueIdentity,
    ViewSide,
    align_sequences,
    apply_edit_script,
    canon,
    compact_edit_script,
    diff_arrays_of_values,
    diff_values,
    format_edit_script,
    format_lines,
    map_compact_script,
    new_side,
    old_side,
    render_diff,
    revert_edit_script,
    sha256_hex,
    value_kind,
)
from .version import DIFF_SCHEMA_VERSION, JSONDELTA_VERSION

__all__ = [
    # Version
    "JSONDELTA_VERSION",
    "DIFF_SCHEMA_VERSION",
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
