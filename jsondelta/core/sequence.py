"""Sequence alignment and edit-script compaction for jsondelta.

Computes the longest common subsequence (LCS) of two sequences and, along
the way, an edit script of kept/inserted/deleted elements that turns the
first sequence into the second.

Algorithm:
1. Fill an (m+1) x (n+1) table of LCS lengths bottom-up.
2. Walk back from (m, n). Equal last elements are kept. Otherwise the
   element of B is inserted only when that branch has a strictly longer
   LCS; on a tie the element of A is deleted. The tie-break fixes the
   shape of every script and therefore of every rendered diff.
3. Reverse the collected operations.

Compaction then pairs each run of deletes with the run of inserts that
follows it (i-th with i-th) into "modified" operations. Pairing is
positional, not similarity based: [0, A, A, A, 0] -> [0, B, B, B, C, 0]
compacts to [0, A->B, A->B, A->B, +C, 0].
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from .identity import ValueIdentity

logger = logging.getLogger(__name__)

# Largest m*n LCS table built before falling back to positional pairing
DEFAULT_MAX_ALIGNMENT_CELLS = 1_000_000


# ---------------------------------------------------------------------------
# Primitive edit script
# ---------------------------------------------------------------------------


class EditKind(Enum):
    KEPT = "kept"
    INSERTED = "inserted"
    DELETED = "deleted"


@dataclass(frozen=True)
class EditOp:
    kind: EditKind
    value: Any

    @classmethod
    def kept(cls, value: Any) -> "EditOp":
        return cls(EditKind.KEPT, value)

    @classmethod
    def inserted(cls, value: Any) -> "EditOp":
        return cls(EditKind.INSERTED, value)

    @classmethod
    def deleted(cls, value: Any) -> "EditOp":
        return cls(EditKind.DELETED, value)


@dataclass(frozen=True)
class AlignmentResult:
    """Result of aligning two sequences.

    Attributes:
        length: LCS length, equal to the number of KEPT operations
        lcs: The common subsequence itself
        script: Edit script turning the first sequence into the second
    """

    length: int
    lcs: List[Any] = field(default_factory=list)
    script: List[EditOp] = field(default_factory=list)


def align_sequences(a: Sequence[Any], b: Sequence[Any]) -> AlignmentResult:
    """Compute the LCS of a and b and an edit script from a to b."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = table[i], table[i - 1]
        ai = a[i - 1]
        for j in range(1, n + 1):
            if ai == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                left, up = row[j - 1], prev[j]
                row[j] = left if left > up else up

    ops: List[EditOp] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            ops.append(EditOp.kept(a[i - 1]))
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            ops.append(EditOp.inserted(b[j - 1]))
            j -= 1
        else:
            ops.append(EditOp.deleted(a[i - 1]))
            i -= 1
    while j > 0:
        ops.append(EditOp.inserted(b[j - 1]))
        j -= 1
    while i > 0:
        ops.append(EditOp.deleted(a[i - 1]))
        i -= 1
    ops.reverse()

    lcs = [op.value for op in ops if op.kind is EditKind.KEPT]
    return AlignmentResult(length=table[m][n], lcs=lcs, script=ops)


def apply_edit_script(script: Sequence[EditOp]) -> List[Any]:
    """Target sequence of a script: kept and inserted values, in order."""
    return [op.value for op in script if op.kind is not EditKind.DELETED]


def revert_edit_script(script: Sequence[EditOp]) -> List[Any]:
    """Source sequence of a script: kept and deleted values, in order."""
    return [op.value for op in script if op.kind is not EditKind.INSERTED]


def format_edit_script(script: Sequence[EditOp]) -> str:
    """Render a script as text, e.g. ``a[+B][-b]c``."""
    parts: List[str] = []
    for op in script:
        if op.kind is EditKind.INSERTED:
            parts.append(f"[+{op.value}]")
        elif op.kind is EditKind.DELETED:
            parts.append(f"[-{op.value}]")
        else:
            parts.append(str(op.value))
    return "".join(parts)


# ---------------------------------------------------------------------------
# Compact edit script
# ---------------------------------------------------------------------------


class CompactKind(Enum):
    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class CompactOp:
    """
    One compacted edit.

    SAME carries its value in both old_value and new_value; ADDED only in
    new_value; REMOVED only in old_value; MODIFIED in both.
    """

    kind: CompactKind
    old_value: Any = None
    new_value: Any = None

    @classmethod
    def same(cls, value: Any) -> "CompactOp":
        return cls(CompactKind.SAME, value, value)

    @classmethod
    def added(cls, new_value: Any) -> "CompactOp":
        return cls(CompactKind.ADDED, new_value=new_value)

    @classmethod
    def removed(cls, old_value: Any) -> "CompactOp":
        return cls(CompactKind.REMOVED, old_value=old_value)

    @classmethod
    def modified(cls, old_value: Any, new_value: Any) -> "CompactOp":
        return cls(CompactKind.MODIFIED, old_value, new_value)

    @property
    def value(self) -> Any:
        """The value of a SAME op."""
        return self.old_value


def _flush(out: List[CompactOp], deleted: List[Any], inserted: List[Any]) -> None:
    paired = min(len(deleted), len(inserted))
    for k in range(paired):
        out.append(CompactOp.modified(deleted[k], inserted[k]))
    for k in range(paired, len(deleted)):
        out.append(CompactOp.removed(deleted[k]))
    for k in range(paired, len(inserted)):
        out.append(CompactOp.added(inserted[k]))
    deleted.clear()
    inserted.clear()


def compact_edit_script(script: Sequence[EditOp]) -> List[CompactOp]:
    """Merge delete runs with the insert runs that follow into MODIFIED ops."""
    out: List[CompactOp] = []
    deleted: List[Any] = []
    inserted: List[Any] = []
    for op in script:
        if op.kind is EditKind.KEPT:
            _flush(out, deleted, inserted)
            out.append(CompactOp.same(op.value))
        elif op.kind is EditKind.DELETED:
            deleted.append(op.value)
        else:
            inserted.append(op.value)
    _flush(out, deleted, inserted)
    return out


def map_compact_script(
    script: Sequence[CompactOp], fn: Callable[[Any], Any]
) -> List[CompactOp]:
    """Apply fn to every value carried by a compact script."""
    out: List[CompactOp] = []
    for op in script:
        if op.kind is CompactKind.SAME:
            out.append(CompactOp.same(fn(op.value)))
        elif op.kind is CompactKind.ADDED:
            out.append(CompactOp.added(fn(op.new_value)))
        elif op.kind is CompactKind.REMOVED:
            out.append(CompactOp.removed(fn(op.old_value)))
        else:
            out.append(CompactOp.modified(fn(op.old_value), fn(op.new_value)))
    return out


# ---------------------------------------------------------------------------
# Arrays of JSON values
# ---------------------------------------------------------------------------


def _unaligned_script(a: Sequence[Any], b: Sequence[Any]) -> List[EditOp]:
    return [EditOp.deleted(v) for v in a] + [EditOp.inserted(v) for v in b]


def diff_arrays_of_values(
    a: Sequence[Any],
    b: Sequence[Any],
    max_cells: Optional[int] = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> List[CompactOp]:
    """
    Compact diff of two arrays of arbitrary JSON values.

    Elements are encoded to identities, the identity sequences are aligned
    and compacted, and identities are decoded back to values.

    Args:
        a: Old array.
        b: New array.
        max_cells: Largest len(a) * len(b) to align. Above it, every old
            element is deleted and every new one inserted, so compaction
            pairs them by position. None disables the cap.
    """
    identity = ValueIdentity()
    a_ids = identity.encode_all(list(a))
    b_ids = identity.encode_all(list(b))

    if max_cells is not None and len(a_ids) * len(b_ids) > max_cells:
        logger.warning(
            "arrays too large to align (%d x %d > %d cells), pairing by position",
            len(a_ids),
            len(b_ids),
            max_cells,
        )
        script = _unaligned_script(a_ids, b_ids)
    else:
        script = align_sequences(a_ids, b_ids).script

    result = map_compact_script(compact_edit_script(script), identity.decode)
    logger.debug(
        "array diff: %d old, %d new, %d distinct, %d ops",
        len(a_ids),
        len(b_ids),
        len(identity),
        len(result),
    )
    return result
