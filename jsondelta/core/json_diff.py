"""Structural JSON diff for jsondelta.

Produces a typed diff tree for two JSON-like values.

Rules, in order of precedence:
- Identical values (same object, or equal scalars of the same kind): same
- Kind mismatch, null involved, or changed scalar: replaced
- Arrays: same when the canonical forms match; otherwise aligned by
  content identity (LCS), compacted, and every "modified" slot diffed
  recursively
- Objects: old keys first (recursed, or removed), then new-only keys
  (added); collapses to same when no property changed
- int vs float are one kind (number), bool is its own kind
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .canon import SCALAR_KINDS, JsonKind, canon, value_kind
from .sequence import DEFAULT_MAX_ALIGNMENT_CELLS, CompactKind, diff_arrays_of_values
from .types import DiffNode


@dataclass(frozen=True)
class DiffPolicy:
    """
    Configuration for structural diffing.

    Attributes:
        max_alignment_cells: Largest len(old) * len(new) array pair that is
            aligned with LCS. Larger pairs are matched by position instead.
            None means no cap.
    """

    max_alignment_cells: Optional[int] = DEFAULT_MAX_ALIGNMENT_CELLS

    @classmethod
    def default(cls) -> "DiffPolicy":
        """Create default diff policy."""
        return cls()

    @classmethod
    def unbounded(cls) -> "DiffPolicy":
        """Create a policy that always aligns, whatever the array sizes."""
        return cls(max_alignment_cells=None)


def diff_values(
    old: Any, new: Any, policy: Optional[DiffPolicy] = None
) -> DiffNode:
    """Compute the diff tree between two JSON values."""
    if policy is None:
        policy = DiffPolicy.default()
    return _diff(old, new, policy)


def _diff(old: Any, new: Any, policy: DiffPolicy) -> DiffNode:
    old_kind = value_kind(old)
    new_kind = value_kind(new)

    if old is new or (
        old_kind is new_kind and old_kind in SCALAR_KINDS and old == new
    ):
        return DiffNode.same(old)

    if old_kind is not new_kind or old_kind in SCALAR_KINDS:
        return DiffNode.replaced(old, new)

    if old_kind is JsonKind.ARRAY:
        if canon(old) == canon(new):
            return DiffNode.same(old)
        return DiffNode.array_diff(_diff_items(old, new, policy), old, new)

    return _diff_object(old, new, policy)


def _diff_items(old: Any, new: Any, policy: DiffPolicy) -> List[DiffNode]:
    items: List[DiffNode] = []
    for op in diff_arrays_of_values(old, new, policy.max_alignment_cells):
        if op.kind is CompactKind.SAME:
            items.append(DiffNode.same(op.value))
        elif op.kind is CompactKind.ADDED:
            items.append(DiffNode.added(op.new_value))
        elif op.kind is CompactKind.REMOVED:
            items.append(DiffNode.removed(op.old_value))
        else:
            items.append(_diff(op.old_value, op.new_value, policy))
    return items


def _diff_object(old: Any, new: Any, policy: DiffPolicy) -> DiffNode:
    properties: Dict[str, DiffNode] = {}
    for key, value in old.items():
        if key in new:
            properties[key] = _diff(value, new[key], policy)
        else:
            properties[key] = DiffNode.removed(value)
    for key, value in new.items():
        if key not in old:
            properties[key] = DiffNode.added(value)

    if all(p.is_same for p in properties.values()):
        return DiffNode.same(old)
    return DiffNode.object_diff(properties, old, new)
