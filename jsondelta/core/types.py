from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class JsonDeltaError(Exception):
    """Base exception for jsondelta errors."""

    pass


class DiffType(Enum):
    """Kind of a node in a diff tree."""

    SAME = "same"
    REPLACED = "replaced"
    ADDED = "added"
    REMOVED = "removed"
    OBJECT_DIFF = "object_diff"
    ARRAY_DIFF = "array_diff"


@dataclass(frozen=True)
class DiffNode:
    """
    One node of a structural diff tree.

    Which attributes are meaningful depends on ``type``:

        SAME         old_value (the unchanged value)
        REPLACED     old_value, new_value
        ADDED        new_value
        REMOVED      old_value
        OBJECT_DIFF  properties, plus the old_value/new_value compared
        ARRAY_DIFF   items, plus the old_value/new_value compared

    Nodes are built through the classmethod constructors and never
    mutated afterwards.
    """

    type: DiffType
    old_value: Any = None
    new_value: Any = None
    properties: Dict[str, "DiffNode"] = field(default_factory=dict)
    items: List["DiffNode"] = field(default_factory=list)

    @classmethod
    def same(cls, value: Any) -> "DiffNode":
        return cls(DiffType.SAME, old_value=value)

    @classmethod
    def replaced(cls, old_value: Any, new_value: Any) -> "DiffNode":
        return cls(DiffType.REPLACED, old_value=old_value, new_value=new_value)

    @classmethod
    def added(cls, new_value: Any) -> "DiffNode":
        return cls(DiffType.ADDED, new_value=new_value)

    @classmethod
    def removed(cls, old_value: Any) -> "DiffNode":
        return cls(DiffType.REMOVED, old_value=old_value)

    @classmethod
    def object_diff(
        cls, properties: Dict[str, "DiffNode"], old_value: Any, new_value: Any
    ) -> "DiffNode":
        return cls(
            DiffType.OBJECT_DIFF,
            old_value=old_value,
            new_value=new_value,
            properties=properties,
        )

    @classmethod
    def array_diff(
        cls, items: List["DiffNode"], old_value: Any, new_value: Any
    ) -> "DiffNode":
        return cls(
            DiffType.ARRAY_DIFF,
            old_value=old_value,
            new_value=new_value,
            items=items,
        )

    @property
    def is_same(self) -> bool:
        return self.type is DiffType.SAME

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict (values are embedded as-is)."""
        out: Dict[str, Any] = {"type": self.type.value}
        if self.type in (DiffType.SAME, DiffType.REMOVED):
            out["old"] = self.old_value
        elif self.type is DiffType.ADDED:
            out["new"] = self.new_value
        elif self.type is DiffType.REPLACED:
            out["old"] = self.old_value
            out["new"] = self.new_value
        elif self.type is DiffType.OBJECT_DIFF:
            out["properties"] = {k: p.to_dict() for k, p in self.properties.items()}
        else:
            out["items"] = [i.to_dict() for i in self.items]
        return out


# ---------------------------------------------------------------------------
# Side reconstruction
# ---------------------------------------------------------------------------

_ABSENT = object()


def _side(node: DiffNode, new: bool) -> Any:
    t = node.type
    if t is DiffType.SAME:
        return node.old_value
    if t is DiffType.REPLACED:
        return node.new_value if new else node.old_value
    if t is DiffType.ADDED:
        return node.new_value if new else _ABSENT
    if t is DiffType.REMOVED:
        return _ABSENT if new else node.old_value
    if t is DiffType.OBJECT_DIFF:
        obj: Dict[str, Any] = {}
        for key, prop in node.properties.items():
            value = _side(prop, new)
            if value is not _ABSENT:
                obj[key] = value
        return obj
    arr: List[Any] = []
    for item in node.items:
        value = _side(item, new)
        if value is not _ABSENT:
            arr.append(value)
    return arr


def old_side(node: DiffNode) -> Any:
    """Rebuild the old value a diff tree was computed from."""
    value = _side(node, new=False)
    if value is _ABSENT:
        raise JsonDeltaError("diff node has no old side (added)")
    return value


def new_side(node: DiffNode) -> Any:
    """Rebuild the new value a diff tree was computed from."""
    value = _side(node, new=True)
    if value is _ABSENT:
        raise JsonDeltaError("diff node has no new side (removed)")
    return value
