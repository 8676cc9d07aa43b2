"""
Walk through the array-diff pipeline step by step.

Run this with:
    python examples/array_alignment.py

Shows the LCS edit script, its compacted form, and the final unified
rendering for two arrays of objects.
"""

from jsondelta import (
    ValueIdentity,
    align_sequences,
    compact_edit_script,
    diff_values,
    format_edit_script,
    format_lines,
    render_diff,
)

OLD = [{"id": 1, "qty": 2}, {"id": 2, "qty": 1}, {"id": 3, "qty": 5}]
NEW = [{"id": 1, "qty": 2}, {"id": 3, "qty": 5}, {"id": 4, "qty": 1}]


def main() -> None:
    # Identities turn objects into comparable integers
    identity = ValueIdentity()
    old_ids = identity.encode_all(OLD)
    new_ids = identity.encode_all(NEW)
    print(f"old ids: {old_ids}")
    print(f"new ids: {new_ids}")

    result = align_sequences(old_ids, new_ids)
    print(f"LCS length: {result.length}")
    print(f"edit script: {format_edit_script(result.script)}")

    for op in compact_edit_script(result.script):
        print(f"  {op.kind.value:<8} {op.old_value!s:>4} -> {op.new_value!s}")

    print()
    print(format_lines(render_diff(diff_values(OLD, NEW))))


if __name__ == "__main__":
    main()
