"""
Side-by-side diff of two JSON documents.

Run this with:
    python examples/side_by_side.py

The old and new columns are rendered with leave_space, so every row of
the left column lines up with the same row of the right column.
"""

from itertools import zip_longest

from jsondelta import RenderOptions, ViewSide, diff_values, render_diff

OLD = {
    "service": "billing",
    "replicas": 2,
    "ports": [80, 443],
    "env": {"LOG_LEVEL": "info", "REGION": "eu-west-1"},
}

NEW = {
    "service": "billing",
    "replicas": 3,
    "ports": [80, 443, 8443],
    "env": {"LOG_LEVEL": "debug"},
    "owner": {"team": "payments", "oncall": True},
}


def main() -> None:
    node = diff_values(OLD, NEW)

    left = render_diff(node, RenderOptions.side_by_side(ViewSide.OLD))
    right = render_diff(node, RenderOptions.side_by_side(ViewSide.NEW))

    for old_line, new_line in zip_longest(left, right):
        print(f"{old_line.prefixed():<40}{new_line.prefixed()}")

    print(f"\n{len(left)} rows on each side")


if __name__ == "__main__":
    main()
