"""
Golden and property tests for diff rendering.

Golden cases render a diff in the unified view with leave_space and join
the lines with "| ", "+ ", "- " prefixes. Property tests check that the
old and new views stay row-aligned under leave_space.
"""

from __future__ import annotations

import random
import textwrap
import unittest
from typing import Any, List

from jsondelta.core.json_diff import diff_values
from jsondelta.core.render import (
    DiffLine,
    LineTag,
    RenderOptions,
    UnsupportedViewSideError,
    ViewSide,
    format_lines,
    render_diff,
)
from jsondelta.core.types import DiffNode, JsonDeltaError


# =============================================================================
# Helpers
# =============================================================================


def print_diff(old: Any, new: Any, side: str = "unified") -> str:
    node = diff_values(old, new)
    return format_lines(render_diff(node, RenderOptions.side_by_side(side)))


def golden(text: str) -> str:
    """Strip the common indentation and surrounding blank lines."""
    return textwrap.dedent(text).strip("\n")


def prefixed(lines: List[DiffLine]) -> List[str]:
    return [line.prefixed() for line in lines]


def _random_json(rnd: random.Random, depth: int = 0):
    roll = rnd.random()
    if depth >= 3 or roll < 0.35:
        return rnd.choice([None, True, 0, 7, "a", "bb"])
    if roll < 0.65:
        return [_random_json(rnd, depth + 1) for _ in range(rnd.randint(0, 3))]
    keys = rnd.sample(["a", "b", "c"], rnd.randint(0, 3))
    return {k: _random_json(rnd, depth + 1) for k in keys}


# =============================================================================
# Golden unified output
# =============================================================================


class TestUnifiedGolden(unittest.TestCase):
    def test_changed_prop(self):
        self.assertEqual(
            print_diff({"apple": 1, "orange": 2}, {"apple": 1, "orange": 3}),
            golden(
                """
                | {
                |     "apple": 1,
                -     "orange": 2
                +     "orange": 3
                | }
                """
            ),
        )

    def test_changed_array_item(self):
        self.assertEqual(
            print_diff(
                {"age": 123, "items": [{"a": 1}, {"b": 2}, {"c": 3}]},
                {"age": 123, "items": [{"a": 1}, {"b": 22}, {"c": 3}]},
            ),
            golden(
                """
                | {
                |     "age": 123,
                |     "items": [
                |         {
                |             "a": 1
                |         },
                |         {
                -             "b": 2
                +             "b": 22
                |         },
                |         {
                |             "c": 3
                |         }
                |     ]
                | }
                """
            ),
        )

    def test_removed_array_item(self):
        self.assertEqual(
            print_diff(
                {"age": 123, "items": [{"a": 1}, {"b": 2}, {"c": 3}]},
                {"age": 123, "items": [{"a": 1}, {"c": 3}]},
            ),
            golden(
                """
                | {
                |     "age": 123,
                |     "items": [
                |         {
                |             "a": 1
                |         },
                -         {
                -             "b": 2
                -         },
                |         {
                |             "c": 3
                |         }
                |     ]
                | }
                """
            ),
        )

    def test_unchanged(self):
        value = {"age": 123, "items": [{"a": 1}, {"b": 2}]}
        self.assertEqual(
            print_diff(value, {"age": 123, "items": [{"a": 1}, {"b": 2}]}),
            golden(
                """
                | {
                |     "age": 123,
                |     "items": [
                |         {
                |             "a": 1
                |         },
                |         {
                |             "b": 2
                |         }
                |     ]
                | }
                """
            ),
        )

    def test_added_array_item(self):
        self.assertEqual(
            print_diff(
                {"age": 123, "items": [{"a": 1}, {"c": 3}]},
                {"age": 123, "items": [{"a": 1}, {"b": 2}, {"c": 3}]},
            ),
            golden(
                """
                | {
                |     "age": 123,
                |     "items": [
                |         {
                |             "a": 1
                |         },
                +         {
                +             "b": 2
                +         },
                |         {
                |             "c": 3
                |         }
                |     ]
                | }
                """
            ),
        )

    def test_different_types(self):
        old = {
            "a": 123,
            "b": "string",
            "c": True,
            "d": None,
            "e": {"e1": 1, "e2": {"e10": "hi"}},
            "items": [{"a": 1}, None],
            "unchanged": {"a": 1},
            "emptyObj": {},
        }
        new = {
            "a": 456,
            "b": "new-string",
            "c": False,
            "d": {},
            "e": {"e1": 2, "e2": {"e10": "hello"}},
            "items": [{"b": 1}, None],
            "unchanged": {"a": 1},
            "emptyObj": {},
        }
        self.assertEqual(
            print_diff(old, new),
            golden(
                """
                | {
                -     "a": 123
                +     "a": 456,
                -     "b": "string"
                +     "b": "new-string",
                -     "c": true
                +     "c": false,
                -     "d": null
                +     "d": {},
                |     "e": {
                -         "e1": 1
                +         "e1": 2,
                |         "e2": {
                -             "e10": "hi"
                +             "e10": "hello"
                |         }
                |     },
                |     "items": [
                |         {
                -             "a": 1,
                +             "b": 1
                |         },
                |         null
                |     ],
                |     "unchanged": {
                |         "a": 1
                |     },
                |     "emptyObj": {}
                | }
                """
            ),
        )


# =============================================================================
# Old / new views
# =============================================================================


class TestSideViews(unittest.TestCase):
    def test_old_and_new_views_of_replaced(self):
        node = diff_values({"apple": 1, "orange": 2}, {"apple": 1, "orange": 3})
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions("old"))),
            ["| {", '|     "apple": 1,', '-     "orange": 2', "| }"],
        )
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions("new"))),
            ["| {", '|     "apple": 1,', '+     "orange": 3', "| }"],
        )

    def test_added_prop_padded_in_old_view(self):
        node = diff_values({"a": 1}, {"a": 1, "b": [1, 2]})
        old_lines = render_diff(node, RenderOptions.side_by_side(ViewSide.OLD))
        new_lines = render_diff(node, RenderOptions.side_by_side(ViewSide.NEW))
        self.assertEqual(
            prefixed(old_lines),
            ["| {", '|     "a": 1,'] + ["|     "] * 4 + ["| }"],
        )
        self.assertEqual(
            prefixed(new_lines),
            [
                "| {",
                '|     "a": 1,',
                '+     "b": [',
                "+         1,",
                "+         2",
                "+     ]",
                "| }",
            ],
        )
        self.assertTrue(all(line.filler for line in old_lines[2:6]))
        self.assertTrue(all(line.tag is LineTag.SAME for line in old_lines[2:6]))

    def test_removed_item_padded_in_new_view(self):
        node = diff_values([1, {"x": 1}, 2], [1, 2])
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions.side_by_side("new"))),
            ["| [", "|     1,", "|     ", "|     ", "|     ", "|     2", "| ]"],
        )

    def test_hidden_content_without_leave_space(self):
        node = diff_values({"a": 1}, {"a": 1, "b": 2})
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions("old"))),
            ["| {", '|     "a": 1,', "| }"],
        )

    def test_replaced_padded_to_larger_side(self):
        node = diff_values({"a": {"x": 1}}, {"a": 5})
        old_lines = render_diff(node, RenderOptions.side_by_side("old"))
        new_lines = render_diff(node, RenderOptions.side_by_side("new"))
        self.assertEqual(
            prefixed(old_lines),
            ["| {", '-     "a": {', '-         "x": 1', "-     }", "| }"],
        )
        self.assertEqual(
            prefixed(new_lines),
            ["| {", '+     "a": 5', "|     ", "|     ", "| }"],
        )

    def test_comma_skips_padding(self):
        node = diff_values({"a": 1, "z": 0}, {"a": [1, 2], "z": 0})
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions.side_by_side("old"))),
            ["| {", '-     "a": 1,', "|     ", "|     ", "|     ", '|     "z": 0', "| }"],
        )

    def test_padding_is_four_spaces_for_any_indent(self):
        node = diff_values({"a": 1}, {"a": 1, "b": [1]})
        for indent in ("  ", "\t"):
            lines = render_diff(node, RenderOptions.side_by_side("old", indent=indent))
            with self.subTest(indent=indent):
                self.assertEqual(
                    [line.text for line in lines if line.filler], ["    "] * 3
                )

    def test_top_level_presence_nodes(self):
        opts = RenderOptions.side_by_side("old")
        self.assertEqual(len(render_diff(DiffNode.added([1]), opts)), 3)
        self.assertEqual(
            prefixed(render_diff(DiffNode.removed("x"), opts)), ['- "x"']
        )


# =============================================================================
# Options
# =============================================================================


class TestRenderOptions(unittest.TestCase):
    def test_hide_same(self):
        node = diff_values({"a": 1, "b": 2}, {"a": 1, "b": 3})
        lines = render_diff(node, RenderOptions(hide_same=True))
        self.assertEqual(prefixed(lines), ["| {", '-     "b": 2', '+     "b": 3', "| }"])

    def test_hide_same_keeps_positional_comma(self):
        node = diff_values({"a": 1, "b": 2}, {"a": 2, "b": 2})
        lines = render_diff(node, RenderOptions(hide_same=True))
        self.assertEqual(
            prefixed(lines), ["| {", '-     "a": 1', '+     "a": 2,', "| }"]
        )

    def test_first_line_prefix(self):
        node = diff_values({"a": 1}, {"a": 2})
        self.assertEqual(
            prefixed(render_diff(node, first_line_prefix='"doc": ')),
            ['| "doc": {', '-     "a": 1', '+     "a": 2', "| }"],
        )
        self.assertEqual(
            prefixed(render_diff(DiffNode.replaced(1, 2), first_line_prefix="k: ")),
            ["- k: 1", "+ k: 2"],
        )

    def test_hide_same_whole_document(self):
        node = diff_values({"a": 1}, {"a": 1})
        self.assertEqual(render_diff(node, RenderOptions(hide_same=True)), [])

    def test_custom_indent(self):
        node = diff_values({"k": [1]}, {"k": [1, 2]})
        self.assertEqual(
            prefixed(render_diff(node, RenderOptions.unified(indent="  "))),
            ["| {", '|   "k": [', "|     1,", "+     2", "|   ]", "| }"],
        )

    def test_non_ascii_kept(self):
        node = diff_values({"k": "é"}, {"k": "ü"})
        self.assertEqual(
            prefixed(render_diff(node)),
            ["| {", '-     "k": "é"', '+     "k": "ü"', "| }"],
        )

    def test_string_view_side_coerced(self):
        self.assertIs(RenderOptions("old").view_side, ViewSide.OLD)
        self.assertIs(RenderOptions().view_side, ViewSide.UNIFIED)

    def test_unsupported_view_side(self):
        with self.assertRaises(UnsupportedViewSideError) as ctx:
            RenderOptions(view_side="left")
        self.assertEqual(ctx.exception.view_side, "left")
        self.assertIn("unified", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIsInstance(ctx.exception, JsonDeltaError)

    def test_unsupported_view_side_rejected_before_walk(self):
        opts = RenderOptions()
        object.__setattr__(opts, "view_side", "sideways")
        with self.assertRaises(UnsupportedViewSideError):
            render_diff(DiffNode.same(1), opts)

    def test_format_lines_prefixes(self):
        lines = [
            DiffLine("a", LineTag.SAME),
            DiffLine("b", LineTag.ADDED),
            DiffLine("c", LineTag.REMOVED),
        ]
        self.assertEqual(format_lines(lines), "| a\n+ b\n- c")


# =============================================================================
# Alignment balance
# =============================================================================


class TestAlignmentBalance(unittest.TestCase):
    def test_old_and_new_line_counts_match(self):
        rnd = random.Random(424242)
        for _ in range(300):
            old, new = _random_json(rnd), _random_json(rnd)
            node = diff_values(old, new)
            for hide_same in (False, True):
                old_lines = render_diff(
                    node, RenderOptions("old", leave_space=True, hide_same=hide_same)
                )
                new_lines = render_diff(
                    node, RenderOptions("new", leave_space=True, hide_same=hide_same)
                )
                with self.subTest(old=old, new=new, hide_same=hide_same):
                    self.assertEqual(len(old_lines), len(new_lines))


if __name__ == "__main__":
    unittest.main()
