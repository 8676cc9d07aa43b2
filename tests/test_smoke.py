import unittest

from jsondelta import (
    DiffType,
    RenderOptions,
    align_sequences,
    compact_edit_script,
    diff_arrays_of_values,
    diff_values,
    format_lines,
    new_side,
    old_side,
    render_diff,
)


class SmokeTest(unittest.TestCase):
    def test_diff_and_render(self) -> None:
        old = {"name": "widget", "tags": ["a", "b"], "size": {"w": 1, "h": 2}}
        new = {"name": "widget", "tags": ["a", "c", "b"], "size": {"w": 1, "h": 3}}

        node = diff_values(old, new)
        self.assertEqual(DiffType.OBJECT_DIFF, node.type)
        self.assertEqual(old, old_side(node))
        self.assertEqual(new, new_side(node))

        text = format_lines(render_diff(node, RenderOptions.unified()))
        self.assertIn('+         "c",', text)
        self.assertIn('-         "h": 2', text)

        left = render_diff(node, RenderOptions.side_by_side("old"))
        right = render_diff(node, RenderOptions.side_by_side("new"))
        self.assertEqual(len(left), len(right))

    def test_sequence_api(self) -> None:
        result = align_sequences(list("abc"), list("abcD"))
        self.assertEqual(3, result.length)
        self.assertEqual(4, len(compact_edit_script(result.script)))
        self.assertEqual(3, len(diff_arrays_of_values([{"a": 1}, 2], [{"a": 1}, 3, 4])))


if __name__ == "__main__":
    unittest.main()
