import unittest

from core.note import (
    Note,
    split_content,
    join_content,
    clamp_width,
    clamp_height,
    clamp_split_ratio,
    reading_order,
)


class TestNoteContent(unittest.TestCase):
    def test_split_on_first_separator(self):
        self.assertEqual(split_content("apple\n---\nred fruit"), ("apple", "red fruit"))
        self.assertEqual(split_content("a\n---\nb\n---\nc"), ("a", "b\n---\nc"))

    def test_split_without_separator_is_all_term(self):
        self.assertEqual(split_content("just a term"), ("just a term", ""))
        self.assertEqual(split_content(None), ("", ""))

    def test_join_omits_separator_for_empty_definition(self):
        self.assertEqual(join_content("apple", ""), "apple")
        self.assertEqual(join_content("apple", "red"), "apple\n---\nred")

    def test_root_ignores_definition_segment(self):
        note = Note(id="r", content="Fruits\n---\nleftover", is_root=True)
        self.assertEqual(note.term, "Fruits")
        self.assertEqual(note.definition, "")


class TestNoteRole(unittest.TestCase):
    def test_role_is_derived(self):
        self.assertEqual(Note(id="a").role, "standalone")
        self.assertEqual(Note(id="b", parent_id="r").role, "child")
        self.assertEqual(Note(id="c", is_root=True).role, "root")

    def test_bottom(self):
        self.assertEqual(Note(id="a", y=100, height=160).bottom, 260)


class TestNoteClamping(unittest.TestCase):
    def test_size_bounds(self):
        self.assertEqual(clamp_width(50), 120)
        self.assertEqual(clamp_width(5000), 600)
        self.assertEqual(clamp_width(300), 300)
        self.assertEqual(clamp_height(10), 80)
        self.assertEqual(clamp_height(900), 500)

    def test_split_ratio_bounds(self):
        self.assertEqual(clamp_split_ratio(0.0), 0.1)
        self.assertEqual(clamp_split_ratio(1.0), 0.9)
        self.assertEqual(clamp_split_ratio(0.3), 0.3)

    def test_from_dict_defaults_and_clamps(self):
        note = Note.from_dict({"id": "n1", "width": 5000, "height": None})
        self.assertEqual(note.width, 600)
        self.assertEqual(note.height, 160)

        note = Note.from_dict({"id": "n2", "width": 0, "height": "tall"})
        self.assertEqual(note.width, 220)
        self.assertEqual(note.height, 160)
        self.assertEqual(note.split_ratio, 0.5)

    def test_from_dict_root_never_has_parent(self):
        note = Note.from_dict({"id": "r", "is_root": True, "parent_id": "other"})
        self.assertTrue(note.is_root)
        self.assertIsNone(note.parent_id)

    def test_to_dict_round_trip(self):
        note = Note(id="n", x=12.5, y=40, content="t\n---\nd", z=7, parent_id="r",
                    stack_order=3, split_ratio=0.25)
        self.assertEqual(Note.from_dict(note.to_dict()), note)


class TestReadingOrder(unittest.TestCase):
    def test_same_row_sorts_by_x(self):
        right = Note(id="right", x=300, y=100)
        left = Note(id="left", x=0, y=110)
        below = Note(id="below", x=0, y=200)
        ordered = reading_order([below, right, left])
        self.assertEqual([n.id for n in ordered], ["left", "right", "below"])

    def test_rows_sort_by_y(self):
        a = Note(id="a", x=500, y=0)
        b = Note(id="b", x=0, y=30)
        self.assertEqual([n.id for n in reading_order([b, a])], ["a", "b"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
