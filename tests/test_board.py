import unittest

from core.board import Board
from core.note import Note


def _stack(*child_ids):
    board = Board()
    board.add(Note(id="root", x=0, y=0, is_root=True))
    for order, cid in enumerate(child_ids):
        board.add(Note(id=cid, parent_id="root", stack_order=order))
    return board


def _order(board, root_id="root"):
    return [n.id for n in board.children(root_id)]


class TestBoardCollection(unittest.TestCase):
    def test_new_note_is_standalone_on_top(self):
        board = Board()
        a = board.new_note(10, 20, "hello")
        b = board.new_note(30, 40)
        self.assertEqual(a.role, "standalone")
        self.assertGreater(b.z, a.z)
        self.assertEqual(board.highest_z, b.z)
        self.assertEqual((a.width, a.height), (220, 160))

    def test_bring_to_front(self):
        board = Board()
        a = board.new_note(0, 0)
        board.new_note(0, 0)
        self.assertTrue(board.bring_to_front(a.id))
        self.assertEqual(max(n.z for n in board), a.z)
        self.assertFalse(board.bring_to_front("missing"))

    def test_remove_root_releases_children(self):
        board = _stack("a", "b")
        removed = board.remove("root")
        self.assertEqual(removed.id, "root")
        for cid in ("a", "b"):
            self.assertIsNone(board.get(cid).parent_id)
            self.assertEqual(board.get(cid).role, "standalone")

    def test_remove_unknown_is_noop(self):
        board = _stack("a")
        self.assertIsNone(board.remove("nope"))
        self.assertEqual(len(board), 2)

    def test_top_level_excludes_children(self):
        board = _stack("a", "b")
        board.add(Note(id="loose", x=400, y=0))
        self.assertEqual([n.id for n in board.top_level()], ["root", "loose"])


class TestBoardRoles(unittest.TestCase):
    def test_pin_refused_with_definition(self):
        board = Board()
        board.add(Note(id="n", content="term\n---\ndefinition"))
        self.assertFalse(board.set_root("n", True))
        self.assertFalse(board.get("n").is_root)

    def test_pin_clears_parent(self):
        board = _stack("a")
        self.assertTrue(board.set_root("a", True))
        a = board.get("a")
        self.assertTrue(a.is_root)
        self.assertIsNone(a.parent_id)
        self.assertEqual(board.child_count("root"), 0)

    def test_unpin_refused_while_populated(self):
        board = _stack("a")
        self.assertFalse(board.set_root("root", False))
        self.assertTrue(board.get("root").is_root)

    def test_unpin_empty_root_clears_collapsed(self):
        board = Board()
        board.add(Note(id="r", is_root=True, collapsed=True))
        self.assertTrue(board.set_root("r", False))
        self.assertFalse(board.get("r").collapsed)

    def test_unknown_id_is_noop(self):
        self.assertFalse(Board().set_root("ghost", True))


class TestBoardAttach(unittest.TestCase):
    def test_attach_renumbers_siblings(self):
        board = _stack("a", "b", "c")
        board.add(Note(id="d"))
        self.assertTrue(board.attach("d", "root", 1))
        self.assertEqual(_order(board), ["a", "d", "b", "c"])
        self.assertEqual([n.stack_order for n in board.children("root")], [0, 1, 2, 3])

    def test_attach_clamps_index(self):
        board = _stack("a")
        board.add(Note(id="d"))
        self.assertTrue(board.attach("d", "root", 99))
        self.assertEqual(_order(board), ["a", "d"])

    def test_attach_empty_root_clears_role_flags(self):
        board = _stack("a")
        board.add(Note(id="r2", is_root=True, collapsed=True))
        self.assertTrue(board.attach("r2", "root", 0))
        r2 = board.get("r2")
        self.assertFalse(r2.is_root)
        self.assertFalse(r2.collapsed)
        self.assertEqual(r2.parent_id, "root")
        self.assertEqual(_order(board), ["r2", "a"])

    def test_attach_refuses_populated_root(self):
        board = _stack("a")
        board.add(Note(id="other", is_root=True))
        board.add(Note(id="kid", parent_id="other"))
        self.assertFalse(board.attach("other", "root", 0))
        self.assertTrue(board.get("other").is_root)
        self.assertEqual(_order(board), ["a"])

    def test_attach_requires_root_target(self):
        board = Board()
        board.add(Note(id="a"))
        board.add(Note(id="b"))
        self.assertFalse(board.attach("a", "b", 0))
        self.assertFalse(board.attach("a", "missing", 0))

    def test_detach_returns_former_parent(self):
        board = _stack("a")
        self.assertEqual(board.detach("a"), "root")
        self.assertIsNone(board.detach("a"))

    def test_compact_closes_gaps(self):
        board = Board()
        board.add(Note(id="root", is_root=True))
        board.add(Note(id="a", parent_id="root", stack_order=4))
        board.add(Note(id="b", parent_id="root", stack_order=-2))
        board.compact("root")
        self.assertEqual([(n.id, n.stack_order) for n in board.children("root")],
                         [("b", 0), ("a", 1)])


if __name__ == "__main__":
    unittest.main(verbosity=2)
