import unittest

from core.board import Board
from core.note import Note
from core.controller import BoardController
from core.interaction import AXIS_WIDTH, AXIS_HEIGHT


def _controller():
    board = Board()
    board.add(Note(id="R", x=0, y=0, height=160, is_root=True))
    board.add(Note(id="a", height=160, parent_id="R", stack_order=0))
    board.add(Note(id="b", height=160, parent_id="R", stack_order=1))
    board.add(Note(id="n", x=500, y=500))
    saves = []
    ctl = BoardController(board, persist=lambda notes, vp: saves.append(len(notes)))
    return ctl, saves


def _order(ctl, root_id="R"):
    return [n.id for n in ctl.board.children(root_id)]


class TestDragLifecycle(unittest.TestCase):
    def test_pick_up_pops_note_out_of_stack(self):
        ctl, _saves = _controller()
        self.assertTrue(ctl.start_drag("a", (10, 200)))
        self.assertIsNone(ctl.note("a").parent_id)
        self.assertEqual(_order(ctl), ["b"])
        self.assertEqual(ctl.note("b").y, 170)
        self.assertEqual(ctl.dragging_id, "a")

    def test_pick_up_raises_z(self):
        ctl, _saves = _controller()
        ctl.start_drag("R", (0, 0))
        self.assertEqual(max(n.z for n in ctl.board), ctl.note("R").z)

    def test_drop_between_children(self):
        ctl, saves = _controller()
        ctl.start_drag("n", (500, 500))
        preview = ctl.update_drag((10, 300))
        self.assertEqual((preview.root_id, preview.index), ("R", 1))
        self.assertEqual(ctl.preview, preview)

        self.assertTrue(ctl.end_drag())
        self.assertEqual(_order(ctl), ["a", "n", "b"])
        self.assertEqual([ctl.note(i).stack_order for i in ("a", "n", "b")], [0, 1, 2])
        self.assertEqual((ctl.note("n").x, ctl.note("n").y), (0, 340))
        self.assertEqual(ctl.note("b").y, 510)
        self.assertIsNone(ctl.dragging_id)
        self.assertEqual(len(saves), 1)

    def test_drop_outside_any_zone_stays_put(self):
        ctl, _saves = _controller()
        ctl.start_drag("a", (5, 175))
        self.assertIsNone(ctl.update_drag((905, 175)))
        self.assertFalse(ctl.end_drag())
        a = ctl.note("a")
        self.assertEqual(a.role, "standalone")
        self.assertEqual((a.x, a.y), (900, 170))
        self.assertEqual(_order(ctl), ["b"])

    def test_populated_root_refuses_to_stack(self):
        ctl, _saves = _controller()
        ctl.board.add(Note(id="P", x=600, y=0, is_root=True))
        ctl.board.add(Note(id="pk", parent_id="P"))
        ctl.start_drag("P", (600, 0))
        self.assertIsNotNone(ctl.update_drag((40, 30)))

        self.assertFalse(ctl.end_drag())
        p = ctl.note("P")
        self.assertTrue(p.is_root)
        self.assertEqual((p.x, p.y), (40, 30))
        self.assertEqual(_order(ctl, "P"), ["pk"])
        self.assertEqual((ctl.note("pk").x, ctl.note("pk").y), (40, 200))
        self.assertEqual(_order(ctl), ["a", "b"])

    def test_empty_root_joins_stack(self):
        ctl, _saves = _controller()
        ctl.board.add(Note(id="E", x=600, y=0, is_root=True))
        ctl.start_drag("E", (600, 0))
        ctl.update_drag((0, 100))
        self.assertTrue(ctl.end_drag())
        self.assertEqual(ctl.note("E").role, "child")
        self.assertEqual(_order(ctl), ["E", "a", "b"])

    def test_release_without_move(self):
        ctl, saves = _controller()
        ctl.start_drag("a", (0, 170))
        self.assertFalse(ctl.end_drag())
        self.assertEqual(ctl.note("a").role, "standalone")
        self.assertEqual(len(saves), 1)

    def test_end_without_start_is_noop(self):
        ctl, saves = _controller()
        self.assertFalse(ctl.end_drag())
        self.assertIsNone(ctl.update_drag((0, 0)))
        self.assertEqual(saves, [])

    def test_unknown_note(self):
        ctl, _saves = _controller()
        self.assertFalse(ctl.start_drag("ghost", (0, 0)))
        self.assertIsNone(ctl.dragging_id)

    def test_deleting_dragged_note_ends_drag(self):
        ctl, _saves = _controller()
        ctl.start_drag("n", (500, 500))
        ctl.delete_note("n")
        self.assertIsNone(ctl.dragging_id)
        self.assertFalse(ctl.end_drag())


class TestResize(unittest.TestCase):
    def test_width_is_clamped(self):
        ctl, _saves = _controller()
        self.assertTrue(ctl.start_resize("n", AXIS_WIDTH, 100))
        self.assertEqual(ctl.update_resize(2000), 600)
        self.assertEqual(ctl.update_resize(-1000), 120)
        self.assertEqual(ctl.update_resize(150), 270)
        self.assertTrue(ctl.end_resize())
        self.assertEqual(ctl.note("n").width, 270)

    def test_child_height_change_shifts_siblings(self):
        ctl, saves = _controller()
        ctl.start_resize("a", AXIS_HEIGHT, 0)
        self.assertEqual(ctl.resize_axis, AXIS_HEIGHT)
        self.assertEqual(ctl.update_resize(-30), 130)
        self.assertTrue(ctl.end_resize())
        self.assertEqual(ctl.note("b").y, 170 + 130 + 10)
        self.assertIsNone(ctl.resize_axis)
        self.assertEqual(len(saves), 1)

    def test_bad_axis_or_id(self):
        ctl, _saves = _controller()
        self.assertFalse(ctl.start_resize("n", "depth", 0))
        self.assertFalse(ctl.start_resize("ghost", AXIS_WIDTH, 0))
        self.assertIsNone(ctl.update_resize(10))
        self.assertFalse(ctl.end_resize())


if __name__ == "__main__":
    unittest.main(verbosity=2)
