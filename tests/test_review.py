import random
import unittest

from core.board import Board
from core.note import Note
from core.controller import BoardController
from core.review import ShuffleState


def _deck(count=3, seed=7):
    board = Board()
    board.add(Note(id="R", is_root=True, content="Fruits"))
    for i in range(count):
        board.add(Note(id=f"c{i}", parent_id="R", stack_order=i,
                       content=f"term{i}\n---\ndef{i}"))
    return BoardController(board, rng=random.Random(seed))


class TestCollapse(unittest.TestCase):
    def test_toggle_round_trip(self):
        ctl = _deck()
        self.assertTrue(ctl.toggle_collapse("R"))
        self.assertTrue(ctl.note("R").collapsed)
        self.assertTrue(ctl.toggle_collapse("R"))
        self.assertFalse(ctl.note("R").collapsed)

    def test_toggle_needs_populated_root(self):
        ctl = _deck(count=0)
        self.assertFalse(ctl.toggle_collapse("R"))
        self.assertFalse(ctl.note("R").collapsed)
        ctl.board.add(Note(id="plain"))
        self.assertFalse(ctl.toggle_collapse("plain"))
        self.assertFalse(ctl.toggle_collapse("ghost"))

    def test_children_stay_in_model_while_collapsed(self):
        ctl = _deck()
        ctl.toggle_collapse("R")
        self.assertEqual(ctl.board.child_count("R"), 3)

    def test_deleting_only_child_keeps_collapsed(self):
        ctl = _deck(count=1)
        ctl.toggle_collapse("R")
        self.assertTrue(ctl.delete_note("c0"))
        self.assertEqual(ctl.board.child_count("R"), 0)
        self.assertTrue(ctl.note("R").collapsed)
        # The indicator still opens it up.
        self.assertTrue(ctl.expand("R"))
        self.assertFalse(ctl.note("R").collapsed)


class TestShuffle(unittest.TestCase):
    def test_term_reveal_redraw_cycle(self):
        ctl = _deck()
        first = ctl.trigger_shuffle("R")
        self.assertEqual(first.state, ShuffleState.SHOWING_TERM)
        self.assertTrue(ctl.note("R").collapsed)
        self.assertIn(first.child_id, {"c0", "c1", "c2"})
        self.assertEqual(first.term, ctl.note(first.child_id).term)
        drawn = first.child_id

        second = ctl.trigger_shuffle("R")
        self.assertEqual(second.state, ShuffleState.REVEALED)
        self.assertEqual(second.child_id, drawn)
        self.assertEqual(second.term, ctl.note(drawn).term)
        self.assertEqual(second.definition, ctl.note(drawn).definition)
        self.assertTrue(second.revealed)

        third = ctl.trigger_shuffle("R")
        self.assertEqual(third.state, ShuffleState.SHOWING_TERM)
        self.assertIn(third.child_id, {"c0", "c1", "c2"})

    def test_draws_follow_seeded_rng(self):
        expected_rng = random.Random(11)
        ctl = _deck(seed=11)
        kids = ctl.board.children("R")
        for _ in range(4):
            card = ctl.trigger_shuffle("R")
            self.assertEqual(card.child_id, expected_rng.choice(kids).id)
            ctl.trigger_shuffle("R")

    def test_expand_resets_to_idle(self):
        ctl = _deck()
        ctl.trigger_shuffle("R")
        self.assertTrue(ctl.toggle_collapse("R"))
        self.assertFalse(ctl.note("R").collapsed)
        card = ctl.shuffle_card("R")
        self.assertEqual(card.state, ShuffleState.IDLE)
        self.assertFalse(card.active)

    def test_noop_without_children(self):
        ctl = _deck(count=0)
        self.assertIsNone(ctl.trigger_shuffle("R"))
        self.assertFalse(ctl.note("R").collapsed)
        self.assertIsNone(ctl.trigger_shuffle("ghost"))

    def test_deleting_drawn_child_clears_card(self):
        ctl = _deck()
        card = ctl.trigger_shuffle("R")
        ctl.delete_note(card.child_id)
        self.assertEqual(ctl.shuffle_card("R").state, ShuffleState.IDLE)

    def test_unpinning_forgets_card(self):
        ctl = _deck(count=1)
        ctl.trigger_shuffle("R")
        ctl.delete_note("c0")
        self.assertTrue(ctl.toggle_root("R"))
        self.assertEqual(ctl.shuffle_card("R").state, ShuffleState.IDLE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
