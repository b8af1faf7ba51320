import json
import tempfile
import unittest
from pathlib import Path

from core.board import Board
from core.note import Note
from core.storage import BOARD_VERSION, load_board, save_board
from utils.fs_atomic import atomic_write_text


class TestBoardStorage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "board.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_save_then_load(self):
        notes = [
            Note(id="r", x=10, y=20, is_root=True, collapsed=True, content="Fruits", z=105),
            Note(id="c", x=10, y=190, parent_id="r", content="apple\n---\nred", z=106,
                 split_ratio=0.3, width=300),
        ]
        save_board(self.path, notes, (12.5, -40), highest_z=106)

        doc = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(doc["version"], BOARD_VERSION)
        self.assertEqual(doc["viewport"], {"x": 12.5, "y": -40.0})

        board = load_board(self.path)
        self.assertEqual(board.notes(), notes)
        self.assertEqual(board.viewport, (12.5, -40.0))
        self.assertEqual(board.highest_z, 106)

    def test_missing_file_is_empty_board(self):
        board = load_board(self.path)
        self.assertTrue(board.is_empty())
        self.assertEqual(board.viewport, (0.0, 0.0))

    def test_malformed_json_raises(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_board(self.path)

    def test_non_object_document_raises(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[]", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_board(self.path)

    def test_newer_version_raises(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"version": BOARD_VERSION + 1, "notes": []}), encoding="utf-8")
        with self.assertRaises(ValueError):
            load_board(self.path)

    def test_bad_records_are_skipped(self):
        self.path.parent.mkdir(parents=True)
        doc = {"version": 1, "notes": ["junk", {"id": "ok", "width": 9999}, {"id": "bad", "z": "high"}]}
        self.path.write_text(json.dumps(doc), encoding="utf-8")
        board = load_board(self.path)
        self.assertEqual([n.id for n in board], ["ok"])
        self.assertEqual(board.get("ok").width, 600)

    def test_atomic_write_leaves_no_temp_files(self):
        atomic_write_text(self.path, "one")
        atomic_write_text(self.path, "two")
        self.assertEqual(self.path.read_text(encoding="utf-8"), "two")
        self.assertEqual([p.name for p in self.path.parent.iterdir()], ["board.json"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
