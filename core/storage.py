'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

from core.log import Log
from core.board import Board
from core.note import Note
from core.constants import BASE_Z
from utils.fs_atomic import atomic_write_text

BOARD_VERSION = 1

__all__ = ["BOARD_VERSION", "default_board_path", "load_board", "save_board", "board_document"]


def default_board_path() -> Path:
    return Path.home() / ".stacknotes" / "board.json"


def _read_json(p: Path, default: Any) -> Any:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e

# ---------- board.json ----------

def board_document(notes: Iterable[Note], viewport: Tuple[float, float], highest_z: int) -> Dict[str, Any]:
    return {
        "version": BOARD_VERSION,
        "saved_ts": int(time.time()),
        "highest_z": int(highest_z),
        "viewport": {"x": float(viewport[0]), "y": float(viewport[1])},
        "notes": [n.to_dict() for n in notes],
    }


def save_board(path: str | Path, notes: Iterable[Note], viewport: Tuple[float, float],
               highest_z: int = BASE_Z) -> None:
    """Write the whole board atomically. Raises OSError on failure."""
    p = Path(path).expanduser()
    doc = board_document(notes, viewport, highest_z)
    atomic_write_text(p, json.dumps(doc, indent=2))
    Log.debug(f"Saved {len(doc['notes'])} note(s) to {p}", 2)


def load_board(path: str | Path) -> Board:
    """
    Load a board file. A missing file is an empty board; malformed JSON
    raises ValueError. Individual note records that make no sense are
    skipped rather than failing the load.
    """
    p = Path(path).expanduser()
    doc = _read_json(p, {})
    if not isinstance(doc, dict):
        raise ValueError(f"Board file {p} does not hold a JSON object")

    version = int(doc.get("version", BOARD_VERSION) or BOARD_VERSION)
    if version > BOARD_VERSION:
        raise ValueError(f"Board file {p} has version {version}; newest supported is {BOARD_VERSION}")

    notes = []
    for raw in doc.get("notes", []) or []:
        if not isinstance(raw, dict):
            continue
        try:
            notes.append(Note.from_dict(raw))
        except (TypeError, ValueError) as e:
            Log.debug(f"Skipping unreadable note record in {p}: {e}", 0)

    vp = doc.get("viewport") or {}
    viewport = (float(vp.get("x", 0.0) or 0.0), float(vp.get("y", 0.0) or 0.0))
    board = Board(notes, highest_z=int(doc.get("highest_z", BASE_Z) or BASE_Z), viewport=viewport)
    Log.debug(f"Loaded {len(board)} note(s) from {p}", 1)
    return board
