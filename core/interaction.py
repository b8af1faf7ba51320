'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Pointer-driven drag and resize sessions. A session lives from pointer-down
to pointer-up; nothing here outlives it.

'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.log import Log
from core.board import Board
from core.note import clamp_width, clamp_height
from core.snap import SnapPreview, resolve_snap_target
from core.stack_layout import reflow

__all__ = [
    "DragSession",
    "ResizeSession",
    "begin_drag",
    "drag_to",
    "finish_drag",
    "begin_resize",
    "resize_to",
    "finish_resize",
]

AXIS_WIDTH = "width"
AXIS_HEIGHT = "height"


@dataclass(slots=True)
class DragSession:
    """Grab offset between pointer and note corner, plus the live snap preview."""
    note_id: str
    grab_dx: float
    grab_dy: float
    former_parent: Optional[str] = None
    preview: Optional[SnapPreview] = None
    moved: bool = False


@dataclass(slots=True)
class ResizeSession:
    note_id: str
    axis: str
    start_pointer: float
    start_size: float

# ---------- dragging ----------

def begin_drag(board: Board, note_id: str, px: float, py: float) -> Optional[DragSession]:
    """
    Pick a note up. A stacked note pops out of its stack immediately and
    the stack it left closes the gap.
    """
    note = board.get(note_id)
    if note is None:
        Log.debug(f"begin_drag: unknown note {note_id}", 1)
        return None

    board.bring_to_front(note_id)
    session = DragSession(note_id=note_id, grab_dx=px - note.x, grab_dy=py - note.y)

    former = board.detach(note_id)
    if former is not None:
        session.former_parent = former
        reflow(board, dragging_id=note_id)
        Log.debug(f"Lifted {note_id} out of {former}.", 2)
    return session


def drag_to(board: Board, session: DragSession, px: float, py: float) -> Optional[SnapPreview]:
    """Move the note under the pointer and refresh the snap preview."""
    note = board.get(session.note_id)
    if note is None:
        session.preview = None
        return None
    note.x = px - session.grab_dx
    note.y = py - session.grab_dy
    session.moved = True
    session.preview = resolve_snap_target(board, note)
    return session.preview


def finish_drag(board: Board, session: DragSession) -> bool:
    """
    Commit a drag. With a live preview the note is stacked under the
    previewed root at the previewed index; otherwise it stays where it was
    dropped. Returns True if the note joined a stack.
    """
    attached = False
    preview = session.preview
    note = board.get(session.note_id)

    if note is not None and preview is not None:
        if note.is_root and board.has_children(note.id):
            Log.debug(f"Drop of populated stack {note.id} onto {preview.root_id} refused.", 1)
        else:
            attached = board.attach(note.id, preview.root_id, preview.index)

    session.preview = None
    reflow(board)
    return attached

# ---------- resizing ----------

def begin_resize(board: Board, note_id: str, axis: str, pointer: float) -> Optional[ResizeSession]:
    note = board.get(note_id)
    if note is None or axis not in (AXIS_WIDTH, AXIS_HEIGHT):
        return None
    board.bring_to_front(note_id)
    start = note.width if axis == AXIS_WIDTH else note.height
    return ResizeSession(note_id=note_id, axis=axis, start_pointer=pointer, start_size=start)


def resize_to(board: Board, session: ResizeSession, pointer: float) -> Optional[float]:
    """Apply the pointer delta to the note's size; returns the clamped size."""
    note = board.get(session.note_id)
    if note is None:
        return None
    size = session.start_size + (pointer - session.start_pointer)
    if session.axis == AXIS_WIDTH:
        note.width = clamp_width(size)
        return note.width
    note.height = clamp_height(size)
    return note.height


def finish_resize(board: Board, session: ResizeSession) -> None:
    # Height changes shift every card below in the stack.
    reflow(board)
