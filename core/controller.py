'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from core.log import Log
from core.board import Board
from core.note import Note, join_content, clamp_split_ratio
from core.snap import SnapPreview
from core.review import StackReview, ShuffleCard
from core.stack_layout import reflow, organize
from core.interaction import (
    DragSession,
    ResizeSession,
    begin_drag,
    drag_to,
    finish_drag,
    begin_resize,
    resize_to,
    finish_resize,
)
from core.hierarchy import (
    OutlineEntry,
    TableRow,
    export_outline,
    import_outline,
    outline_from_sections,
    export_table,
    import_table,
)
from core.markdown_io import to_markdown, parse_markdown
from core.csv_io import to_csv, parse_csv

__all__ = ["BoardController", "PersistHook"]

# Called with (notes, viewport) after every committed mutation.
PersistHook = Callable[[List[Note], Tuple[float, float]], None]


class BoardController:
    """
    Centralized API for every board operation. Owns the board, the transient
    pointer session and the per-stack review state, and runs reflow plus the
    persistence hook after each committed change. Renderers call in here and
    redraw from board.notes(); nothing else mutates the board.

    Unknown note ids are ignored (the call returns False/None).
    """

    def __init__(self, board: Optional[Board] = None, persist: Optional[PersistHook] = None,
                 rng: Optional[random.Random] = None):
        self.board = board if board is not None else Board()
        self.review = StackReview(rng)
        self._persist = persist
        self._drag: Optional[DragSession] = None
        self._resize: Optional[ResizeSession] = None
        reflow(self.board)

    def set_persist_hook(self, persist: Optional[PersistHook]) -> None:
        self._persist = persist

    def _commit(self) -> None:
        if self._persist is None:
            return
        try:
            self._persist(self.board.notes(), self.board.viewport)
        except Exception as e:
            # Saving is best effort; the model is already consistent.
            Log.debug(f"Persistence hook failed: {e}", 0)

    # ------------------------------------------------------------------ #
    # notes
    # ------------------------------------------------------------------ #

    def is_empty(self) -> bool:
        return self.board.is_empty()

    def note(self, note_id: str) -> Optional[Note]:
        return self.board.get(note_id)

    def create_note(self, position: Tuple[float, float], content: str = "") -> Note:
        note = self.board.new_note(position[0], position[1], content)
        Log.debug(f"Created note {note.id} at {position}.", 2)
        self._commit()
        return note

    def delete_note(self, note_id: str) -> bool:
        note = self.board.remove(note_id)
        if note is None:
            return False
        self.review.forget(note_id)
        if note.parent_id is not None:
            # The drawn card may have been the one just deleted.
            card = self.review.card(note.parent_id)
            if card.child_id == note_id:
                self.review.forget(note.parent_id)
        if self._drag is not None and self._drag.note_id == note_id:
            self._drag = None
        reflow(self.board)
        Log.debug(f"Deleted note {note_id}.", 2)
        self._commit()
        return True

    def set_content(self, note_id: str, term: str, definition: str = "") -> bool:
        """Replace a note's text. Roots only keep their term."""
        note = self.board.get(note_id)
        if note is None:
            return False
        if note.is_root:
            note.content = term or ""
        else:
            note.content = join_content(term, definition)
        self._commit()
        return True

    def set_split_ratio(self, note_id: str, ratio: float) -> bool:
        note = self.board.get(note_id)
        if note is None:
            return False
        note.split_ratio = clamp_split_ratio(ratio)
        self._commit()
        return True

    def bring_to_front(self, note_id: str) -> bool:
        return self.board.bring_to_front(note_id)

    # ------------------------------------------------------------------ #
    # dragging
    # ------------------------------------------------------------------ #

    @property
    def dragging_id(self) -> Optional[str]:
        return self._drag.note_id if self._drag else None

    @property
    def preview(self) -> Optional[SnapPreview]:
        return self._drag.preview if self._drag else None

    def start_drag(self, note_id: str, pointer: Tuple[float, float]) -> bool:
        self._resize = None
        self._drag = begin_drag(self.board, note_id, pointer[0], pointer[1])
        return self._drag is not None

    def update_drag(self, pointer: Tuple[float, float]) -> Optional[SnapPreview]:
        if self._drag is None:
            return None
        return drag_to(self.board, self._drag, pointer[0], pointer[1])

    def end_drag(self) -> bool:
        """
        Release the dragged note. Also fine without any prior update_drag
        (lost pointer capture): the note just stays where it is.
        """
        session, self._drag = self._drag, None
        if session is None:
            return False
        attached = finish_drag(self.board, session)
        self._commit()
        return attached

    # ------------------------------------------------------------------ #
    # resizing
    # ------------------------------------------------------------------ #

    @property
    def resize_axis(self) -> Optional[str]:
        return self._resize.axis if self._resize else None

    def start_resize(self, note_id: str, axis: str, pointer: float) -> bool:
        self._drag = None
        self._resize = begin_resize(self.board, note_id, axis, pointer)
        return self._resize is not None

    def update_resize(self, pointer: float) -> Optional[float]:
        if self._resize is None:
            return None
        return resize_to(self.board, self._resize, pointer)

    def end_resize(self) -> bool:
        session, self._resize = self._resize, None
        if session is None:
            return False
        finish_resize(self.board, session)
        self._commit()
        return True

    # ------------------------------------------------------------------ #
    # roots, collapse, shuffle
    # ------------------------------------------------------------------ #

    def toggle_root(self, note_id: str) -> bool:
        note = self.board.get(note_id)
        if note is None:
            return False
        if not self.board.set_root(note_id, not note.is_root):
            return False
        if not note.is_root:
            self.review.forget(note_id)
        reflow(self.board)
        self._commit()
        return True

    def toggle_collapse(self, note_id: str) -> bool:
        if not self.review.toggle_collapse(self.board, note_id):
            return False
        reflow(self.board)
        self._commit()
        return True

    def expand(self, note_id: str) -> bool:
        if not self.review.expand(self.board, note_id):
            return False
        self._commit()
        return True

    def trigger_shuffle(self, note_id: str) -> Optional[ShuffleCard]:
        card = self.review.trigger_shuffle(self.board, note_id)
        if card is not None:
            self._commit()
        return card

    def shuffle_card(self, note_id: str) -> ShuffleCard:
        return self.review.card(note_id)

    # ------------------------------------------------------------------ #
    # viewport
    # ------------------------------------------------------------------ #

    @property
    def viewport(self) -> Tuple[float, float]:
        return self.board.viewport

    def set_viewport(self, x: float, y: float, commit: bool = True) -> None:
        self.board.viewport = (float(x), float(y))
        if commit:
            self._commit()

    def pan_by(self, dx: float, dy: float, commit: bool = True) -> None:
        vx, vy = self.board.viewport
        self.set_viewport(vx + dx, vy + dy, commit=commit)

    def screen_to_canvas(self, sx: float, sy: float) -> Tuple[float, float]:
        vx, vy = self.board.viewport
        return sx - vx, sy - vy

    def canvas_to_screen(self, cx: float, cy: float) -> Tuple[float, float]:
        vx, vy = self.board.viewport
        return cx + vx, cy + vy

    # ------------------------------------------------------------------ #
    # whole-board operations
    # ------------------------------------------------------------------ #

    def organize(self) -> None:
        if self.board.is_empty():
            return
        organize(self.board)
        self._commit()

    def export_hierarchy(self) -> List[OutlineEntry]:
        return export_outline(self.board)

    def import_hierarchy(self, entries: List[OutlineEntry], replace: bool = False) -> List[Note]:
        if replace:
            self._reset_transient()
        created = import_outline(self.board, entries, replace=replace)
        self._commit()
        return created

    def export_table(self) -> List[TableRow]:
        return export_table(self.board)

    def import_table(self, rows: List[TableRow], replace: bool = False) -> List[Note]:
        if replace:
            self._reset_transient()
        created = import_table(self.board, rows, replace=replace)
        self._commit()
        return created

    def export_markdown(self) -> str:
        return to_markdown(self.export_hierarchy())

    def import_markdown(self, text: str, replace: bool = False) -> List[Note]:
        if not (text or "").strip():
            return []
        return self.import_hierarchy(outline_from_sections(parse_markdown(text)), replace=replace)

    def export_csv(self) -> str:
        return to_csv(self.export_table())

    def import_csv(self, text: str, replace: bool = False) -> List[Note]:
        rows = parse_csv(text)
        if not rows:
            return []
        return self.import_table(rows, replace=replace)

    def _reset_transient(self) -> None:
        self._drag = None
        self._resize = None
        self.review.reset()
