'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional

from core.log import Log
from core.board import Board
from core.note import Note
from core.constants import (
    STACK_GAP,
    MARKER_OFFSET,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    IMPORT_COLUMNS,
    ORGANIZE_ORIGIN_X,
    ORGANIZE_ORIGIN_Y,
    ORGANIZE_COL_PITCH,
    ORGANIZE_ROOT_ROW_GAP,
    ORGANIZE_ROW_GAP,
)

__all__ = [
    "StackColumn",
    "reflow",
    "stack_bottom",
    "insertion_index",
    "organize",
]


class StackColumn:
    """
    Per-root layout of a stack as a vertical column.

    - children[i] is the i-th child in stack_order.
    - offsets[i] == canvas Y of the top of children[i].
    - bottom == canvas Y just below the last card (or the root).

    Child i sits at root.bottom + sum(heights of children 0..i-1) + GAP*(i+1).
    """

    __slots__ = ("root", "children", "offsets", "bottom")

    def __init__(self, board: Board, root: Note, exclude_id: Optional[str] = None) -> None:
        self.root = root
        self.children: List[Note] = board.children(root.id, exclude_id=exclude_id)
        self.offsets: List[float] = []

        acc = root.y + root.height
        for child in self.children:
            acc += STACK_GAP
            self.offsets.append(acc)
            acc += child.height
        self.bottom = acc

    def __len__(self) -> int:
        return len(self.children)

    def child_top(self, i: int) -> float:
        if 0 <= i < len(self.offsets):
            return self.offsets[i]
        return self.bottom

    def insertion_index(self, y: float) -> int:
        """
        Sibling position a card with top edge `y` would take.

        Above the first child → 0. Otherwise the first gap whose midpoint
        (between one card's bottom and the next card's top) lies below y
        decides; past the last gap → append. Exact midpoint goes before
        the later card.
        """
        count = len(self.children)
        if count == 0:
            return 0
        if y < self.offsets[0]:
            return 0
        for i in range(count - 1):
            mid = (self.offsets[i] + self.children[i].height + self.offsets[i + 1]) / 2
            if y < mid:
                return i + 1
        return count

    def marker_y(self, index: int) -> float:
        """Y of the insertion marker line drawn for `index`."""
        if index <= 0:
            return self.root.y + self.root.height + MARKER_OFFSET
        acc = self.root.y + self.root.height
        for child in self.children[:index]:
            acc += child.height + STACK_GAP
        return acc


def stack_bottom(board: Board, root: Note) -> float:
    return StackColumn(board, root).bottom


def insertion_index(board: Board, root: Note, y: float, exclude_id: Optional[str] = None) -> int:
    return StackColumn(board, root, exclude_id=exclude_id).insertion_index(y)


def reflow(board: Board, dragging_id: Optional[str] = None) -> None:
    """
    Lay every stack out as a column under its root. Safe to call after any
    mutation. Child order values are compacted to 0..n-1 on the way, and
    the note under the pointer (if any) is left where the pointer put it.
    """
    moved = 0
    for root in board.roots():
        board.compact(root.id)
        column = StackColumn(board, root, exclude_id=dragging_id)
        for child, top in zip(column.children, column.offsets):
            if child.x != root.x or child.y != top:
                moved += 1
            child.x = root.x
            child.y = top
    if moved:
        Log.debug(f"Reflow moved {moved} stacked note(s).", 3)


def organize(board: Board) -> None:
    """
    Tidy the whole board: roots in one row (collapsing any with children),
    standalone notes on a grid underneath, all widths reset.
    """
    groups = board.top_level()
    roots = [n for n in groups if n.is_root]
    loose = [n for n in groups if not n.is_root]

    for note in board:
        note.width = DEFAULT_WIDTH

    for gi, root in enumerate(roots):
        root.x = ORGANIZE_ORIGIN_X + gi * ORGANIZE_COL_PITCH
        root.y = ORGANIZE_ORIGIN_Y
        if board.has_children(root.id):
            root.collapsed = True

    start_y = ORGANIZE_ORIGIN_Y + (DEFAULT_HEIGHT + ORGANIZE_ROOT_ROW_GAP if roots else 0)
    for si, note in enumerate(loose):
        col = si % IMPORT_COLUMNS
        row = si // IMPORT_COLUMNS
        note.x = ORGANIZE_ORIGIN_X + col * ORGANIZE_COL_PITCH
        note.y = start_y + row * (DEFAULT_HEIGHT + ORGANIZE_ROW_GAP)

    reflow(board)
    board.viewport = (0.0, 0.0)
    Log.debug(f"Organized {len(roots)} stack(s) and {len(loose)} loose note(s).", 1)
