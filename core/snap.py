'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from core.board import Board
from core.note import Note
from core.stack_layout import StackColumn
from core.constants import (
    SNAP_X_THRESHOLD,
    SNAP_Y_ABOVE,
    SNAP_PADDING_EXPANDED,
    SNAP_PADDING_COLLAPSED,
    MARKER_OFFSET,
)

__all__ = ["SnapPreview", "snap_padding", "snap_zone", "resolve_snap_target"]


@dataclass(slots=True, frozen=True)
class SnapPreview:
    """
    Where a dragged note would land if released now.

    • root_id   – the stack it would join
    • index     – sibling position within that stack
    • marker_x  – left edge of the insertion marker line
    • marker_y  – canvas Y of the insertion marker line
    • distance  – score the target won with
    """
    root_id: str
    index: int
    marker_x: float
    marker_y: float
    distance: float


def snap_padding(root: Note) -> int:
    return SNAP_PADDING_COLLAPSED if root.collapsed else SNAP_PADDING_EXPANDED


def snap_zone(board: Board, root: Note, exclude_id: Optional[str] = None):
    """
    Vertical band (top, bottom) in which a dragged note's top edge is
    considered for this root. A collapsed stack only occupies its root card.
    """
    if root.collapsed:
        bottom = root.y + root.height
    else:
        bottom = StackColumn(board, root, exclude_id=exclude_id).bottom
    return root.y - SNAP_Y_ABOVE, bottom + snap_padding(root)


def resolve_snap_target(board: Board, dragged: Note) -> Optional[SnapPreview]:
    """
    Pick the root the dragged note would stack under. Pure: never mutates.

    A root qualifies when |root.x - x| <= SNAP_X_THRESHOLD and y is inside
    its snap zone. The qualifying root nearest to (x, y), measured against
    the root card's own top-left, wins. Equal distances go to the lowest id.
    """
    best: Optional[Note] = None
    best_dist = math.inf

    for root in sorted(board.roots(), key=lambda n: n.id):
        if root.id == dragged.id:
            continue
        x_dist = abs(root.x - dragged.x)
        if x_dist > SNAP_X_THRESHOLD:
            continue
        top, bottom = snap_zone(board, root, exclude_id=dragged.id)
        if not (top <= dragged.y <= bottom):
            continue
        dist = math.hypot(x_dist, abs(dragged.y - root.y))
        if dist < best_dist:
            best, best_dist = root, dist

    if best is None:
        return None

    column = StackColumn(board, best, exclude_id=dragged.id)
    if best.collapsed:
        # Hidden children: append, marker just under the root card.
        index = len(column)
        marker_y = best.y + best.height + MARKER_OFFSET
    else:
        index = column.insertion_index(dragged.y)
        marker_y = column.marker_y(index)

    return SnapPreview(
        root_id=best.id,
        index=index,
        marker_x=best.x,
        marker_y=marker_y,
        distance=best_dist,
    )
