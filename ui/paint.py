'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List

import wx

from core.note import Note
from core.snap import SnapPreview
from core.review import ShuffleCard
from ui.hit_test import paint_order, button_rect
from ui.constants import (
    HEADER_H,
    PADDING,
    CORNER_R,
    INDICATOR_H,
    MARKER_W,
    MARKER_H,
    CANVAS_BG_COLOR,
    NOTE_COLOR,
    ROOT_COLOR,
    STACKED_COLOR,
    HEADER_COLOR,
    BORDER_COLOR,
    SNAP_BORDER_COLOR,
    MARKER_COLOR,
    TEXT_COLOR,
    HINT_COLOR,
    OVERLAY_COLOR,
)

def paint_background(view, gc: wx.GraphicsContext) -> None:
    w, h = view.GetClientSize()
    gc.SetBrush(wx.Brush(CANVAS_BG_COLOR))
    gc.SetPen(wx.Pen(CANVAS_BG_COLOR))
    gc.DrawRectangle(0, 0, w, h)

    if view.controller.is_empty():
        gc.SetFont(view._font, HINT_COLOR)
        msg = "Double-click anywhere to add a note"
        tw, th = gc.GetTextExtent(msg)
        gc.DrawText(msg, (w - tw) / 2, (h - th) / 2)


def _wrap(gc: wx.GraphicsContext, text: str, width: float) -> List[str]:
    """Greedy word wrap against the current font."""
    lines: List[str] = []
    for para in (text or "").split("\n"):
        line = ""
        for word in para.split(" "):
            trial = f"{line} {word}" if line else word
            if line and gc.GetTextExtent(trial)[0] > width:
                lines.append(line)
                line = word
            else:
                line = trial
        lines.append(line)
    return lines


def _draw_text_block(gc, text: str, x: float, y: float, w: float, h: float) -> None:
    _tw, lh = gc.GetTextExtent("Ag")
    cy = y
    for line in _wrap(gc, text, w):
        if cy + lh > y + h:
            break
        gc.DrawText(line, x, cy)
        cy += lh


def paint_note(view, gc: wx.GraphicsContext, note: Note, snapping: bool) -> None:
    board = view.controller.board
    x, y = view.controller.canvas_to_screen(note.x, note.y)
    w, h = note.width, note.height

    if note.is_root:
        fill = ROOT_COLOR
    elif note.parent_id is not None:
        fill = STACKED_COLOR
    else:
        fill = NOTE_COLOR

    gc.SetBrush(wx.Brush(fill))
    gc.SetPen(wx.Pen(SNAP_BORDER_COLOR if snapping else BORDER_COLOR, 2 if snapping else 1))
    gc.DrawRoundedRectangle(x, y, w, h, CORNER_R)

    # Header strip and buttons: pin, shuffle, delete (right to left)
    gc.SetBrush(wx.Brush(HEADER_COLOR))
    gc.SetPen(wx.TRANSPARENT_PEN)
    gc.DrawRectangle(x + 1, y + 1, w - 2, HEADER_H - 1)

    gc.SetFont(view._font, TEXT_COLOR)
    for slot, glyph in enumerate(("✕", "⟳", "●" if note.is_root else "○")):
        bx, by, _bw, _bh = button_rect(note, slot)
        gc.DrawText(glyph, bx + (x - note.x) + 4, by + (y - note.y) + 2)
    gc.SetFont(view._bold if note.is_root else view._font, HINT_COLOR)
    gc.DrawText("Pin" if note.is_root else "Sticky", x + PADDING, y + 4)

    body_y = y + HEADER_H + PADDING
    body_h = h - HEADER_H - 2 * PADDING
    inner_w = w - 2 * PADDING

    gc.SetFont(view._bold if note.is_root else view._font, TEXT_COLOR)
    if note.is_root:
        _draw_text_block(gc, note.term, x + PADDING, body_y, inner_w, body_h)
    else:
        term_h = body_h * note.split_ratio
        _draw_text_block(gc, note.term, x + PADDING, body_y, inner_w, term_h)
        gc.SetPen(wx.Pen(BORDER_COLOR, 1, wx.PENSTYLE_SHORT_DASH))
        gc.StrokeLine(x + PADDING, body_y + term_h, x + w - PADDING, body_y + term_h)
        gc.SetFont(view._font, TEXT_COLOR)
        _draw_text_block(gc, note.definition, x + PADDING, body_y + term_h + 2,
                         inner_w, body_h - term_h - 2)

    if note.collapsed:
        count = board.child_count(note.id)
        gc.SetFont(view._font, HINT_COLOR)
        gc.DrawText(f"▼ {count} collapsed", x + PADDING, y + h - INDICATOR_H)


def paint_shuffle(view, gc: wx.GraphicsContext, note: Note, card: ShuffleCard) -> None:
    """Flashcard overlay over the lower half of a root card."""
    x, y = view.controller.canvas_to_screen(note.x, note.y)
    top = y + note.height / 2
    h = note.height / 2 - INDICATOR_H
    gc.SetBrush(wx.Brush(OVERLAY_COLOR))
    gc.SetPen(wx.Pen(MARKER_COLOR))
    gc.DrawRoundedRectangle(x + 2, top, note.width - 4, h, CORNER_R)

    gc.SetFont(view._bold, TEXT_COLOR)
    text = card.term or "(Empty)"
    if card.revealed:
        text += "\n" + (card.definition or "(No definition)")
    _draw_text_block(gc, text, x + PADDING, top + 2, note.width - 2 * PADDING, h - 4)


def paint_marker(view, gc: wx.GraphicsContext, preview: SnapPreview) -> None:
    x, y = view.controller.canvas_to_screen(preview.marker_x, preview.marker_y)
    gc.SetBrush(wx.Brush(MARKER_COLOR))
    gc.SetPen(wx.TRANSPARENT_PEN)
    gc.DrawRoundedRectangle(x, y, MARKER_W, MARKER_H, 2)


def paint_board(view, gc: wx.GraphicsContext) -> None:
    ctl = view.controller
    preview = ctl.preview
    for note in paint_order(ctl.board):
        paint_note(view, gc, note, snapping=(preview is not None and note.id == ctl.dragging_id))
        if note.is_root:
            card = ctl.shuffle_card(note.id)
            if card.active:
                paint_shuffle(view, gc, note, card)
    if preview is not None:
        paint_marker(view, gc, preview)
