# ui/mouse.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

from __future__ import annotations

import wx

from core.log import Log
from core.interaction import AXIS_WIDTH, AXIS_HEIGHT
from ui.hit_test import (
    hit_test,
    ZONE_DELETE,
    ZONE_SHUFFLE,
    ZONE_PIN,
    ZONE_HEADER,
    ZONE_INDICATOR,
    ZONE_RESIZE_W,
    ZONE_RESIZE_H,
    ZONE_BODY,
)


def _canvas_pos(view, evt: wx.MouseEvent):
    pos = evt.GetPosition()
    return view.controller.screen_to_canvas(pos.x, pos.y)

# ---------------------------------------------------------------------------
# event handlers
# ---------------------------------------------------------------------------

def handle_left_down(view, evt: wx.MouseEvent) -> bool:
    """
    • empty canvas → start panning
    • header buttons → delete / shuffle / pin
    • collapsed indicator → expand the stack
    • right / bottom edge → resize width / height
    • header → pick the note up
    """
    ctl = view.controller
    cx, cy = _canvas_pos(view, evt)
    note, zone = hit_test(ctl.board, cx, cy)

    # ---------- Empty space, pan the canvas ----------
    if note is None:
        pos = evt.GetPosition()
        vx, vy = ctl.viewport
        view._pan_start = (pos.x, pos.y, vx, vy)
        view.SetCursor(wx.Cursor(wx.CURSOR_HAND))
        view.capture()
        return True

    if zone == ZONE_DELETE:
        ctl.delete_note(note.id)
        view.SetStatusText("Note deleted")
    elif zone == ZONE_SHUFFLE:
        card = ctl.trigger_shuffle(note.id)
        if card is None:
            view.SetStatusText("Shuffle needs a pinned note with stacked notes")
    elif zone == ZONE_PIN:
        if not ctl.toggle_root(note.id):
            view.SetStatusText("Can't pin a note with a definition or unpin a stack that has notes")
    elif zone == ZONE_INDICATOR:
        ctl.expand(note.id)
    elif zone == ZONE_RESIZE_W:
        ctl.start_resize(note.id, AXIS_WIDTH, cx)
        view.capture()
    elif zone == ZONE_RESIZE_H:
        ctl.start_resize(note.id, AXIS_HEIGHT, cy)
        view.capture()
    elif zone == ZONE_HEADER:
        ctl.start_drag(note.id, (cx, cy))
        view.SetCursor(wx.Cursor(wx.CURSOR_SIZING))
        view.capture()
    else:
        ctl.bring_to_front(note.id)

    view.Refresh(False)
    return True


def handle_motion(view, evt: wx.MouseEvent) -> bool:
    ctl = view.controller

    if view._pan_start is not None:
        pos = evt.GetPosition()
        sx, sy, vx, vy = view._pan_start
        ctl.set_viewport(vx + pos.x - sx, vy + pos.y - sy, commit=False)
        view.Refresh(False)
        return True

    if not evt.LeftIsDown():
        return False

    cx, cy = _canvas_pos(view, evt)
    axis = ctl.resize_axis
    if axis is not None:
        ctl.update_resize(cx if axis == AXIS_WIDTH else cy)
        view.Refresh(False)
        return True

    if ctl.dragging_id is not None:
        preview = ctl.update_drag((cx, cy))
        if preview is not None:
            view.SetStatusText(f"Drop to stack at position {preview.index + 1}")
        else:
            view.SetStatusText("")
        view.Refresh(False)
        return True

    return False


def handle_left_up(view, evt) -> bool:
    """Also used for lost mouse capture; a release with no prior move is a normal drop."""
    ctl = view.controller
    handled = False

    if view._pan_start is not None:
        view._pan_start = None
        ctl.set_viewport(*ctl.viewport)
        handled = True
    elif ctl.resize_axis is not None:
        ctl.end_resize()
        handled = True
    elif ctl.dragging_id is not None:
        note_id = ctl.dragging_id
        if ctl.end_drag():
            Log.debug(f"Dropped {note_id} into a stack.", 1)
            view.SetStatusText("Note stacked")
        handled = True

    view.release()
    view.SetCursor(wx.Cursor(wx.CURSOR_ARROW))
    if handled:
        view.Refresh(False)
    return handled


def handle_left_dclick(view, evt: wx.MouseEvent) -> bool:
    ctl = view.controller
    cx, cy = _canvas_pos(view, evt)
    note, zone = hit_test(ctl.board, cx, cy)

    # ---------- Empty space, new note ----------
    if note is None:
        ctl.create_note((cx, cy))
        view.Refresh(False)
        return True

    # ---------- Header double-click, collapse / expand the stack ----------
    if zone == ZONE_HEADER:
        if ctl.toggle_collapse(note.id):
            view.Refresh(False)
        return True

    # ---------- Body double-click, edit text ----------
    if zone == ZONE_BODY:
        view.edit_note(note.id)
        return True

    return False


def handle_mousewheel(view, evt: wx.MouseEvent) -> bool:
    """Pan ~48 px per wheel notch; shift pans sideways."""
    rotation = evt.GetWheelRotation()
    delta = evt.GetWheelDelta() or 120
    pixels = int(rotation / float(delta) * 48)

    if evt.ShiftDown():
        view.controller.pan_by(pixels, 0)
    else:
        view.controller.pan_by(0, pixels)
    view.Refresh(False)
    return True
