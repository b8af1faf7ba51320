# ui/canvas_view.py

from __future__ import annotations

import wx
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# project imports
# -----------------------------------------------------------------------------

from core.log import Log
from core.controller import BoardController
from ui.constants import CANVAS_BG_COLOR
from ui.mouse import (
    handle_left_down,
    handle_left_up,
    handle_left_dclick,
    handle_motion,
    handle_mousewheel,
)
from ui.paint import paint_background, paint_board
from ui.note_dialog import edit_note_text

# =============================================================================
class CanvasView(wx.Panel):
    """
    GraphicsContext-based infinite canvas of note cards. All board changes go
    through the BoardController; this class only paints and dispatches input.
    """

    def __init__(self, parent: wx.Window, controller: BoardController):
        super().__init__(parent, style=wx.BORDER_NONE | wx.WANTS_CHARS)

        self.controller = controller
        self.main_frame = wx.GetTopLevelParent(parent)

        # pan state: (screen x, screen y, viewport x, viewport y) at press
        self._pan_start: Optional[Tuple[float, float, float, float]] = None

        # appearance
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetDoubleBuffered(True)
        self.SetBackgroundColour(CANVAS_BG_COLOR)

        self._font = self.GetFont()
        self._bold = wx.Font(
            self._font.GetPointSize(),
            self._font.GetFamily(),
            wx.FONTSTYLE_NORMAL,
            wx.FONTWEIGHT_BOLD,
        )

        # event bindings
        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_LEFT_UP, self._on_left_up)
        self.Bind(wx.EVT_MOTION, self._on_motion)
        self.Bind(wx.EVT_LEFT_DCLICK, self._on_left_dclick)
        self.Bind(wx.EVT_MOUSEWHEEL, self._on_mousewheel)
        self.Bind(wx.EVT_MOUSE_CAPTURE_LOST, self._on_capture_lost)

    def set_controller(self, controller: BoardController) -> None:
        self.controller = controller
        self._pan_start = None
        self.release()
        self.Refresh(False)

    # ------------------------------------------------------------------ #
    # mouse capture
    # ------------------------------------------------------------------ #

    def capture(self) -> None:
        if not self.HasCapture():
            self.CaptureMouse()

    def release(self) -> None:
        if self.HasCapture():
            self.ReleaseMouse()

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        paint_background(self, gc)
        paint_board(self, gc)

    def _on_size(self, evt: wx.SizeEvent):
        self.Refresh(False)
        evt.Skip()

    # ------------------------------------------------------------------ #
    # event dispatch
    # ------------------------------------------------------------------ #

    def _on_left_down(self, evt):
        self.SetFocus()
        if handle_left_down(self, evt):
            return
        evt.Skip()

    def _on_left_up(self, evt):
        if handle_left_up(self, evt):
            return
        evt.Skip()

    def _on_motion(self, evt):
        if handle_motion(self, evt):
            return
        evt.Skip()

    def _on_left_dclick(self, evt):
        if handle_left_dclick(self, evt):
            return
        evt.Skip()

    def _on_mousewheel(self, evt):
        if handle_mousewheel(self, evt):
            return
        evt.Skip()

    def _on_capture_lost(self, evt):
        # Lost capture ends the gesture like a normal release.
        Log.debug("Mouse capture lost.", 2)
        handle_left_up(self, evt)

    # ------------------------------------------------------------------ #
    # public API
    # ------------------------------------------------------------------ #

    def edit_note(self, note_id: str) -> bool:
        note = self.controller.note(note_id)
        if note is None:
            return False
        result = edit_note_text(self, note)
        if result is None:
            return False
        term, definition = result
        self.controller.set_content(note_id, term, definition)
        self.Refresh(False)
        return True

    def SetStatusText(self, text: str):
        """Set status text in main frame."""
        Log.debug(text, 1)
        if self.main_frame:
            self.main_frame.SetStatusText(text)
