################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the main window's status bar: a message field, a board
summary field, and a right-click log viewer.
'''
################################################################################################

import wx

from core.log import Log

################################################################################################
class LogList(wx.VListBox):
    DATE_W = 20
    LINE_NUM_W = 7

    def __init__(self, parent, size):
        super().__init__(parent, style=wx.SIMPLE_BORDER, size=size)
        self.font = wx.Font(wx.FontInfo(9).FaceName("Monospace"))
        dc = wx.MemoryDC()
        dc.SetFont(self.font)
        self.char_w, self.char_h = dc.GetTextExtent("X")
        self.SetBackgroundColour((0, 0, 0))
        self.SetItemCount(Log.count())
        self.ScrollToRow(max(0, Log.count() - 1))

    def OnMeasureItem(self, index):
        _timestamp, text = Log.get(index)
        return max(1, text.count("\n") + 1) * self.char_h

    def OnDrawItem(self, dc, rect, index):
        timestamp, text = Log.get(index)
        dc.SetFont(self.font)
        dc.SetTextForeground((255, 255, 0))
        dc.DrawText("%d" % index, rect[0], rect[1])
        dc.SetTextForeground((255, 0, 255))
        dc.DrawText(timestamp, rect[0] + self.LINE_NUM_W * self.char_w, rect[1])
        dc.SetTextForeground((128, 192, 128))
        dc.DrawText(text.replace("\t", "    "),
                    rect[0] + (self.LINE_NUM_W + self.DATE_W) * self.char_w, rect[1])

    def OnDrawBackground(self, dc, rect, index):
        dc.SetPen(wx.Pen((0, 0, 100)))
        dc.SetBrush(wx.Brush((64, 0, 64) if self.IsSelected(index) else (0, 0, 0)))
        dc.DrawRectangle(rect[0], rect[1], rect[2], rect[3])

################################################################################################
class LogPopup(wx.PopupTransientWindow):
    WIN_HEIGHT = 300

    def __init__(self, parent):
        super().__init__(parent, wx.SIMPLE_BORDER)
        box = wx.BoxSizer(wx.VERTICAL)
        box.Add(LogList(self, (parent.Size[0], self.WIN_HEIGHT)), 1, wx.EXPAND)
        self.SetSizerAndFit(box)

    def OnDismiss(self):
        self.Parent.popup = None

################################################################################################
class StatusBar(wx.StatusBar):
    """Field 0: last message. Field 1: note / stack counts."""

    def __init__(self, parent):
        super().__init__(parent)
        self.SetFieldsCount(2)
        self.SetStatusWidths([-1, 220])
        self.popup = None
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.debug("Create StatusBar", 2)

    def set_summary(self, notes: int, stacks: int) -> None:
        self.SetStatusText(f"{notes} note(s), {stacks} stack(s)", 1)

    def OnRightDown(self, event):
        menu = wx.Menu()
        item_show = menu.Append(wx.ID_ANY, "Show Log")
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        menu.AppendSeparator()
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")
        self.Bind(wx.EVT_MENU, self.OnShowLog, item_show)
        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)
        self.PopupMenu(menu)
        menu.Destroy()

    def OnShowLog(self, event=None):
        if self.popup is not None:
            self.popup.Dismiss()
        self.popup = LogPopup(self)
        pos = self.ClientToScreen((0, 0))
        self.popup.Position((pos[0], pos[1] - LogPopup.WIN_HEIGHT), (0, 0))
        self.popup.Popup()

    def OnSaveLogToFile(self, event=None):
        with wx.FileDialog(
            self,
            "Save Log to file",
            wildcard="Log files (*.log)|*.log|Text files (*.txt)|*.txt|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
        ) as dlg:
            if dlg.ShowModal() == wx.ID_CANCEL:
                return
            path = dlg.GetPath()
        Log.write_to_file(path)
        self.SetStatusText(f"Log saved to: {path}")

    def OnClearLog(self, event=None):
        if wx.MessageBox("Clear the entire log?", "Clear Log",
                         wx.YES_NO | wx.ICON_QUESTION) == wx.YES:
            Log.clear()
            self.SetStatusText("Log cleared")

################################################################################################
