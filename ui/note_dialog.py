'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional, Tuple

import wx

from core.note import Note


class NoteDialog(wx.Dialog):
    """Edit a note's term and definition. Pinned notes only have a title."""

    def __init__(self, parent, note: Note):
        title = "Edit Pin" if note.is_root else "Edit Note"
        super().__init__(parent, title=title,
                         style=wx.DEFAULT_DIALOG_STYLE | wx.RESIZE_BORDER)
        self._is_root = note.is_root

        self._create_controls(note)
        self._create_layout()

        self.SetMinSize(wx.Size(360, 240 if note.is_root else 320))
        self.Fit()
        self.Center()
        self.term_input.SetFocus()

    def _create_controls(self, note: Note):
        self.term_label = wx.StaticText(self, label="Title:" if self._is_root else "Term:")
        self.term_input = wx.TextCtrl(self, value=note.term, style=wx.TE_MULTILINE)

        self.def_label = wx.StaticText(self, label="Definition:")
        self.def_input = wx.TextCtrl(self, value=note.definition, style=wx.TE_MULTILINE)
        if self._is_root:
            self.def_label.Hide()
            self.def_input.Hide()

        self.ok_button = wx.Button(self, wx.ID_OK, "OK")
        self.cancel_button = wx.Button(self, wx.ID_CANCEL, "Cancel")
        self.ok_button.SetDefault()

    def _create_layout(self):
        main_sizer = wx.BoxSizer(wx.VERTICAL)
        main_sizer.Add(self.term_label, 0, wx.ALL, 5)
        main_sizer.Add(self.term_input, 1, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 5)
        main_sizer.Add(self.def_label, 0, wx.ALL, 5)
        main_sizer.Add(self.def_input, 2, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 5)

        button_sizer = wx.BoxSizer(wx.HORIZONTAL)
        button_sizer.AddStretchSpacer(1)
        button_sizer.Add(self.ok_button, 0, wx.RIGHT, 5)
        button_sizer.Add(self.cancel_button, 0)
        main_sizer.Add(button_sizer, 0, wx.EXPAND | wx.ALL, 5)

        self.SetSizer(main_sizer)

    def values(self) -> Tuple[str, str]:
        definition = "" if self._is_root else self.def_input.GetValue()
        return self.term_input.GetValue(), definition


def edit_note_text(parent, note: Note) -> Optional[Tuple[str, str]]:
    """Show the editor modally; (term, definition) on OK, None on cancel."""
    with NoteDialog(parent, note) as dlg:
        if dlg.ShowModal() != wx.ID_OK:
            return None
        return dlg.values()
