'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import dataclasses
from pathlib import Path
from typing import List, Tuple

import wx

from core.log import Log
from core.note import Note
from core.board import Board
from core.io_worker import SaveWorker
from core.storage import load_board, save_board, default_board_path
from core.controller import BoardController
from ui.canvas_view import CanvasView
from ui.statusbar import StatusBar
from ui.file_dialogs import (
    MARKDOWN_WILDCARD,
    CSV_WILDCARD,
    choose_import_file,
    choose_export_file,
    ask_replace,
)


class MainFrame(wx.Frame):
    """Main application frame for StackNotes."""

    def __init__(self, board_path=None, verbosity: int = 0):
        super().__init__(None, title="StackNotes", size=(1100, 760))
        self.SetMinSize((640, 480))
        Log.set_verbosity(verbosity)

        self.io = SaveWorker()
        self.board_path = Path(board_path).expanduser() if board_path else default_board_path()
        self._dirty = False

        self._build_menu()
        self.statusbar = StatusBar(self)
        self.SetStatusBar(self.statusbar)

        self.controller = BoardController(self._load(), persist=self._persist)
        self.view = CanvasView(self, self.controller)
        self._update_summary()
        self.SetStatusText("Ready.")

        self.Bind(wx.EVT_CLOSE, self.Close)
        self.SetCursor(wx.Cursor(wx.CURSOR_ARROW))

    # ---------------- Board load / save ----------------

    def _load(self) -> Board:
        try:
            return load_board(self.board_path)
        except ValueError as e:
            # Keep the unreadable file; a fresh board saves over it only after an edit.
            Log.debug(f"Could not load {self.board_path}: {e}", 0)
            wx.MessageBox(f"Could not load the board:\n\n{e}\n\nStarting with an empty board.",
                          "Load Failed", wx.OK | wx.ICON_WARNING)
            return Board()

    def _persist(self, notes: List[Note], viewport: Tuple[float, float]) -> None:
        """Snapshot the notes on the GUI thread; the worker writes the copy."""
        self._dirty = True
        snapshot = [dataclasses.replace(n) for n in notes]
        self.io.submit(
            save_board,
            self.board_path,
            snapshot,
            viewport,
            self.controller.board.highest_z,
            callback=self._on_saved,
        )
        self._update_summary()

    def _on_saved(self, result, error):
        if error:
            err, tb = error
            Log.debug(tb, 0)
            self.SetStatusText(f"Save failed: {err}")

    def _update_summary(self):
        board = self.controller.board
        self.statusbar.set_summary(len(board), len(board.roots()))

    # ---------------- UI scaffolding ----------------

    def _build_menu(self):
        mb = wx.MenuBar()

        # File menu
        m_file = wx.Menu()
        m_import_md = m_file.Append(wx.ID_ANY, "Import &Markdown...")
        m_import_csv = m_file.Append(wx.ID_ANY, "Import &CSV...")
        m_file.AppendSeparator()
        m_export_md = m_file.Append(wx.ID_ANY, "Export Mar&kdown...")
        m_export_csv = m_file.Append(wx.ID_ANY, "Export C&SV...")
        m_file.AppendSeparator()
        m_quit = m_file.Append(wx.ID_EXIT, "E&xit")
        self.Bind(wx.EVT_MENU, self.on_import_markdown, m_import_md)
        self.Bind(wx.EVT_MENU, self.on_import_csv, m_import_csv)
        self.Bind(wx.EVT_MENU, self.on_export_markdown, m_export_md)
        self.Bind(wx.EVT_MENU, self.on_export_csv, m_export_csv)
        self.Bind(wx.EVT_MENU, self.on_quit, m_quit)
        mb.Append(m_file, "&File")

        # Board menu
        m_board = wx.Menu()
        m_new = m_board.Append(wx.ID_NEW, "&New Note\tCtrl-N")
        m_organize = m_board.Append(wx.ID_ANY, "&Organize\tCtrl-Shift-O")
        m_home = m_board.Append(wx.ID_ANY, "Reset &View\tCtrl-0")
        self.Bind(wx.EVT_MENU, self.on_action_new_note, m_new)
        self.Bind(wx.EVT_MENU, self.on_action_organize, m_organize)
        self.Bind(wx.EVT_MENU, self.on_action_reset_view, m_home)
        mb.Append(m_board, "&Board")

        self.SetMenuBar(mb)

    # ---------------- Board actions ----------------

    def on_action_new_note(self, evt=None):
        # Drop the note near the top-left of what is on screen.
        cx, cy = self.controller.screen_to_canvas(40, 40)
        note = self.controller.create_note((cx, cy))
        self.view.Refresh(False)
        self.view.edit_note(note.id)

    def on_action_organize(self, evt=None):
        self.controller.organize()
        self.view.Refresh(False)
        self.SetStatusText("Board organized")

    def on_action_reset_view(self, evt=None):
        self.controller.set_viewport(0, 0)
        self.view.Refresh(False)

    # ---------------- Import / export ----------------

    def _read_import(self, wildcard: str, message: str):
        path = choose_import_file(self, wildcard, message=message)
        if not path:
            return None, None
        replace = ask_replace(self)
        if replace is None:
            return None, None
        try:
            return Path(path).read_text(encoding="utf-8"), replace
        except (OSError, UnicodeDecodeError) as e:
            wx.MessageBox(f"Could not read {path}:\n\n{e}", "Import Failed", wx.ICON_ERROR)
            return None, None

    def _write_export(self, wildcard: str, default_name: str, text: str):
        path = choose_export_file(self, wildcard, default_name)
        if not path:
            return
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as e:
            wx.MessageBox(f"Could not write {path}:\n\n{e}", "Export Failed", wx.ICON_ERROR)
            return
        self.SetStatusText(f"Exported to {path}")

    def _after_import(self, created):
        self.view.Refresh(False)
        self._update_summary()
        self.SetStatusText(f"Imported {len(created)} note(s)")

    def on_import_markdown(self, evt=None):
        text, replace = self._read_import(MARKDOWN_WILDCARD, "Import Markdown")
        if text is None:
            return
        self._after_import(self.controller.import_markdown(text, replace=replace))

    def on_import_csv(self, evt=None):
        text, replace = self._read_import(CSV_WILDCARD, "Import CSV")
        if text is None:
            return
        created = self.controller.import_csv(text, replace=replace)
        if not created:
            wx.MessageBox("The file needs a header row and at least one data row.",
                          "Import CSV", wx.OK | wx.ICON_INFORMATION)
            return
        self._after_import(created)

    def on_export_markdown(self, evt=None):
        self._write_export(MARKDOWN_WILDCARD, "board.md", self.controller.export_markdown())

    def on_export_csv(self, evt=None):
        self._write_export(CSV_WILDCARD, "board.csv", self.controller.export_csv())

    # --------------- Close ---------------

    def on_quit(self, event):
        evt = wx.CloseEvent(wx.wxEVT_CLOSE_WINDOW)
        wx.PostEvent(self, evt)

    def Close(self, event):
        """Flush the board synchronously before the window goes away."""
        if self._dirty:
            board = self.controller.board
            try:
                save_board(self.board_path, board.notes(), board.viewport, board.highest_z)
            except OSError as e:
                Log.debug(f"Final save failed: {e}", 0)
        event.Skip()
