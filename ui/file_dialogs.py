from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import wx

Pathish = Union[str, Path]

__all__ = [
    "MARKDOWN_WILDCARD",
    "CSV_WILDCARD",
    "choose_import_file",
    "choose_export_file",
    "ask_replace",
]

MARKDOWN_WILDCARD = "Markdown files (*.md;*.markdown)|*.md;*.markdown|All files (*.*)|*.*"
CSV_WILDCARD = "CSV files (*.csv)|*.csv|All files (*.*)|*.*"


def choose_import_file(
    parent: wx.Window | None,
    wildcard: str,
    *,
    message: str = "Import…",
    default_dir: Pathish | None = None,
) -> Optional[str]:
    """
    Open a file picker for an import source.
    Returns an absolute path on OK, or None on cancel.
    """
    with wx.FileDialog(
        parent,
        message=message,
        wildcard=wildcard,
        style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST,
        defaultDir=str(default_dir) if default_dir else "",
    ) as dlg:
        if dlg.ShowModal() != wx.ID_OK:
            return None
        return str(Path(dlg.GetPath()).resolve())


def choose_export_file(
    parent: wx.Window | None,
    wildcard: str,
    default_name: str,
    *,
    message: str = "Export…",
) -> Optional[str]:
    """Save picker; asks before overwriting an existing file."""
    with wx.FileDialog(
        parent,
        message=message,
        wildcard=wildcard,
        defaultFile=default_name,
        style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
    ) as dlg:
        if dlg.ShowModal() != wx.ID_OK:
            return None
        return str(Path(dlg.GetPath()).resolve())


def ask_replace(parent: wx.Window | None) -> Optional[bool]:
    """
    Ask whether an import replaces the board or adds to it.
    True = replace, False = append, None = cancel.
    """
    with wx.MessageDialog(
        parent,
        "Replace the current board with the imported notes?\n\n"
        "Choose No to add them next to the existing notes.",
        "Import",
        style=wx.YES_NO | wx.CANCEL | wx.ICON_QUESTION,
    ) as dlg:
        res = dlg.ShowModal()
    if res == wx.ID_YES:
        return True
    if res == wx.ID_NO:
        return False
    return None
