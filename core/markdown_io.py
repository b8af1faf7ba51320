'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional

from core.note import join_content
from core.hierarchy import OutlineEntry, Section, SECTION_GROUP, SECTION_ITEM
from core.constants import EMPTY_ROOT_TEXT, EMPTY_NOTE_TEXT

__all__ = ["to_markdown", "parse_markdown"]

GROUP_MARK = "##"
ITEM_MARK = "###"


def to_markdown(entries: List[OutlineEntry]) -> str:
    """
    Render an outline as headings: `## term` per group and `### content`
    per item, a blank line after each.
    """
    parts: List[str] = []
    for entry in entries:
        if entry.is_group:
            parts.append(f"{GROUP_MARK} {entry.term or EMPTY_ROOT_TEXT}\n\n")
            for item in entry.children:
                parts.append(f"{ITEM_MARK} {join_content(item.term, item.definition) or EMPTY_NOTE_TEXT}\n\n")
        else:
            parts.append(f"{ITEM_MARK} {join_content(entry.term, entry.definition) or EMPTY_NOTE_TEXT}\n\n")
    return "".join(parts).strip()


def _heading(line: str) -> Optional[Section]:
    t = line.strip()
    if t.startswith("####"):
        return None
    if t.startswith(ITEM_MARK):
        rest = t[len(ITEM_MARK):]
        if rest and not rest.startswith(" "):
            return None
        return Section(kind=SECTION_ITEM, title=rest.strip())
    if t.startswith(GROUP_MARK):
        rest = t[len(GROUP_MARK):]
        if rest and not rest.startswith(" "):
            return None
        return Section(kind=SECTION_GROUP, title=rest.strip())
    return None


def parse_markdown(text: str) -> List[Section]:
    """
    Split a document into sections at `##` / `###` headings. Lines before
    the first heading are dropped; deeper headings count as body text.
    """
    sections: List[Section] = []
    current: Optional[Section] = None
    body: List[str] = []

    def close():
        if current is not None:
            current.body = "\n".join(body).strip()
            sections.append(current)

    for line in (text or "").strip().split("\n"):
        heading = _heading(line)
        if heading is not None:
            close()
            current, body = heading, []
        elif current is not None:
            body.append(line)
    close()
    return sections
