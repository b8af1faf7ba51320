'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Mapping between the flat board and two nested representations: an outline
(groups holding items, in reading order) and a table keyed by category.

'''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from core.log import Log
from core.board import Board
from core.note import Note, join_content, split_content
from core.stack_layout import reflow
from core.constants import (
    DEFAULT_HEIGHT,
    IMPORT_COLUMNS,
    IMPORT_ORIGIN_X,
    IMPORT_ORIGIN_Y,
    IMPORT_COL_PITCH,
    IMPORT_ROW_PITCH,
    IMPORT_CHILD_DROP,
    IMPORT_MAX_HEIGHT,
    IMPORT_BASE_HEIGHT,
    IMPORT_LINE_HEIGHT,
    STACK_GAP,
)

__all__ = [
    "OutlineEntry",
    "Section",
    "TableRow",
    "export_outline",
    "outline_from_sections",
    "import_outline",
    "export_table",
    "import_table",
]

SECTION_GROUP = "group"
SECTION_ITEM = "item"


@dataclass(slots=True)
class OutlineEntry:
    """One top-level item of the outline: a group with items, or a lone item."""
    term: str
    definition: str = ""
    is_group: bool = False
    children: List["OutlineEntry"] = field(default_factory=list)


@dataclass(slots=True)
class Section:
    """A heading from a flat document stream plus the lines under it."""
    kind: str
    title: str
    body: str = ""

    @property
    def content(self) -> str:
        if self.body:
            return f"{self.title}\n{self.body}"
        return self.title


@dataclass(slots=True, frozen=True)
class TableRow:
    category: str
    term: str
    definition: str

# ---------- placement ----------

class _Grid:
    """Fixed-column slots for newly imported top-level notes."""

    def __init__(self, start: int = 0):
        self.index = start

    @classmethod
    def below(cls, board: Board) -> "_Grid":
        """A grid whose first slot starts on the first row clear of every existing note."""
        if board.is_empty():
            return cls()
        lowest = max(n.bottom for n in board.notes())
        row = max(0, int((lowest - IMPORT_ORIGIN_Y) // IMPORT_ROW_PITCH) + 1)
        return cls(row * IMPORT_COLUMNS)

    def take(self):
        col = self.index % IMPORT_COLUMNS
        row = self.index // IMPORT_COLUMNS
        self.index += 1
        return IMPORT_ORIGIN_X + col * IMPORT_COL_PITCH, IMPORT_ORIGIN_Y + row * IMPORT_ROW_PITCH


def _height_for(content: str) -> int:
    # Taller cards for longer bodies: everything after the first line counts.
    body = content.split("\n", 1)[1] if "\n" in content else ""
    return min(IMPORT_MAX_HEIGHT, IMPORT_BASE_HEIGHT + len(body.split("\n")) * IMPORT_LINE_HEIGHT)

# ---------- outline ----------

def export_outline(board: Board) -> List[OutlineEntry]:
    """Roots (with their children in stack order) and standalone notes, in reading order."""
    out: List[OutlineEntry] = []
    for item in board.top_level():
        if item.is_root:
            group = OutlineEntry(term=item.term, is_group=True)
            for child in board.children(item.id):
                group.children.append(OutlineEntry(term=child.term, definition=child.definition))
            out.append(group)
        else:
            out.append(OutlineEntry(term=item.term, definition=item.definition))
    return out


def outline_from_sections(sections: Iterable[Section]) -> List[OutlineEntry]:
    """
    Fold a flat stream of sections into an outline: a group section opens a
    group, an item section joins the most recent group (or stands alone if
    no group has been seen yet).
    """
    out: List[OutlineEntry] = []
    current: Optional[OutlineEntry] = None
    for section in sections:
        if section.kind == SECTION_GROUP:
            # Groups only carry a title; anything past the separator is dropped.
            current = OutlineEntry(term=split_content(section.content)[0], is_group=True)
            out.append(current)
            continue
        term, definition = split_content(section.content)
        entry = OutlineEntry(term=term, definition=definition)
        if current is None:
            out.append(entry)
        else:
            current.children.append(entry)
    return out


def import_outline(board: Board, entries: Iterable[OutlineEntry], replace: bool = False) -> List[Note]:
    """
    Create notes for an outline. Groups become roots laid out on the import
    grid, their items become children in order, lone items become standalone
    notes on the grid. Returns the created notes.
    """
    if replace:
        board.clear()

    created: List[Note] = []
    grid = _Grid.below(board)
    for entry in entries:
        x, y = grid.take()
        if entry.is_group:
            title = split_content(entry.term)[0]
            root = board.new_note(x, y, title)
            root.is_root = True
            root.height = _height_for(title)
            created.append(root)
            for order, item in enumerate(entry.children):
                content = join_content(item.term, item.definition)
                child = board.new_note(root.x, root.y + IMPORT_CHILD_DROP, content,
                                       height=_height_for(content))
                child.parent_id = root.id
                child.stack_order = order
                created.append(child)
        else:
            content = join_content(entry.term, entry.definition)
            created.append(board.new_note(x, y, content, height=_height_for(content)))

    reflow(board)
    Log.debug(f"Imported {len(created)} note(s) from outline (replace={replace}).", 1)
    return created

# ---------- table ----------

def export_table(board: Board) -> List[TableRow]:
    """One row per stacked note (category = root term), one per lone note, one per empty root."""
    rows: List[TableRow] = []
    for item in board.top_level():
        if item.is_root:
            children = board.children(item.id)
            if not children:
                rows.append(TableRow(item.term, "", ""))
            for child in children:
                rows.append(TableRow(item.term, child.term, child.definition))
        else:
            rows.append(TableRow("", item.term, item.definition))
    return rows


def import_table(board: Board, rows: Iterable[TableRow], replace: bool = False) -> List[Note]:
    """
    Create notes from category rows. Every distinct non-empty category
    becomes one root holding its rows in order; uncategorised rows become
    standalone notes placed on the grid after the roots.
    """
    categories: Dict[str, List[TableRow]] = {}
    loose: List[TableRow] = []
    for row in rows:
        category = (row.category or "").strip()
        term = (row.term or "").strip()
        definition = (row.definition or "").strip()
        if not (category or term or definition):
            continue
        cleaned = TableRow(category, term, definition)
        if category:
            categories.setdefault(category, []).append(cleaned)
        else:
            loose.append(cleaned)

    if replace:
        board.clear()

    created: List[Note] = []
    grid = _Grid.below(board)
    for category, cards in categories.items():
        x, y = grid.take()
        root = board.new_note(x, y, category)
        root.is_root = True
        created.append(root)
        # A row with only a category declares the stack and holds no card.
        cards = [c for c in cards if c.term or c.definition]
        for order, card in enumerate(cards):
            child = board.new_note(root.x, root.y + DEFAULT_HEIGHT + STACK_GAP * (order + 1),
                                   join_content(card.term, card.definition))
            child.parent_id = root.id
            child.stack_order = order
            created.append(child)

    for card in loose:
        x, y = grid.take()
        created.append(board.new_note(x, y, join_content(card.term, card.definition)))

    reflow(board)
    Log.debug(f"Imported {len(created)} note(s) from table (replace={replace}).", 1)
    return created
