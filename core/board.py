'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the note collection and its stacking invariants.

'''
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from core.log import Log
from core.constants import BASE_Z, DEFAULT_WIDTH, DEFAULT_HEIGHT
from core.note import Note, new_note_id, clamp_width, clamp_height, reading_order

__all__ = ["Board"]


class Board:
    """
    Flat collection of notes plus the board-wide counters.

    Hierarchy is kept as flat parent pointers; the ordered child list of a
    root is rebuilt on demand by children(). Insertion order of the dict is
    the tie-break for equal stack_order values.
    """

    def __init__(self, notes: Optional[List[Note]] = None, highest_z: int = BASE_Z,
                 viewport: Tuple[float, float] = (0.0, 0.0)):
        self._notes: Dict[str, Note] = {}
        self.highest_z = int(highest_z)
        self.viewport: Tuple[float, float] = (float(viewport[0]), float(viewport[1]))
        for note in notes or []:
            self.add(note)

    # ------------------------------------------------------------------ #
    # collection
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes.values()))

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    def is_empty(self) -> bool:
        return not self._notes

    def get(self, note_id: Optional[str]) -> Optional[Note]:
        if note_id is None:
            return None
        return self._notes.get(note_id)

    def notes(self) -> List[Note]:
        return list(self._notes.values())

    def add(self, note: Note) -> Note:
        self._notes[note.id] = note
        if note.z > self.highest_z:
            self.highest_z = note.z
        return note

    def new_note(self, x: float, y: float, content: str = "",
                 width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT) -> Note:
        """Create a standalone note at (x, y) on top of everything else."""
        note = Note(
            id=new_note_id(),
            x=float(x),
            y=float(y),
            width=clamp_width(width),
            height=clamp_height(height),
            content=content or "",
            z=self.next_z(),
        )
        return self.add(note)

    def remove(self, note_id: str) -> Optional[Note]:
        """
        Remove a note. Children of a removed root are released as standalone
        notes where they are; siblings of a removed child keep their order
        values (gaps are closed on the next reflow).
        """
        note = self._notes.pop(note_id, None)
        if note is None:
            return None
        if note.is_root:
            for child in self.children(note_id):
                child.parent_id = None
                child.stack_order = 0
        return note

    def clear(self) -> None:
        self._notes.clear()

    # ------------------------------------------------------------------ #
    # hierarchy queries
    # ------------------------------------------------------------------ #

    def roots(self) -> List[Note]:
        return [n for n in self._notes.values() if n.is_root]

    def children(self, parent_id: str, exclude_id: Optional[str] = None) -> List[Note]:
        """Children of parent_id sorted by stack_order (stable on ties)."""
        kids = [
            n for n in self._notes.values()
            if n.parent_id == parent_id and n.id != exclude_id and not n.is_root
        ]
        kids.sort(key=lambda n: n.stack_order)
        return kids

    def child_count(self, parent_id: str) -> int:
        return sum(1 for n in self._notes.values() if n.parent_id == parent_id and not n.is_root)

    def has_children(self, note_id: str) -> bool:
        return any(n.parent_id == note_id and not n.is_root for n in self._notes.values())

    def parent_of(self, note: Note) -> Optional[Note]:
        parent = self.get(note.parent_id)
        if parent is None or not parent.is_root:
            return None
        return parent

    def top_level(self) -> List[Note]:
        """Roots and standalone notes (plus any child whose root went missing), in reading order."""
        items = [n for n in self._notes.values() if n.is_root or self.parent_of(n) is None]
        return reading_order(items)

    # ------------------------------------------------------------------ #
    # z-order
    # ------------------------------------------------------------------ #

    def next_z(self) -> int:
        self.highest_z += 1
        return self.highest_z

    def bring_to_front(self, note_id: str) -> bool:
        note = self.get(note_id)
        if note is None:
            return False
        note.z = self.next_z()
        return True

    # ------------------------------------------------------------------ #
    # role transitions
    # ------------------------------------------------------------------ #

    def can_become_root(self, note: Note) -> bool:
        # A note carrying a definition cannot head a stack.
        return not note.is_root and not note.definition.strip()

    def can_leave_root(self, note: Note) -> bool:
        return note.is_root and not self.has_children(note.id)

    def set_root(self, note_id: str, is_root: bool) -> bool:
        """Pin or unpin a note. Returns True if the role changed."""
        note = self.get(note_id)
        if note is None:
            Log.debug(f"set_root: unknown note {note_id}", 1)
            return False

        if is_root:
            if note.is_root:
                return False
            if not self.can_become_root(note):
                Log.debug(f"Refused to pin {note_id}: note has a definition.", 1)
                return False
            note.is_root = True
            note.parent_id = None
            note.stack_order = 0
        else:
            if not note.is_root:
                return False
            if not self.can_leave_root(note):
                Log.debug(f"Refused to unpin {note_id}: stack still has children.", 1)
                return False
            note.is_root = False
            note.collapsed = False

        Log.debug(f"Note {note_id} is now {note.role}.", 2)
        return True

    def detach(self, note_id: str) -> Optional[str]:
        """Clear a child's parent. Returns the former parent id."""
        note = self.get(note_id)
        if note is None or note.parent_id is None:
            return None
        former = note.parent_id
        note.parent_id = None
        return former

    def attach(self, note_id: str, root_id: str, index: int) -> bool:
        """
        Insert note_id under root_id at sibling position `index`, shifting
        every sibling at or after that position down by one.
        """
        note = self.get(note_id)
        root = self.get(root_id)
        if note is None or root is None or not root.is_root or note_id == root_id:
            return False
        if note.is_root and self.has_children(note_id):
            Log.debug(f"Refused to stack {note_id}: it heads a populated stack.", 1)
            return False

        siblings = self.children(root_id, exclude_id=note_id)
        index = max(0, min(int(index), len(siblings)))
        for i, child in enumerate(siblings):
            child.stack_order = i + 1 if i >= index else i

        note.parent_id = root_id
        note.is_root = False
        note.collapsed = False
        note.stack_order = index
        Log.debug(f"Stacked {note_id} under {root_id} at {index}.", 2)
        return True

    def compact(self, parent_id: str) -> None:
        """Renumber a root's children to 0..n-1, keeping their order."""
        for i, child in enumerate(self.children(parent_id)):
            child.stack_order = i
