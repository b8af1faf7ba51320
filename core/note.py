'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import functools
import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.constants import (
    CONTENT_SEP,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    MIN_NOTE_WIDTH,
    MAX_NOTE_WIDTH,
    MIN_NOTE_HEIGHT,
    MAX_NOTE_HEIGHT,
    DEFAULT_SPLIT_RATIO,
    MIN_SPLIT_RATIO,
    MAX_SPLIT_RATIO,
    SAME_ROW_TOLERANCE,
)

__all__ = [
    "Note",
    "new_note_id",
    "split_content",
    "join_content",
    "clamp_width",
    "clamp_height",
    "clamp_split_ratio",
    "reading_order",
]

ROLE_ROOT = "root"
ROLE_CHILD = "child"
ROLE_STANDALONE = "standalone"


def new_note_id() -> str:
    return uuid.uuid4().hex[:12]

# ---------- content ----------

def split_content(content: Optional[str]) -> Tuple[str, str]:
    """Split note content into (term, definition) at the first separator."""
    content = content or ""
    idx = content.find(CONTENT_SEP)
    if idx == -1:
        return content, ""
    return content[:idx], content[idx + len(CONTENT_SEP):]


def join_content(term: str, definition: str) -> str:
    if not definition:
        return term or ""
    return (term or "") + CONTENT_SEP + definition

# ---------- clamping ----------

def _stored_number(value: Any, default: float) -> float:
    # Missing, non-numeric and non-positive stored values fall back to the default.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value != value or value <= 0:  # NaN or non-positive
        return default
    return value


def clamp_width(value: float) -> float:
    return max(MIN_NOTE_WIDTH, min(MAX_NOTE_WIDTH, float(value)))


def clamp_height(value: float) -> float:
    return max(MIN_NOTE_HEIGHT, min(MAX_NOTE_HEIGHT, float(value)))


def clamp_split_ratio(value: float) -> float:
    return max(MIN_SPLIT_RATIO, min(MAX_SPLIT_RATIO, float(value)))

# ---------- entity ----------

@dataclass(slots=True)
class Note:
    """
    A single card on the canvas.

    • x, y         – top-left corner in canvas coordinates
    • z            – stacking order on screen; larger draws on top
    • is_root      – head of a stack; roots never have a parent
    • parent_id    – owning root while this note is stacked
    • stack_order  – position among siblings sharing parent_id
    • collapsed    – roots only; hides the children from the renderer
    • split_ratio  – fraction of the body given to the term area
    """
    id: str
    x: float = 0.0
    y: float = 0.0
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    content: str = ""
    z: int = 0
    is_root: bool = False
    parent_id: Optional[str] = None
    stack_order: int = 0
    collapsed: bool = False
    split_ratio: float = DEFAULT_SPLIT_RATIO

    @property
    def role(self) -> str:
        if self.is_root:
            return ROLE_ROOT
        if self.parent_id is not None:
            return ROLE_CHILD
        return ROLE_STANDALONE

    @property
    def term(self) -> str:
        return split_content(self.content)[0]

    @property
    def definition(self) -> str:
        if self.is_root:
            return ""
        return split_content(self.content)[1]

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        """Build a note from stored data, falling back to defaults for anything missing."""
        parent_id = data.get("parent_id")
        is_root = bool(data.get("is_root", False))
        return cls(
            id=str(data.get("id") or new_note_id()),
            x=float(data.get("x") or 0.0),
            y=float(data.get("y") or 0.0),
            width=clamp_width(_stored_number(data.get("width"), DEFAULT_WIDTH)),
            height=clamp_height(_stored_number(data.get("height"), DEFAULT_HEIGHT)),
            content=str(data.get("content") or ""),
            z=int(data.get("z") or 0),
            is_root=is_root,
            parent_id=None if is_root or parent_id is None else str(parent_id),
            stack_order=int(data.get("stack_order") or 0),
            collapsed=bool(data.get("collapsed", False)),
            split_ratio=clamp_split_ratio(_stored_number(data.get("split_ratio"), DEFAULT_SPLIT_RATIO)),
        )

# ---------- ordering ----------

def reading_order(notes: Iterable[Note]) -> List[Note]:
    """
    Sort notes top-to-bottom, left-to-right. Two notes whose y differs by
    less than SAME_ROW_TOLERANCE are on the same visual row and compare by x.
    """
    def compare(a: Note, b: Note) -> float:
        if abs(a.y - b.y) < SAME_ROW_TOLERANCE:
            return a.x - b.x
        return a.y - b.y

    return sorted(notes, key=functools.cmp_to_key(compare))
