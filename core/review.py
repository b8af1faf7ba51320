'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from core.log import Log
from core.board import Board

__all__ = ["ShuffleState", "ShuffleCard", "StackReview"]


class ShuffleState(str, Enum):
    IDLE = "idle"
    SHOWING_TERM = "showingTerm"
    REVEALED = "revealed"


@dataclass(slots=True)
class ShuffleCard:
    """Flashcard overlay of one root: which child is drawn and how much of it shows."""
    state: ShuffleState = ShuffleState.IDLE
    child_id: Optional[str] = None
    term: str = ""
    definition: str = ""

    @property
    def active(self) -> bool:
        return self.state is not ShuffleState.IDLE

    @property
    def revealed(self) -> bool:
        return self.state is ShuffleState.REVEALED


class StackReview:
    """
    Per-root collapse toggling and flashcard review.

    Collapsed state is stored on the root note itself; the shuffle overlay
    is transient and kept here, keyed by root id.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._cards: Dict[str, ShuffleCard] = {}

    def card(self, root_id: str) -> ShuffleCard:
        return self._cards.get(root_id) or ShuffleCard()

    def forget(self, root_id: str) -> None:
        self._cards.pop(root_id, None)

    def reset(self) -> None:
        self._cards.clear()

    # ------------------------------------------------------------------ #
    # collapse
    # ------------------------------------------------------------------ #

    def toggle_collapse(self, board: Board, root_id: str) -> bool:
        """Flip a populated root between expanded and collapsed."""
        root = board.get(root_id)
        if root is None or not root.is_root or not board.has_children(root_id):
            return False
        if root.collapsed:
            return self.expand(board, root_id)
        root.collapsed = True
        Log.debug(f"Collapsed stack {root_id}.", 2)
        return True

    def expand(self, board: Board, root_id: str) -> bool:
        """Expand a collapsed root; this also puts its flashcard overlay away."""
        root = board.get(root_id)
        if root is None or not root.collapsed:
            return False
        root.collapsed = False
        self.forget(root_id)
        Log.debug(f"Expanded stack {root_id}.", 2)
        return True

    # ------------------------------------------------------------------ #
    # shuffle
    # ------------------------------------------------------------------ #

    def trigger_shuffle(self, board: Board, root_id: str) -> Optional[ShuffleCard]:
        """
        Advance the flashcard cycle of a populated root:
          idle / revealed → draw a random child and show its term
          showingTerm     → reveal that child's definition
        The stack collapses while it is being reviewed.
        """
        root = board.get(root_id)
        if root is None or not root.is_root:
            return None
        children = board.children(root_id)
        if not children:
            return None

        root.collapsed = True
        card = self._cards.get(root_id)
        if card is not None and card.state is ShuffleState.SHOWING_TERM:
            card.state = ShuffleState.REVEALED
            return card

        child = self._rng.choice(children)
        card = ShuffleCard(
            state=ShuffleState.SHOWING_TERM,
            child_id=child.id,
            term=child.term,
            definition=child.definition,
        )
        self._cards[root_id] = card
        Log.debug(f"Shuffle on {root_id} drew {child.id}.", 2)
        return card
