# search_toolkit/core/paths.py
# Incremental construction of paths: a predecessor table rooted at the initial state,
# from which the action sequence to any registered state can be rebuilt.
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple
from .problem import Action, State

logger = logging.getLogger(__name__)


class PathTableError(LookupError):
    """The predecessor table cannot produce a path (unregistered state or broken chain)."""


class PathTable:
    """
    state -> (predecessor, action), with `None` marking the root.

    set(x, a, y) declares x as the new predecessor of y; a later call for the same y
    replaces the earlier one. The root entry is written once and never replaced,
    so every chain ends at the root.
    """
    def __init__(self, root: State):
        self.root = root
        self._preds: Dict[State, Optional[Tuple[State, Action]]] = {root: None}

    def set(self, parent: State, action: Action, child: State) -> None:
        if child == self.root:
            logger.debug("ignoring predecessor for root state %r", child)
            return
        self._preds[child] = (parent, action)

    def build(self, target: State) -> List[Action]:
        """Actions from the root to `target`, in order."""
        if target not in self._preds:
            raise PathTableError(f"state {target!r} was never registered")
        actions: List[Action] = []
        link = self._preds[target]
        # A well-formed chain visits each entry at most once.
        for _ in range(len(self._preds)):
            if link is None:
                actions.reverse()
                return actions
            parent, action = link
            actions.append(action)
            if parent not in self._preds:
                raise PathTableError(f"predecessor {parent!r} is missing from the table")
            link = self._preds[parent]
        raise PathTableError(f"predecessor chain of {target!r} does not reach the root")

    def __contains__(self, state: object) -> bool:
        return state in self._preds

    def __len__(self) -> int:
        return len(self._preds)
