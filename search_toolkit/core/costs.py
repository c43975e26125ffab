# search_toolkit/core/costs.py
# Best-known path cost per state, with the single relaxation primitive used by cost-aware solvers.
from __future__ import annotations
from typing import Dict, Optional
from .problem import State


class CostTable:
    """Maps states to the best cost found so far. The root always starts at 0."""
    def __init__(self, root: State):
        self._costs: Dict[State, int] = {root: 0}

    def improve(self, state: State, cost: int) -> bool:
        """Store `cost` for `state` if it is unknown or strictly cheaper; report whether it changed."""
        prev = self._costs.get(state)
        if prev is None or cost < prev:
            self._costs[state] = cost
            return True
        return False

    def get(self, state: State) -> Optional[int]:
        return self._costs.get(state)

    def __getitem__(self, state: State) -> int:
        return self._costs[state]

    def __contains__(self, state: object) -> bool:
        return state in self._costs

    def __len__(self) -> int:
        return len(self._costs)
