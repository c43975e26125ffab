# search_toolkit/problems/graph.py
# A search problem over an explicit weighted directed graph.
from __future__ import annotations
from typing import Collection, Iterable, Mapping, Optional, Tuple

Edge = Tuple[str, str]


class GraphProblem:
    """
    States are node names. Actions are edges (src, dst), so an action's cost is
    fully determined by the action itself. Nodes missing from `graph` have no
    outgoing edges. `estimates` is an optional per-node heuristic (0 when absent).
    """
    def __init__(
        self,
        graph: Mapping[str, Mapping[str, int]],
        start: str,
        goals: Collection[str],
        estimates: Optional[Mapping[str, int]] = None,
    ):
        self.graph = graph
        self.start = start
        self.goals = frozenset([goals] if isinstance(goals, str) else goals)
        self.estimates = estimates or {}

    def initial_state(self) -> str:
        return self.start

    def is_goal(self, state: str) -> bool:
        return state in self.goals

    def actions(self, state: str) -> Iterable[Edge]:
        return [(state, dst) for dst in self.graph.get(state, {})]

    def result(self, state: str, action: Edge) -> str:
        src, dst = action
        if src != state:
            raise ValueError(f"edge {action!r} does not leave {state!r}")
        return dst

    def cost(self, action: Edge) -> int:
        src, dst = action
        return self.graph[src][dst]

    def heuristic(self, state: str) -> int:
        return self.estimates.get(state, 0)

    def __repr__(self) -> str:
        return f"GraphProblem({self.start!r} -> {sorted(self.goals)!r}, {len(self.graph)} nodes)"
