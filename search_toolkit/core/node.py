# search_toolkit/core/node.py
# Search-tree node for the solvers that carry their path along with the state (BFS, hill-climbing).
# The parent chain is the path in reverse, shared between siblings.
from __future__ import annotations
from typing import Iterator, Optional
from .problem import Action, State, UnitProblem


class Node:
    __slots__ = ("state", "parent", "action", "depth")

    def __init__(self, state: State, parent: Optional["Node"] = None, action: Action = None):
        self.state = state
        self.parent = parent
        self.action = action
        self.depth = 0 if parent is None else parent.depth + 1

    def child(self, problem: UnitProblem, action: Action) -> "Node":
        return Node(problem.result(self.state, action), parent=self, action=action)

    def expand(self, problem: UnitProblem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s) and RESULT, lazily."""
        for a in problem.actions(self.state):
            yield self.child(problem, a)

    def __repr__(self) -> str:
        return f"Node({self.state!r}, depth={self.depth})"
