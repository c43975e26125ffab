# search_toolkit/core/utils.py
# Path reconstruction from a goal node, and checked access to a problem's costs and heuristic.
from __future__ import annotations
from typing import List
from .node import Node
from .problem import Action, HeuristicProblem, Problem, State


def reconstruct_path(node: Node) -> List[Action]:
    actions = []
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions


def step_cost(problem: Problem, action: Action) -> int:
    cost = problem.cost(action)
    if cost is None or cost < 0:
        raise ValueError(
            f"cost returned {cost!r} for action {action!r}; "
            "action costs must be non-negative."
        )
    return cost


def heuristic_value(problem: HeuristicProblem, state: State) -> int:
    h = problem.heuristic(state)
    if h is None or h < 0:
        raise ValueError(
            f"heuristic returned {h!r} for state {state!r}; "
            "heuristic values must be non-negative."
        )
    return h
