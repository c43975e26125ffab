from __future__ import annotations
from collections import deque
from typing import Iterable, Optional

from ..core.problem import Action, HeuristicProblem, Problem, State, UnitProblem
from ..core.utils import heuristic_value, step_cost


def sanity_check_problem(problem: UnitProblem, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks costs and heuristic values (when present) are non-negative."""
    has_cost = isinstance(problem, Problem)
    has_h = isinstance(problem, HeuristicProblem)
    seen = set()
    q = deque([problem.initial_state()])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        if has_h:
            heuristic_value(problem, s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            if has_cost:
                step_cost(problem, a)
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; costs and heuristic values are valid."


def replay_plan(problem: UnitProblem, actions: Iterable[Action], check_legal: bool = True) -> State:
    """Apply `actions` from the initial state and return the state reached."""
    s = problem.initial_state()
    for i, a in enumerate(actions):
        if check_legal and a not in list(problem.actions(s)):
            raise ValueError(f"step {i}: action {a!r} is not available in state {s!r}")
        s = problem.result(s, a)
    return s


def plan_reaches_goal(problem: UnitProblem, actions: Optional[Iterable[Action]]) -> bool:
    if actions is None:
        return False
    return problem.is_goal(replay_plan(problem, actions))


def plan_cost(problem: Problem, actions: Iterable[Action]) -> int:
    return sum(step_cost(problem, a) for a in actions)
