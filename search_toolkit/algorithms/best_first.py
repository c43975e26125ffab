from __future__ import annotations
import logging
from typing import Optional, Set
from ..core.costs import CostTable
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult, MeasuredRun
from ..core.paths import PathTable
from ..core.problem import HeuristicProblem, State
from ..core.utils import heuristic_value, step_cost

logger = logging.getLogger(__name__)


def best_first_search(
    problem: HeuristicProblem,
    name: str = "BestFirst",
    max_expansions: Optional[int] = None,
    track_memory: bool = False,
) -> SearchResult:
    """
    Best-first graph search ordered by f(s) = g(s) + h(s).

    g comes from a CostTable relaxed on every generated successor, paths from a
    PathTable updated alongside it. A state is expanded at most once (marked set);
    stale frontier entries for marked states are skipped. The goal test runs when a
    state leaves the frontier.
    """
    init = problem.initial_state()
    costs = CostTable(init)
    preds = PathTable(init)
    marked: Set[State] = set()
    frontier = PriorityQueue(heuristic_value(problem, init), init)
    expanded = 0

    with MeasuredRun(track_memory) as meter:
        while frontier:
            _, x = frontier.pop()
            g = costs[x]
            if problem.is_goal(x):
                actions = preds.build(x)
                # costs of descendants are not updated when an expanded state is rerouted
                cost = sum(step_cost(problem, a) for a in actions)
                logger.debug("%s: goal %r at cost %s after %d expansions", name, x, cost, expanded)
                return SearchResult(name, True, actions, cost, expanded, meter.elapsed, meter.peak_kb)
            if x in marked:
                continue

            # expansion cap
            if max_expansions is not None and expanded >= max_expansions:
                logger.debug("%s: stopped after %d expansions", name, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error="max_expansions reached")

            expanded += 1
            for a in problem.actions(x):
                y = problem.result(x, a)
                candidate = g + step_cost(problem, a)
                if costs.improve(y, candidate):
                    frontier.push(heuristic_value(problem, y) + candidate, y)
                    preds.set(x, a, y)
            marked.add(x)

    logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
