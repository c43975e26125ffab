"""
Solver behaviour on small problems with known answers.
"""
import pytest

from search_toolkit.algorithms.astar import AStarSolver, a_star_search
from search_toolkit.algorithms.base import Solver
from search_toolkit.algorithms.bfs import BreadthFirstSolver, breadth_first_search
from search_toolkit.algorithms.hill_climbing import HillClimbingSolver, hill_climbing_search
from search_toolkit.algorithms.ucs import UniformCostSolver, uniform_cost_search
from search_toolkit.problems.checks import plan_cost, plan_reaches_goal
from search_toolkit.problems.graph import GraphProblem

ALL_SOLVERS = [BreadthFirstSolver, UniformCostSolver, AStarSolver, HillClimbingSolver]


# ---- Scenario A: 3x3 grid ---------------------------------------------------

@pytest.mark.parametrize("solver_cls", [BreadthFirstSolver, UniformCostSolver, AStarSolver])
def test_grid_corner_to_corner_takes_four_moves(grid3, solver_cls):
    plan = solver_cls(grid3).solve()
    assert plan is not None
    assert len(plan) == 4
    assert plan_reaches_goal(grid3, plan)


def test_astar_expands_no_more_than_ucs_on_grid(grid3):
    astar = a_star_search(grid3)
    ucs = uniform_cost_search(grid3)
    assert astar.success and ucs.success
    assert astar.nodes_expanded <= ucs.nodes_expanded


# ---- Scenario B: start is a goal --------------------------------------------

@pytest.mark.parametrize("solver_cls", ALL_SOLVERS)
def test_start_is_goal_gives_empty_plan(start_is_goal, solver_cls):
    result = solver_cls(start_is_goal).search()
    assert result.success
    assert result.actions == []
    assert result.nodes_expanded == 0
    assert result.cost == 0


# ---- Scenario C: no reachable goal ------------------------------------------

@pytest.mark.parametrize("solver_cls", [BreadthFirstSolver, UniformCostSolver, AStarSolver])
def test_unreachable_goal_returns_none(dead_end, solver_cls):
    result = solver_cls(dead_end).search()
    assert result.success is False
    assert result.error is None
    assert result.nodes_expanded == 5
    assert solver_cls(dead_end).solve() is None


# ---- Scenario D: weights matter ---------------------------------------------

def test_ucs_prefers_cheap_two_hop_path(shortcut):
    plan = UniformCostSolver(shortcut).solve()
    assert plan == [("S", "M"), ("M", "G")]
    assert plan_cost(shortcut, plan) == 2


def test_bfs_ignores_weights_and_takes_direct_edge(shortcut):
    plan = BreadthFirstSolver(shortcut).solve()
    assert plan == [("S", "G")]
    assert plan_cost(shortcut, plan) == 10


def test_ucs_follows_re_relaxed_predecessor(relaxed):
    result = uniform_cost_search(relaxed)
    assert result.actions == [("S", "B"), ("B", "A"), ("A", "G")]
    assert result.cost == 3


def test_astar_cost_matches_plan_when_expanded_state_is_rerouted():
    # h(X) = 10 is inconsistent: Y is expanded via S->Y before the cheaper S->X->Y is found
    problem = GraphProblem(
        {"S": {"Y": 5, "X": 1}, "X": {"Y": 1}, "Y": {"G": 10}},
        start="S",
        goals=["G"],
        estimates={"X": 10},
    )
    result = a_star_search(problem)
    assert result.actions == [("S", "X"), ("X", "Y"), ("Y", "G")]
    assert result.cost == plan_cost(problem, result.actions) == 12


# ---- Romania ----------------------------------------------------------------

ROMANIA_OPTIMAL = [
    ("Arad", "Sibiu"),
    ("Sibiu", "Rimnicu Vilcea"),
    ("Rimnicu Vilcea", "Pitesti"),
    ("Pitesti", "Bucharest"),
]


def test_astar_romania_optimal_and_focused(romania):
    astar = a_star_search(romania)
    ucs = uniform_cost_search(romania)
    assert astar.actions == ROMANIA_OPTIMAL
    assert astar.cost == 418
    assert ucs.cost == 418
    assert astar.nodes_expanded == 5
    assert astar.nodes_expanded < ucs.nodes_expanded


def test_bfs_romania_fewest_roads(romania):
    result = breadth_first_search(romania)
    assert result.actions == [("Arad", "Sibiu"), ("Sibiu", "Fagaras"), ("Fagaras", "Bucharest")]
    assert result.cost == 3
    assert plan_cost(romania, result.actions) == 450


def test_hill_climbing_romania_follows_straight_line_distance(romania):
    plan = HillClimbingSolver(romania).solve()
    assert plan == [("Arad", "Sibiu"), ("Sibiu", "Fagaras"), ("Fagaras", "Bucharest")]


# ---- General properties -----------------------------------------------------

@pytest.mark.parametrize("solver_cls", ALL_SOLVERS)
def test_plans_reach_goal_on_infinite_counter(counter, solver_cls):
    plan = solver_cls(counter).solve()
    assert plan_reaches_goal(counter, plan)


def test_bfs_counter_fewest_actions(counter):
    assert BreadthFirstSolver(counter).solve() == [2, 2, 2, 2, 2]


def test_ucs_counter_minimum_cost(counter):
    plan = UniformCostSolver(counter).solve()
    assert sum(plan) == 10


@pytest.mark.parametrize("solver_cls", ALL_SOLVERS)
def test_solve_is_repeatable(romania, solver_cls):
    solver = solver_cls(romania)
    assert solver.solve() == solver.solve()


@pytest.mark.parametrize("solver_cls", ALL_SOLVERS)
def test_max_expansions_stops_unbounded_search(make_counter, solver_cls):
    # +1/+2 steps from 0 never reach a negative target
    problem = make_counter(target=-1)
    result = solver_cls(problem, max_expansions=50).search()
    assert result.success is False
    assert result.nodes_expanded <= 50
    assert solver_cls(problem, max_expansions=50).solve() is None


def test_max_expansions_reports_reason(make_counter):
    result = breadth_first_search(make_counter(target=-1), max_expansions=10)
    assert result.error == "max_expansions reached"
    assert result.nodes_expanded == 10


def test_max_expansions_stops_endless_descent(make_counter):
    # h keeps strictly decreasing for a million steps, so only the cap stops the climb
    problem = make_counter(target=10**6)
    result = hill_climbing_search(problem, max_expansions=50)
    assert result.success is False
    assert result.error == "max_expansions reached"
    assert result.nodes_expanded == 50
    assert HillClimbingSolver(problem, max_expansions=50).solve() is None


def test_negative_cost_is_rejected():
    problem = GraphProblem({"a": {"b": -1}}, start="a", goals=["b"])
    with pytest.raises(ValueError, match="non-negative"):
        UniformCostSolver(problem).solve()


def test_negative_heuristic_is_rejected():
    problem = GraphProblem({"a": {"b": 1}}, start="a", goals=["b"], estimates={"a": -3})
    with pytest.raises(ValueError, match="non-negative"):
        AStarSolver(problem).solve()


def test_bfs_never_consults_costs():
    class NoCost:
        def initial_state(self): return 0
        def is_goal(self, s): return s == 3
        def actions(self, s): return ["inc"]
        def result(self, s, a): return s + 1

    assert BreadthFirstSolver(NoCost()).solve() == ["inc", "inc", "inc"]


def test_track_memory_reports_peak():
    problem = GraphProblem({"a": {"b": 1}}, start="a", goals=["b"])
    assert a_star_search(problem, track_memory=True).peak_kb is not None
    assert a_star_search(problem).peak_kb is None


def test_solver_base_requires_search(romania):
    with pytest.raises(TypeError):
        Solver(romania)
