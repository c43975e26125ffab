"""
Pytest configuration and shared problems for search_toolkit tests.
"""
import pytest

from search_toolkit.problems.graph import GraphProblem
from search_toolkit.problems.grid import GridProblem
from search_toolkit.problems.romania import romania_problem


class CounterProblem:
    """Integers from 0, actions +1/+2 costing their value. Infinite state space."""
    def __init__(self, target=10, steps=(1, 2)):
        self.target = target
        self.steps = steps

    def initial_state(self):
        return 0

    def is_goal(self, state):
        return state == self.target

    def actions(self, state):
        return list(self.steps)

    def result(self, state, action):
        return state + action

    def cost(self, action):
        return action

    def heuristic(self, state):
        return max(self.target - state, 0)


@pytest.fixture
def grid3():
    """Scenario A: 3x3 open grid, corner to opposite corner."""
    return GridProblem(rows=3, cols=3, start=(0, 0), goal=(2, 2))


@pytest.fixture
def start_is_goal():
    """Scenario B: the initial state is already a goal."""
    return GraphProblem({"s": {"t": 1}}, start="s", goals=["s"], estimates={"s": 0, "t": 1})


@pytest.fixture
def dead_end():
    """Scenario C: 5 states, cycle plus a sink, goal unreachable."""
    graph = {
        "a": {"b": 1},
        "b": {"c": 1, "d": 1},
        "c": {"a": 1},
        "d": {"e": 1},
        "e": {},
    }
    return GraphProblem(graph, start="a", goals=["z"])


@pytest.fixture
def shortcut():
    """Scenario D: expensive direct edge vs cheap two-hop path."""
    graph = {
        "S": {"G": 10, "M": 1},
        "M": {"G": 1},
    }
    return GraphProblem(graph, start="S", goals=["G"])


@pytest.fixture
def relaxed():
    """A state whose best cost improves after it was first reached."""
    graph = {
        "S": {"A": 5, "B": 1},
        "B": {"A": 1},
        "A": {"G": 1},
    }
    return GraphProblem(graph, start="S", goals=["G"])


@pytest.fixture
def counter():
    return CounterProblem(target=10)


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture
def make_counter():
    return CounterProblem
