# Defines the standard interfaces for search problems (states, actions, goals, costs, heuristic)
# and the data contracts for 2-player and n-player games.
# search_toolkit/core/problem.py
from __future__ import annotations
from enum import Enum
from typing import Hashable, Iterable, Protocol, Sequence, runtime_checkable

Action = Hashable
State = Hashable


@runtime_checkable
class UnitProblem(Protocol):
    """Search problem where no notion of cost is involved.

    The state-space graph is never built explicitly (it may be infinite); it is
    described by an initial state, the actions available in a state, a transition
    function and a goal test. RESULT must return a new state and never mutate its input.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, state: State) -> bool: ...
    def actions(self, state: State) -> Iterable[Action]: ...
    def result(self, state: State, action: Action) -> State: ...


@runtime_checkable
class Problem(UnitProblem, Protocol):
    """UnitProblem whose actions carry a non-negative integer cost."""
    def cost(self, action: Action) -> int: ...


@runtime_checkable
class HeuristicProblem(Problem, Protocol):
    """Problem with a non-negative estimate of the remaining cost to a goal."""
    def heuristic(self, state: State) -> int: ...


class Player(Enum):
    P1 = 1
    P2 = 2


@runtime_checkable
class Game2(Problem, Protocol):
    """2-player game. `utility` is only ever called on terminal states."""
    def utility(self, state: State, player: Player) -> int: ...


@runtime_checkable
class Game(Problem, Protocol):
    """N-player game.

    `players` is the number of players, `which(s)` the index of the player to move
    in `s`, and `utility(s)[i]` the payoff of player `i` in terminal state `s`.
    """
    players: int
    def which(self, state: State) -> int: ...
    def utility(self, state: State) -> Sequence[int]: ...


class ZeroHeuristic:
    """Wraps a Problem so it can be driven by a heuristic solver with h(s) = 0."""
    def __init__(self, problem: Problem):
        self.problem = problem

    def initial_state(self) -> State: return self.problem.initial_state()
    def is_goal(self, state: State) -> bool: return self.problem.is_goal(state)
    def actions(self, state: State) -> Iterable[Action]: return self.problem.actions(state)
    def result(self, state: State, action: Action) -> State: return self.problem.result(state, action)
    def cost(self, action: Action) -> int: return self.problem.cost(action)
    def heuristic(self, state: State) -> int: return 0
