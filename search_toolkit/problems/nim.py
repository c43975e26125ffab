# search_toolkit/problems/nim.py
# Single-heap Nim as a 2-player game: players alternate taking 1..max_take sticks,
# whoever takes the last stick wins.
from __future__ import annotations
from typing import Iterable, List, Tuple

from ..core.problem import Player

NimState = Tuple[int, Player]  # (sticks left, player to move)


def other(player: Player) -> Player:
    return Player.P2 if player is Player.P1 else Player.P1


class NimProblem:
    def __init__(self, sticks: int = 7, max_take: int = 3, first: Player = Player.P1):
        if sticks < 0 or max_take < 1:
            raise ValueError(f"invalid Nim setup: sticks={sticks}, max_take={max_take}")
        self.sticks = sticks
        self.max_take = max_take
        self.first = first

    def initial_state(self) -> NimState:
        return (self.sticks, self.first)

    def is_goal(self, state: NimState) -> bool:
        # terminal: no sticks left
        return state[0] == 0

    def actions(self, state: NimState) -> Iterable[int]:
        return range(1, min(self.max_take, state[0]) + 1)

    def result(self, state: NimState, action: int) -> NimState:
        sticks, player = state
        return (sticks - action, other(player))

    def cost(self, action: int) -> int:
        return 1

    def utility(self, state: NimState, player: Player) -> int:
        # In a terminal state the player to move is the one who did not take the last stick.
        _, to_move = state
        return -1 if player is to_move else 1


class RoundRobinNim:
    """Nim for `players` players taking turns in index order; the last taker scores 1, everyone else 0."""
    def __init__(self, sticks: int = 10, max_take: int = 3, players: int = 3):
        if players < 2:
            raise ValueError(f"need at least 2 players, got {players}")
        if sticks < 0 or max_take < 1:
            raise ValueError(f"invalid Nim setup: sticks={sticks}, max_take={max_take}")
        self.sticks = sticks
        self.max_take = max_take
        self.players = players

    def initial_state(self) -> Tuple[int, int]:
        return (self.sticks, 0)

    def is_goal(self, state: Tuple[int, int]) -> bool:
        return state[0] == 0

    def actions(self, state: Tuple[int, int]) -> Iterable[int]:
        return range(1, min(self.max_take, state[0]) + 1)

    def result(self, state: Tuple[int, int], action: int) -> Tuple[int, int]:
        sticks, i = state
        return (sticks - action, (i + 1) % self.players)

    def cost(self, action: int) -> int:
        return 1

    def which(self, state: Tuple[int, int]) -> int:
        return state[1]

    def utility(self, state: Tuple[int, int]) -> List[int]:
        last = (state[1] - 1) % self.players
        return [1 if i == last else 0 for i in range(self.players)]
