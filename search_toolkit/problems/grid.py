# search_toolkit/problems/grid.py
from __future__ import annotations
from typing import Iterable, Optional, Set, Tuple
import numpy as np

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


class GridProblem:
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - ACTIONS(s): subset of {'Up','Down','Left','Right'} that keep you in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - IS-GOAL(s): s == goal
    - cost(a): 1
    - heuristic(s): Manhattan distance (admissible on 4-neighbor grid)
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self._start = start
        self._goal = goal
        self.walls = walls or set()
        for name, p in (("start", start), ("goal", goal)):
            if not self.in_bounds(p):
                raise ValueError(f"{name} {p} is outside the {rows}x{cols} grid")
            if p in self.walls:
                raise ValueError(f"{name} {p} is a wall")

    @classmethod
    def from_array(cls, cells: np.ndarray, start: Coord, goal: Coord) -> "GridProblem":
        """Build from a 2-D array where non-zero cells are walls."""
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise ValueError(f"expected a 2-D array, got shape {cells.shape}")
        walls = {(int(r), int(c)) for r, c in np.argwhere(cells != 0)}
        rows, cols = cells.shape
        return cls(rows=int(rows), cols=int(cols), start=start, goal=goal, walls=walls)

    def to_array(self) -> np.ndarray:
        cells = np.zeros((self.rows, self.cols), dtype=np.int8)
        for r, c in self.walls:
            cells[r, c] = 1
        return cells

    def in_bounds(self, p: Coord) -> bool:
        r, c = p
        return 0 <= r < self.rows and 0 <= c < self.cols

    def initial_state(self) -> Coord:
        return self._start

    def is_goal(self, state: Coord) -> bool:
        return state == self._goal

    def actions(self, state: Coord) -> Iterable[str]:
        r, c = state
        for name, (dr, dc) in _MOVES.items():
            nr, nc = r + dr, c + dc
            if self.in_bounds((nr, nc)) and (nr, nc) not in self.walls:
                yield name

    def result(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def cost(self, action: str) -> int:
        return 1

    def heuristic(self, state: Coord) -> int:
        r, c = state
        gr, gc = self._goal
        return abs(r - gr) + abs(c - gc)

    def __repr__(self) -> str:
        return f"GridProblem({self.rows}x{self.cols}, {self._start}->{self._goal}, walls={len(self.walls)})"


def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, start=(0,0), goal=(4,6), walls=walls)


def random_grid_problem(rows: int, cols: int, density: float = 0.2, seed: Optional[int] = None) -> GridProblem:
    """Random walls with the given density; start (0,0) and goal (rows-1, cols-1) are kept open."""
    rng = np.random.default_rng(seed)
    cells = (rng.random((rows, cols)) < density).astype(np.int8)
    cells[0, 0] = 0
    cells[rows - 1, cols - 1] = 0
    return GridProblem.from_array(cells, start=(0, 0), goal=(rows - 1, cols - 1))
