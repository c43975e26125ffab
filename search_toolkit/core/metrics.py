# search_toolkit/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import time, tracemalloc

from .problem import Action


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Action] = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: Optional[int] = None
    error: Optional[str] = None

    def plan(self) -> Optional[List[Action]]:
        """The action sequence, or None when the search failed."""
        return list(self.actions) if self.success else None


class MeasuredRun:
    """
    Context manager for timing and (optionally) approximate peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.

    Memory is only traced when `track_memory` is set, and a trace that was already
    running when the block started is left running.
    """
    def __init__(self, track_memory: bool = False) -> None:
        self.track_memory = track_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.track_memory:
            self._tracing = True
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._owns_trace = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_trace:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> Optional[int]:
        """Approx peak KB, or None when memory is not tracked."""
        if not self.track_memory:
            return None
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
