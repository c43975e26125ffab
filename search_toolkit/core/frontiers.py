# search_toolkit/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class FIFOQueue(Generic[T]):
    def __init__(self, first: Optional[T] = None):
        self.q = deque()
        if first is not None:
            self.q.append(first)
    def push(self, x: T): self.q.append(x)
    def pop(self) -> T: return self.q.popleft()
    def __len__(self): return len(self.q)
    def peek(self) -> T: return self.q[0]


class PriorityQueue(Generic[T]):
    """
    Min-heap of (priority, item) pairs.

    Equal priorities pop in insertion order; items themselves are never compared.
    The same item may be queued several times with different priorities.
    """
    def __init__(self, priority: Optional[float] = None, item: Optional[T] = None):
        self.h: List[Tuple[float, int, Any]] = []
        self.counter = 0  # tie-breaker for stability
        if priority is not None:
            self.push(priority, item)

    def push(self, priority: float, item: T) -> None:
        self.counter += 1
        heapq.heappush(self.h, (priority, self.counter, item))

    def pop(self) -> Tuple[float, T]:
        priority, _, item = heapq.heappop(self.h)
        return priority, item

    def is_empty(self) -> bool:
        return not self.h

    def __len__(self): return len(self.h)

    def peek(self) -> Tuple[float, T]:
        priority, _, item = self.h[0]
        return priority, item
