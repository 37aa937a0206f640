import heapq
import itertools
from typing import Iterable, List, Optional, Tuple


class FactorMultiset:
    """Prime factors of a generated value, kept in a max-priority queue.

    - insert(key, value) adds one factor instance
    - pop_max() removes and returns the value with the largest key
    - clone() copies the queue so it can be drained without losing it
    """

    def __init__(self, primes: Optional[Iterable[int]] = None):
        self._heap: List[Tuple[int, int, int]] = []
        self._seq = itertools.count()
        if primes is not None:
            for p in primes:
                self.add(p)

    def insert(self, key: int, value: int) -> None:
        heapq.heappush(self._heap, (-key, next(self._seq), value))

    def add(self, prime: int) -> None:
        self.insert(prime, prime)

    def pop_max(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty FactorMultiset")
        return heapq.heappop(self._heap)[2]

    def clone(self) -> "FactorMultiset":
        other = FactorMultiset()
        other._heap = list(self._heap)
        other._seq = itertools.count(next(self._seq))
        return other

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def descending(self) -> List[int]:
        drain = self.clone()
        return [drain.pop_max() for _ in range(drain.size())]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FactorMultiset):
            return NotImplemented
        return self.descending() == other.descending()

    def __repr__(self) -> str:
        return f"FactorMultiset({self.descending()!r})"
