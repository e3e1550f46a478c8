"""Fixed-capacity FIFO of the most recently accepted blocks."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Iterable, Iterator

from .errors import InvalidInitialWindow


class Window:
    """Ordered buffer of exactly ``size`` blocks, oldest first.

    The window never grows or shrinks: the only mutation is
    evict_oldest_and_push(), which drops the oldest block and appends a new one.
    """

    def __init__(self, seed: Iterable[int], size: int) -> None:
        blocks = list(seed)
        if size < 2 or len(blocks) != size:
            raise InvalidInitialWindow(size, len(blocks))
        self.size = size
        self._blocks: deque[int] = deque(blocks)

    def oldest(self) -> int:
        """Return the oldest block without removing it."""
        return self._blocks[0]

    def newest(self) -> int:
        return self._blocks[-1]

    def evict_oldest_and_push(self, block: int) -> int:
        """Drop the oldest block, append *block* and return the evicted value."""
        evicted = self._blocks.popleft()
        self._blocks.append(block)
        return evicted

    def newer(self) -> Iterator[int]:
        """Iterate over every block except the oldest one."""
        return islice(self._blocks, 1, None)

    def snapshot(self) -> tuple[int, ...]:
        return tuple(self._blocks)

    def __iter__(self) -> Iterator[int]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        return f"Window(size={self.size}, blocks={list(self._blocks)!r})"
