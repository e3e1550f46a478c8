"""Engine backed by a sorted copy of the window and a two-pointer scan.

The window is kept as a flat ascending list: a query walks it once from both
ends (O(I)); a slide removes one value and inserts another with binary
search, which still shifts the list and so costs O(I).
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Optional

from .arith import block_max, checked_add


class SortedScanEngine:
    """Ascending list of the window's blocks, duplicates kept."""

    def __init__(self, blocks: Iterable[int], bits: int) -> None:
        self.bits = bits
        self._max = block_max(bits)
        self._ordered = sorted(blocks)

    def contains(self, target: int) -> bool:
        ordered = self._ordered
        lo, hi = 0, len(ordered) - 1
        # lo == hi would pair a position with itself
        while lo < hi:
            total = checked_add(ordered[lo], ordered[hi], self.bits, self._max)
            if total == target:
                return True
            if total < target:
                lo += 1
            else:
                hi -= 1
        return False

    def replace(self, old: int, new: int, remaining: Optional[Iterable[int]] = None) -> None:
        """Remove one occurrence of *old* and insert *new*; *remaining* is unused."""
        idx = bisect_left(self._ordered, old)
        if idx == len(self._ordered) or self._ordered[idx] != old:
            raise ValueError(f"Block {old} is not in the sorted window")
        del self._ordered[idx]
        insort(self._ordered, new)

    def snapshot(self) -> tuple[int, ...]:
        return tuple(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)
