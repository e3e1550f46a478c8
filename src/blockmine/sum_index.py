"""Engine backed by the multiset of every pairwise window sum.

Construction is O(I²) in time and memory; lookups are O(1) and each slide of
the window touches exactly 2·(I-1) sums.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from .arith import block_max, checked_add

logger = logging.getLogger(__name__)


class SumIndexEngine:
    """Multiset (sum -> multiplicity) over all pairs of distinct window positions."""

    def __init__(self, blocks: Iterable[int], bits: int) -> None:
        self.bits = bits
        self._max = block_max(bits)
        window = list(blocks)
        self._sums: Counter[int] = Counter()
        for i, first in enumerate(window[:-1]):
            for second in window[i + 1:]:
                self._sums[checked_add(first, second, bits, self._max)] += 1
        logger.debug("Indexed %d pair sums over %d blocks", sum(self._sums.values()), len(window))

    def contains(self, target: int) -> bool:
        # Counter lookups don't insert missing keys.
        return self._sums[target] > 0

    def replace(self, old: int, new: int, remaining: Optional[Iterable[int]] = None) -> None:
        """Swap every sum involving *old* for the matching sum involving *new*.

        *remaining* must be exactly the I-1 blocks that stay in the window;
        passing the full window would count ``old + new`` or ``new + new``.
        The new sums are computed before anything is removed, so an overflow
        leaves the index untouched.
        """
        if remaining is None:
            raise TypeError("SumIndexEngine.replace() needs the remaining window blocks")
        kept = list(remaining)
        fresh = [checked_add(new, block, self.bits, self._max) for block in kept]
        for block in kept:
            stale = old + block
            count = self._sums[stale] - 1
            if count > 0:
                self._sums[stale] = count
            elif count == 0:
                del self._sums[stale]
            else:
                raise ValueError(f"Sum {stale} is not indexed; engine is out of step with the window")
        self._sums.update(fresh)

    def snapshot(self) -> frozenset:
        return frozenset(self._sums.items())

    def __len__(self) -> int:
        return sum(self._sums.values())
