"""Validation engine contract and the registry Mine selects strategies from.

An engine answers one question about the current window: *is there a pair of
blocks at two distinct positions that sums to ``target``?*  It also keeps
itself in step with the window as Mine slides it forward.  Engines share
only this contract, not state:

    contains(target)                -> bool
    replace(old, new, remaining)    -> None   (remaining = the I-1 unaffected blocks)
    snapshot()                      -> hashable, order-independent view of state
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Optional, Protocol

from typing_extensions import Literal

from .sorted_scan import SortedScanEngine
from .sum_index import SumIndexEngine

EngineName = Literal["sum-index", "sorted-scan"]


class Engine(Protocol):
    def contains(self, target: int) -> bool:
        ...

    def replace(self, old: int, new: int, remaining: Optional[Iterable[int]] = None) -> None:
        ...

    def snapshot(self) -> Hashable:
        ...


ENGINES: Dict[str, Callable[[Iterable[int], int], Engine]] = {
    "sum-index": SumIndexEngine,
    "sorted-scan": SortedScanEngine,
}


def make_engine(name: EngineName, blocks: Iterable[int], bits: int) -> Engine:
    """Build the engine registered under *name* over the window *blocks*."""
    try:
        factory = ENGINES[name]
    except KeyError:
        raise ValueError(f"Unknown engine {name!r} (expected one of {sorted(ENGINES)})") from None
    return factory(blocks, bits)
