"""Mine: the orchestrator that slides the validation window over a chain.

A new block is valid iff it is the sum of two blocks at distinct positions
among the previous ``window_size`` accepted blocks.  The Mine owns one Window
and one engine and keeps them in lockstep: on acceptance the oldest block is
evicted from both and the candidate is pushed into both; on rejection neither
is touched.

Typical use::

    mine = Mine([35, 20, 15, 25, 47], window_size=5)
    for index, outcome in mine.validate_stream(candidates):
        if isinstance(outcome, InvalidBlock):
            ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Hashable, Iterable, Iterator, Optional, Tuple, Union

from . import config as _cfg
from .arith import block_limit, check_block
from .engine import Engine, EngineName, make_engine
from .errors import InvalidBlockError, InvalidInitialWindow
from .window import Window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    """Candidate joined the chain as block number *position* (1-based)."""

    block: int
    position: int


@dataclass(frozen=True)
class InvalidBlock:
    """Candidate at chain position *position* is not a sum of two window blocks."""

    block: int
    position: int


Outcome = Union[Accepted, InvalidBlock]


class Mine:
    def __init__(
        self,
        seed: Iterable[int],
        window_size: int,
        *,
        engine: EngineName = _cfg.ENGINE,  # type: ignore[assignment]
        bits: int = _cfg.BLOCK_BITS,
    ) -> None:
        """Build the window and engine from *seed*; the seed itself is never validated."""
        self._window = Window(seed, window_size)
        self._engine: Engine = make_engine(engine, self._window, bits)
        self.engine_name = engine
        self.bits = bits
        self._limit = block_limit(bits)
        self._total_blocks = window_size

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_blocks(
        cls,
        blocks: Iterable[int],
        window_size: int,
        **kwargs,
    ) -> Tuple["Mine", Iterator[int]]:
        """Seed a Mine with the first *window_size* items of *blocks*.

        Returns the Mine and an iterator over the blocks not yet consumed.
        """
        remaining = iter(blocks)
        seed = list(islice(remaining, max(window_size, 0)))
        if len(seed) < window_size:
            raise InvalidInitialWindow(window_size, len(seed))
        return cls(seed, window_size, **kwargs), remaining

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def window_size(self) -> int:
        return self._window.size

    @property
    def total_blocks(self) -> int:
        """Blocks absorbed so far, seed included."""
        return self._total_blocks

    @property
    def window(self) -> Tuple[int, ...]:
        return self._window.snapshot()

    def snapshot(self) -> Tuple[Tuple[int, ...], Hashable]:
        """Return (window blocks, engine state) for before/after comparisons."""
        return self._window.snapshot(), self._engine.snapshot()

    def __repr__(self) -> str:
        return (
            f"Mine(window_size={self.window_size}, engine={self.engine_name!r}, "
            f"total_blocks={self._total_blocks})"
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def try_extend_one(self, candidate: int) -> Outcome:
        """Validate *candidate* and, if it passes, slide it into the window.

        A candidate too wide for the block width raises BlockOverflowError
        before any state is touched; the engine is updated before the window
        so a failure there leaves the window as it was.
        """
        check_block(candidate, self.bits, self._limit)
        position = self._total_blocks + 1
        if not self._engine.contains(candidate):
            logger.debug("Block #%d rejected: %d", position, candidate)
            return InvalidBlock(candidate, position)

        evicted = self._window.oldest()
        self._engine.replace(evicted, candidate, list(self._window.newer()))
        self._window.evict_oldest_and_push(candidate)
        self._total_blocks = position
        logger.debug("Block #%d accepted: %d (evicted %d)", position, candidate, evicted)
        return Accepted(candidate, position)

    def validate_stream(self, candidates: Iterable[int]) -> Iterator[Tuple[int, Outcome]]:
        """Lazily yield ``(index, outcome)`` for each candidate, in order.

        Invalid blocks do not end the stream; stop early with
        ``itertools.takewhile`` or exhaust it to find every weak block.
        """
        for index, candidate in enumerate(candidates):
            yield index, self.try_extend_one(candidate)

    def extend(self, blocks: Iterable[int]) -> int:
        """Extend with every block, raising InvalidBlockError at the first invalid one.

        Blocks accepted before the failure stay in the chain.  Returns the
        number of blocks accepted.
        """
        accepted = 0
        for block in blocks:
            outcome = self.try_extend_one(block)
            if isinstance(outcome, InvalidBlock):
                raise InvalidBlockError(outcome, self.window_size)
            accepted += 1
        return accepted


def first_invalid(
    blocks: Iterable[int],
    window_size: int,
    **kwargs,
) -> Optional[InvalidBlock]:
    """Validate a whole chain (seed first) and return its first invalid block, if any."""
    mine, remaining = Mine.from_blocks(blocks, window_size, **kwargs)
    for _, outcome in mine.validate_stream(remaining):
        if isinstance(outcome, InvalidBlock):
            return outcome
    return None
