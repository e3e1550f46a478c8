"""Read block chains from text files: one decimal block value per line."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Union

from . import config as _cfg
from .arith import block_limit
from .errors import BlockFormatError

logger = logging.getLogger(__name__)


def parse_blocks(lines: Iterable[str], bits: int = _cfg.BLOCK_BITS, source: str = "<input>") -> Iterator[int]:
    """Yield block values from *lines*, skipping blank lines.

    Every value must be a non-negative integer strictly below half the
    maximum of a *bits*-wide block, so that any two blocks sum without
    overflow.
    """
    limit = block_limit(bits)
    for lineno, line in enumerate(lines, start=1):
        raw = line.strip()
        if not raw:
            continue
        try:
            value = int(raw, 10)
        except ValueError:
            raise BlockFormatError(source, lineno, f"not an integer: {raw!r}") from None
        if value < 0:
            raise BlockFormatError(source, lineno, f"negative block value: {value}")
        if value >= limit:
            raise BlockFormatError(source, lineno, f"block value {value} does not fit a {bits}-bit chain")
        yield value


def read_blocks(path: Union[str, os.PathLike], bits: int = _cfg.BLOCK_BITS) -> Iterator[int]:
    """Lazily read blocks from the file at *path*; the file stays open while iterating."""
    path = Path(path)
    logger.debug("Reading blocks from %s", path)
    with path.open("r", encoding="utf-8") as fh:
        yield from parse_blocks(fh, bits, source=str(path))
