"""Overflow-checked arithmetic over a fixed-width unsigned block domain."""

from __future__ import annotations

from typing import Optional

from . import config as _cfg
from .errors import BlockOverflowError


def block_max(bits: int) -> int:
    """Return the largest value representable in *bits* unsigned bits."""
    if bits not in _cfg.SUPPORTED_BITS:
        raise ValueError(f"Unsupported block width: {bits} (expected one of {_cfg.SUPPORTED_BITS})")
    return (1 << bits) - 1


def block_limit(bits: int) -> int:
    """Exclusive upper bound for a single block: strictly under half of block_max."""
    return block_max(bits) // 2 + 1


def checked_add(a: int, b: int, bits: int, maximum: Optional[int] = None) -> int:
    """Return ``a + b``, raising BlockOverflowError if it does not fit in *bits*.

    Hot loops pass *maximum* (``block_max(bits)``, computed once) to skip the
    width lookup on every addition.
    """
    total = a + b
    if total > (block_max(bits) if maximum is None else maximum):
        raise BlockOverflowError(a, b, bits)
    return total


def check_block(value: int, bits: int, limit: Optional[int] = None) -> int:
    """Return *value* if two such blocks always sum within *bits*, else raise BlockOverflowError."""
    if value >= (block_limit(bits) if limit is None else limit):
        raise BlockOverflowError(value, None, bits)
    return value
