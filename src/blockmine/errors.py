"""Exception hierarchy shared by the mine core, the loader and the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .mine import InvalidBlock


class MineError(Exception):
    """Base for every error raised by blockmine."""


class InvalidInitialWindow(MineError, ValueError):
    """Raised when a seed cannot form a window (wrong length or size below 2)."""

    def __init__(self, window_size: int, seed_len: int) -> None:
        self.window_size = window_size
        self.seed_len = seed_len
        if window_size < 2:
            msg = f"Window size must be at least 2, got {window_size}"
        else:
            msg = (
                f"Initialization blocks must have exactly {window_size} blocks. "
                f"Size of the blocks provided: {seed_len}"
            )
        super().__init__(msg)


class InvalidBlockError(MineError):
    """Raised by Mine.extend() at the first block that fails validation."""

    def __init__(self, outcome: "InvalidBlock", window_size: int) -> None:
        self.outcome = outcome
        self.window_size = window_size
        super().__init__(
            f"Validation for block number {outcome.position} failed. "
            f"Invalid block value: {outcome.block}. A block is valid iff it is the "
            f"sum of any two blocks in the previous {window_size}."
        )


class BlockOverflowError(MineError, OverflowError):
    """Raised when two blocks sum past the block width, or one block is too wide to pair.

    Only reachable when a block violates the input precondition (every block
    below half the width maximum), so it is never treated as a rejection.
    """

    def __init__(self, a: int, b: Optional[int], bits: int) -> None:
        self.a = a
        self.b = b
        self.bits = bits
        if b is None:
            msg = f"block {a} is not below half the maximum of a {bits}-bit block"
        else:
            msg = f"{a} + {b} overflows a {bits}-bit block"
        super().__init__(msg)


class BlockFormatError(MineError, ValueError):
    """Raised when a block file line is not a usable block value."""

    def __init__(self, source: str, lineno: int, reason: str) -> None:
        self.source = source
        self.lineno = lineno
        self.reason = reason
        super().__init__(f"{source}:{lineno}: {reason}")
