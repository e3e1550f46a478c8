"""Central configuration for runtime-tunable parameters.

All constants can be overridden via environment variables so that the
``blockmine`` command validates production-sized chains by default, while
tests and ad-hoc runs can switch engines or shrink the window without
touching code. Command-line flags take precedence over these values.
"""

from __future__ import annotations

import os

# ===========================================================================
# Validation Window
# ===========================================================================
# BLOCKMINE_WINDOW_SIZE: Number of most recently accepted blocks a candidate
#   is checked against (the "I" of the validation rule). Must be at least 2.
#   Defaults to 100.
#   Example: export BLOCKMINE_WINDOW_SIZE=5
WINDOW_SIZE: int = int(os.getenv("BLOCKMINE_WINDOW_SIZE", "100"))


# ===========================================================================
# Engine Selection
# ===========================================================================
# BLOCKMINE_ENGINE: Validation strategy used by Mine.
#   "sum-index"   – keeps a multiset of every pairwise sum (O(1) lookups, O(I²) memory).
#   "sorted-scan" – keeps the window sorted and answers with a two-pointer scan.
#   Defaults to "sum-index".
#   Example: export BLOCKMINE_ENGINE=sorted-scan
ENGINE: str = os.getenv("BLOCKMINE_ENGINE", "sum-index")


# ===========================================================================
# Block Width
# ===========================================================================
# BLOCKMINE_BLOCK_BITS: Width (in bits) of the unsigned block domain.
#   Any single block must stay below half the domain maximum so that the sum
#   of two blocks always fits. One of 8, 16, 32, 64, 128.
#   Defaults to 128 (challenge inputs grow past 64 bits).
#   Example: export BLOCKMINE_BLOCK_BITS=64
BLOCK_BITS: int = int(os.getenv("BLOCKMINE_BLOCK_BITS", "128"))

# Widths accepted by blockmine.arith. Not typically overridden.
SUPPORTED_BITS = (8, 16, 32, 64, 128)


# ===========================================================================
# Benchmark Defaults
# ===========================================================================
# BLOCKMINE_BENCH_LENGTH: Total blocks (seed included) in each generated
#   benchmark chain. Defaults to 1000.
BENCH_LENGTH: int = int(os.getenv("BLOCKMINE_BENCH_LENGTH", "1000"))

# BLOCKMINE_BENCH_REPEAT: Timed repetitions per benchmark case. Defaults to 5.
BENCH_REPEAT: int = int(os.getenv("BLOCKMINE_BENCH_REPEAT", "5"))

# Window sizes benchmarked when none are given on the command line.
BENCH_WINDOW_SIZES = (25, 50, 100)


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# BLOCKMINE_DEBUG: If "1", enables detailed debug logging across modules,
#   including one record per validated block.
#   Defaults to "0" (disabled).
#   Example: export BLOCKMINE_DEBUG=1
DEBUG: bool = os.getenv("BLOCKMINE_DEBUG", "0") == "1"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
