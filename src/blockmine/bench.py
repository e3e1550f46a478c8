"""``blockmine-bench``: time Mine construction and chain validation per engine.

Chains are synthetic but fully valid: a seed of random 31-bit blocks is
extended with ``x[i] = x[i - I] + x[i - I + 1]``, i.e. the sum of the oldest
two blocks of the window, so every engine walks the happy path end to end.
Each block roughly doubles every ``I`` steps, so long chains over small
windows need the 128-bit width.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from . import config as _cfg
from .engine import ENGINES, EngineName
from .mine import Mine

logger = logging.getLogger(__name__)

SEED_HIGH = 1 << 31


@dataclass(frozen=True)
class BenchResult:
    case: str
    engine: str
    window_size: int
    median_s: float
    min_s: float

    def format(self) -> str:
        return (
            f"{self.case:<10} {self.engine:<12} I={self.window_size:<5} "
            f"median={self.median_s * 1e3:9.3f} ms  min={self.min_s * 1e3:9.3f} ms"
        )


def generate_seed(window_size: int, rng_seed: int = 0) -> List[int]:
    """Return *window_size* reproducible random blocks in ``[1, 2**31)``."""
    rng = np.random.default_rng(rng_seed)
    return [int(v) for v in rng.integers(1, SEED_HIGH, size=window_size, dtype=np.int64)]


def generate_stream(seed: Sequence[int], length: int) -> List[int]:
    """Extend *seed* to *length* blocks, each the sum of the two oldest window blocks."""
    window_size = len(seed)
    blocks = list(seed)
    for i in range(window_size, length):
        blocks.append(blocks[i - window_size] + blocks[i - window_size + 1])
    return blocks


def _time(fn: Callable[[], object], repeat: int) -> np.ndarray:
    timings = np.empty(repeat, dtype=np.float64)
    for i in range(repeat):
        start = time.perf_counter()
        fn()
        timings[i] = time.perf_counter() - start
    return timings


def run_benchmarks(
    window_sizes: Sequence[int] = _cfg.BENCH_WINDOW_SIZES,
    engines: Sequence[EngineName] = tuple(ENGINES),  # type: ignore[assignment]
    length: int = _cfg.BENCH_LENGTH,
    repeat: int = _cfg.BENCH_REPEAT,
    bits: int = _cfg.BLOCK_BITS,
) -> List[BenchResult]:
    results: List[BenchResult] = []
    for window_size in window_sizes:
        chain = generate_stream(generate_seed(window_size), max(length, window_size))
        seed, tail = chain[:window_size], chain[window_size:]
        for engine in engines:
            logger.debug("Benchmarking %s with I=%d over %d blocks", engine, window_size, len(chain))

            def build() -> Mine:
                return Mine(seed, window_size, engine=engine, bits=bits)

            def validate() -> None:
                build().extend(tail)

            for case, fn in (("new", build), ("validate", validate)):
                timings = _time(fn, repeat)
                results.append(
                    BenchResult(case, engine, window_size, float(np.median(timings)), float(timings.min()))
                )
    return results


def main(argv: Optional[List[str]] = None) -> None:  # pragma: no cover – CLI entry
    parser = argparse.ArgumentParser(prog="blockmine-bench", description="Benchmark blockmine engines")
    parser.add_argument("-w", "--window-size", type=int, nargs="+", default=list(_cfg.BENCH_WINDOW_SIZES))
    parser.add_argument("-e", "--engine", choices=sorted(ENGINES), nargs="+", default=sorted(ENGINES))
    parser.add_argument("-n", "--length", type=int, default=_cfg.BENCH_LENGTH)
    parser.add_argument("-r", "--repeat", type=int, default=_cfg.BENCH_REPEAT)
    parser.add_argument("--bits", type=int, choices=_cfg.SUPPORTED_BITS, default=_cfg.BLOCK_BITS)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or _cfg.DEBUG) else logging.INFO,
        format=_cfg.LOG_FORMAT,
    )

    for result in run_benchmarks(args.window_size, args.engine, args.length, args.repeat, args.bits):
        print(result.format())


if __name__ == "__main__":  # pragma: no cover
    main()
