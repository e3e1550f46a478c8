from __future__ import annotations

import logging
import sys
from itertools import combinations
from pathlib import Path
from typing import Callable, Iterable

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from blockmine.engine import ENGINES  # noqa: E402

# Keep per-block DEBUG records out of test output
logging.basicConfig(level=logging.WARNING)


def _brute_force_contains(window: Iterable[int], target: int) -> bool:
    return any(a + b == target for a, b in combinations(list(window), 2))


@pytest.fixture(params=sorted(ENGINES))
def engine_name(request) -> str:
    """Run the test once per registered engine."""
    return request.param


@pytest.fixture
def brute_force() -> Callable[[Iterable[int], int], bool]:
    """O(I²) reference: does any pair of distinct positions sum to the target?"""
    return _brute_force_contains
