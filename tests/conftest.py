"""
Pytest configuration and shared fixtures for the Kadane benchmark tests.

This module provides reusable input sequences, a brute-force reference
solver, and a scripted line reader for driving the interactive runner.
"""

import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import numpy as np
import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

INT32_MAX = 2 ** 31 - 1
INT32_MIN = -2 ** 31


# =============================================================================
# Input Sequence Fixtures
# =============================================================================


@pytest.fixture
def classic_array() -> List[int]:
    """
    Textbook example with a mixed-sign maximum in the middle.

    Returns:
        Sequence whose best range is [3, 6] with sum 6.
    """
    return [-2, 1, -3, 4, -1, 2, 1, -5, 4]


@pytest.fixture
def known_cases() -> List[Tuple[List[int], int, int, int]]:
    """
    Sequences with their expected (max_sum, start_index, end_index).

    Returns:
        List of (sequence, max_sum, start, end) tuples.
    """
    return [
        ([42], 42, 0, 0),
        ([-15], -15, 0, 0),
        ([0], 0, 0, 0),
        ([-5, -2, -8, -1, -4], -1, 3, 3),
        ([1, 2, 3, 4, 5], 15, 0, 4),
        ([0, 0, 0, 0], 0, 0, 0),
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6, 3, 6),
        ([5, -3, 2, -1, 4], 7, 0, 4),
        ([-1, 0, -2, 3, 0, -1, 2, 0], 4, 3, 6),
        ([10, -20, 1, 2, 3], 10, 0, 0),
        ([1, 2, 3, -20, 10], 10, 4, 4),
        ([INT32_MIN + 1, INT32_MAX, INT32_MIN + 1], INT32_MAX, 1, 1),
    ]


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible randomized checks."""
    return np.random.default_rng(42)


# =============================================================================
# Runner Fixtures
# =============================================================================


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """
    Factory for line readers that replay a fixed script.

    The returned reader raises EOFError once the script is exhausted,
    matching builtins.input at end of stream.
    """

    def factory(lines: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(lines)

        def reader(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        return reader

    return factory


# =============================================================================
# Helper Functions
# =============================================================================


def brute_force_max_sum(values: List[int]) -> int:
    """
    Largest contiguous sum by checking every subrange.

    Args:
        values: Non-empty sequence.

    Returns:
        Maximum sum over all [i, j] ranges.
    """
    best = None
    for i in range(len(values)):
        total = 0
        for j in range(i, len(values)):
            total += int(values[j])
            if best is None or total > best:
                best = total
    return best
