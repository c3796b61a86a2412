"""
Unit tests for the instrumented max-subarray algorithm.

Tests cover:
- Input validation and exact error messages
- Single-element, all-negative, all-zero and mixed sequences
- Tie-breaking (earliest maximal range wins)
- Extreme 32-bit values and fixed-width numpy inputs
- Operation accounting
- Brute-force cross-check on random sequences
"""

import dataclasses

import numpy as np
import pytest

from kadane_core.algorithms import (
    MAX_ARRAY_SIZE,
    InvalidArgumentError,
    find_max_subarray,
    find_max_subarray_optimized,
    validate_input,
)
from kadane_core.proto import SubarrayResult
from tests.conftest import INT32_MAX, INT32_MIN, brute_force_max_sum


# =============================================================================
# Input Validation
# =============================================================================


class TestInputValidation:
    """Tests for precondition failures."""

    def test_null_array(self):
        """Test that None is rejected with the exact message."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            find_max_subarray(None)

        assert str(exc_info.value) == "Array cannot be null"

    def test_empty_array(self):
        """Test that an empty sequence is rejected with the exact message."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            find_max_subarray([])

        assert str(exc_info.value) == "Array cannot be empty"

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            find_max_subarray([])

    def test_validate_oversized_array(self):
        """Test that validate_input enforces the 1,000,000 element limit."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_input([0] * (MAX_ARRAY_SIZE + 1))

        assert str(exc_info.value) == "Array size exceeds maximum limit of 1,000,000 elements"

    def test_validate_accepts_limit(self):
        validate_input([0] * MAX_ARRAY_SIZE)

    def test_validate_null_and_empty(self):
        with pytest.raises(InvalidArgumentError, match="^Array cannot be null$"):
            validate_input(None)
        with pytest.raises(InvalidArgumentError, match="^Array cannot be empty$"):
            validate_input([])

    @pytest.mark.parametrize("algorithm", [find_max_subarray, find_max_subarray_optimized])
    def test_size_limit_left_to_caller(self, algorithm):
        """The algorithms do not call validate_input themselves."""
        result = algorithm([0] * (MAX_ARRAY_SIZE + 1))

        assert result.max_sum == 0
        assert (result.start_index, result.end_index) == (0, 0)


# =============================================================================
# Known Results
# =============================================================================


class TestKnownResults:
    """Tests against sequences with hand-checked answers."""

    def test_known_cases(self, known_cases):
        for sequence, max_sum, start, end in known_cases:
            result = find_max_subarray(sequence)
            assert (result.max_sum, result.start_index, result.end_index) == \
                (max_sum, start, end), f"Failed for {sequence}"

    def test_single_positive_element(self):
        result = find_max_subarray([42])

        assert result.max_sum == 42
        assert result.start_index == 0
        assert result.end_index == 0
        assert result.metrics is not None

    def test_all_negative_picks_least_negative(self):
        result = find_max_subarray([-5, -2, -8, -1, -4])

        assert result.max_sum == -1
        assert (result.start_index, result.end_index) == (3, 3)

    def test_classic_example(self, classic_array):
        result = find_max_subarray(classic_array)

        assert result.max_sum == 6
        assert (result.start_index, result.end_index) == (3, 6)

    def test_negative_element_inside_positive_run(self):
        """Negative elements do not restart a non-negative running sum."""
        result = find_max_subarray([5, -3, 2, -1, 4])

        assert result.max_sum == 7
        assert (result.start_index, result.end_index) == (0, 4)

    def test_input_not_mutated(self, classic_array):
        original = list(classic_array)
        find_max_subarray(classic_array)
        assert classic_array == original

    def test_accepts_tuple(self):
        result = find_max_subarray((1, -2, 3))
        assert result.max_sum == 3


# =============================================================================
# Tie-Breaking
# =============================================================================


class TestTieBreaking:
    """Tests that the earliest maximal range is kept."""

    def test_equal_later_range_ignored(self):
        result = find_max_subarray([3, -3, 3])

        assert result.max_sum == 3
        assert (result.start_index, result.end_index) == (0, 0)

    def test_trailing_zero_not_included(self):
        result = find_max_subarray([-1, 0, -2, 3, 0, -1, 2, 0])

        assert result.end_index == 6

    def test_leading_zero_extends_range(self):
        """A zero running sum is extended, not restarted."""
        result = find_max_subarray([0, 3])

        assert result.max_sum == 3
        assert (result.start_index, result.end_index) == (0, 1)

    def test_all_zeros(self):
        result = find_max_subarray([0] * 10)

        assert result.max_sum == 0
        assert (result.start_index, result.end_index) == (0, 0)


# =============================================================================
# Extreme Values
# =============================================================================


class TestExtremeValues:
    """Tests for values at the 32-bit integer bounds."""

    def test_large_positive_values(self):
        result = find_max_subarray([INT32_MAX, -1, INT32_MAX])

        assert result.max_sum == 2 * INT32_MAX - 1
        assert (result.start_index, result.end_index) == (0, 2)

    def test_extreme_values(self):
        result = find_max_subarray([INT32_MIN + 1, INT32_MAX, INT32_MIN + 1])

        assert result.max_sum == INT32_MAX
        assert (result.start_index, result.end_index) == (1, 1)

    def test_int32_numpy_input_does_not_overflow(self):
        """Sum exceeds int32 range but the accumulator is arbitrary precision."""
        values = np.array([INT32_MAX, INT32_MAX, INT32_MAX], dtype=np.int32)
        result = find_max_subarray(values)

        assert result.max_sum == 3 * INT32_MAX
        assert isinstance(result.max_sum, int)

    def test_min_value_singleton(self):
        result = find_max_subarray([INT32_MIN])
        assert result.max_sum == INT32_MIN


# =============================================================================
# Operation Accounting
# =============================================================================


class TestMetricsAccounting:
    """Tests for operation counts recorded during a run."""

    def test_single_element_counts(self):
        metrics = find_max_subarray([42]).metrics

        assert metrics.memory_allocations == 2
        assert metrics.array_accesses == 2
        assert metrics.assignments == 5
        assert metrics.comparisons == 0

    def test_all_positive_counts(self):
        """Every step extends and strictly improves."""
        metrics = find_max_subarray([1, 2, 3, 4, 5]).metrics

        assert metrics.memory_allocations == 2
        assert metrics.array_accesses == 6
        assert metrics.comparisons == 12
        assert metrics.assignments == 5 + 4 * 5

    def test_all_negative_counts(self):
        """Every step resets; improvements at indices 1 and 3 only."""
        metrics = find_max_subarray([-5, -2, -8, -1, -4]).metrics

        assert metrics.array_accesses == 6
        assert metrics.comparisons == 12
        assert metrics.assignments == 5 + 4 * 3 + 2 * 3

    def test_counts_positive_for_nontrivial_input(self, classic_array):
        metrics = find_max_subarray(classic_array).metrics

        assert metrics.comparisons > 0
        assert metrics.array_accesses > 0
        assert metrics.assignments > 0
        assert metrics.memory_allocations > 0

    def test_metrics_scale_with_length(self):
        pattern = [3, -1, -2, 4]
        small = find_max_subarray(pattern * 10).metrics
        large = find_max_subarray(pattern * 1000).metrics

        assert large.array_accesses > small.array_accesses
        assert large.comparisons > small.comparisons

    def test_linear_array_accesses(self):
        """One read per element plus one extra for the initial element."""
        for n in (1, 10, 100, 1000):
            metrics = find_max_subarray(list(range(n))).metrics
            assert metrics.array_accesses == n + 1


# =============================================================================
# Result Object
# =============================================================================


class TestResult:
    """Tests for the returned SubarrayResult."""

    def test_result_completeness(self, classic_array):
        result = find_max_subarray(classic_array)

        assert isinstance(result, SubarrayResult)
        assert 0 <= result.start_index <= result.end_index < len(classic_array)
        assert result.length == 4

    def test_result_to_string(self, classic_array):
        text = str(find_max_subarray(classic_array))

        assert "Max Sum" in text
        assert "Range" in text
        assert "Metrics" in text

    def test_result_is_immutable(self):
        result = find_max_subarray([1, 2])
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.max_sum = 100

    def test_invalid_range_rejected(self):
        result = find_max_subarray([1])
        with pytest.raises(ValueError):
            SubarrayResult(max_sum=1, start_index=2, end_index=1, metrics=result.metrics)


# =============================================================================
# Randomized Cross-Check
# =============================================================================


class TestBruteForceCrossCheck:
    """Compare against exhaustive search on small random sequences."""

    def test_random_sequences(self, rng):
        for _ in range(300):
            length = int(rng.integers(1, 51))
            values = rng.integers(-10, 11, size=length).tolist()

            result = find_max_subarray(values)

            assert 0 <= result.start_index <= result.end_index < length
            assert sum(values[result.start_index:result.end_index + 1]) == result.max_sum
            assert result.max_sum == brute_force_max_sum(values), f"Failed for {values}"

    def test_duplicate_elements(self):
        values = [2, 2, -5, 2, 2, 3]
        result = find_max_subarray(values)

        assert result.max_sum == 7
        assert 0 <= result.start_index <= result.end_index < len(values)
