"""
Instrumented Kadane's algorithm for the maximum-sum contiguous subarray.

Two variants share one contract:
- find_max_subarray: scalar single pass, counts every primitive operation
- find_max_subarray_optimized: vectorized prefix-sum formulation on numpy

The scan resets only when the accumulated running sum is negative (not when
the current element is negative), and improvements must be strict, so ties
keep the earliest maximal range.
"""

import logging
from typing import Callable, Dict, Sequence

import numpy as np

from kadane_core.metrics.counters import OperationMetrics
from kadane_core.proto.subarray_result import SubarrayResult

logger = logging.getLogger(__name__)

MAX_ARRAY_SIZE = 1_000_000
INT64_MAX = 2 ** 63 - 1


class InvalidArgumentError(ValueError):
    """Input sequence violates a precondition of the algorithm."""


def _check_present_and_non_empty(sequence):
    if sequence is None:
        raise InvalidArgumentError("Array cannot be null")

    if len(sequence) == 0:
        raise InvalidArgumentError("Array cannot be empty")


def validate_input(sequence: Sequence[int]) -> None:
    """
    Validate a sequence before handing it to an algorithm variant.

    Not called by the algorithms themselves; callers decide when the size
    limit applies.

    Args:
        sequence: Candidate input sequence

    Raises:
        InvalidArgumentError: If sequence is None, empty, or longer than
            MAX_ARRAY_SIZE elements
    """
    _check_present_and_non_empty(sequence)

    if len(sequence) > MAX_ARRAY_SIZE:
        raise InvalidArgumentError("Array size exceeds maximum limit of 1,000,000 elements")


def find_max_subarray(sequence: Sequence[int]) -> SubarrayResult:
    """
    Find the maximum-sum contiguous subarray in one instrumented pass.

    Accounting per run:
        - allocations: the metrics object and the result
        - array accesses: two at initialisation, one per later element
        - assignments: five at initialisation; per element one for the read,
          two on reset or one on extend, three on strict improvement
        - comparisons: per element the loop bound, the negative-sum test and
          the improvement test

    Args:
        sequence: Non-empty sequence of integers (not mutated)

    Returns:
        SubarrayResult with max sum, inclusive range and metrics snapshot

    Raises:
        InvalidArgumentError: If sequence is None or empty
    """
    _check_present_and_non_empty(sequence)

    metrics = OperationMetrics()
    metrics.increment_memory_allocations()

    # int() keeps numpy fixed-width inputs from overflowing the accumulator
    max_sum = int(sequence[0])
    metrics.increment_array_accesses()
    metrics.increment_assignments()

    current_sum = int(sequence[0])
    metrics.increment_array_accesses()
    metrics.increment_assignments()

    start_index = 0
    end_index = 0
    temp_start = 0
    metrics.increment_assignments(3)

    length = len(sequence)
    for i in range(1, length):
        metrics.increment_comparisons()

        current_element = int(sequence[i])
        metrics.increment_array_accesses()
        metrics.increment_assignments()

        metrics.increment_comparisons()
        if current_sum < 0:
            current_sum = current_element
            temp_start = i
            metrics.increment_assignments(2)
        else:
            current_sum += current_element
            metrics.increment_assignments()

        metrics.increment_comparisons()
        if current_sum > max_sum:
            max_sum = current_sum
            start_index = temp_start
            end_index = i
            metrics.increment_assignments(3)

    metrics.increment_memory_allocations()
    result = SubarrayResult(
        max_sum=max_sum,
        start_index=start_index,
        end_index=end_index,
        metrics=metrics.snapshot(),
    )

    logger.debug(f"Standard scan over {length} elements: sum={max_sum} "
                 f"range=[{start_index}, {end_index}]")
    return result


def find_max_subarray_optimized(sequence: Sequence[int]) -> SubarrayResult:
    """
    Vectorized variant with the same result as find_max_subarray.

    The best sum ending at index i is prefix[i + 1] - min(prefix[0..i]).
    The first argmax gives the earliest end index among ties, and the first
    occurrence of the minimum prefix gives the start index the scalar scan
    would have kept (it only moves the start on a strictly lower prefix).

    Accounting per run:
        - allocations: metrics, element copy, prefix sums, running minimum,
          candidate sums, result
        - array accesses: one per input element plus the winning candidate
        - comparisons: one per running-minimum step and argmax step, plus
          the start-index search up to the end index
        - assignments: max sum, start index, end index

    Args:
        sequence: Non-empty sequence of integers. Elements are copied to
            int64 when every partial sum fits; otherwise to numpy object
            arrays of Python ints, so sums never wrap

    Returns:
        SubarrayResult with max sum, inclusive range and metrics snapshot

    Raises:
        InvalidArgumentError: If sequence is None or empty
    """
    _check_present_and_non_empty(sequence)

    metrics = OperationMetrics()
    metrics.increment_memory_allocations()

    try:
        values = np.asarray(sequence, dtype=np.int64)
    except OverflowError:
        values = np.asarray(sequence, dtype=object)
    length = int(values.size)
    metrics.increment_memory_allocations()
    metrics.increment_array_accesses(length)

    # Partial sums are bounded by peak * length; past int64 they would wrap
    peak = max(abs(int(values.min())), abs(int(values.max())))
    if values.dtype != object and peak * length > INT64_MAX:
        logger.debug(f"Partial sums may exceed int64 (peak={peak}, n={length}), "
                     f"using arbitrary-precision elements")
        values = values.astype(object)

    prefix = np.zeros(length + 1, dtype=values.dtype)
    np.cumsum(values, out=prefix[1:])
    metrics.increment_memory_allocations()

    running_min = np.minimum.accumulate(prefix[:-1])
    metrics.increment_memory_allocations()
    metrics.increment_comparisons(length - 1)

    candidates = prefix[1:] - running_min
    metrics.increment_memory_allocations()

    end_index = int(np.argmax(candidates))
    metrics.increment_comparisons(length - 1)

    max_sum = int(candidates[end_index])
    metrics.increment_array_accesses()

    start_index = int(np.argmax(prefix[:end_index + 1] == running_min[end_index]))
    metrics.increment_comparisons(end_index + 1)
    metrics.increment_assignments(3)

    metrics.increment_memory_allocations()
    result = SubarrayResult(
        max_sum=max_sum,
        start_index=start_index,
        end_index=end_index,
        metrics=metrics.snapshot(),
    )

    logger.debug(f"Optimized scan over {length} elements: sum={max_sum} "
                 f"range=[{start_index}, {end_index}]")
    return result


# Named strategies selected explicitly by the benchmark harness
ALGORITHMS: Dict[str, Callable[[Sequence[int]], SubarrayResult]] = {
    "Standard": find_max_subarray,
    "Optimized": find_max_subarray_optimized,
}
