"""
Algorithms Module: maximum-sum contiguous subarray.

Usage:
    from kadane_core.algorithms import find_max_subarray

    result = find_max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])
    print(result.max_sum, result.start_index, result.end_index)
"""

from .kadane import (
    ALGORITHMS,
    MAX_ARRAY_SIZE,
    InvalidArgumentError,
    find_max_subarray,
    find_max_subarray_optimized,
    validate_input,
)

__all__ = [
    'ALGORITHMS',
    'MAX_ARRAY_SIZE',
    'InvalidArgumentError',
    'find_max_subarray',
    'find_max_subarray_optimized',
    'validate_input',
]
