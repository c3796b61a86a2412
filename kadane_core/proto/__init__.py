"""
Protocol Module: result and record schemas.

- SubarrayResult: outcome of one max-subarray computation
- BenchmarkRecord: one timed run, encodable as a CSV row
"""

from .subarray_result import SubarrayResult
from .benchmark_record import BenchmarkRecord, CSV_HEADER

__all__ = [
    'SubarrayResult',
    'BenchmarkRecord',
    'CSV_HEADER',
]
