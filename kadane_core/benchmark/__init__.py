"""
Benchmark Module: timing, results log, CSV export and the interactive runner.
"""

from .tracker import PerformanceTracker, measure_execution_time
from .runner import BenchmarkRunner, generate_random_array

__all__ = [
    'PerformanceTracker',
    'measure_execution_time',
    'BenchmarkRunner',
    'generate_random_array',
]
