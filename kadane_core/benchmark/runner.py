"""
Interactive benchmark runner.

Numbered menu driving the max-subarray algorithms:
    1. Test with custom array
    2. Test with random array
    3. Performance comparison (Standard vs Optimized)
    4. Run edge case tests
    5. Run comprehensive benchmark
    6. View benchmark results
    7. Export results to CSV
    10. Exit

Input is read one line at a time through input_func so the loop can be
driven from tests; EOF ends the session. A bad line never ends the loop.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from kadane_core.algorithms.kadane import ALGORITHMS, find_max_subarray, validate_input
from kadane_core.benchmark.tracker import PerformanceTracker, measure_execution_time

logger = logging.getLogger(__name__)

INT32_MAX = 2 ** 31 - 1
INT32_MIN = -2 ** 31

EXIT_CHOICE = 10
PREVIEW_LIMIT = 20
MAX_RANDOM_SIZE = 10000
COMPARISON_SIZES = (100, 1000, 5000, 10000)
COMPARISON_RANGE = (-100, 100)
SWEEP_SIZES = (10, 50, 100, 500, 1000, 5000, 10000)
SWEEP_RANGES = ((-10, 10), (-100, 100), (-1000, 1000))

EDGE_CASES: List[Tuple[str, List[int]]] = [
    ("Single positive element", [5]),
    ("Single negative element", [-3]),
    ("All negative elements", [-5, -2, -8, -1]),
    ("All positive elements", [1, 2, 3, 4, 5]),
    ("All negative elements (descending)", [-1, -2, -3, -4, -5]),
    ("Mixed positive/negative", [-2, 1, -3, 4, -1, 2, 1, -5, 4]),
    ("All zeros", [0, 0, 0, 0]),
    ("Mixed with zeros", [-1, 0, -2, 3, 0, -1, 2]),
    ("Large positive values", [INT32_MAX, -1, INT32_MAX]),
    ("Extreme values", [INT32_MIN + 1, INT32_MAX, INT32_MIN + 1]),
]


def generate_random_array(
    size: int,
    low: int,
    high: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Generate uniformly distributed integers in [low, high] (both inclusive).

    Args:
        size: Number of elements
        low: Smallest allowed value
        high: Largest allowed value
        rng: Random generator (fresh default_rng if None)

    Returns:
        int64 numpy array of length size
    """
    rng = rng or np.random.default_rng()
    return rng.integers(low, high, size=size, endpoint=True, dtype=np.int64)


def _format_preview(values: Sequence[int], limit: int) -> str:
    return "[" + ", ".join(str(int(v)) for v in values[:limit]) + "]"


class BenchmarkRunner:
    """Command-dispatch loop over the benchmark menu."""

    def __init__(
        self,
        tracker: Optional[PerformanceTracker] = None,
        input_func: Callable[[str], str] = input,
        seed: Optional[int] = None,
        repeats: int = 1,
        max_random_size: int = MAX_RANDOM_SIZE,
        comparison_sizes: Sequence[int] = COMPARISON_SIZES,
        sweep_sizes: Sequence[int] = SWEEP_SIZES,
        sweep_ranges: Sequence[Tuple[int, int]] = SWEEP_RANGES,
    ):
        """
        Initialize runner.

        Args:
            tracker: Results log (new PerformanceTracker if None)
            input_func: Line reader taking a prompt; raises EOFError at end
            seed: Seed for random array generation (None = unseeded)
            repeats: Timing samples per measured run
            max_random_size: Upper bound for option 2 array size
            comparison_sizes: Array sizes for option 3
            sweep_sizes: Array sizes for option 5
            sweep_ranges: (min, max) value ranges for option 5
        """
        self.tracker = tracker or PerformanceTracker()
        self.input_func = input_func
        self.rng = np.random.default_rng(seed)
        self.repeats = repeats
        self.max_random_size = max_random_size
        self.comparison_sizes = tuple(comparison_sizes)
        self.sweep_sizes = tuple(sweep_sizes)
        self.sweep_ranges = tuple(sweep_ranges)

        self._commands: Dict[int, Callable[[], None]] = {
            1: self.test_with_custom_array,
            2: self.test_with_random_array,
            3: self.performance_comparison,
            4: self.run_edge_case_tests,
            5: self.run_comprehensive_benchmark,
            6: self.view_benchmark_results,
            7: self.export_results_to_csv,
        }

    def run(self):
        """Main loop: show menu, dispatch one command, repeat until exit."""
        logger.info("Benchmark runner started")

        while True:
            self._display_menu()
            try:
                choice = self._read_choice()
                if choice == EXIT_CHOICE:
                    break

                handler = self._commands.get(choice)
                if handler is None:
                    print("Invalid choice. Please try again.")
                else:
                    try:
                        handler()
                    except (ValueError, OSError) as e:
                        logger.debug(f"Command {choice} failed: {e}")
                        print(f"Error: {e}")

                self.input_func("\nPress Enter to continue...")
            except EOFError:
                break

        logger.info("Benchmark runner stopped")

    def _display_menu(self):
        print("\nChoose an option:")
        print("1. Test with custom array")
        print("2. Test with random array")
        print("3. Performance comparison")
        print("4. Run edge case tests")
        print("5. Run comprehensive benchmark")
        print("6. View benchmark results")
        print("7. Export results to CSV")
        print("10. Exit")

    def _read_choice(self) -> int:
        line = self.input_func("Enter your choice (1-10): ")
        try:
            return int(line.strip())
        except ValueError:
            return -1

    def test_with_custom_array(self):
        line = self.input_func("Enter array elements separated by spaces: ")
        try:
            array = [int(token) for token in line.split()]
        except ValueError:
            print("Invalid input. Please enter valid integers.")
            return

        self.run_algorithm_test(array, "Custom Array")

    def test_with_random_array(self):
        try:
            size = int(self.input_func(f"Enter array size (1-{self.max_random_size}): ").strip())
        except ValueError:
            print("Invalid input. Please enter valid integers.")
            return

        if not 1 <= size <= self.max_random_size:
            print(f"Size must be between 1 and {self.max_random_size}.")
            return

        bounds = self.input_func("Enter range for random numbers (min max): ").split()
        if len(bounds) != 2:
            print("Please enter exactly two numbers for min and max.")
            return

        try:
            low, high = int(bounds[0]), int(bounds[1])
        except ValueError:
            print("Invalid input. Please enter valid integers.")
            return

        if low >= high:
            print("Min must be less than max.")
            return

        array = generate_random_array(size, low, high, self.rng)

        suffix = f" ... (showing first {PREVIEW_LIMIT} elements)" if size > PREVIEW_LIMIT else ""
        print(f"Generated array: {_format_preview(array, PREVIEW_LIMIT)}{suffix}")

        self.run_algorithm_test(array, "Random Array")

    def run_algorithm_test(self, array: Sequence[int], description: str):
        """
        Validate and solve one array, printing the result.

        Errors are reported on one line and not propagated.
        """
        try:
            validate_input(array)
            result = find_max_subarray(array)
        except ValueError as e:
            print(f"Error processing {description}: {e}")
            return

        print(f"Result: {result}")
        if len(array) <= PREVIEW_LIMIT:
            winning = array[result.start_index:result.end_index + 1]
            print(f"Subarray: {_format_preview(winning, PREVIEW_LIMIT)}")

    def _time_variants(self, array: np.ndarray, label_suffix: str = "") -> Dict[str, int]:
        """
        Run and time every algorithm variant on the same array.

        Returns:
            Mapping of variant name to elapsed nanoseconds
        """
        timings = {}
        sums = set()
        for name, algorithm in ALGORITHMS.items():
            result = algorithm(array)
            elapsed = measure_execution_time(lambda: algorithm(array), self.repeats)
            self.tracker.record(name + label_suffix, len(array), elapsed,
                                result.metrics, result.max_sum)
            timings[name] = elapsed
            sums.add(result.max_sum)

        if len(sums) > 1:
            logger.warning(f"Algorithm variants disagree on size {len(array)}: {sorted(sums)}")
        return timings

    def performance_comparison(self):
        self.tracker.clear_results()
        low, high = COMPARISON_RANGE

        for size in self.comparison_sizes:
            print(f"\nArray size: {size}")
            array = generate_random_array(size, low, high, self.rng)
            timings = self._time_variants(array, label_suffix=" Kadane")

            standard, optimized = timings["Standard"], timings["Optimized"]
            print(f"Standard Algorithm: {standard} ns")
            print(f"Optimized Algorithm: {optimized} ns")
            if optimized > 0:
                print(f"Speedup: {standard / optimized:.2f}x")

        self.tracker.print_comparison()

    def run_edge_case_tests(self):
        print("\n--- Edge Case Tests ---")
        for number, (description, array) in enumerate(EDGE_CASES, start=1):
            print(f"\nTest case {number}: {description}")
            self.run_algorithm_test(array, description)

    def run_comprehensive_benchmark(self):
        print("\n--- Comprehensive Benchmark ---")
        print("Running benchmark with multiple array sizes and configurations...")

        self.tracker.clear_results()
        total_tests = len(self.sweep_sizes) * len(self.sweep_ranges) * len(ALGORITHMS)
        current_test = 0

        for size in self.sweep_sizes:
            for low, high in self.sweep_ranges:
                array = generate_random_array(size, low, high, self.rng)
                for name, algorithm in ALGORITHMS.items():
                    current_test += 1
                    print(f"Progress: {current_test}/{total_tests} - Testing {name} Algorithm "
                          f"(size={size}, range=[{low},{high}])")

                    result = algorithm(array)
                    elapsed = measure_execution_time(lambda: algorithm(array), self.repeats)
                    self.tracker.record(name, size, elapsed, result.metrics, result.max_sum)

        print("\nBenchmark completed!")
        print(f"Total tests run: {len(self.tracker.get_results())}")
        self.tracker.print_summary()

    def view_benchmark_results(self):
        print("\n--- Benchmark Results ---")
        if not self.tracker.get_results():
            print("No benchmark results available. Run a benchmark first.")
            return

        self.tracker.print_summary()
        self.tracker.print_comparison()

    def export_results_to_csv(self):
        print("\n--- Export Results to CSV ---")
        if not self.tracker.get_results():
            print("No benchmark results available. Run a benchmark first.")
            return

        try:
            self.tracker.export_to_csv_with_timestamp()
        except OSError as e:
            logger.error(f"CSV export failed: {e}")
            print(f"Error exporting to CSV: {e}")
