"""
Kadane benchmark entry point
Starts the interactive menu for the instrumented max-subarray algorithms
"""

import logging
import argparse

import config
from kadane_core.benchmark.runner import BenchmarkRunner
from kadane_core.benchmark.tracker import PerformanceTracker

logging.basicConfig(
    level=getattr(logging, config.LOGGING_CONFIG["level"]),
    format=config.LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


def build_runner() -> BenchmarkRunner:
    """Create a runner from the current configuration."""
    tracker = PerformanceTracker(results_dir=config.EXPORT_CONFIG["results_dir"])
    return BenchmarkRunner(
        tracker=tracker,
        seed=config.RANDOM_ARRAY_CONFIG["seed"],
        repeats=config.BENCHMARK_CONFIG["timing_repeats"],
        max_random_size=config.RANDOM_ARRAY_CONFIG["max_size"],
        comparison_sizes=config.BENCHMARK_CONFIG["comparison_sizes"],
        sweep_sizes=config.BENCHMARK_CONFIG["sweep_sizes"],
        sweep_ranges=config.BENCHMARK_CONFIG["sweep_ranges"],
    )


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description='Kadane max-subarray benchmark')
    parser.add_argument('--results-dir', '-o', type=str, default=None,
                        help='directory for CSV exports')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='seed for random arrays')
    parser.add_argument('--repeats', '-r', type=int, default=None,
                        help='timing samples per run')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='enable debug logging')

    args = parser.parse_args()
    if args.repeats is not None and args.repeats < 1:
        parser.error('--repeats must be at least 1')

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Override configuration
    if args.results_dir:
        config.EXPORT_CONFIG["results_dir"] = args.results_dir
    if args.seed is not None:
        config.RANDOM_ARRAY_CONFIG["seed"] = args.seed
    if args.repeats is not None:
        config.BENCHMARK_CONFIG["timing_repeats"] = args.repeats

    runner = build_runner()
    runner.run()


if __name__ == "__main__":
    main()
