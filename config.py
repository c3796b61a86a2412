"""
Kadane benchmark configuration
"""

# Benchmark configuration
BENCHMARK_CONFIG = {
    "timing_repeats": 1,                                # timing samples per run (fastest kept)
    "comparison_sizes": [100, 1000, 5000, 10000],       # option 3
    "sweep_sizes": [10, 50, 100, 500, 1000, 5000, 10000],  # option 5
    "sweep_ranges": [(-10, 10), (-100, 100), (-1000, 1000)],
}

# Random array configuration
RANDOM_ARRAY_CONFIG = {
    "max_size": 10000,        # upper bound accepted by option 2
    "seed": None,             # None = different arrays every session
}

# Export configuration
EXPORT_CONFIG = {
    "results_dir": "results",  # created on first export
}

# Logging configuration
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
