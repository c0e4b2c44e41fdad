"""Default settings for random graph generation and the benchmark."""

DEFAULT_SEED = 5489
"""Seed for random graphs when no generator is given (mt19937's default seed)."""

DEFAULT_MIN_NODES = 512
"""Smallest graph size benchmarked."""

DEFAULT_MAX_NODES = 16 * 1024
"""Largest graph size benchmarked."""

DEFAULT_MULTIPLIER = 2
"""Factor between consecutive benchmarked graph sizes."""

DEFAULT_EDGE_FACTOR = 2
"""Arcs generated per node in benchmark graphs."""

DEFAULT_MAX_WEIGHT = 1000.0
"""Exclusive upper bound on random arc weights."""

DEFAULT_REPEATS = 5
"""Random graphs timed per size and heap."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
"""Format of benchmark log lines."""
