"""Benchmark Dijkstra's algorithm over the binary and Fibonacci heaps.

For each graph size in a geometric range, random graphs with a fixed number
of arcs per node are generated, and the time to find a path from node 0 to
node n-1 is measured with each selected heap.
"""

from __future__ import annotations

import logging
import time
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np
import plotext as plt

from heaps import constants
from heaps.binary import BinaryHeap
from heaps.fibonacci import FibonacciHeap
from heaps.graph.dijkstra import QueueFactory, dijkstra
from heaps.graph.graph import generate_random_graph

__all__ = [
    "HEAPS",
    "BenchConfig",
    "BenchResult",
    "BenchSummary",
    "configure_logging",
    "main",
    "make_parser",
    "plot_results",
    "run_bench",
    "summarize",
]

HEAPS: Dict[str, QueueFactory] = {
    "binary": BinaryHeap,
    "fibonacci": FibonacciHeap,
}


@dataclass(frozen=True)
class BenchConfig:
    """Settings of one benchmark run."""

    min_nodes: int = constants.DEFAULT_MIN_NODES
    max_nodes: int = constants.DEFAULT_MAX_NODES
    multiplier: int = constants.DEFAULT_MULTIPLIER
    edge_factor: int = constants.DEFAULT_EDGE_FACTOR
    max_weight: float = constants.DEFAULT_MAX_WEIGHT
    repeats: int = constants.DEFAULT_REPEATS
    seed: int = constants.DEFAULT_SEED
    heap: str = "both"
    plot: bool = False

    @staticmethod
    def from_args(args: Namespace) -> BenchConfig:
        return BenchConfig(
            min_nodes=args.min_nodes,
            max_nodes=args.max_nodes,
            multiplier=args.multiplier,
            edge_factor=args.edge_factor,
            max_weight=args.max_weight,
            repeats=args.repeats,
            seed=args.seed,
            heap=args.heap,
            plot=args.plot,
        )

    def validate(self) -> None:
        """Check the settings before any graph is generated.

        Raises:
            ValueError: If a setting is out of range, or the smallest graph
                cannot hold edge_factor arcs per node.
        """
        if self.min_nodes < 1:
            raise ValueError("min_nodes must be positive")
        if self.max_nodes < self.min_nodes:
            raise ValueError("max_nodes must be at least min_nodes")
        if self.multiplier < 2:
            raise ValueError("multiplier must be at least 2")
        if self.edge_factor < 0:
            raise ValueError("edge_factor must be non-negative")
        if self.edge_factor * 2 > self.min_nodes - 1:
            raise ValueError(
                f"Graphs of {self.min_nodes} nodes cannot hold "
                f"{self.edge_factor} arcs per node"
            )
        if self.max_weight <= 0:
            raise ValueError("max_weight must be positive")
        if self.repeats < 1:
            raise ValueError("repeats must be positive")
        if self.heap != "both" and self.heap not in HEAPS:
            raise ValueError(f"Unknown heap {self.heap}")

    def heap_names(self) -> List[str]:
        return list(HEAPS) if self.heap == "both" else [self.heap]

    def sizes(self) -> List[int]:
        sizes = []
        size = self.min_nodes
        while size <= self.max_nodes:
            sizes.append(size)
            size *= self.multiplier
        return sizes


@dataclass(frozen=True)
class BenchResult:
    """Timing of one search on one random graph."""

    heap: str
    num_nodes: int
    repeat: int
    seconds: float
    path_length: int


@dataclass(frozen=True)
class BenchSummary:
    """Timings of one heap on one graph size, aggregated over repeats."""

    heap: str
    num_nodes: int
    runs: int
    mean_seconds: float
    std_seconds: float


def run_bench(config: BenchConfig) -> List[BenchResult]:
    """Time every selected heap on the same random graphs.

    Repetition i of every size uses a generator seeded with seed + i, so
    both heaps always search identical graphs.
    """
    results: List[BenchResult] = []
    for num_nodes in config.sizes():
        num_edges = config.edge_factor * num_nodes
        for repeat in range(config.repeats):
            rng = np.random.default_rng(config.seed + repeat)
            graph = generate_random_graph(
                num_nodes, num_edges, config.max_weight, rng=rng
            )
            for name in config.heap_names():
                start = time.perf_counter()
                path = dijkstra(graph, 0, num_nodes - 1, HEAPS[name])
                seconds = time.perf_counter() - start
                results.append(
                    BenchResult(name, num_nodes, repeat, seconds, len(path))
                )
        logging.info("finished %d nodes", num_nodes)
    return results


def summarize(results: Sequence[BenchResult]) -> List[BenchSummary]:
    """Aggregate results per (heap, size), ordered by heap then size."""
    groups: Dict[tuple[str, int], List[float]] = {}
    for result in results:
        groups.setdefault((result.heap, result.num_nodes), []).append(
            result.seconds
        )
    summaries = []
    for (heap, num_nodes), seconds in sorted(groups.items()):
        arr = np.asarray(seconds, dtype=np.float64)
        summaries.append(
            BenchSummary(
                heap=heap,
                num_nodes=num_nodes,
                runs=len(seconds),
                mean_seconds=float(np.mean(arr)),
                std_seconds=float(np.std(arr)),
            )
        )
    return summaries


def plot_results(summaries: Sequence[BenchSummary]) -> None:
    """Draw mean search time against graph size in the terminal."""
    plt.clear_figure()
    for heap in sorted({summary.heap for summary in summaries}):
        rows = [summary for summary in summaries if summary.heap == heap]
        plt.plot(
            [row.num_nodes for row in rows],
            [row.mean_seconds for row in rows],
            label=heap,
        )
    plt.title("Dijkstra search time")
    plt.xlabel("nodes")
    plt.ylabel("seconds")
    plt.show()


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser."""
    parser = ArgumentParser(description=__doc__)
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--min-nodes", type=int, default=constants.DEFAULT_MIN_NODES)
    parser.add_argument("--max-nodes", type=int, default=constants.DEFAULT_MAX_NODES)
    parser.add_argument(
        "--multiplier", type=int, default=constants.DEFAULT_MULTIPLIER
    )
    parser.add_argument(
        "--edge-factor", type=int, default=constants.DEFAULT_EDGE_FACTOR
    )
    parser.add_argument(
        "--max-weight", type=float, default=constants.DEFAULT_MAX_WEIGHT
    )
    parser.add_argument("--repeats", type=int, default=constants.DEFAULT_REPEATS)
    parser.add_argument("--seed", type=int, default=constants.DEFAULT_SEED)
    parser.add_argument("--heap", choices=["both", *HEAPS], default="both")
    parser.add_argument("--plot", action="store_true")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(format=constants.LOG_FORMAT, level=log_level)


def main() -> None:
    parser = make_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)
    config = BenchConfig.from_args(args)
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    logging.info("benchmarking %s on sizes %s", config.heap_names(), config.sizes())
    summaries = summarize(run_bench(config))
    for summary in summaries:
        logging.info(
            "%-9s %8d nodes: %.6fs +/- %.6fs over %d runs",
            summary.heap,
            summary.num_nodes,
            summary.mean_seconds,
            summary.std_seconds,
            summary.runs,
        )
    if config.plot:
        plot_results(summaries)
    logging.info("done")


if __name__ == "__main__":
    main()
