"""Tests for the Dijkstra benchmark"""

import logging

import pytest

from heaps import bench
from heaps.bench import BenchConfig, BenchResult, run_bench, summarize


def test_default_config_is_valid() -> None:
    config = BenchConfig()
    config.validate()
    assert config.heap_names() == ["binary", "fibonacci"]
    assert config.sizes()[0] == 512
    assert config.sizes()[-1] == 16 * 1024


def test_sizes() -> None:
    config = BenchConfig(min_nodes=16, max_nodes=100, multiplier=3)
    assert config.sizes() == [16, 48]


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"min_nodes": 0}, "min_nodes"),
        ({"min_nodes": 64, "max_nodes": 32}, "max_nodes"),
        ({"multiplier": 1}, "multiplier"),
        ({"edge_factor": -1}, "edge_factor"),
        ({"min_nodes": 8, "edge_factor": 4}, "cannot hold"),
        ({"max_weight": 0.0}, "max_weight"),
        ({"repeats": 0}, "repeats"),
        ({"heap": "pairing"}, "Unknown heap"),
    ],
)
def test_invalid_config(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError) as info:
        BenchConfig(**kwargs).validate()
    assert message in str(info.value)


def test_parser_builds_config() -> None:
    args = bench.make_parser().parse_args(
        ["--min-nodes", "32", "--max-nodes", "64", "--heap", "fibonacci", "--plot"]
    )
    config = BenchConfig.from_args(args)
    assert config.min_nodes == 32
    assert config.max_nodes == 64
    assert config.heap_names() == ["fibonacci"]
    assert config.plot
    assert args.log_level == "INFO"


def test_parser_rejects_unknown_heap() -> None:
    with pytest.raises(SystemExit):
        bench.make_parser().parse_args(["--heap", "pairing"])


def test_run_bench(caplog: pytest.LogCaptureFixture) -> None:
    config = BenchConfig(min_nodes=16, max_nodes=32, repeats=2)
    with caplog.at_level(logging.INFO):
        results = run_bench(config)
    assert len(results) == 2 * 2 * 2
    assert {result.heap for result in results} == {"binary", "fibonacci"}
    assert {result.num_nodes for result in results} == {16, 32}
    assert all(result.seconds >= 0.0 for result in results)
    assert "finished 32 nodes" in caplog.text

    # Both heaps search the same graphs, so they find paths of equal length
    by_key = {(r.heap, r.num_nodes, r.repeat): r.path_length for r in results}
    for num_nodes in (16, 32):
        for repeat in range(2):
            assert (
                by_key[("binary", num_nodes, repeat)]
                == by_key[("fibonacci", num_nodes, repeat)]
            )


def test_summarize() -> None:
    results = [
        BenchResult("fibonacci", 16, 0, 1.0, 3),
        BenchResult("fibonacci", 16, 1, 3.0, 3),
        BenchResult("binary", 16, 0, 2.0, 3),
        BenchResult("binary", 32, 0, 4.0, 5),
    ]
    summaries = summarize(results)
    assert [(s.heap, s.num_nodes, s.runs) for s in summaries] == [
        ("binary", 16, 1),
        ("binary", 32, 1),
        ("fibonacci", 16, 2),
    ]
    assert summaries[2].mean_seconds == pytest.approx(2.0)
    assert summaries[2].std_seconds == pytest.approx(1.0)
    assert summaries[0].std_seconds == 0.0


def test_plot_results(monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(bench.plt, "show", lambda: shown.append(True))
    bench.plot_results(
        summarize(
            [
                BenchResult("binary", 16, 0, 2.0, 3),
                BenchResult("fibonacci", 16, 0, 1.0, 3),
            ]
        )
    )
    assert shown == [True]


def test_main(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(
        "sys.argv",
        ["heaps-bench", "--min-nodes", "8", "--max-nodes", "8", "--repeats", "1"],
    )
    with caplog.at_level(logging.INFO):
        bench.main()
    assert "done" in caplog.text
    assert "fibonacci" in caplog.text


def test_main_rejects_invalid_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["heaps-bench", "--repeats", "0"])
    with pytest.raises(SystemExit):
        bench.main()
