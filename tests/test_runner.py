"""End-to-end tests for the benchmark runner."""

from __future__ import annotations

import json
import sys
import types
from pathlib import Path

import pandas as pd
import pytest
import yaml

from sortlab.algorithms import ALGORITHM_NAMES
from sortlab.bench import runner


def _small_config(tmp_path: Path, **overrides):
    cfg = {
        "experiment_name": "t",
        "output_dir": str(tmp_path / "results"),
        "seed": 5,
        "repeats": 2,
        "sizes": [0, 1, 50],
    }
    cfg.update(overrides)
    return runner.resolve_config(cfg)


def test_defaults_match_classic_demo() -> None:
    cfg = runner.resolve_config()
    assert cfg["sizes"] == [20000]
    assert cfg["dataset"] == {"dist": "random", "params": {"range": [0, 99999]}}
    assert [a["name"] for a in cfg["algorithms"]] == list(ALGORITHM_NAMES)


@pytest.mark.parametrize(
    "overrides",
    [
        {"sizes": []},
        {"sizes": [10, -1]},
        {"repeats": 0},
        {"timeout_seconds": 0},
        {"seed": "abc"},
        {"dataset": "random"},
        {"algorithms": []},
        {"bogus": 1},
    ],
)
def test_resolve_config_rejects(overrides) -> None:
    with pytest.raises(ValueError):
        runner.resolve_config(overrides)


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = runner.run_experiment(_small_config(tmp_path))

    for fname in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / fname).exists()

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]
    assert all("time_ns" in line for line in lines)
    assert len(lines) == len(ALGORITHM_NAMES) * 3 * 2

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == set(ALGORITHM_NAMES)
    assert len(summary) == len(ALGORITHM_NAMES) * 3
    assert summary["verified"].all()
    assert (summary["samples_ok"] == 2).all()

    meta = json.loads((run_dir / "meta.json").read_text())
    assert "numpy" in meta and "machine" in meta

    resolved = yaml.safe_load((run_dir / "config_resolved.yaml").read_text())
    assert resolved["seed"] == 5


def test_labels_allow_same_module_twice(tmp_path: Path) -> None:
    cfg = _small_config(
        tmp_path,
        dataset={"dist": "reversed"},
        sizes=[30],
        algorithms=[
            {"name": "quicksort"},
            {"name": "quicksort", "label": "qs_random", "config": {"pivot": "random", "seed": 1}},
        ],
    )
    run_dir = runner.run_experiment(cfg)
    summary = pd.read_csv(run_dir / "summary.csv")
    assert sorted(summary["algo"]) == ["qs_random", "quicksort"]


def test_failed_algorithm_is_skipped_for_larger_sizes(tmp_path: Path) -> None:
    cfg = _small_config(
        tmp_path,
        sizes=[10, 20],
        algorithms=[{"name": "block_sort", "config": {"block_size": 0}}, {"name": "heapsort"}],
    )
    run_dir = runner.run_experiment(cfg)
    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]
    failures = [l for l in lines if l.get("status") == "error"]
    assert len(failures) == 1
    assert failures[0]["n"] == 10
    assert "block_size" in failures[0]["error"]
    summary = pd.read_csv(run_dir / "summary.csv")
    assert list(summary["algo"]) == ["heapsort", "heapsort"]


def test_unknown_algorithm(tmp_path: Path) -> None:
    cfg = _small_config(tmp_path, algorithms=[{"name": "bogo_sort"}])
    with pytest.raises(ImportError):
        runner.run_experiment(cfg)


def test_duplicate_label(tmp_path: Path) -> None:
    cfg = _small_config(tmp_path, algorithms=["heapsort", "heapsort"])
    with pytest.raises(ValueError, match="Duplicate"):
        runner.run_experiment(cfg)


def test_main_with_config_file(tmp_path: Path) -> None:
    cfg_path = tmp_path / "exp.yaml"
    cfg_path.write_text(
        yaml.safe_dump(
            {
                "experiment_name": "cli",
                "sizes": [25],
                "algorithms": [{"name": "tree_sort"}, {"name": "merge_sort"}],
            }
        )
    )
    out_dir = tmp_path / "out"
    runner.main([str(cfg_path), "--seed", "3", "--output-dir", str(out_dir)])

    (run_dir,) = list(out_dir.iterdir())
    resolved = yaml.safe_load((run_dir / "config_resolved.yaml").read_text())
    assert resolved["seed"] == 3
    summary = pd.read_csv(run_dir / "summary.csv")
    assert sorted(summary["algo"]) == ["merge_sort", "tree_sort"]


def test_main_missing_config(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        runner.main([str(tmp_path / "nope.yaml")])


def test_unverified_run_is_not_reported_as_sorted(tmp_path: Path) -> None:
    cfg = _small_config(tmp_path, sizes=[50], verify=False, algorithms=[{"name": "heapsort"}])
    run_dir = runner.run_experiment(cfg)

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]
    assert [line["verified"] for line in lines] == [None, None]

    summary = pd.read_csv(run_dir / "summary.csv")
    assert summary["verified"].isna().all()
    assert not summary["verified"].any()


def test_samples_before_an_incorrect_repeat_stay_verified(tmp_path: Path, monkeypatch) -> None:
    calls = []

    def flaky(a, *, config=None):
        calls.append(1)
        if len(calls) == 2:
            a.reverse()
        else:
            a.sort()

    module = types.ModuleType("sortlab.algorithms.flaky_sort")
    module.sort = flaky
    monkeypatch.setitem(sys.modules, "sortlab.algorithms.flaky_sort", module)

    cfg = _small_config(tmp_path, sizes=[10], repeats=3, algorithms=[{"name": "flaky_sort"}])
    run_dir = runner.run_experiment(cfg)

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]
    samples = [l for l in lines if "time_ns" in l]
    assert [l["verified"] for l in samples] == [True, False]
    assert [l["status"] for l in lines if "status" in l] == ["incorrect"]


def test_resolved_config_does_not_share_defaults() -> None:
    cfg = runner.resolve_config()
    cfg["algorithms"].append({"name": "bogus"})
    cfg["dataset"]["params"]["range"][1] = 5
    assert len(runner.DEFAULT_CONFIG["algorithms"]) == len(ALGORITHM_NAMES)
    assert runner.DEFAULT_CONFIG["dataset"]["params"]["range"] == [0, 99999]
