"""
Benchmark runner: times every algorithm on generated inputs and verifies the output.

Usage (from repo root):
    python -m sortlab.bench.runner                                  # built-in defaults
    python -m sortlab.bench.runner experiments/configs/default.yaml
    sortlab-bench experiments/configs/adversarial.yaml --seed 7

Without a config file the run matches the classic demo: one random input of
20 000 integers in [0, 99999], each of the five algorithms timed once.

Outputs in a new run directory:
    - config_resolved.yaml    # defaults merged with the file and CLI overrides
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR per (algo, n), plus verification flag
    - (console) rich table + tqdm progress

Design notes:
- For each size n, ONE dataset is generated and every algorithm sorts its own copy.
- On timeout/error/incorrect output, an algorithm is skipped for larger sizes.
"""

from __future__ import annotations

import argparse
import copy
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortlab.algorithms import ALGORITHM_NAMES
from sortlab.bench.measure import time_sort_call
from sortlab.datasets import make_dataset

_console = Console()

DEFAULT_CONFIG: Dict[str, Any] = {
    "experiment_name": "default",
    "output_dir": "results",
    "seed": None,
    "repeats": 1,
    "warmup": False,
    "disable_gc": True,
    "timeout_seconds": 60.0,
    "verify": True,
    "dataset": {"dist": "random", "params": {"range": [0, 99999]}},
    "sizes": [20000],
    "algorithms": [{"name": name} for name in ALGORITHM_NAMES],
}

SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "verified"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a YAML mapping: {path}")
    return data


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- config ------------------------- #

def resolve_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge `overrides` over DEFAULT_CONFIG (top-level keys only) and validate."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if overrides:
        unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        cfg.update(copy.deepcopy(overrides))

    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if any(not isinstance(n, int) or isinstance(n, bool) or n < 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must contain nonnegative integers; got {sizes!r}")
    if int(cfg["repeats"]) < 1:
        raise ValueError("Config 'repeats' must be >= 1")
    if float(cfg["timeout_seconds"]) <= 0:
        raise ValueError("Config 'timeout_seconds' must be positive")
    if cfg["seed"] is not None and not isinstance(cfg["seed"], int):
        raise ValueError(f"Config 'seed' must be an integer or null; got {cfg['seed']!r}")
    if not isinstance(cfg["dataset"], dict):
        raise ValueError("Config 'dataset' must be a mapping with 'dist' and optional 'params'")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    return cfg


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if isinstance(entry, str):
            entry = {"name": entry}
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        # `label` lets one module appear twice with different configs.
        label = entry.get("label", name)
        if not isinstance(label, str):
            raise ValueError(f"Algorithm '{name}': 'label' must be a string")
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        try:
            mod = importlib.import_module(f"sortlab.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'sortlab.algorithms.{name}': {e!r}") from e

        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`")

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=label, sort_fn=mod.sort, config=config))
    return specs


# ------------------------- aggregation & reporting ------------------------- #

def _iqr(series: pd.Series) -> float:
    return float(series.quantile(0.75) - series.quantile(0.25))


def _all_verified(series: pd.Series) -> Optional[bool]:
    """All checked samples passed; None when verification was skipped for every sample."""
    checked = series.dropna()
    if checked.empty:
        return None
    return bool(checked.astype(bool).all())


def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Collapse results.jsonl into one row per (algo, n)."""
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    if "verified" not in df.columns:
        df["verified"] = None
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            verified=("verified", _all_verified),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    median_ms = median_ns / 1e6
    if iqr_ns is None:
        return f"{median_ms:.2f}"
    return f"{median_ms:.2f} ± {iqr_ns / 1e6:.2f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int], failures: Dict[str, str]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    # First, middle and last size; duplicates collapse for short sweeps.
    picks: List[int] = list(dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]))
    for n in picks:
        table.add_column(f"n={n}", justify="right")
    table.add_column("Sorted", justify="center")

    for algo in dict.fromkeys(summary["algo"].tolist() + list(failures)):
        row = [f"[bold]{algo}[/]"]
        rows = summary[summary["algo"] == algo]
        for n in picks:
            s = rows[rows["n"] == n]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].values[0]), int(s["iqr_ns"].values[0])))
        if algo in failures:
            row.append(f"[red]{failures[algo]}[/]")
        elif rows.empty:
            row.append("—")
        else:
            checked = rows["verified"].dropna()
            if checked.empty:
                row.append("[dim]skipped[/]")
            else:
                row.append("[green]yes[/]" if bool(checked.astype(bool).all()) else "[red]no[/]")
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(cfg: Dict[str, Any]) -> Path:
    """Run a full sweep for an already-resolved config; return the run directory."""
    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = list(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    verify = bool(cfg["verify"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(cfg["seed"])

    # algo name -> failure status; such algos are skipped for larger n
    failures: Dict[str, str] = {}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(int(n), dataset_spec, rng)

        for a_spec in algos:
            if a_spec.name in failures:
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                verify=verify,
            )

            for trial_idx, (t_ns, verified) in enumerate(zip(res["samples_ns"], res["verified_samples"])):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": int(n),
                        "dataset": dataset_spec,
                        "trial": int(trial_idx),
                        "time_ns": int(t_ns),
                        "verified": verified,
                        "config": a_spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                failures[a_spec.name] = status
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": int(n),
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": a_spec.config,
                    },
                    results_path,
                )
                _console.print(f"[yellow]{a_spec.name}[/yellow] at n={n}: {status} {res['error'] or ''}")

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_summary(summary_df, sizes, failures)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Time and verify the sorting algorithms on generated inputs.")
    p.add_argument("config", nargs="?", default=None, help="Path to YAML experiment config (optional)")
    p.add_argument("--seed", type=int, default=None, help="Override the config's RNG seed")
    p.add_argument("--output-dir", default=None, help="Override the config's output directory")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.config is not None:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")
        overrides.update(_load_yaml(config_path))
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    return resolve_config(overrides)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    cfg = _build_config(args)
    try:
        run_experiment(cfg)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
