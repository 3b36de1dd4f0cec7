"""
Input generators for the sorting benchmark.

Implemented distributions:
- "random":        integers drawn uniformly from an inclusive range. This is
                   the benchmark's default input (range [0, 99999]).
- "sorted":        [0, 1, ..., n-1]. Idempotence input; worst case for
                   first-element quicksort and for tree sort.
- "reversed":      [n-1, ..., 0]. The other adversarial shape.
- "nearly_sorted": sorted input degraded by ceil(swap_frac * n) random swaps.
- "few_uniques":   duplicate-heavy; n samples from k distinct values.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Ranges in params["range"] are inclusive on both ends.
- The caller owns and seeds the RNG; deterministic shapes ignore it.
- Output is always a plain Python list so algorithms never see NumPy types.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "sorted",
    "reversed",
    "nearly_sorted",
    "few_uniques",
}
DEFAULT_RANGE: Tuple[int, int] = (0, 99999)

__all__ = ["DEFAULT_RANGE", "SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer input of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}

        random:        {"range": [lo, hi]}       optional, default [0, 99999]
        nearly_sorted: {"swap_frac": 0.05}       in [0.0, 1.0]
        few_uniques:   {"k": 10, "range": [lo, hi]}
        sorted / reversed take no params.
    rng : numpy.random.Generator
        Random source, seeded upstream.

    Raises
    ------
    ValueError
        On a negative/non-int `n`, an unknown dist, or invalid params.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "random":
        lo, hi = _parse_range(params, dist)
        if n == 0:
            return []
        # Generator.integers is half-open; +1 makes `hi` reachable.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=(num_swaps, 2))
        for i, j in idxs.tolist():
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, dist)
        if n == 0:
            return []
        actual_k = int(min(k, n, hi - lo + 1))
        # Distinct values without replacement, then n draws among them.
        values = (rng.choice(hi - lo + 1, size=actual_k, replace=False) + lo).tolist()
        picks = rng.integers(0, actual_k, size=n)
        return [values[t] for t in picks.tolist()]

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(params: Dict[str, Any], dist: str) -> Tuple[int, int]:
    """Parse optional params["range"] == [lo, hi] (inclusive)."""
    if "range" not in params:
        return DEFAULT_RANGE
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
