"""
Timing harness for in-place sorting algorithms.

We measure exactly one call to an algorithm's `sort(a, config=...)` per
sample using a monotonic high-resolution clock. Copying the input,
GC housekeeping and output verification all happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error" | "incorrect",
        "error": str | None,                # populated for "error" and "incorrect"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
        "verified": bool | None,            # None when verification was skipped
        "verified_samples": list[bool | None],  # per-sample result, aligned with samples_ns
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from sortlab.validate import first_nondecreasing_violation_index, is_permutation

__all__ = ["time_sort_call", "verify_output"]


def verify_output(original: List[Any], out: List[Any]) -> Optional[str]:
    """Return None if `out` is a sorted permutation of `original`, else a reason."""
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        return f"not nondecreasing at i={i}: {out[i]!r} > {out[i + 1]!r}"
    if not is_permutation(original, out):
        return "output is not a permutation of the input"
    return None


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    verify: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated in-place calls to `algo_fn(copy_of_a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., None]
        Callable with signature sort(a: list, *, config: dict | None) that
        sorts `a` in place.
    a : list
        Base input. Never passed to the algorithm directly; every call gets
        a fresh copy, so `a` is left untouched.
    config : dict | None
        Algorithm configuration passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable GC during the timed loop; restore afterward.
    timeout_seconds : float
        A single sample slower than this marks status="timeout" and stops sampling.
    verify : bool
        If True, check each sample's output is a sorted permutation of `a`.
        A failure marks status="incorrect" and stops sampling.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "verified": None,
        "verified_samples": [],
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if not verify:
                result["verified_samples"].append(None)
            else:
                reason = verify_output(a, arg)
                result["verified_samples"].append(reason is None)
                if reason is not None:
                    result["status"] = "incorrect"
                    result["error"] = f"repeat {r}: {reason}"
                    result["verified"] = False
                    break
                result["verified"] = True

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
