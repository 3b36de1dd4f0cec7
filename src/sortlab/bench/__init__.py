"""
Benchmark harness.

    sortlab.bench.measure  - time_sort_call, verify_output
    sortlab.bench.runner   - YAML-driven sweep CLI (python -m sortlab.bench.runner)
"""

from .measure import time_sort_call, verify_output

__all__ = ["time_sort_call", "verify_output"]
