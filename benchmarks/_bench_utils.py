"""Timing helpers for the nested-list benchmarks."""

from __future__ import annotations

import os
import platform
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable

import jax


@dataclass(frozen=True)
class Timing:
    repeats: int
    samples_ms: tuple[float, ...]

    @property
    def mean_ms(self) -> float:
        return statistics.fmean(self.samples_ms)

    @property
    def median_ms(self) -> float:
        return statistics.median(self.samples_ms)

    @property
    def worst_ms(self) -> float:
        return max(self.samples_ms)


def host_metadata() -> dict[str, Any]:
    return {
        "python": platform.python_version(),
        "machine": platform.machine(),
        "cpu_count": os.cpu_count(),
        "jax": jax.__version__,
        "jax_backend": jax.default_backend(),
    }


def _settle(result: object) -> None:
    # Lists come back fully built; jax dispatch is asynchronous.
    ready = getattr(result, "block_until_ready", None)
    if ready is not None:
        ready()


def time_call(fn: Callable[[], object], *, repeats: int, samples: int) -> Timing:
    """Run `fn` `repeats` times per sample and record per-call milliseconds."""
    _settle(fn())
    per_call: list[float] = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(repeats):
            _settle(fn())
        per_call.append((time.perf_counter() - start) * 1e3 / repeats)
    return Timing(repeats=repeats, samples_ms=tuple(per_call))
