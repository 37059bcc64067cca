"""Time nested-list operations on square and cubic inputs of growing size.

Run from the `benchmarks/` directory. The coordinate converter honours the
`NDIM_JAX_COORDINATE_DIMENSIONS` environment variable, so e.g. setting it to
`any` also times the 4-dimensional case.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from _bench_utils import Timing, host_metadata, time_call

from ndim_jax import (
    NdimPolicy,
    UnsupportedDimensionError,
    as_jax_array,
    get_depth,
    is_regular,
    map_at_depth,
    policy_from_env,
    to_coordinate_map,
)


@dataclass(frozen=True)
class Workload:
    name: str
    run: Callable[[list, NdimPolicy], object]


WORKLOADS = (
    Workload("is_regular", lambda value, _policy: is_regular(value)),
    Workload("is_regular(exhaustive)", lambda value, _policy: is_regular(value, exhaustive=True)),
    Workload("get_depth", lambda value, _policy: get_depth(value)),
    Workload(
        "map_at_depth",
        lambda value, policy: map_at_depth(value, get_depth(value), str, policy=policy),
    ),
    Workload("to_coordinate_map", lambda value, policy: to_coordinate_map(value, policy=policy)),
    Workload("as_jax_array", lambda value, _policy: as_jax_array(value)),
)


def nested_range(side: int, dim: int) -> list:
    """A `dim`-dimensional list with `side` entries per axis, filled row-major."""
    counter = iter(range(side**dim))

    def build(level: int) -> list:
        if level == dim:
            return [next(counter) for _ in range(side)]
        return [build(level + 1) for _ in range(side)]

    return build(1)


def repeats_for(leaves: int, budget: int) -> int:
    return min(200, max(2, budget // max(leaves, 1)))


def run_workload(workload: Workload, value: list, policy: NdimPolicy, *, budget: int, samples: int) -> Timing | None:
    leaves = len(value) ** get_depth(value)
    try:
        return time_call(
            lambda: workload.run(value, policy),
            repeats=repeats_for(leaves, budget),
            samples=samples,
        )
    except UnsupportedDimensionError:
        return None


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--dims", default="2,3,4", help="comma-separated dimensions to time")
    parser.add_argument("--max-leaves", type=int, default=1 << 18, help="largest leaf count per input")
    parser.add_argument("--samples", type=int, default=5, help="timed samples per input")
    parser.add_argument("--budget", type=int, default=2_000_000, help="leaf visits per sample")
    parser.add_argument("--json-out", default="", help="optional path for machine-readable results")
    args = parser.parse_args()

    policy = policy_from_env()
    dims = [int(part) for part in args.dims.split(",") if part.strip()]
    results: list[dict[str, object]] = []

    for dim in dims:
        side = 2
        while side**dim <= args.max_leaves:
            value = nested_range(side, dim)
            print(f"dim={dim} side={side} leaves={side**dim}")
            for workload in WORKLOADS:
                timing = run_workload(workload, value, policy, budget=args.budget, samples=args.samples)
                if timing is None:
                    print(f"  {workload.name:<24} unsupported")
                    continue
                print(f"  {workload.name:<24} median {timing.median_ms:10.4f} ms  worst {timing.worst_ms:10.4f} ms")
                results.append(
                    {
                        "workload": workload.name,
                        "dim": dim,
                        "side": side,
                        "repeats": timing.repeats,
                        "mean_ms": timing.mean_ms,
                        "median_ms": timing.median_ms,
                        "worst_ms": timing.worst_ms,
                    }
                )
            side *= 2

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "host": host_metadata(),
            "coordinate_dimensions": policy.coordinate_dimensions,
            "results": results,
        }
        out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
