"""Micro-benchmarks for Array operations against plain list baselines."""

from __future__ import annotations

import argparse
import json
import platform
import statistics
import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

import jax

from onearray import Array, to_jax


DEFAULT_N = 10_000


@dataclass(frozen=True)
class BenchCase:
    name: str
    note: str
    run: Callable[[], object]
    baseline: Callable[[], object] | None


@dataclass(frozen=True)
class BenchRow:
    name: str
    note: str
    repeats: int
    mean_ms: float
    median_ms: float
    list_mean_ms: float | None


def _ready(value: object) -> object:
    if hasattr(value, "block_until_ready"):
        value.block_until_ready()
    return value


def _per_call_ms(fn: Callable[[], object], repeats: int) -> float:
    start_ns = time.perf_counter_ns()
    for _ in range(repeats):
        _ready(fn())
    return (time.perf_counter_ns() - start_ns) / repeats / 1e6


def _repeats_for(fn: Callable[[], object], target_ms: float) -> int:
    trial_ms = max(_per_call_ms(fn, 4), 1e-3)
    return max(4, int(target_ms / trial_ms))


def _build_cases(n: int) -> list[BenchCase]:
    values = list(range(n))
    arr = Array.from_(values)
    return [
        BenchCase("from_", "construct from a list", lambda: Array.from_(values), lambda: list(values)),
        BenchCase("map", "x * 2 over every element", lambda: arr.map(lambda x: x * 2), lambda: [x * 2 for x in values]),
        BenchCase("filter", "keep even elements", lambda: arr.filter(lambda x: x % 2 == 0), lambda: [x for x in values if x % 2 == 0]),
        BenchCase("reduce", "sum without a seed", lambda: arr.reduce(lambda a, c: a + c), lambda: sum(values)),
        BenchCase("slice", "last half via a negative start", lambda: arr.slice(-(n // 2)), lambda: values[-(n // 2) :]),
        BenchCase("index_of", "scan for the final element", lambda: arr.index_of(n - 1), lambda: values.index(n - 1)),
        BenchCase("to_reversed", "reversed copy", lambda: arr.to_reversed(), lambda: values[::-1]),
        BenchCase("to_jax", "convert to a jax vector", lambda: to_jax(arr), None),
    ]


def _run_case(case: BenchCase, *, samples: int, target_ms: float) -> BenchRow:
    repeats = _repeats_for(case.run, target_ms)
    timings = [_per_call_ms(case.run, repeats) for _ in range(samples)]
    list_mean = None
    if case.baseline is not None:
        list_mean = statistics.fmean(_per_call_ms(case.baseline, repeats) for _ in range(samples))
    return BenchRow(
        name=case.name,
        note=case.note,
        repeats=repeats,
        mean_ms=statistics.fmean(timings),
        median_ms=statistics.median(timings),
        list_mean_ms=list_mean,
    )


def _print_rows(rows: list[BenchRow]) -> None:
    print(f"{'case':<14} {'repeats':>8} {'mean ms':>10} {'median ms':>10} {'list ms':>10} {'ratio':>8}")
    for row in rows:
        list_ms = "-" if row.list_mean_ms is None else f"{row.list_mean_ms:.4f}"
        ratio = "-"
        if row.list_mean_ms:
            ratio = f"{row.mean_ms / row.list_mean_ms:.2f}x"
        print(f"{row.name:<14} {row.repeats:>8} {row.mean_ms:>10.4f} {row.median_ms:>10.4f} {list_ms:>10} {ratio:>8}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--n", type=int, default=DEFAULT_N, help="number of elements per array")
    parser.add_argument("--samples", type=int, default=5, help="timed samples per case")
    parser.add_argument("--target-ms", type=float, default=20.0, help="target duration of one sample")
    parser.add_argument("--json-out", default="", help="optional path to write machine-readable results")
    args = parser.parse_args()

    rows = [_run_case(case, samples=args.samples, target_ms=args.target_ms) for case in _build_cases(args.n)]
    print(f"Array benchmarks (n={args.n}, jax backend={jax.default_backend()})")
    print()
    _print_rows(rows)

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "generated_at": datetime.now(UTC).isoformat(),
            "python": platform.python_version(),
            "jax": jax.__version__,
            "n": args.n,
            "rows": [asdict(row) for row in rows],
        }
        out.write_text(json.dumps(payload, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
