"""Benchmark the overlap groupers and full layout on generated event sets."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from calendar_layout.grouping import group_overlapping, group_overlapping_sweep
from calendar_layout.layout import layout
from calendar_layout.metrics import compute_layout_metrics
from calendar_layout.schema import Event

_WINDOW_START = datetime(2025, 1, 6, 7, 0)
_WINDOW_MINUTES = 14 * 60


def generate_events(n: int, seed: int = 42) -> list[Event]:
    """Random 15-minute-aligned sessions inside one 07:00-21:00 day window."""

    rng = np.random.default_rng(seed)
    starts = rng.integers(0, _WINDOW_MINUTES // 15, size=n) * 15
    durations = rng.choice([30, 45, 60, 90, 120], size=n)
    return [
        Event(
            id=f"evt-{i}",
            start_time=_WINDOW_START + timedelta(minutes=int(start)),
            end_time=_WINDOW_START + timedelta(minutes=int(start + duration)),
        )
        for i, (start, duration) in enumerate(zip(starts, durations))
    ]


def _time_call(func, events, repeats: int) -> dict:
    samples = []
    for _ in range(repeats):
        began = time.perf_counter()
        func(events)
        samples.append((time.perf_counter() - began) * 1000.0)
    values = np.asarray(samples)
    return {
        "mean_ms": float(np.mean(values)),
        "p50_ms": float(np.percentile(values, 50)),
        "p95_ms": float(np.percentile(values, 95)),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run calendar-layout benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 50, 200, 500])
    parser.add_argument("--repeats", type=int, default=20)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s - %(message)s")

    report = {"runs": []}
    for size in args.sizes:
        events = generate_events(size, seed=args.seed)
        report["runs"].append(
            {
                "n_events": size,
                "flood_fill": _time_call(group_overlapping, events, args.repeats),
                "sweep_line": _time_call(group_overlapping_sweep, events, args.repeats),
                "layout": _time_call(layout, events, args.repeats),
                "metrics": compute_layout_metrics(layout(events)),
            }
        )
        logging.info("Benchmarked %d events", size)

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "benchmark_report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved benchmark report to {out_path}")


if __name__ == "__main__":
    main()
