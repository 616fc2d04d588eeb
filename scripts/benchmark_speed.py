#!/usr/bin/env python3
"""Benchmark every registered indicator through ``df.ta.study``.

The first (untimed) run also compiles the Numba kernels; use
``--warmup 0`` to see the compile cost.
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_overlap as ta


def make_ohlc(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    return pd.DataFrame(
        {"open": open_, "high": high, "low": low, "close": close},
        index=idx,
    )


def parse_exclude(value: str | None) -> List[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=100_000)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--exclude", type=str, default="", help="comma-separated kinds to exclude")
    ap.add_argument("--warmup", type=int, default=1, help="warmup runs (not timed)")
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    args = ap.parse_args()

    exclude = set(parse_exclude(args.exclude)) | {"mavp"}
    kinds = [k for k in ta.supported_kinds() if k not in exclude]
    df = make_ohlc(args.rows, args.seed)

    for _ in range(max(args.warmup, 0)):
        df.copy().ta.study(kinds)

    timings = {}
    for kind in kinds:
        times = []
        for _ in range(max(args.runs, 1)):
            df_copy = df.copy()
            start = perf_counter()
            df_copy.ta(kind)
            times.append(perf_counter() - start)
        timings[kind] = sum(times) / len(times)

    print(f"[i] rows: {args.rows}")
    print(f"[i] runs: {max(args.runs, 1)} (warmup: {args.warmup})")
    for kind, avg in sorted(timings.items(), key=lambda kv: kv[1], reverse=True):
        print(f"  {kind:<14} {avg:.4f}s  ({avg / args.rows * 100_000:.4f}s per 100k rows)")


if __name__ == "__main__":
    main()
