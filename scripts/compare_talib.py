#!/usr/bin/env python3
"""Compare pandas_ta_overlap outputs against TA-Lib.

TA-Lib seeds its averages differently (SMA seeds, NaN warm-up rows), so
the early rows never match.  The report covers the last ``--tail`` rows
where both libraries have settled.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_overlap as ta
from pandas_ta_overlap.maps import Imports


def make_ohlcv(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    return pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2000)
    ap.add_argument("--tail", type=int, default=500)
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    if not Imports.get("talib", False):
        raise SystemExit("[X] TA-Lib not available. Install the dev extra to run this script.")
    import talib

    df = make_ohlcv(args.rows, args.seed)
    close = df["close"]
    price = ta.hl2(df["high"], df["low"])
    np_close, np_price = close.to_numpy(), price.to_numpy()

    mama_ = ta.mama(df["high"], df["low"])
    phasor = ta.ht_phasor(df["high"], df["low"])
    talib_mama, talib_fama = talib.MAMA(np_price, fastlimit=0.5, slowlimit=0.05)
    talib_inphase, talib_quadrature = talib.HT_PHASOR(np_price)

    test = pd.DataFrame({
        "sma": ta.sma(close, 14),
        "ema": ta.ema(close, 14),
        "dema": ta.dema(close, 14),
        "kama": ta.kama(close, 10, seed="price"),
        "mama": mama_.iloc[:, 0],
        "fama": mama_.iloc[:, 1],
        "ht_trendline": ta.ht_trendline(df["high"], df["low"]),
        "ht_dcperiod": ta.ht_dcperiod(df["high"], df["low"]),
        "ht_i1": phasor["HT_PHASOR_I1"],
        "ht_q1": phasor["HT_PHASOR_Q1"],
    }, index=df.index)
    ref = pd.DataFrame({
        "sma": talib.SMA(np_close, 14),
        "ema": talib.EMA(np_close, 14),
        "dema": talib.DEMA(np_close, 14),
        "kama": talib.KAMA(np_close, 10),
        "mama": talib_mama,
        "fama": talib_fama,
        "ht_trendline": talib.HT_TRENDLINE(np_price),
        "ht_dcperiod": talib.HT_DCPERIOD(np_price),
        "ht_i1": talib_inphase,
        "ht_q1": talib_quadrature,
    }, index=df.index)

    tail = df.index[-args.tail:]
    summary = compare_frames(ref.loc[tail], test.loc[tail], args.eps)

    print("[i] rows:", args.rows)
    print("[i] compare rows:", len(tail))
    print("\nBy max_abs:")
    print(summary.sort_values("max_abs", ascending=False))


if __name__ == "__main__":
    main()
