"""Shared pytest fixtures.

All fixtures are deterministic synthetic prices; nothing is read from disk.
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Ensure the package is importable from a source checkout
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)


def _make_ohlc(n_bars: int, seed: int, base_price: float, trend: float = 0.0) -> pd.DataFrame:
    """Generate synthetic OHLC with high >= open/close >= low."""
    rng = np.random.RandomState(seed)
    dates = pd.date_range("2024-01-01", periods=n_bars, freq="h", tz="UTC")

    close = np.empty(n_bars)
    close[0] = base_price
    for i in range(1, n_bars):
        close[i] = close[i - 1] * (1.0 + rng.normal(trend, 0.005))

    open_ = close * (1.0 + rng.normal(0, 0.001, n_bars))
    spread = np.abs(rng.normal(0, 0.003, n_bars)) * close
    high = np.maximum(open_, close) + spread
    low = np.minimum(open_, close) - spread

    return pd.DataFrame(
        {"open": open_, "high": high, "low": low, "close": close},
        index=dates,
    )


@pytest.fixture(scope="session")
def sample_ohlc_df() -> pd.DataFrame:
    """500 hourly bars around 40000, mild uptrend."""
    return _make_ohlc(500, seed=42, base_price=40000.0, trend=0.0002)


@pytest.fixture(scope="session")
def cyclic_ohlc_df() -> pd.DataFrame:
    """300 bars of a 20 bar sine cycle on top of a slow ramp."""
    n = 300
    i = np.arange(n, dtype=float)
    mid = 100.0 + 0.05 * i + 5.0 * np.sin(2.0 * np.pi * i / 20.0)
    dates = pd.date_range("2024-01-01", periods=n, freq="D")
    return pd.DataFrame(
        {"open": mid, "high": mid + 0.5, "low": mid - 0.5, "close": mid},
        index=dates,
    )


@pytest.fixture()
def short_prices() -> pd.Series:
    """The 14 sample vector used across the Hilbert based engines."""
    return pd.Series([1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 0, 11, 12, 13], dtype=float)


@pytest.fixture()
def kama_prices() -> pd.Series:
    return pd.Series([
        35.0, 10.0, 20.0, 56.0, 10.0, 20.0, 56.0, 89.0, 89.0, 76.0, 76.0, 30.0,
        10.0, 20.0, 56.0, 89.0, 46.0, 10.0, 653.0, 10.0, 20.0, 56.0, 89.0, 30.0,
        46.0, 10.0, 653.0, 76.0, 30.0, 46.0, 10.0, 653.0,
    ])
