"""Tests for the Hilbert Transform Instantaneous Trendline."""
from math import floor

import numpy as np
import pandas as pd
import pytest

import pandas_ta_overlap as ta
from pandas_ta_overlap.cycle._hilbert import MAX_PERIOD, MIN_PERIOD
from pandas_ta_overlap.overlap.ht_trendline import (
    INPHASE_FEEDBACK,
    INPHASE_TAPS,
    QUADRATURE_FEEDBACK,
    QUADRATURE_TAPS,
    TRENDLINE_BOOTSTRAP,
    TRENDLINE_WARMUP,
    nb_ht_trendline,
)
from pandas_ta_overlap.utils import InsufficientData


def _run(price: np.ndarray):
    return nb_ht_trendline(
        price, TRENDLINE_WARMUP, TRENDLINE_BOOTSTRAP,
        INPHASE_TAPS.weights, INPHASE_TAPS.lags,
        INPHASE_FEEDBACK.weights, INPHASE_FEEDBACK.lags,
        QUADRATURE_TAPS.weights, QUADRATURE_TAPS.lags,
        QUADRATURE_FEEDBACK.weights, QUADRATURE_FEEDBACK.lags,
    )


class TestTrendline:

    def test_short_vector_returns_price(self, short_prices: pd.Series):
        result = ta.ht_trendline(short_prices, short_prices)
        assert result.name == "HT_TL"
        assert result.category == "overlap"
        np.testing.assert_array_equal(result.to_numpy(), short_prices.to_numpy())

    def test_bootstrap_rows_are_price(self, sample_ohlc_df: pd.DataFrame):
        high, low = sample_ohlc_df["high"], sample_ohlc_df["low"]
        result = ta.ht_trendline(high, low)
        price = ta.hl2(high, low)
        assert len(result) == len(price)
        np.testing.assert_array_equal(
            result.iloc[:TRENDLINE_BOOTSTRAP].to_numpy(),
            price.iloc[:TRENDLINE_BOOTSTRAP].to_numpy(),
        )

    @pytest.mark.parametrize("fixture", ["sample_ohlc_df", "cyclic_ohlc_df"])
    def test_period_bounds(self, fixture: str, request):
        df = request.getfixturevalue(fixture)
        _, period = _run(df["close"].to_numpy())
        assert (period >= MIN_PERIOD).all()
        assert (period <= MAX_PERIOD).all()

    def test_trend_is_mean_over_period(self, cyclic_ohlc_df: pd.DataFrame):
        x = cyclic_ohlc_df["close"].to_numpy()
        trend, period = _run(x)
        for i in range(TRENDLINE_BOOTSTRAP, x.size):
            length = min(int(floor(period[i] + 0.5)) + 2, i + 1)
            assert trend[i] == pytest.approx(x[i - length + 1:i + 1].mean())

    def test_trend_removes_cycle(self, cyclic_ohlc_df: pd.DataFrame):
        price = cyclic_ohlc_df["close"]
        result = ta.ht_trendline(cyclic_ohlc_df["high"], cyclic_ohlc_df["low"])
        ramp = 100.0 + 0.05 * np.arange(len(price))
        tail = slice(150, None)
        # the trendline hugs the ramp much closer than price does
        trend_err = np.abs(result.to_numpy()[tail] - ramp[tail]).mean()
        price_err = np.abs(price.to_numpy()[tail] - ramp[tail]).mean()
        assert trend_err < price_err

    def test_constant_series(self):
        flat = pd.Series([3.5] * 120)
        result = ta.ht_trendline(flat, flat)
        np.testing.assert_allclose(result.to_numpy(), 3.5)

    def test_boundary(self, short_prices: pd.Series):
        six = short_prices.iloc[:6]
        assert len(ta.ht_trendline(six, six)) == 6
        with pytest.raises(InsufficientData):
            ta.ht_trendline(six.iloc[:5], six.iloc[:5])

    def test_offset(self, sample_ohlc_df: pd.DataFrame):
        high, low = sample_ohlc_df["high"], sample_ohlc_df["low"]
        base = ta.ht_trendline(high, low)
        shifted = ta.ht_trendline(high, low, offset=2)
        assert np.isnan(shifted.iloc[0])
        assert shifted.iloc[2] == base.iloc[0]
