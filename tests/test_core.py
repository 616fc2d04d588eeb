"""Tests for the indicator registry, the ``ta`` accessor and the validators."""
import numpy as np
import pandas as pd
import pytest

import pandas_ta_overlap as ta
from pandas_ta_overlap.core import REGISTRY, Indicator, resolve_output_names, supported_kinds
from pandas_ta_overlap.utils import InsufficientData, v_pos_default, v_series


# ── Registry ────────────────────────────────────────────────────────────

class TestRegistry:

    def test_supported_kinds(self):
        assert supported_kinds() == [
            "bbands", "dema", "ema", "ht_dcperiod", "ht_phasor",
            "ht_trendline", "kama", "mama", "mavp", "sma",
        ]

    def test_descriptors(self):
        mama = REGISTRY["mama"]
        assert isinstance(mama, Indicator)
        assert mama.inputs == ("high", "low")
        assert mama.category == "overlap"
        assert mama.function is ta.mama
        assert REGISTRY["sma"].inputs == ("close",)
        assert REGISTRY["ht_phasor"].category == "cycle"

    def test_descriptor_is_frozen(self):
        with pytest.raises(AttributeError):
            REGISTRY["sma"].kind = "ema"

    def test_every_kind_in_a_category(self):
        listed = sorted(k for kinds in ta.Category.values() for k in kinds)
        assert listed == supported_kinds()


# ── Output names ────────────────────────────────────────────────────────

class TestOutputNames:

    def test_prefix_suffix(self):
        names = resolve_output_names(["SMA_10"], {"prefix": "fast", "suffix": "d1"})
        assert names == ["fast_SMA_10_d1"]

    def test_delimiter(self):
        names = resolve_output_names(["SMA_10"], {"prefix": "x", "delimiter": "-"})
        assert names == ["x-SMA_10"]

    def test_col_names(self):
        names = resolve_output_names(["MAMA", "FAMA"], {"col_names": ("m", "f")})
        assert names == ["m", "f"]
        assert resolve_output_names(["SMA"], {"col_names": "avg"}) == ["avg"]

    def test_col_names_too_short(self):
        with pytest.raises(ValueError, match="too short"):
            resolve_output_names(["MAMA", "FAMA"], {"col_names": ("m",)})


# ── Accessor ────────────────────────────────────────────────────────────

class TestAccessor:

    def test_call_matches_function(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        result = df.ta("sma", length=10)
        pd.testing.assert_series_equal(result, ta.sma(df["close"], 10))
        assert "SMA_10" not in df.columns

    def test_call_hilbert_inputs(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        result = df.ta("mama")
        expected = ta.mama(df["high"], df["low"])
        pd.testing.assert_frame_equal(result, expected)

    def test_append(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        df.ta("kama", length=20, append=True)
        df.ta("bbands", append=True)
        assert "KAMA_20_2_30" in df.columns
        assert {"BBL_14_5.0", "BBM_14_5.0", "BBU_14_5.0"} <= set(df.columns)

    def test_kind_is_case_insensitive(self, sample_ohlc_df: pd.DataFrame):
        assert sample_ohlc_df.copy().ta("EMA", length=5).name == "EMA_5"

    def test_renaming(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        df.ta("sma", length=10, prefix="fast", append=True)
        df.ta("mama", col_names=("m", "f"), append=True)
        assert "fast_SMA_10" in df.columns
        assert {"m", "f"} <= set(df.columns)

    def test_column_override(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        df["adj"] = df["close"] * 2.0
        result = df.ta("sma", close="adj", length=5)
        np.testing.assert_allclose(result.to_numpy(), ta.sma(df["close"] * 2.0, 5).to_numpy())

    def test_column_case_insensitive(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.rename(columns=str.capitalize)
        result = df.ta("ht_trendline")
        assert len(result) == len(df)

    def test_study(self, sample_ohlc_df: pd.DataFrame):
        df = sample_ohlc_df.copy()
        out = df.ta.study(["sma", {"kind": "kama", "length": 20}, "ht_dcperiod"])
        assert out is df
        assert {"SMA_14", "KAMA_20_2_30", "HT_DCPERIOD"} <= set(df.columns)

    def test_unknown_kind(self, sample_ohlc_df: pd.DataFrame):
        with pytest.raises(ValueError, match="not found"):
            sample_ohlc_df.ta("macd")

    def test_missing_column(self):
        df = pd.DataFrame({"close": np.arange(20.0)})
        with pytest.raises(ValueError, match="no 'high' column"):
            df.ta("mama")

    def test_accessor_propagates_insufficient_data(self):
        df = pd.DataFrame({"close": np.arange(5.0)})
        with pytest.raises(InsufficientData):
            df.ta("sma")


# ── Validators ──────────────────────────────────────────────────────────

class TestValidators:

    def test_insufficient_data_attributes(self):
        with pytest.raises(InsufficientData) as excinfo:
            v_series([1.0, 2.0], 5, "close")
        err = excinfo.value
        assert (err.name, err.required, err.actual) == ("close", 5, 2)
        assert isinstance(err, ValueError)
        assert "at least 5" in str(err)

    def test_v_series_casts_to_float(self):
        result = v_series([1, 2, 3])
        assert result.dtype == np.float64
        assert len(result) == 3

    def test_v_pos_default(self):
        assert v_pos_default(None, 14) == 14
        assert v_pos_default(0, 14) == 14
        assert v_pos_default(-3, 14) == 14
        assert v_pos_default(3.0, 14) == 3
        assert isinstance(v_pos_default(2, 5.0), float)

    def test_hl2(self):
        result = ta.hl2([2.0, 4.0], [1.0, 2.0])
        assert result.name == "HL2"
        np.testing.assert_allclose(result.to_numpy(), [1.5, 3.0])

    def test_hl2_length_mismatch(self):
        with pytest.raises(ValueError, match="differ in length"):
            ta.hl2([1.0, 2.0, 3.0], [1.0, 2.0])
