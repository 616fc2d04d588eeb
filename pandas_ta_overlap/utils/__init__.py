# -*- coding: utf-8 -*-
"""Validation helpers, the error type and the rolling aggregator.

Every public indicator validates its inputs here before any calculation
so that a short series fails immediately and never yields a partial
result.
"""
from typing import Any, Optional

from numpy import float64
from pandas import Series

from pandas_ta_overlap._typing import Int, IntFloat, ListLike

__all__ = [
    "InsufficientData",
    "hl2",
    "rolling_mean",
    "rolling_std",
    "v_offset",
    "v_pos_default",
    "v_same_length",
    "v_series",
]


class InsufficientData(ValueError):
    """Raised when an input series is shorter than an indicator needs."""

    def __init__(self, name: str, required: int, actual: int):
        self.name = name
        self.required = required
        self.actual = actual
        super().__init__(
            f"{name} length must be at least {required}, got {actual}"
        )


def v_series(series: Any, length: Int = 0, name: str = None) -> Series:
    """Return *series* as a float64 Series of at least *length* rows.

    Lists and arrays are wrapped in a Series with a RangeIndex.  Raises
    ``InsufficientData`` when the series is too short.
    """
    if not isinstance(series, Series):
        series = Series(series)
    if series.dtype != float64:
        series = series.astype(float64)
    name = name or series.name or "series"
    if series.size < int(length):
        raise InsufficientData(str(name), int(length), series.size)
    return series


def v_same_length(**series: Series) -> None:
    sizes = {s.size for s in series.values()}
    if len(sizes) > 1:
        names = ", ".join(f"{k}={s.size}" for k, s in series.items())
        raise ValueError(f"Input series differ in length: {names}")


def v_pos_default(value: Optional[IntFloat], default: IntFloat = 0) -> IntFloat:
    """Positive *value* or *default*."""
    if value is not None and value > 0:
        return type(default)(value)
    return default


def v_offset(value: Optional[Int]) -> int:
    return int(value) if isinstance(value, (int, float)) and value != 0 else 0


def hl2(high: ListLike, low: ListLike) -> Series:
    """Typical price of a high / low pair: ``(high + low) / 2``."""
    high = v_series(high, name="high")
    low = v_series(low, name="low")
    v_same_length(high=high, low=low)
    result = 0.5 * (high.values + low.values)
    return Series(result, index=high.index, name="HL2")


# Rolling aggregator.  Both keep the input length: early rows are computed
# over a partial window instead of being left empty.
def rolling_mean(series: Series, window: Int) -> Series:
    return series.rolling(int(window), min_periods=1).mean()


def rolling_std(series: Series, window: Int, ddof: Int = 1) -> Series:
    return series.rolling(int(window), min_periods=1).std(ddof=int(ddof))
