# -*- coding: utf-8 -*-
from warnings import warn

from numba import njit
from numpy import zeros
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int, ListLike
from pandas_ta_overlap.utils import (
    v_offset,
    v_pos_default,
    v_same_length,
    v_series,
)


@njit(cache=True)
def nb_mavp(x, periods, minperiod, maxperiod):
    m = x.size
    result = zeros(m)
    skipped = 0
    for i in range(m):
        p = periods[i]
        if p < minperiod or p > maxperiod or p != p:
            skipped += 1
            continue
        length = int(p)
        if length > i + 1:
            length = i + 1
        total = 0.0
        for k in range(length):
            total += x[i - k]
        result[i] = total / length
    return result, skipped


def mavp(
    close: Series, periods: ListLike,
    minperiod: Int = None, maxperiod: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Moving Average with Variable Period (MAVP)

    A simple moving average whose window is read, bar by bar, from
    ```periods```.  Windows that reach before the first bar are averaged
    over the bars available.

    Parameters:
        close (Series): ```close``` Series
        periods (Series): Window length for each bar, same length as
            ```close```
        minperiod (int): Smallest accepted period. Default: ```2```
        maxperiod (int): Largest accepted period. Default: ```30```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Warning:
        Bars whose period falls outside ```[minperiod, maxperiod]``` are
        set to ```0.0``` and a ```UserWarning``` is emitted.
    """
    # Validate
    minperiod = v_pos_default(minperiod, 2)
    maxperiod = v_pos_default(maxperiod, 30)
    if minperiod > maxperiod:
        raise ValueError(
            f"mavp minperiod ({minperiod}) exceeds maxperiod ({maxperiod})"
        )
    close = v_series(close, minperiod, "close")
    periods = v_series(periods, name="periods")
    v_same_length(close=close, periods=periods)
    offset = v_offset(offset)

    # Calculation
    np_result, skipped = nb_mavp(
        close.to_numpy(), periods.to_numpy(), float(minperiod), float(maxperiod)
    )
    if skipped > 0:
        warn(
            f"MAVP: {skipped} bar(s) with a period outside "
            f"[{minperiod}, {maxperiod}] were set to 0.0",
            UserWarning,
            stacklevel=2
        )
    result = Series(np_result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"MAVP_{minperiod}_{maxperiod}"
    result.category = "overlap"

    return result
