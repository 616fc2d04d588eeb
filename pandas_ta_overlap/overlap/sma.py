# -*- coding: utf-8 -*-
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.utils import (
    rolling_mean,
    v_offset,
    v_pos_default,
    v_series,
)


def sma(
    close: Series, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Simple Moving Average (SMA)

    The arithmetic mean of the last ```length``` values.  The first
    ```length - 1``` rows are averaged over the bars available so far.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/s/sma.asp)

    Parameters:
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    length = v_pos_default(length, 14)
    close = v_series(close, length, "close")
    offset = v_offset(offset)

    # Calculation
    result = rolling_mean(close, length)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"SMA_{length}"
    result.category = "overlap"

    return result
