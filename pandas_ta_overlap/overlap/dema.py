# -*- coding: utf-8 -*-
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.overlap.ema import _ema
from pandas_ta_overlap.utils import v_offset, v_pos_default, v_series


def dema(
    close: Series, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Double Exponential Moving Average (DEMA)

    Lag compensated smoother: ```2 * EMA - EMA(EMA)```.

    Sources:
        * [tradingtechnologies](https://library.tradingtechnologies.com/trade/chrt-ti-double-exponential-moving-average.html)

    Parameters:
        close (Series): ```close``` Series
        length (int): The period. Default: ```5```, shorter than the
            ```14``` of ```ema``` and ```sma```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    length = v_pos_default(length, 5)
    close = v_series(close, length, "close")
    offset = v_offset(offset)

    # Calculation
    ema1 = _ema(close, length)
    ema2 = _ema(ema1, length)
    result = 2 * ema1 - ema2

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"DEMA_{length}"
    result.category = "overlap"

    return result
