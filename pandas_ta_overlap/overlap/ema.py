# -*- coding: utf-8 -*-
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.utils import v_offset, v_pos_default, v_series


def _ema(close: Series, length: int) -> Series:
    # alpha = 2 / (length + 1), seeded with the first value
    return close.ewm(span=length, adjust=False).mean()


def ema(
    close: Series, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Exponential Moving Average (EMA)

    Single pole recursive smoother:
    ```ema[i] = alpha * close[i] + (1 - alpha) * ema[i-1]``` with
    ```alpha = 2 / (length + 1)```.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/e/ema.asp)

    Parameters:
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Note:
        The first value is the first ```close```, not an SMA seed.
    """
    # Validate
    length = v_pos_default(length, 14)
    close = v_series(close, length, "close")
    offset = v_offset(offset)

    # Calculation
    result = _ema(close, length)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"EMA_{length}"
    result.category = "overlap"

    return result
