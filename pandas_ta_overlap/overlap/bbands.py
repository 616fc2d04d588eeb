# -*- coding: utf-8 -*-
from pandas import DataFrame, Series
from pandas_ta_overlap._typing import DictLike, Int, IntFloat
from pandas_ta_overlap.utils import (
    rolling_mean,
    rolling_std,
    v_offset,
    v_pos_default,
    v_series,
)


def bbands(
    close: Series, length: Int = None, std: IntFloat = None,
    ddof: Int = None, offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Bollinger Bands (BBANDS)

    A rolling mean with bands placed ```std``` rolling standard
    deviations above and below it.

    Sources:
        * [tradingview](https://www.tradingview.com/wiki/Bollinger_Bands_(BB))

    Parameters:
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
        std (float): Band width in standard deviations. Default: ```5.0```
        ddof (int): Delta Degrees of Freedom. Default: ```1```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): lower, mid, upper columns

    Note:
        Both the mean and the deviation are taken over partial windows
        for the first rows.  With ```ddof=1``` the first band values are
        ```NaN``` since one sample has no sample deviation.
    """
    # Validate
    length = v_pos_default(length, 14)
    std = v_pos_default(std, 5.0)
    ddof = int(ddof) if isinstance(ddof, int) and 0 <= ddof < length else 1
    close = v_series(close, length, "close")
    offset = v_offset(offset)

    # Calculation
    mid = rolling_mean(close, length)
    deviation = std * rolling_std(close, length, ddof)
    lower = mid - deviation
    upper = mid + deviation

    _props = f"_{length}_{std}"
    df = DataFrame({
        f"BBL{_props}": lower,
        f"BBM{_props}": mid,
        f"BBU{_props}": upper,
    }, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"BBANDS{_props}"
    df.category = "overlap"

    return df
