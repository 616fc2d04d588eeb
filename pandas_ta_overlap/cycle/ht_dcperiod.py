# -*- coding: utf-8 -*-
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.cycle._hilbert import HILBERT_WARMUP, hilbert_cascade
from pandas_ta_overlap.utils import hl2, v_offset, v_series


def ht_dcperiod(
    high: Series, low: Series,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hilbert Transform - Dominant Cycle Period

    Smoothed cycle length, in bars, measured by the homodyne discriminator
    of the Hilbert Transform cascade.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", 2001

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    high = v_series(high, HILBERT_WARMUP, "high")
    low = v_series(low, HILBERT_WARMUP, "low")
    offset = v_offset(offset)

    # Calculation
    price = hl2(high, low)
    state = hilbert_cascade(price.to_numpy())
    result = Series(state.smooth_period, index=price.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = "HT_DCPERIOD"
    result.category = "cycle"

    return result
