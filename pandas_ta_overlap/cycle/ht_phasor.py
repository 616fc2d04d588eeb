# -*- coding: utf-8 -*-
from pandas import DataFrame, Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.cycle._hilbert import HILBERT_WARMUP, hilbert_cascade
from pandas_ta_overlap.utils import hl2, v_offset, v_series


def ht_phasor(
    high: Series, low: Series,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Hilbert Transform - Phasor Components

    The in-phase (I1) and quadrature (Q1) components of the typical price,
    as extracted by the Hilbert Transform cascade.  Q1 lags I1 by a quarter
    of the dominant cycle.

    Sources:
        * John F. Ehlers, "Rocket Science for Traders", 2001
        * [mql5](https://c.mql5.com/forextsd/forum/59/023inst.pdf)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): 2 columns, ```Q1``` then ```I1```

    Note:
        The first ```6``` rows are zero.
    """
    # Validate
    high = v_series(high, HILBERT_WARMUP, "high")
    low = v_series(low, HILBERT_WARMUP, "low")
    offset = v_offset(offset)

    # Calculation
    price = hl2(high, low)
    state = hilbert_cascade(price.to_numpy())

    df = DataFrame({
        "HT_PHASOR_Q1": state.q1,
        "HT_PHASOR_I1": state.i1,
    }, index=price.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = "HT_PHASOR"
    df.category = "cycle"

    return df
