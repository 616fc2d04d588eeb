# -*- coding: utf-8 -*-
from numba import njit
from numpy import zeros
from pandas import DataFrame, Series
from pandas_ta_overlap._typing import DictLike, Int, IntFloat
from pandas_ta_overlap.cycle._hilbert import HILBERT_WARMUP, hilbert_cascade
from pandas_ta_overlap.utils import (
    hl2,
    v_offset,
    v_pos_default,
    v_series,
)


@njit(cache=True)
def nb_mama_phase(q1, i1, warmup):
    # Quadrature over in-phase ratio, held when i1 is zero
    m = q1.size
    phase = zeros(m)
    for i in range(warmup, m):
        if i1[i] != 0.0:
            phase[i] = q1[i] / i1[i]
        else:
            phase[i] = phase[i - 1]
    return phase


@njit(cache=True)
def nb_mama_alpha(phase, fastlimit, slowlimit, warmup):
    m = phase.size
    alpha = zeros(m)
    for i in range(warmup, m):
        delta_phase = phase[i - 1] - phase[i]
        if delta_phase < 1.0:
            delta_phase = 1.0

        a = fastlimit / delta_phase
        if a > fastlimit:
            a = fastlimit
        if a < slowlimit:
            a = slowlimit
        alpha[i] = a
    return alpha


@njit(cache=True)
def nb_mama(x, alpha, warmup):
    m = x.size
    mama, fama = zeros(m), zeros(m)
    for i in range(warmup, m):
        a = alpha[i]
        mama[i] = a * x[i] + (1.0 - a) * mama[i - 1]
        fama[i] = 0.5 * a * mama[i] + (1.0 - 0.5 * a) * fama[i - 1]
    return mama, fama


def mama(
    high: Series, low: Series,
    fastlimit: IntFloat = None, slowlimit: IntFloat = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """MESA Adaptive Moving Average (MAMA)

    Ehlers' phase adaptive pair of moving averages.  The typical price runs
    through the Hilbert Transform cascade; the phase is the ratio
    ```q1 / i1``` of its quadrature and in-phase components, and the bar to
    bar drop in phase sets ```alpha = fastlimit / delta_phase```.  A stalled
    or rising phase gives ```fastlimit```, a steep drop brings it down to
    ```slowlimit```.  FAMA follows MAMA with half its ```alpha```.

    Sources:
        * [mesasoftware](https://www.mesasoftware.com/papers/MAMA.pdf)
        * [prorealcode](https://www.prorealcode.com/prorealtime-indicators/john-ehlers-mama-the-mother-of-adaptive-moving-average/)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        fastlimit (float): Upper bound of ```alpha```. Default: ```0.5```
        slowlimit (float): Lower bound of ```alpha```. Default: ```0.05```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): MAMA, FAMA columns

    Note:
        The first ```6``` rows are zero and both averages start from zero,
        so allow a few cycles of warm-up before reading them.
    """
    # Validate
    fastlimit = v_pos_default(fastlimit, 0.5)
    slowlimit = v_pos_default(slowlimit, 0.05)
    high = v_series(high, HILBERT_WARMUP, "high")
    low = v_series(low, HILBERT_WARMUP, "low")
    offset = v_offset(offset)

    # Calculation
    price = hl2(high, low)
    np_price = price.to_numpy()
    state = hilbert_cascade(np_price)
    phase = nb_mama_phase(state.q1, state.i1, HILBERT_WARMUP)
    alpha = nb_mama_alpha(phase, fastlimit, slowlimit, HILBERT_WARMUP)
    mama_, fama = nb_mama(np_price, alpha, HILBERT_WARMUP)

    _props = f"_{fastlimit}_{slowlimit}"
    df = DataFrame({
        f"MAMA{_props}": mama_,
        f"FAMA{_props}": fama,
    }, index=price.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"MAMA{_props}"
    df.category = "overlap"

    return df
