# -*- coding: utf-8 -*-
from math import atan, degrees, floor

from numba import njit
from numpy import full, zeros
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.cycle._hilbert import (
    HILBERT_WARMUP,
    MAX_PERIOD,
    MIN_PERIOD,
    Taps,
    nb_taps,
)
from pandas_ta_overlap.utils import hl2, v_offset, v_series

TRENDLINE_WARMUP = 7
TRENDLINE_BOOTSTRAP = 26
PHASE_LOOKBACK = 40
MIN_DELTA_PHASE, MAX_DELTA_PHASE = 7.0, 60.0

# in_phase[i]   = 1.25 * (v3[i-4] - 0.635 * v3[i-2]) + 0.635 * in_phase[i-3]
# quadrature[i] = v3[i-2] - 0.338 * v3[i] + 0.338 * quadrature[i-2]
INPHASE_TAPS = Taps.make((1.25, -1.25 * 0.635), (4, 2))
INPHASE_FEEDBACK = Taps.make((0.635,), (3,))
QUADRATURE_TAPS = Taps.make((1.0, -0.338), (2, 0))
QUADRATURE_FEEDBACK = Taps.make((0.338,), (2,))


@njit(cache=True)
def nb_ht_trendline(
    x, warmup, bootstrap,
    ip_w, ip_l, ipf_w, ipf_l, q_w, q_l, qf_w, qf_l,
):
    m = x.size
    value3, in_phase, quadrature = zeros(m), zeros(m), zeros(m)
    phase, delta_phase, inst_period = zeros(m), zeros(m), zeros(m)
    period = full(m, MIN_PERIOD)
    trend = x.copy()

    for i in range(warmup, m):
        value3[i] = x[i] - x[i - 7]
        in_phase[i] = nb_taps(value3, i, ip_w, ip_l) \
            + nb_taps(in_phase, i, ipf_w, ipf_l)
        quadrature[i] = nb_taps(value3, i, q_w, q_l) \
            + nb_taps(quadrature, i, qf_w, qf_l)

        # Phase angle in [0, 360), held when undefined
        phase[i] = phase[i - 1]
        denom = in_phase[i] + in_phase[i - 1]
        if denom != 0.0:
            angle = degrees(atan(abs((quadrature[i] + quadrature[i - 1]) / denom)))
            if in_phase[i] < 0.0 and quadrature[i] > 0.0:
                angle = 180.0 - angle
            elif in_phase[i] < 0.0 and quadrature[i] < 0.0:
                angle = 180.0 + angle
            elif in_phase[i] > 0.0 and quadrature[i] < 0.0:
                angle = 360.0 - angle
            if angle >= 360.0:
                angle -= 360.0
            phase[i] = angle

        # Wraparound through 0 degrees
        dp = phase[i - 1] - phase[i]
        if phase[i - 1] < 90.0 and phase[i] > 270.0:
            dp = 360.0 + phase[i - 1] - phase[i]
        if dp < MIN_DELTA_PHASE:
            dp = MIN_DELTA_PHASE
        if dp > MAX_DELTA_PHASE:
            dp = MAX_DELTA_PHASE
        delta_phase[i] = dp

        # Bars needed to complete one full cycle, held when not reached
        inst_period[i] = inst_period[i - 1]
        total = 0.0
        for count in range(min(PHASE_LOOKBACK, i) + 1):
            total += delta_phase[i - count]
            if total > 360.0:
                inst_period[i] = count
                break

        p = 0.25 * inst_period[i] + 0.75 * period[i - 1]
        if p < MIN_PERIOD:
            p = MIN_PERIOD
        if p > MAX_PERIOD:
            p = MAX_PERIOD
        period[i] = p

        if i >= bootstrap:
            length = int(floor(p + 0.5)) + 2
            if length > i + 1:
                length = i + 1
            total = 0.0
            for k in range(length):
                total += x[i - k]
            trend[i] = total / length

    return trend, period


def ht_trendline(
    high: Series, low: Series,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hilbert Transform - Instantaneous Trendline (HT_TL)

    Measures the dominant cycle of the typical price and averages price
    over that cycle, which removes the cycle and leaves the trend.

    The cycle is measured from a 7 bar momentum ```price - price[7]```
    split into in-phase and quadrature components.  Their phase angle
    advances by ```7``` to ```60``` degrees a bar; the number of bars the
    angle needs to turn a full ```360``` degrees is the instantaneous
    period.  The period is smoothed, clamped to ```[6, 50]``` and rounded,
    and the trendline is the simple mean of the last ```period + 2```
    prices.

    Sources:
        * [prorealcode](https://www.prorealcode.com/prorealtime-indicators/john-ehlers-instantaneous-trendline/)
        * [mql5](https://c.mql5.com/forextsd/forum/59/023inst.pdf)
        * [tradingview](https://tw.tradingview.com/script/dFWImthM-blackcat-L2-Ehlers-Hilbert-Transform/)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Note:
        The first ```26``` rows are the typical price itself.
    """
    # Validate
    high = v_series(high, HILBERT_WARMUP, "high")
    low = v_series(low, HILBERT_WARMUP, "low")
    offset = v_offset(offset)

    # Calculation
    price = hl2(high, low)
    trend, _ = nb_ht_trendline(
        price.to_numpy(), TRENDLINE_WARMUP, TRENDLINE_BOOTSTRAP,
        INPHASE_TAPS.weights, INPHASE_TAPS.lags,
        INPHASE_FEEDBACK.weights, INPHASE_FEEDBACK.lags,
        QUADRATURE_TAPS.weights, QUADRATURE_TAPS.lags,
        QUADRATURE_FEEDBACK.weights, QUADRATURE_FEEDBACK.lags,
    )
    result = Series(trend, index=price.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = "HT_TL"
    result.category = "overlap"

    return result
