# -*- coding: utf-8 -*-
"""Hilbert Transform cascade shared by MAMA, HT_PHASOR and HT_DCPERIOD.

The cascade is a chain of fixed 4 tap weighted differences:

    price -> smooth -> detrender -> (i1, q1) -> (ji, jq)

Every Hilbert stage is scaled by ``0.075 * period[i-1] + 0.54`` so the
filter bandwidth follows the cycle period estimated on the previous bar
by the homodyne discriminator.  Filter coefficients are kept as data
(``Taps``) so the trendline engine can reuse the same tap primitive with
its own coefficients.

All work arrays are zero below ``HILBERT_WARMUP``.

The smooth stage is the 4-3-2-1 weighted mean of price and the homodyne
angle is taken in degrees, as in Ehlers and TA-Lib.  Outputs therefore
differ from ports that recurse ``smooth`` on itself or use radians.
"""
from math import atan, degrees
from typing import NamedTuple

from numba import njit
from numpy import array, float64, int64, zeros

from pandas_ta_overlap._typing import Array

HILBERT_WARMUP = 6
MIN_PERIOD, MAX_PERIOD = 6.0, 50.0


class Taps(NamedTuple):
    """Weighted sum over lagged samples: sum(weights[k] * src[i - lags[k]])."""
    weights: Array
    lags: Array

    @classmethod
    def make(cls, weights, lags) -> "Taps":
        return cls(array(weights, dtype=float64), array(lags, dtype=int64))


SMOOTH_TAPS = Taps.make((0.4, 0.3, 0.2, 0.1), (0, 1, 2, 3))
HILBERT_TAPS = Taps.make((0.0962, 0.5769, -0.5769, -0.0962), (0, 2, 4, 6))


class HilbertState(NamedTuple):
    smooth: Array
    detrender: Array
    i1: Array
    q1: Array
    ji: Array
    jq: Array
    i2: Array
    q2: Array
    re: Array
    im: Array
    period: Array
    smooth_period: Array


@njit(cache=True)
def nb_taps(src, i, weights, lags):
    total = 0.0
    for k in range(weights.size):
        total += weights[k] * src[i - lags[k]]
    return total


@njit(cache=True)
def nb_hilbert_cascade(price, warmup, smooth_w, smooth_l, hilbert_w, hilbert_l):
    n = price.size
    smooth, detrender = zeros(n), zeros(n)
    i1, q1, ji, jq = zeros(n), zeros(n), zeros(n), zeros(n)
    i2, q2, re, im = zeros(n), zeros(n), zeros(n), zeros(n)
    period, smooth_period = zeros(n), zeros(n)

    for i in range(warmup, n):
        mult = 0.075 * period[i - 1] + 0.54

        smooth[i] = nb_taps(price, i, smooth_w, smooth_l)
        detrender[i] = mult * nb_taps(smooth, i, hilbert_w, hilbert_l)

        # In-phase and quadrature components
        q1[i] = mult * nb_taps(detrender, i, hilbert_w, hilbert_l)
        i1[i] = detrender[i - 3]

        # Advance the phase of i1 and q1 by 90 degrees
        ji[i] = mult * nb_taps(i1, i, hilbert_w, hilbert_l)
        jq[i] = mult * nb_taps(q1, i, hilbert_w, hilbert_l)

        # Phasor addition, smoothed
        i2[i] = 0.2 * (i1[i] - jq[i]) + 0.8 * i2[i - 1]
        q2[i] = 0.2 * (q1[i] + ji[i]) + 0.8 * q2[i - 1]

        # Homodyne discriminator
        re[i] = 0.2 * (i2[i] * i2[i - 1] + q2[i] * q2[i - 1]) + 0.8 * re[i - 1]
        im[i] = 0.2 * (i2[i] * q2[i - 1] - q2[i] * i2[i - 1]) + 0.8 * im[i - 1]

        prev = period[i - 1]
        p = prev
        if re[i] != 0.0 and im[i] != 0.0:
            p = 360.0 / degrees(atan(im[i] / re[i]))

        if p > 1.5 * prev:
            p = 1.5 * prev
        if p < 0.67 * prev:
            p = 0.67 * prev
        if p < MIN_PERIOD:
            p = MIN_PERIOD
        if p > MAX_PERIOD:
            p = MAX_PERIOD

        period[i] = 0.2 * p + 0.8 * prev
        smooth_period[i] = 0.33 * period[i] + 0.67 * smooth_period[i - 1]

    return (
        smooth, detrender, i1, q1, ji, jq,
        i2, q2, re, im, period, smooth_period,
    )


def hilbert_cascade(price: Array) -> HilbertState:
    """Run the cascade over a float64 price array."""
    return HilbertState(*nb_hilbert_cascade(
        price, HILBERT_WARMUP,
        SMOOTH_TAPS.weights, SMOOTH_TAPS.lags,
        HILBERT_TAPS.weights, HILBERT_TAPS.lags,
    ))
