# -*- coding: utf-8 -*-
from numba import njit
from numpy import empty_like
from pandas import Series
from pandas_ta_overlap._typing import DictLike, Int
from pandas_ta_overlap.utils import (
    v_offset,
    v_pos_default,
    v_series,
)

KAMA_SEEDS = ("zero", "price")


@njit(cache=True)
def nb_kama(x, sc, seed):
    m = x.size
    result = empty_like(x)
    result[0] = seed
    for i in range(1, m):
        result[i] = result[i - 1] + sc[i] * (x[i] - result[i - 1])
    return result


def kama(
    close: Series, length: Int = None,
    fast: Int = None, slow: Int = None, seed: str = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Kaufman's Adaptive Moving Average (KAMA)

    An EMA whose smoothing constant follows the Efficiency Ratio: net
    movement over ```length``` bars divided by the sum of the absolute bar
    to bar movements.  Trending prices speed it up towards the ```fast```
    constant, choppy prices slow it down towards the ```slow``` one.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:kaufman_s_adaptive_moving_average)

    Parameters:
        close (Series): ```close``` Series
        length (int): Efficiency Ratio period. Default: ```10```
        fast (int): Fast MA period. Default: ```2```
        slow (int): Slow MA period. Default: ```30```
        seed (str): First value, ```"zero"``` or ```"price"```.
            Default: ```"zero"```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Note: Warm-up
        The first ```length``` rows have no full lookback; their direction
        and volatility are back filled from the first complete values.
        With exactly ```length``` rows there is no complete direction and
        it is taken as zero.  When the volatility is zero the Efficiency
        Ratio is zero.

    Note: Seed
        ```seed="zero"``` starts the recursion at ```0``` which drags the
        early values up from zero.  ```seed="price"``` starts at the first
        ```close``` instead.
    """
    # Validate
    length = v_pos_default(length, 10)
    fast = v_pos_default(fast, 2)
    slow = v_pos_default(slow, 30)
    seed = "zero" if seed is None else str(seed).lower()
    if seed not in KAMA_SEEDS:
        raise ValueError(f"kama seed must be one of {KAMA_SEEDS}, got {seed!r}")
    close = v_series(close, length, "close")
    offset = v_offset(offset)

    # Calculation
    fr = 2.0 / (fast + 1.0)
    sr = 2.0 / (slow + 1.0)

    direction = close.diff(length).abs().bfill().fillna(0.0)
    volatility = close.diff().abs().rolling(length, min_periods=1).sum().bfill()
    er = (direction / volatility).where(volatility != 0.0, 0.0)
    sc = (er * (fr - sr) + sr) ** 2

    np_close = close.to_numpy()
    first = np_close[0] if seed == "price" else 0.0
    result = Series(nb_kama(np_close, sc.to_numpy(), first), index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"KAMA_{length}_{fast}_{slow}"
    result.category = "overlap"

    return result
