# -*- coding: utf-8 -*-
from .bbands import bbands
from .dema import dema
from .ema import ema
from .ht_trendline import ht_trendline
from .kama import kama
from .mama import mama
from .mavp import mavp
from .sma import sma

__all__ = [
    "bbands",
    "dema",
    "ema",
    "ht_trendline",
    "kama",
    "mama",
    "mavp",
    "sma",
]
