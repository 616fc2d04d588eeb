# -*- coding: utf-8 -*-
from .ht_dcperiod import ht_dcperiod
from .ht_phasor import ht_phasor

__all__ = [
    "ht_dcperiod",
    "ht_phasor",
]
