# -*- coding: utf-8 -*-
from importlib.util import find_spec
from typing import Dict, List

# Optional libraries, probed once at import.
Imports: Dict[str, bool] = {
    "talib": find_spec("talib") is not None,
}

Category: Dict[str, List[str]] = {
    "cycle": ["ht_dcperiod", "ht_phasor"],
    "overlap": [
        "bbands", "dema", "ema", "ht_trendline", "kama", "mama", "mavp",
        "sma",
    ],
}
