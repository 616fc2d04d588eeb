# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pandas_ta_overlap")
except PackageNotFoundError:
    # running from a source checkout
    version = "0.0.0"

from pandas_ta_overlap.maps import Category, Imports
from pandas_ta_overlap.utils import *
from pandas_ta_overlap.utils import __all__ as utils_all

# Flat Structure. Supports ta.mama() or ta.overlap.mama()
from pandas_ta_overlap.cycle import *
from pandas_ta_overlap.overlap import *
from pandas_ta_overlap.cycle import __all__ as cycle_all
from pandas_ta_overlap.overlap import __all__ as overlap_all

# Enable "ta" DataFrame Extension
from pandas_ta_overlap.core import (
    AnalysisIndicators,
    Indicator,
    REGISTRY,
    supported_kinds,
)

__all__ = [
    "Category",
    "Imports",
    "version",
    "AnalysisIndicators",
    "Indicator",
    "REGISTRY",
    "supported_kinds",
]

__all__ += utils_all + cycle_all + overlap_all
