# -*- coding: utf-8 -*-
from typing import Any, Dict, Sequence, Union

from numpy import floating, integer, ndarray
from pandas import Series

Array = ndarray
DictLike = Dict[str, Any]
Float = Union[float, floating]
Int = Union[int, integer]
IntFloat = Union[Int, Float]
ListLike = Union[Sequence[IntFloat], Array, Series]
