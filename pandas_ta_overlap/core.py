# -*- coding: utf-8 -*-
"""pandas-ta-overlap -- indicator registry and the ``ta`` DataFrame accessor.

The registry maps an indicator *kind* to its function and the DataFrame
columns it reads, so a DataFrame of OHLC prices can run any indicator by
name::

    df.ta("mama", fastlimit=0.5, append=True)
    df.ta.study(["sma", {"kind": "kama", "length": 20}])
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple, Union

from pandas import DataFrame, Series
from pandas.api.extensions import register_dataframe_accessor

from pandas_ta_overlap import cycle, overlap
from pandas_ta_overlap.maps import Category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Indicator:
    """Immutable descriptor for a single indicator."""
    kind:     str
    inputs:   Tuple[str, ...]
    function: Callable[..., Union[Series, DataFrame]]
    category: str


_HL_INPUTS = ("high", "low")
_INPUTS: Dict[str, Tuple[str, ...]] = {
    "ht_dcperiod": _HL_INPUTS,
    "ht_phasor": _HL_INPUTS,
    "ht_trendline": _HL_INPUTS,
    "mama": _HL_INPUTS,
}
_MODULES = {"cycle": cycle, "overlap": overlap}

REGISTRY: Dict[str, Indicator] = {
    kind: Indicator(
        kind=kind,
        inputs=_INPUTS.get(kind, ("close",)),
        function=getattr(_MODULES[category], kind),
        category=category,
    )
    for category, kinds in Category.items()
    for kind in kinds
}

# Accessor options that are not indicator parameters.
ACCESSOR_EXCLUDES = frozenset({
    "kind", "append", "prefix", "suffix", "delimiter", "col_names",
})


def supported_kinds() -> List[str]:
    """Return sorted list of registered indicator kinds."""
    return sorted(REGISTRY.keys())


def resolve_output_names(base_names: List[str], spec: Dict[str, Any]) -> List[str]:
    """Apply prefix / suffix / col_names overrides from *spec*."""
    names = list(base_names)
    delimiter = spec.get("delimiter", "_")
    prefix = spec.get("prefix") or ""
    suffix = spec.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = spec.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            raise ValueError(f"col_names too short: {len(col_names)} < {len(names)}")
        names = list(col_names[: len(names)])
    return names


@register_dataframe_accessor("ta")
class AnalysisIndicators:
    """Run registered indicators on the columns of a DataFrame.

    Input columns are matched case-insensitively (```close``` or
    ```Close```).  Pass ```close="adj_close"``` (or ```high=```/```low=```)
    to read a differently named column.
    """

    def __init__(self, pandas_obj: DataFrame):
        self._df = pandas_obj

    def __call__(self, kind: str, append: bool = False, **kwargs: Any) -> Union[Series, DataFrame]:
        indicator = REGISTRY.get(str(kind).lower())
        if indicator is None:
            raise ValueError(f"Indicator '{kind}' not found in REGISTRY")

        params = {k: v for k, v in kwargs.items() if k not in ACCESSOR_EXCLUDES}
        args = [self._column(params.pop(name, name)) for name in indicator.inputs]

        logger.debug("computing %s %s", indicator.kind, params)
        result = indicator.function(*args, **params)
        result = self._rename(result, kwargs)

        if append:
            self._append(result)
        return result

    def study(self, kinds: List[Union[str, Dict[str, Any]]], **kwargs: Any) -> DataFrame:
        """Append several indicators.  Each entry is a kind or a dict with a
        ```kind``` key plus parameters; *kwargs* apply to every entry."""
        for entry in kinds:
            spec = {"kind": entry} if isinstance(entry, str) else dict(entry)
            kind = spec.pop("kind")
            self(kind, append=True, **{**kwargs, **spec})
        return self._df

    def _column(self, name: str) -> Series:
        if name in self._df.columns:
            return self._df[name]
        lowered = {str(c).lower(): c for c in self._df.columns}
        if name.lower() in lowered:
            return self._df[lowered[name.lower()]]
        raise ValueError(f"DataFrame has no '{name}' column")

    @staticmethod
    def _rename(result: Union[Series, DataFrame], spec: Dict[str, Any]) -> Union[Series, DataFrame]:
        if isinstance(result, DataFrame):
            result.columns = resolve_output_names(list(result.columns), spec)
        else:
            result.name = resolve_output_names([result.name], spec)[0]
        return result

    def _append(self, result: Union[Series, DataFrame]) -> None:
        if isinstance(result, DataFrame):
            for col in result.columns:
                self._df[col] = result[col]
            names = list(result.columns)
        else:
            self._df[result.name] = result
            names = [result.name]
        logger.debug("appended %s", names)
