"""Risk-free rate providers consumed by pricing engines.

A provider answers a single no-argument query, the annualized
continuously-compounded risk-free rate. Engines call it once per pricing
request and never cache the answer, so a provider backed by a live feed yields
a fresh rate on every price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Protocol, TypeAlias, runtime_checkable

import numpy as np
import pandas as pd


@runtime_checkable
class RateProvider(Protocol):
    """Source of the annualized risk-free rate."""

    def annual_risk_free_rate(self) -> float:
        """Return the annualized continuously-compounded rate (decimal)."""


RateInput: TypeAlias = float | int | pd.Series | RateProvider


@dataclass(frozen=True)
class ConstantRateProvider:
    """Constant annualized rate."""

    rate_annual: float = 0.0

    def __post_init__(self) -> None:
        if not np.isfinite(self.rate_annual):
            raise ValueError("rate_annual must be finite")

    def annual_risk_free_rate(self) -> float:
        return float(self.rate_annual)


@dataclass(frozen=True)
class SeriesRateProvider:
    """Date-indexed annualized rates with an as-of lookup.

    The provider returns the latest known rate on or before `as_of`
    (forward-filled in time). If `as_of` is earlier than the first observation,
    the first observation is used; if `as_of` is None, the latest observation is
    used.
    """

    series: pd.Series
    as_of: pd.Timestamp | None = None
    _prepared: pd.Series = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cleaned = pd.Series(self.series).dropna()
        if cleaned.empty:
            raise ValueError("series rate input must contain at least one non-null row")

        try:
            idx = pd.to_datetime(cleaned.index)
        except (TypeError, ValueError) as exc:
            raise ValueError("series rate input must be indexed by dates") from exc

        prepared = pd.Series(cleaned.astype(float).values, index=idx)
        prepared = prepared.sort_index(kind="stable")
        if prepared.index.has_duplicates:
            prepared = prepared.groupby(level=0).last()
        if not np.isfinite(prepared.to_numpy()).all():
            raise ValueError("series rates must be finite")

        object.__setattr__(self, "_prepared", prepared)

    def at(self, as_of: pd.Timestamp | str | None) -> SeriesRateProvider:
        """Return a provider over the same series pinned to another date."""
        pinned = None if as_of is None else pd.Timestamp(as_of)
        return SeriesRateProvider(self.series, as_of=pinned)

    def annual_risk_free_rate(self) -> float:
        if self.as_of is None:
            return float(self._prepared.iloc[-1])

        as_of_ts = pd.Timestamp(self.as_of)
        if as_of_ts <= self._prepared.index[0]:
            return float(self._prepared.iloc[0])

        position = self._prepared.index.searchsorted(as_of_ts, side="right") - 1
        return float(self._prepared.iloc[int(position)])


def coerce_rate_provider(value: RateInput) -> RateProvider:
    """Normalize constant/series/provider input into a `RateProvider`."""
    if isinstance(value, RateProvider):
        return value
    if isinstance(value, pd.Series):
        return SeriesRateProvider(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return ConstantRateProvider(float(value))
    raise TypeError(
        "rate input must be a numeric constant, pandas Series, or RateProvider"
    )
