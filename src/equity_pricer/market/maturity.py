"""Maturity representations convertible to year fractions.

Pricing engines only consume ``to_year_fraction()``; the day-count logic lives
here so contracts can be described either by a plain year fraction or by dates.

Supported day counts
--------------------
- ``ACT/365F``: calendar days / 365
- ``ACT/360``: calendar days / 360
- ``BUS/252``: XNYS trading sessions in ``(valuation_date, expiry]`` / 252
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import TypeAlias

import exchange_calendars as xcals
import numpy as np
import pandas as pd

DateInput: TypeAlias = str | date | pd.Timestamp

TRADING_DAYS_PER_YEAR = 252
# Padding around the requested window so calendar bounds never clip it.
_CALENDAR_PAD = pd.Timedelta(days=10)


class DayCount(StrEnum):
    ACT_365F = "ACT/365F"
    ACT_360 = "ACT/360"
    BUS_252 = "BUS/252"


@dataclass(frozen=True)
class YearFractionMaturity:
    """Maturity already expressed in years."""

    years: float

    def __post_init__(self) -> None:
        if not np.isfinite(self.years):
            raise ValueError("years must be finite")

    def to_year_fraction(self) -> float:
        return float(self.years)


@dataclass(frozen=True)
class DatedMaturity:
    """Maturity given by an expiry date seen from a valuation date."""

    expiry: DateInput
    valuation_date: DateInput
    day_count: DayCount | str = DayCount.ACT_365F
    calendar_name: str = "XNYS"

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "day_count", DayCount(self.day_count))
        except ValueError as exc:
            raise ValueError(
                f"Unsupported day count {self.day_count!r}; expected one of "
                f"{[dc.value for dc in DayCount]}"
            ) from exc
        if self._expiry_ts < self._valuation_ts:
            raise ValueError("expiry must not precede valuation_date")

    @property
    def _expiry_ts(self) -> pd.Timestamp:
        return pd.Timestamp(self.expiry).normalize()

    @property
    def _valuation_ts(self) -> pd.Timestamp:
        return pd.Timestamp(self.valuation_date).normalize()

    def calendar_days(self) -> int:
        return int((self._expiry_ts - self._valuation_ts).days)

    def trading_sessions(self) -> int:
        """Sessions of `calendar_name` strictly after valuation, up to expiry."""
        start, end = self._valuation_ts, self._expiry_ts
        cal = xcals.get_calendar(
            self.calendar_name,
            start=start - _CALENDAR_PAD,
            end=end + _CALENDAR_PAD,
        )
        sessions = cal.sessions
        if sessions.tz is not None:
            sessions = sessions.tz_localize(None)
        return int(((sessions > start) & (sessions <= end)).sum())

    def to_year_fraction(self) -> float:
        if self.day_count is DayCount.ACT_360:
            return self.calendar_days() / 360.0
        if self.day_count is DayCount.BUS_252:
            return self.trading_sessions() / float(TRADING_DAYS_PER_YEAR)
        return self.calendar_days() / 365.0
