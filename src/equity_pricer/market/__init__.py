"""Market collaborators consumed by pricing engines: rates and maturities."""

from .maturity import DatedMaturity, DayCount, YearFractionMaturity
from .rates import (
    ConstantRateProvider,
    RateProvider,
    SeriesRateProvider,
    coerce_rate_provider,
)

__all__ = [
    "RateProvider",
    "ConstantRateProvider",
    "SeriesRateProvider",
    "coerce_rate_provider",
    "DayCount",
    "DatedMaturity",
    "YearFractionMaturity",
]
