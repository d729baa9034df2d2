"""Binomial-lattice pricing of vanilla equity options."""

from .market import (
    ConstantRateProvider,
    DatedMaturity,
    RateProvider,
    YearFractionMaturity,
)
from .options import (
    BinomialTreePricer,
    OptionContract,
    OptionStyle,
    OptionType,
    PricingConfiguration,
    PricingResult,
    Underlying,
)

__all__ = [
    "BinomialTreePricer",
    "ConstantRateProvider",
    "DatedMaturity",
    "OptionContract",
    "OptionStyle",
    "OptionType",
    "PricingConfiguration",
    "PricingResult",
    "RateProvider",
    "Underlying",
    "YearFractionMaturity",
]
