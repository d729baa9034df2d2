"""Option pricing models, engines, and shared types."""

from .engines import BinomialTreePricer, PriceModel
from .exceptions import (
    InvalidOptionInputError,
    PricingError,
    UnsupportedVariantError,
)
from .models import LatticeParameters, binomial_tree_price, bs_d1_d2, bs_price
from .parity import parity_forward_value, put_call_parity_residual
from .types import (
    Greeks,
    Maturity,
    OptionContract,
    OptionStyle,
    OptionStyleInput,
    OptionType,
    OptionTypeInput,
    PricingConfiguration,
    PricingResult,
    Underlying,
    normalize_option_style,
    normalize_option_type,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "OptionStyle",
    "OptionStyleInput",
    "Maturity",
    "Underlying",
    "OptionContract",
    "PricingConfiguration",
    "Greeks",
    "PricingResult",
    "normalize_option_type",
    "normalize_option_style",
    "PricingError",
    "UnsupportedVariantError",
    "InvalidOptionInputError",
    "PriceModel",
    "BinomialTreePricer",
    "LatticeParameters",
    "binomial_tree_price",
    "bs_d1_d2",
    "bs_price",
    "parity_forward_value",
    "put_call_parity_residual",
]
