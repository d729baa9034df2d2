"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from equity_pricer.options.types import (
    OptionContract,
    PricingConfiguration,
    PricingResult,
)


@runtime_checkable
class PriceModel(Protocol):
    """Minimum pricing capability required by callers."""

    def price(
        self, config: PricingConfiguration, option: OptionContract
    ) -> PricingResult:
        """Return the pricing result for one contract."""
