"""Binomial-tree pricing engine for vanilla equity options."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from equity_pricer.market.rates import RateProvider
from equity_pricer.options.exceptions import InvalidOptionInputError
from equity_pricer.options.models.binomial_tree import (
    DEFAULT_STEPS,
    LatticeParameters,
    backward_induct,
    terminal_payoffs,
    terminal_stock_prices,
)
from equity_pricer.options.types import (
    OptionContract,
    PricingConfiguration,
    PricingResult,
    normalize_option_style,
    normalize_option_type,
)

logger = logging.getLogger(__name__)


def _validate_inputs(
    *,
    spot: float,
    strike: float,
    T: float,
    sigma: float,
    dividend_yield: float,
) -> None:
    values = {
        "spot_price": spot,
        "strike": strike,
        "time_to_maturity": T,
        "annual_volatility": sigma,
        "annual_dividend_yield": dividend_yield,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidOptionInputError(f"{name} must be finite, got {value!r}")

    if strike <= 0:
        raise InvalidOptionInputError("strike must be > 0")
    if spot <= 0:
        raise InvalidOptionInputError("spot_price must be > 0")
    if T <= 0:
        raise InvalidOptionInputError("time_to_maturity must be > 0")
    if sigma <= 0:
        raise InvalidOptionInputError("annual_volatility must be > 0")


@dataclass(frozen=True)
class BinomialTreePricer:
    """CRR tree pricer supporting American and European exercise.

    The engine holds no per-call state: the step count and the rate provider
    are fixed at construction and each ``price`` call allocates its own
    lattice buffers, so one instance can serve concurrent callers as long as
    the rate provider can.

    With ``validate_inputs=False`` degenerate contracts (zero volatility,
    non-positive maturity, ...) are priced anyway and produce NaN/Inf instead
    of raising. Greeks are not computed; ``PricingResult.greeks`` is None.
    """

    rate_provider: RateProvider
    steps: int = DEFAULT_STEPS
    validate_inputs: bool = True

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if not isinstance(self.rate_provider, RateProvider):
            raise TypeError("rate_provider must implement annual_risk_free_rate()")

    def price(
        self, config: PricingConfiguration, option: OptionContract
    ) -> PricingResult:
        _ = config
        option_type = normalize_option_type(option.option_type)
        style = normalize_option_style(option.style)

        underlying = option.underlying
        spot = float(underlying.spot_price)
        sigma = float(underlying.annual_volatility)
        div = float(underlying.annual_dividend_yield)
        strike = float(option.strike)
        T = option.time_to_maturity

        if self.validate_inputs:
            _validate_inputs(
                spot=spot, strike=strike, T=T, sigma=sigma, dividend_yield=div
            )

        rate = float(self.rate_provider.annual_risk_free_rate())
        if self.validate_inputs and not math.isfinite(rate):
            raise InvalidOptionInputError(
                f"risk_free_rate must be finite, got {rate!r}"
            )

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            params = LatticeParameters.from_crr(
                T=T, sigma=sigma, r=rate, q=div, steps=self.steps
            )
            if not params.is_arbitrage_free:
                logger.warning(
                    "Risk-neutral probability %.6g outside [0, 1] "
                    "(r=%.6g, q=%.6g, sigma=%.6g, dt=%.6g); lattice is not "
                    "arbitrage-free",
                    params.p_up,
                    rate,
                    div,
                    sigma,
                    params.dt,
                )
            logger.debug(
                "Pricing %s %s K=%g T=%g: steps=%d u=%.8f d=%.8f p=%.8f",
                style.value,
                option_type.value,
                strike,
                T,
                params.steps,
                params.up,
                params.down,
                params.p_up,
            )

            values = terminal_payoffs(
                terminal_stock_prices(spot, params), strike, option_type
            )
            present_value = backward_induct(
                values,
                spot=spot,
                strike=strike,
                option_type=option_type,
                style=style,
                params=params,
            )

        return PricingResult(present_value=present_value)
