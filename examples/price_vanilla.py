"""Price a European and an American vanilla option on the same lattice.

This script demonstrates the minimal pipeline:
1) build settings from defaults, an optional YAML file and CLI overrides,
2) build a binomial pricer wired to a constant rate provider,
3) price both exercise styles and compare against Black-Scholes.
"""

from __future__ import annotations

import argparse
import logging

from equity_pricer.config import build_config, build_pricer
from equity_pricer.market import DatedMaturity
from equity_pricer.options import (
    OptionContract,
    OptionStyle,
    PricingConfiguration,
    Underlying,
    bs_price,
)
from equity_pricer.utils import setup_logging_from_config

logger = logging.getLogger("price_vanilla")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, default=None, help="YAML config path.")
    parser.add_argument("--spot", type=float, default=100.0)
    parser.add_argument("--strike", type=float, default=100.0)
    parser.add_argument("--volatility", type=float, default=0.2)
    parser.add_argument("--dividend-yield", type=float, default=0.0)
    parser.add_argument("--rate", type=float, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--option-type", choices=["call", "put"], default="put")
    parser.add_argument("--expiry", type=str, default="2025-01-02")
    parser.add_argument("--valuation-date", type=str, default="2024-01-02")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()

    overrides: dict = {}
    if args.steps is not None:
        overrides["pricer"] = {"steps": args.steps}
    if args.rate is not None:
        overrides["rates"] = {"annual_rate": args.rate}
    config = build_config(args.config, overrides=overrides)
    setup_logging_from_config(config["logging"])

    pricer = build_pricer(config)
    maturity = DatedMaturity(expiry=args.expiry, valuation_date=args.valuation_date)
    underlying = Underlying(
        spot_price=args.spot,
        annual_volatility=args.volatility,
        annual_dividend_yield=args.dividend_yield,
    )

    for style in OptionStyle:
        contract = OptionContract(
            style=style,
            option_type=args.option_type,
            strike=args.strike,
            maturity=maturity,
            underlying=underlying,
        )
        result = pricer.price(PricingConfiguration(), contract)
        logger.info("%s %s: %.6f", style.value, args.option_type, result.present_value)

    reference = bs_price(
        S=args.spot,
        K=args.strike,
        T=maturity.to_year_fraction(),
        sigma=args.volatility,
        r=pricer.rate_provider.annual_risk_free_rate(),
        q=args.dividend_yield,
        option_type=args.option_type,
    )
    logger.info("black-scholes european %s: %.6f", args.option_type, reference)


if __name__ == "__main__":
    main()
