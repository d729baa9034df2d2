from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest
import yaml

from equity_pricer.options import (
    OptionContract,
    OptionStyle,
    OptionType,
    Underlying,
)


class CountingRateProvider:
    """Rate provider stub that records how often it is queried."""

    def __init__(self, *rates: float) -> None:
        self._rates = list(rates) or [0.05]
        self.calls = 0

    def annual_risk_free_rate(self) -> float:
        rate = self._rates[min(self.calls, len(self._rates) - 1)]
        self.calls += 1
        return rate


@pytest.fixture
def counting_rate_provider():
    return CountingRateProvider


@pytest.fixture
def make_contract():
    def _make(
        *,
        style: OptionStyle | str = OptionStyle.EUROPEAN,
        option_type: OptionType | str = OptionType.CALL,
        strike: float = 100.0,
        maturity: Any = 1.0,
        spot: float = 100.0,
        volatility: float = 0.2,
        dividend_yield: float = 0.0,
    ) -> OptionContract:
        return OptionContract(
            style=style,
            option_type=option_type,
            strike=strike,
            maturity=maturity,
            underlying=Underlying(
                spot_price=spot,
                annual_volatility=volatility,
                annual_dividend_yield=dividend_yield,
            ),
        )

    return _make


@pytest.fixture
def write_yaml(tmp_path: Path):
    def _write(name: str, data: Mapping[str, Any] | Any) -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _write
