"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, Protocol, TypeAlias, runtime_checkable

from equity_pricer.options.exceptions import UnsupportedVariantError


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"

    @property
    def multiplier(self) -> int:
        """Payoff sign: ``+1`` for calls, ``-1`` for puts."""
        return 1 if self is OptionType.CALL else -1


class OptionStyle(StrEnum):
    """Exercise style of a vanilla option."""

    EUROPEAN = "european"
    AMERICAN = "american"


# Tolerant input types accepted at system boundaries (configs/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]
OptionStyleInput: TypeAlias = (
    OptionStyle | Literal["european", "american", "E", "A"]
)

_TYPE_ALIASES: dict[str, OptionType] = {
    "call": OptionType.CALL,
    "c": OptionType.CALL,
    "put": OptionType.PUT,
    "p": OptionType.PUT,
}

_STYLE_ALIASES: dict[str, OptionStyle] = {
    "european": OptionStyle.EUROPEAN,
    "e": OptionStyle.EUROPEAN,
    "american": OptionStyle.AMERICAN,
    "a": OptionStyle.AMERICAN,
}


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to :class:`OptionType`."""
    if isinstance(option_type, OptionType):
        return option_type
    if isinstance(option_type, str):
        resolved = _TYPE_ALIASES.get(option_type.strip().lower())
        if resolved is not None:
            return resolved
    raise UnsupportedVariantError(
        f"Unsupported option type {option_type!r}; expected one of "
        "{'call', 'put', 'C', 'P'}"
    )


def normalize_option_style(style: OptionStyleInput) -> OptionStyle:
    """Normalize exercise style labels to :class:`OptionStyle`."""
    if isinstance(style, OptionStyle):
        return style
    if isinstance(style, str):
        resolved = _STYLE_ALIASES.get(style.strip().lower())
        if resolved is not None:
            return resolved
    raise UnsupportedVariantError(
        f"Unsupported exercise style {style!r}; expected one of "
        "{'european', 'american', 'E', 'A'}"
    )


@runtime_checkable
class Maturity(Protocol):
    """Contract maturity convertible to a year fraction."""

    def to_year_fraction(self) -> float:
        """Return time to maturity in years."""


MaturityInput: TypeAlias = float | int | Maturity


@dataclass(frozen=True)
class Underlying:
    """Market description of the option's underlying asset.

    `annual_volatility` and `annual_dividend_yield` are decimals
    (0.2 = 20%); the dividend yield is continuously compounded.
    """

    spot_price: float
    annual_volatility: float
    annual_dividend_yield: float = 0.0


@dataclass(frozen=True)
class OptionContract:
    """Contract terms required for pricing one vanilla equity option.

    `maturity` is either a year fraction already computed by the caller or an
    object exposing ``to_year_fraction()`` (see
    :mod:`equity_pricer.market.maturity`). The value is trusted as-is.
    """

    style: OptionStyleInput
    option_type: OptionTypeInput
    strike: float
    maturity: MaturityInput
    underlying: Underlying

    @property
    def time_to_maturity(self) -> float:
        if isinstance(self.maturity, Maturity):
            return float(self.maturity.to_year_fraction())
        return float(self.maturity)


@dataclass(frozen=True)
class PricingConfiguration:
    """Per-request pricing options.

    Carries no fields yet; the binomial pricer accepts it so callers can pass
    request-level settings without changing the pricing signature later.
    """


@dataclass(frozen=True, slots=True)
class Greeks:
    """First/second-order sensitivities."""

    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Option value and, when an engine supports it, sensitivities."""

    present_value: float
    greeks: Greeks | None = None

    @property
    def has_greeks(self) -> bool:
        return self.greeks is not None
