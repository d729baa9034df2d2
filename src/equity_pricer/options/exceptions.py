"""Exceptions raised by option-pricing code."""

from __future__ import annotations


class PricingError(ValueError):
    """Base class for errors that abort a single pricing request."""


class UnsupportedVariantError(PricingError):
    """Raised when an option type or exercise style has no pricing rule.

    The binomial pricer supports ``CALL``/``PUT`` payoffs and
    ``EUROPEAN``/``AMERICAN`` exercise only. Any other label aborts the call
    before the rate provider is queried.
    """


class InvalidOptionInputError(PricingError):
    """Raised when contract or market inputs would produce a degenerate lattice.

    Notes
    -----
    Checked only when input validation is enabled on the pricer:

    - every scalar input must be finite
    - ``strike > 0`` and ``spot_price > 0``
    - ``time_to_maturity > 0`` (otherwise ``dt`` is zero or negative)
    - ``annual_volatility > 0`` (otherwise ``u == d == 1`` and the
      risk-neutral probability divides by zero)
    """
