"""CRR binomial-lattice pricing for vanilla options.

The lattice is recombining: node ``j`` of layer ``i`` holds the underlying after
``j`` up-moves and ``i - j`` down-moves, i.e. ``S0 * u**j * d**(i - j)``.

Only two arrays of length ``steps + 1`` are allocated per call: the terminal
stock prices and a rolling option-value buffer that backward induction
overwrites in place, one layer at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from equity_pricer.options.types import (
    OptionStyle,
    OptionStyleInput,
    OptionType,
    OptionTypeInput,
    normalize_option_style,
    normalize_option_type,
)

DEFAULT_STEPS = 500


@dataclass(frozen=True)
class LatticeParameters:
    """Per-step parameters of a Cox-Ross-Rubinstein lattice."""

    steps: int
    dt: float
    up: float
    down: float
    p_up: float  # risk-neutral probability of an up-move (not clamped)
    disc_step: float  # one-step discount factor exp(-r * dt)

    @classmethod
    def from_crr(
        cls,
        *,
        T: float,
        sigma: float,
        r: float,
        q: float,
        steps: int,
    ) -> LatticeParameters:
        """Build CRR parameters with continuous dividend yield ``q``.

        Inputs are not validated: a zero ``sigma`` gives ``u == d`` and a
        NaN/Inf probability, which then propagates through the lattice.
        """
        dt = np.float64(T) / steps
        up = np.exp(np.float64(sigma) * np.sqrt(dt))
        down = 1.0 / up
        growth = np.exp((np.float64(r) - q) * dt)
        p_up = (growth - down) / (up - down)
        return cls(
            steps=steps,
            dt=float(dt),
            up=float(up),
            down=float(down),
            p_up=float(p_up),
            disc_step=float(np.exp(-np.float64(r) * dt)),
        )

    @property
    def is_arbitrage_free(self) -> bool:
        return 0.0 <= self.p_up <= 1.0


def layer_stock_prices(
    spot: float, params: LatticeParameters, layer: int
) -> np.ndarray:
    """Underlying prices at every node of ``layer`` (0 = today)."""
    j = np.arange(layer + 1)
    return spot * params.up**j * params.down ** (layer - j)


def terminal_stock_prices(spot: float, params: LatticeParameters) -> np.ndarray:
    """Underlying prices at maturity, node ``j`` having ``j`` up-moves."""
    return layer_stock_prices(spot, params, params.steps)


def terminal_payoffs(
    stock_prices: np.ndarray, strike: float, option_type: OptionTypeInput
) -> np.ndarray:
    """Vanilla payoff ``max(m * (S - K), 0)`` with ``m = +1`` call, ``-1`` put."""
    multiplier = normalize_option_type(option_type).multiplier
    return np.maximum(multiplier * (stock_prices - strike), 0.0)


def backward_induct(
    values: np.ndarray,
    *,
    spot: float,
    strike: float,
    option_type: OptionTypeInput,
    style: OptionStyleInput,
    params: LatticeParameters,
) -> float:
    """Roll ``values`` back from maturity to today and return the root value.

    ``values`` must hold the ``steps + 1`` terminal payoffs; it is overwritten
    in place. European exercise keeps the discounted expectation at each node;
    American exercise takes the larger of that and the intrinsic value
    ``m * (S_ij - K)``. Type and style accept the same labels as
    :func:`binomial_tree_price`; unknown ones raise ``UnsupportedVariantError``.
    """
    early_exercise = normalize_option_style(style) is OptionStyle.AMERICAN

    multiplier = normalize_option_type(option_type).multiplier
    p = params.p_up
    disc = params.disc_step

    for step in range(params.steps - 1, -1, -1):
        cont = (p * values[1 : step + 2] + (1.0 - p) * values[: step + 1]) * disc
        if early_exercise:
            intrinsic = multiplier * (layer_stock_prices(spot, params, step) - strike)
            np.maximum(cont, intrinsic, out=cont)
        values[: step + 1] = cont

    return float(values[0])


def binomial_tree_price(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
    option_type: OptionTypeInput = OptionType.CALL,
    style: OptionStyleInput = OptionStyle.EUROPEAN,
    steps: int = DEFAULT_STEPS,
) -> float:
    """Price a vanilla option with a Cox-Ross-Rubinstein tree.

    Args:
        S: Spot price.
        K: Strike price.
        T: Time to maturity in years.
        sigma: Annualized volatility in decimals.
        r: Continuously-compounded risk-free rate.
        q: Continuously-compounded dividend yield.
        option_type: One of `{'call', 'put', 'C', 'P'}`.
        style: One of `{'european', 'american', 'E', 'A'}`.
        steps: Number of binomial time steps.

    Returns:
        Present value for one option.

    Raises:
        ValueError: If `steps < 1`.
        UnsupportedVariantError: If `option_type` or `style` is unknown.

    Degenerate inputs (``T <= 0``, ``sigma == 0``) are not rejected here; the
    result is whatever NaN/Inf the floating-point arithmetic produces.
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")

    opt_type = normalize_option_type(option_type)
    opt_style = normalize_option_style(style)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        params = LatticeParameters.from_crr(T=T, sigma=sigma, r=r, q=q, steps=steps)
        spots_T = terminal_stock_prices(S, params)
        values = terminal_payoffs(spots_T, K, opt_type)
        return backward_induct(
            values,
            spot=S,
            strike=K,
            option_type=opt_type,
            style=opt_style,
            params=params,
        )
