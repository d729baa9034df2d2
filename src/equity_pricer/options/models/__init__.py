"""Lattice and closed-form option-pricing models."""

from .binomial_tree import (
    DEFAULT_STEPS,
    LatticeParameters,
    backward_induct,
    binomial_tree_price,
    layer_stock_prices,
    terminal_payoffs,
    terminal_stock_prices,
)
from .black_scholes import bs_d1_d2, bs_price

__all__ = [
    "DEFAULT_STEPS",
    "LatticeParameters",
    "backward_induct",
    "binomial_tree_price",
    "layer_stock_prices",
    "terminal_payoffs",
    "terminal_stock_prices",
    "bs_d1_d2",
    "bs_price",
]
