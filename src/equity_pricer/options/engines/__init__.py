"""Pricing engines."""

from .base import PriceModel
from .binomial_tree_pricer import BinomialTreePricer

__all__ = [
    "PriceModel",
    "BinomialTreePricer",
]
