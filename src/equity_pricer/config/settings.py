"""YAML-backed settings for building a configured pricer.

Settings are plain mappings: defaults are deep-merged with an optional YAML
file and then with caller overrides. Only the ``pricer`` and ``rates`` sections
are interpreted here; the ``logging`` section is handed to
:func:`equity_pricer.utils.logging_config.setup_logging_from_config`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import pandas as pd
import yaml

from equity_pricer.market.rates import RateInput, RateProvider, coerce_rate_provider
from equity_pricer.options.engines.binomial_tree_pricer import BinomialTreePricer
from equity_pricer.options.models.binomial_tree import DEFAULT_STEPS
from equity_pricer.utils.logging_config import DEFAULT_LOGGING

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "pricer": {
        "steps": DEFAULT_STEPS,
        "validate_inputs": True,
    },
    "rates": {
        "annual_rate": 0.0,
    },
}


def load_yaml_config(path: str | Path | None) -> dict[str, Any]:
    """Read a YAML mapping; ``None`` means no file and yields ``{}``."""
    if path is None:
        return {}

    p = Path(os.path.expandvars(os.path.expanduser(str(path))))
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a YAML mapping at the top level.")

    return data


def deep_merge(
    base: Mapping[str, Any],
    updates: Mapping[str, Any],
) -> dict[str, Any]:
    """Recursively merge ``updates`` into a copy of ``base``."""
    merged: dict[str, Any] = {
        key: deep_merge(value, {}) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }

    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value

    return merged


def build_config(
    yaml_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    defaults: Mapping[str, Any] = DEFAULT_CONFIG,
) -> dict[str, Any]:
    config = deep_merge(defaults, load_yaml_config(yaml_path))
    if overrides:
        config = deep_merge(config, overrides)
    return config


@dataclass(frozen=True)
class PricerSettings:
    """Construction-time settings of :class:`BinomialTreePricer`."""

    steps: int = DEFAULT_STEPS
    validate_inputs: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.steps, bool) or not isinstance(self.steps, int):
            raise ValueError(f"pricer.steps must be an integer, got {self.steps!r}")
        if self.steps < 1:
            raise ValueError("pricer.steps must be >= 1")
        if not isinstance(self.validate_inputs, bool):
            raise ValueError("pricer.validate_inputs must be a boolean")

    @classmethod
    def from_mapping(cls, section: Mapping[str, Any] | None) -> PricerSettings:
        section = dict(section or {})
        unknown = set(section) - {"steps", "validate_inputs"}
        if unknown:
            raise ValueError(f"Unknown pricer settings: {sorted(unknown)}")
        return cls(**section)


def rate_provider_from_config(rates_cfg: Mapping[str, Any] | None) -> RateProvider:
    """Build the rate provider described by a ``rates`` section.

    ``series`` maps observation dates to annual rates and takes precedence over
    ``annual_rate``; ``as_of`` pins the series lookup to a date (latest
    observation when omitted).
    """
    rates_cfg = dict(rates_cfg or {})
    series = rates_cfg.get("series")
    if series:
        provider = coerce_rate_provider(pd.Series(dict(series), dtype=float))
        as_of = rates_cfg.get("as_of")
        return provider if as_of is None else provider.at(as_of)
    return coerce_rate_provider(float(rates_cfg.get("annual_rate", 0.0)))


def build_pricer(
    config: Mapping[str, Any],
    *,
    rate_provider: RateInput | None = None,
) -> BinomialTreePricer:
    """Build a pricer from a merged config.

    An explicit ``rate_provider`` (a provider, a constant or a date-indexed
    series) wins over the ``rates`` section.
    """
    settings = PricerSettings.from_mapping(config.get("pricer"))

    if rate_provider is None:
        provider = rate_provider_from_config(config.get("rates"))
    else:
        provider = coerce_rate_provider(rate_provider)

    logger.debug(
        "Building binomial pricer: steps=%d validate_inputs=%s provider=%s",
        settings.steps,
        settings.validate_inputs,
        type(provider).__name__,
    )
    return BinomialTreePricer(
        rate_provider=provider,
        steps=settings.steps,
        validate_inputs=settings.validate_inputs,
    )
