from .settings import (
    DEFAULT_CONFIG,
    PricerSettings,
    build_config,
    build_pricer,
    deep_merge,
    load_yaml_config,
    rate_provider_from_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "PricerSettings",
    "build_config",
    "build_pricer",
    "deep_merge",
    "load_yaml_config",
    "rate_provider_from_config",
]
