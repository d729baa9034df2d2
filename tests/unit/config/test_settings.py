from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from equity_pricer.config import (
    DEFAULT_CONFIG,
    PricerSettings,
    build_config,
    build_pricer,
    deep_merge,
    load_yaml_config,
    rate_provider_from_config,
)
from equity_pricer.market import ConstantRateProvider, SeriesRateProvider
from equity_pricer.options import BinomialTreePricer, PricingConfiguration

SERIES_RATES = {"2024-01-02": 0.05, "2024-03-01": 0.045, "2024-06-03": 0.04}


def test_load_yaml_config_none_returns_empty() -> None:
    assert load_yaml_config(None) == {}


def test_load_yaml_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml_config(tmp_path / "missing.yml")


def test_load_yaml_config_non_mapping_raises(write_yaml) -> None:
    path = write_yaml("bad.yml", ["a", "b"])
    with pytest.raises(ValueError, match="YAML mapping"):
        load_yaml_config(path)


def test_load_yaml_config_expands_env_vars(write_yaml, monkeypatch) -> None:
    path = write_yaml("ok.yml", {"pricer": {"steps": 50}})
    monkeypatch.setenv("PRICER_CONFIG_DIR", str(path.parent))

    assert load_yaml_config("$PRICER_CONFIG_DIR/ok.yml") == {"pricer": {"steps": 50}}


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    updates = {"a": {"c": 20}, "e": 5}

    merged = deep_merge(base, updates)

    assert merged == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}


def test_build_config_layers_yaml_then_overrides(write_yaml) -> None:
    path = write_yaml(
        "cfg.yml", {"pricer": {"steps": 250}, "rates": {"annual_rate": 0.02}}
    )

    config = build_config(path, overrides={"rates": {"annual_rate": 0.03}})

    assert config["pricer"] == {"steps": 250, "validate_inputs": True}
    assert config["rates"]["annual_rate"] == pytest.approx(0.03)
    assert config["logging"]["level"] == DEFAULT_CONFIG["logging"]["level"]


def test_pricer_settings_defaults() -> None:
    settings = PricerSettings.from_mapping(None)

    assert settings.steps == 500
    assert settings.validate_inputs is True


@pytest.mark.parametrize(
    "section, match",
    [
        ({"steps": 0}, "steps must be >= 1"),
        ({"steps": 12.5}, "must be an integer"),
        ({"steps": True}, "must be an integer"),
        ({"validate_inputs": "yes"}, "must be a boolean"),
        ({"step": 10}, "Unknown pricer settings"),
    ],
)
def test_pricer_settings_validation(section, match) -> None:
    with pytest.raises(ValueError, match=match):
        PricerSettings.from_mapping(section)


def test_build_pricer_from_yaml(write_yaml, make_contract) -> None:
    path = write_yaml(
        "cfg.yml",
        {
            "pricer": {"steps": 400, "validate_inputs": False},
            "rates": {"annual_rate": 0.05},
        },
    )

    pricer = build_pricer(build_config(path))

    assert isinstance(pricer, BinomialTreePricer)
    assert pricer.steps == 400
    assert pricer.validate_inputs is False
    assert pricer.rate_provider.annual_risk_free_rate() == pytest.approx(0.05)
    result = pricer.price(PricingConfiguration(), make_contract())
    assert result.present_value == pytest.approx(10.45, abs=0.05)


def test_build_pricer_prefers_injected_rate_provider() -> None:
    provider = ConstantRateProvider(0.07)

    pricer = build_pricer(build_config(), rate_provider=provider)

    assert pricer.rate_provider is provider


def test_build_pricer_coerces_injected_constant_rate() -> None:
    pricer = build_pricer(build_config(), rate_provider=0.03)

    assert isinstance(pricer.rate_provider, ConstantRateProvider)
    assert pricer.rate_provider.annual_risk_free_rate() == pytest.approx(0.03)


def test_build_pricer_rejects_unusable_injected_rate() -> None:
    with pytest.raises(TypeError, match="rate input"):
        build_pricer(build_config(), rate_provider="0.03")


@pytest.mark.parametrize(
    "as_of, expected",
    [
        ("2024-04-15", 0.045),
        ("2023-12-01", 0.05),
        (None, 0.04),
    ],
)
def test_rate_provider_from_config_reads_dated_series(as_of, expected) -> None:
    section = {
        "annual_rate": 0.01,
        "series": SERIES_RATES,
        "as_of": as_of,
    }

    provider = rate_provider_from_config(section)

    assert isinstance(provider, SeriesRateProvider)
    assert provider.annual_risk_free_rate() == pytest.approx(expected)


def test_rate_provider_from_config_defaults_to_constant() -> None:
    provider = rate_provider_from_config(None)

    assert isinstance(provider, ConstantRateProvider)
    assert provider.annual_risk_free_rate() == 0.0


def test_build_pricer_from_yaml_rate_series(write_yaml, make_contract) -> None:
    path = write_yaml(
        "cfg.yml",
        {
            "pricer": {"steps": 200},
            "rates": {"series": SERIES_RATES, "as_of": "2024-04-15"},
        },
    )

    pricer = build_pricer(build_config(path))
    flat = build_pricer(build_config(path), rate_provider=0.045)

    contract = make_contract()
    assert pricer.rate_provider.annual_risk_free_rate() == pytest.approx(0.045)
    from_series = pricer.price(PricingConfiguration(), contract).present_value
    from_constant = flat.price(PricingConfiguration(), contract).present_value
    assert from_series == pytest.approx(from_constant)


def test_config_package_reexports_settings_module() -> None:
    mod = importlib.import_module("equity_pricer.config.settings")
    assert mod.build_pricer is build_pricer
