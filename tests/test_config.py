"""Tests for environment-driven configuration."""

import pytest

from pocket_calc.config import CalculatorConfig


def test_defaults():
    cfg = CalculatorConfig.from_env({})
    assert cfg == CalculatorConfig()
    assert cfg.precision == 20
    assert cfg.reject_repeated_point is False
    assert cfg.error_marker == "Error"


def test_from_env_reads_variables():
    cfg = CalculatorConfig.from_env(
        {
            "POCKET_CALC_PRECISION": "8",
            "POCKET_CALC_REJECT_REPEATED_POINT": "yes",
            "POCKET_CALC_LOG_LEVEL": "debug",
        }
    )
    assert cfg.precision == 8
    assert cfg.reject_repeated_point is True
    assert cfg.log_level == "DEBUG"
    assert cfg.decimal_context().prec == 8


@pytest.mark.parametrize(
    "env",
    [
        {"POCKET_CALC_PRECISION": "many"},
        {"POCKET_CALC_PRECISION": "0"},
        {"POCKET_CALC_REJECT_REPEATED_POINT": "maybe"},
        {"POCKET_CALC_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        CalculatorConfig.from_env(env)


def test_with_overrides_skips_none():
    cfg = CalculatorConfig(precision=12).with_overrides(precision=None, reject_repeated_point=True)
    assert cfg.precision == 12
    assert cfg.reject_repeated_point is True
