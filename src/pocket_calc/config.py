"""
=============================================================================
MODULE NAME: config.py
=============================================================================

INPUT FILES:
- None. Settings come from keyword arguments or process environment.

ENVIRONMENT:
- POCKET_CALC_PRECISION: significant digits for decimal arithmetic (default 20)
- POCKET_CALC_REJECT_REPEATED_POINT: "1"/"true" rejects a second "." while typing
- POCKET_CALC_LOG_LEVEL: logging level name for the CLI and server (default WARNING)

NOTES:
- The library never configures logging on import; entry points call
  `configure_logging()` themselves.
=============================================================================
"""

from __future__ import annotations

import decimal
import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PRECISION = "POCKET_CALC_PRECISION"
ENV_REJECT_REPEATED_POINT = "POCKET_CALC_REJECT_REPEATED_POINT"
ENV_LOG_LEVEL = "POCKET_CALC_LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class CalculatorConfig:
    precision: int = 20
    rounding: str = decimal.ROUND_HALF_UP
    reject_repeated_point: bool = False
    error_marker: str = "Error"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from; defaults to os.environ

        Returns:
            CalculatorConfig with defaults for unset variables

        Raises:
            ValueError: If a variable is set to an unparseable value
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        raw = env.get(ENV_PRECISION)
        if raw is not None and raw.strip():
            try:
                kwargs["precision"] = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PRECISION} must be an integer, got {raw!r}") from None

        raw = env.get(ENV_REJECT_REPEATED_POINT)
        if raw is not None:
            kwargs["reject_repeated_point"] = _parse_bool(ENV_REJECT_REPEATED_POINT, raw)

        raw = env.get(ENV_LOG_LEVEL)
        if raw is not None and raw.strip():
            kwargs["log_level"] = raw.strip().upper()

        return cls(**kwargs)

    def with_overrides(self, **overrides) -> "CalculatorConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def decimal_context(self) -> decimal.Context:
        return decimal.Context(prec=self.precision, rounding=self.rounding)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


DEFAULT_CONFIG = CalculatorConfig()

__all__ = ["CalculatorConfig", "DEFAULT_CONFIG", "configure_logging"]
