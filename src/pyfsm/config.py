"""Runtime settings for pyfsm, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("debug", "info", "warn", "warning", "error")
LOG_FORMATS = ("json", "text")


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Settings shared by the logging setup and the command line front end."""

    log_level: str = "warning"
    log_format: str = "text"
    default_n: int = 3

    def __post_init__(self) -> None:
        if self.log_level.lower() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if self.log_format.lower() not in LOG_FORMATS:
            raise ConfigError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")
        if isinstance(self.default_n, bool) or not isinstance(self.default_n, int) or self.default_n <= 0:
            raise ConfigError(f"default_n must be a positive integer, got {self.default_n!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from PYFSM_* environment variables.

        Recognized: PYFSM_LOG_LEVEL, PYFSM_LOG_FORMAT, PYFSM_DEFAULT_N.
        Missing variables fall back to the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        if env.get("PYFSM_LOG_LEVEL"):
            kwargs["log_level"] = env["PYFSM_LOG_LEVEL"]
        if env.get("PYFSM_LOG_FORMAT"):
            kwargs["log_format"] = env["PYFSM_LOG_FORMAT"]
        if env.get("PYFSM_DEFAULT_N"):
            raw = env["PYFSM_DEFAULT_N"]
            try:
                kwargs["default_n"] = int(raw)
            except ValueError as exc:
                raise ConfigError(f"PYFSM_DEFAULT_N must be an integer, got {raw!r}") from exc

        return cls(**kwargs)
