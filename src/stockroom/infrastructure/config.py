"""Runtime configuration, read from ``STOCKROOM_*`` environment variables.

CLI options take precedence; see ``Settings.with_overrides``.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass

from stockroom.domain.exceptions import DomainException

ENV_PREFIX = "STOCKROOM_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(DomainException):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    log_json: bool = False
    seed: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=_parse_port(env.get(f"{ENV_PREFIX}PORT"), defaults.port),
            log_level=_parse_level(env.get(f"{ENV_PREFIX}LOG_LEVEL"), defaults.log_level),
            log_json=_parse_bool("LOG_JSON", env.get(f"{ENV_PREFIX}LOG_JSON"), defaults.log_json),
            seed=_parse_bool("SEED", env.get(f"{ENV_PREFIX}SEED"), defaults.seed),
        )

    def with_overrides(self, **overrides) -> Settings:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "log_level" in changes:
            changes["log_level"] = _parse_level(changes["log_level"], self.log_level)
        return dataclasses.replace(self, **changes)


def _parse_port(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"{ENV_PREFIX}PORT out of range: {port}")
    return port


def _parse_level(raw: str | None, default: str) -> str:
    if raw is None:
        return default
    level = raw.upper()
    if level not in _LEVELS:
        raise ConfigurationError(f"Unknown log level: {raw!r}")
    return level


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
