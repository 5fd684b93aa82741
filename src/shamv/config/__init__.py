"""Configuration management for shamv.

Settings come from built-in defaults, ``SHAMV__SECTION__KEY`` environment
variables and command-line overrides, in increasing order of precedence.
There is no configuration file.
"""

from __future__ import annotations

import os
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError
from .models import ShamvConfig
from .resolver import resolve_with_precedence

ENV_PREFIX = "SHAMV__"


class ConfigManager:
    """Resolve configuration from the environment and CLI overrides."""

    def __init__(self, *, env: Mapping[str, str] | None = None) -> None:
        self._env = env if env is not None else os.environ

    def load(
        self,
        *,
        cli_overrides: Mapping[str, Any] | None = None,
        include_env: bool = True,
    ) -> ShamvConfig:
        """Return the effective configuration.

        Args:
            cli_overrides: Dotted-key overrides taken from command-line flags.
            include_env: Whether ``SHAMV__`` environment variables are applied.

        Raises:
            ConfigError: If a source is malformed or the merged values are invalid.
        """
        return resolve_with_precedence(
            defaults=ShamvConfig(),
            env_overrides=self._extract_env(self._env) if include_env else None,
            cli_overrides=cli_overrides,
        )

    def _extract_env(self, env: Mapping[str, str]) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for key, raw_value in env.items():
            if not key.startswith(ENV_PREFIX):
                continue
            path = [segment.lower() for segment in key[len(ENV_PREFIX) :].split("__") if segment]
            if not path:
                continue
            try:
                parsed_value = yaml.safe_load(raw_value)
            except yaml.YAMLError:
                parsed_value = raw_value
            overrides[".".join(path)] = parsed_value
        return overrides


__all__ = [
    "ConfigManager",
    "ConfigError",
    "ENV_PREFIX",
    "ShamvConfig",
    "resolve_with_precedence",
]
