"""Configuration resolution helpers."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import ShamvConfig


def resolve_with_precedence(
    *,
    defaults: ShamvConfig,
    env_overrides: Mapping[str, Any] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> ShamvConfig:
    """Apply dotted-key overrides on top of ``defaults`` (defaults < env < cli).

    Keys name a setting by section, e.g. ``"rename.on_conflict"``.
    """
    merged = defaults.model_dump(mode="python")
    for name, source in (("environment", env_overrides), ("cli", cli_overrides)):
        for key, value in (source or {}).items():
            _assign(merged, key, value, source_name=name)

    try:
        return ShamvConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def _assign(target: dict[str, Any], key: str, value: Any, *, source_name: str) -> None:
    *sections, leaf = key.split(".")
    node = target
    for segment in sections:
        existing = node.setdefault(segment, {})
        if not isinstance(existing, dict):
            raise ConfigError(
                f"{source_name.capitalize()} override for {key} conflicts with existing value."
            )
        node = existing
    node[leaf] = value


__all__ = ["resolve_with_precedence"]
