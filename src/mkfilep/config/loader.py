"""Config loading entry points for mkfilep."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import MkfilepConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "mkfilep.default.yaml"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> MkfilepConfig:
    """Load the mkfilep configuration applying optional overrides."""

    default_data = _section(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        config_data = _section(_read_structured_file(path), path)
    else:
        config_data = {}

    merged: dict[str, Any] = _merge(default_data, config_data)

    if overrides:
        merged = _merge(merged, _nest_overrides(overrides))

    try:
        return MkfilepConfig.model_validate(merged)
    except ValidationError as exc:
        source = path or DEFAULT_CONFIG_PATH
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.is_file():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".toml", ".json"}:
        raise ConfigError(f"Unsupported config format for {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Config file {path} could not be read: {exc}") from exc

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Config file {path} could not be parsed: {exc}") from exc


def _section(payload: Any, source: Path) -> dict[str, Any]:
    """Top-level settings table from ``payload``; an empty file counts as ``{}``."""

    if payload is None:
        return {}
    if isinstance(payload, Mapping):
        return dict(payload)
    raise ConfigError(f"{source} must contain a mapping of settings, not {type(payload).__name__}.")


def _merge(base: Mapping[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``layer`` on ``base``; nested tables merge, anything else replaces."""

    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _merge(current, value)
        merged[key] = value
    return merged


def _nest_overrides(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``{"creation.exist_ok": False}`` into ``{"creation": {"exist_ok": False}}``."""

    nested: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str):
            for segment in reversed(key.split(".")[1:]):
                value = {segment: value}
            key = key.split(".", 1)[0]
        nested = _merge(nested, {key: value})
    return nested


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "load_config",
]
