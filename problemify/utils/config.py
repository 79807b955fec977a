"""
Configuration management for problemify.
Loads and validates settings from YAML files and environment variables.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _split_list(value: Any) -> Any:
    """Accept comma-separated strings for list settings (env overrides)."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class GeneralConfig(BaseModel):
    """General configuration."""

    # WARNING keeps a normal run quiet apart from the status line
    log_level: str = "WARNING"
    log_file: str | None = None
    json_logs: bool = False


class DiscoveryConfig(BaseModel):
    """File discovery configuration.

    Not exposed on the command line.
    """

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: [".js", ".jsx"])
    # Matched against base names of both directories and files
    ignore_names: list[str] = Field(default_factory=lambda: ["node_modules", "bundle.js"])

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> Any:
        value = _split_list(value)
        if isinstance(value, list):
            return [ext if ext.startswith(".") else f".{ext}" for ext in value]
        return value

    @field_validator("ignore_names", mode="before")
    @classmethod
    def _split_ignore_names(cls, value: Any) -> Any:
        return _split_list(value)


class ProcessingConfig(BaseModel):
    """File processing configuration."""

    model_config = ConfigDict(extra="forbid")

    encoding: str = "utf-8"


class Settings(BaseModel):
    """Main settings container."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary.
        override: Override dictionary.

    Returns:
        Merged dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_yaml_config(config_dir: Path) -> dict[str, Any]:
    """Load settings.yaml with local.yaml overrides (settings section).

    Example local.yaml:
        settings:
          discovery:
            extensions: [".js", ".jsx", ".mjs"]

    Args:
        config_dir: Configuration directory path.

    Returns:
        Merged configuration dictionary.
    """
    config = _read_yaml(config_dir / "settings.yaml")

    local_overrides = _read_yaml(config_dir / "local.yaml")
    if "settings" in local_overrides:
        config = _deep_merge(config, local_overrides["settings"])

    return config


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides.

    Environment variables should be prefixed with PROBLEMIFY_ and use
    double underscores for nested keys.

    Example:
        PROBLEMIFY_GENERAL__LOG_LEVEL=DEBUG

    Args:
        config: Configuration dictionary.

    Returns:
        Configuration with environment overrides.
    """
    prefix = "PROBLEMIFY_"

    for key, value in os.environ.items():
        if not key.startswith(prefix) or key == "PROBLEMIFY_CONFIG_DIR":
            continue

        # Remove prefix and split by double underscore
        key_path = key[len(prefix) :].lower().split("__")

        current = config
        for part in key_path[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        # Set the value (attempt to parse as appropriate type)
        final_key = key_path[-1]
        try:
            if value.lower() in ("true", "false"):
                current[final_key] = value.lower() == "true"
            elif "." in value:
                current[final_key] = float(value)
            else:
                current[final_key] = int(value)
        except ValueError:
            current[final_key] = value

    return config


def get_config_dir() -> Path:
    """Get the configuration directory (PROBLEMIFY_CONFIG_DIR, default ./config)."""
    return Path(os.environ.get("PROBLEMIFY_CONFIG_DIR", "config"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get application settings.

    Settings are loaded from:
    1. Default values
    2. YAML configuration files
    3. Environment variables (highest priority)

    Returns:
        Settings instance.
    """
    config = _load_yaml_config(get_config_dir())
    config = _apply_env_overrides(config)
    return Settings(**config)
