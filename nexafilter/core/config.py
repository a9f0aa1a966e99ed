"""
NexaFilter Configuration
========================

Library-wide defaults for inputs, filter chains and logging.

Configuration Loading Priority (highest to lowest):
1. Runtime overrides (``config.set``)
2. Environment variables (NEXAFILTER_*)
3. Added sources
4. Built-in defaults

Environment variable names use a double underscore between levels:

    NEXAFILTER_INPUT__ALLOW_EMPTY=true   ->  input.allow_empty = True
    NEXAFILTER_LOGGING__LEVEL=DEBUG      ->  logging.level = "DEBUG"

Example:
    config = get_config()
    config.set("input.break_on_failure", True)

    config.get_bool("input.required")       # True
    config.get("logging.level", "INFO")     # "WARNING"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypeVar, Union

import orjson

T = TypeVar("T")

ENV_PREFIX = "NEXAFILTER_"

DEFAULTS: Dict[str, Any] = {
    "input": {
        "required": True,
        "allow_empty": False,
        "continue_if_empty": False,
        "break_on_failure": False,
    },
    "filter_chain": {
        "default_priority": 1000,
    },
    "logging": {
        "level": "WARNING",
        "format": "text",
        "colors": True,
    },
}


@dataclass
class ConfigSource:
    """Represents a configuration source with priority."""
    name: str
    data: Dict[str, Any]
    priority: int = 0


class Config:
    """
    Configuration container.

    Sources are merged by priority; nested keys are addressed with
    dot notation.

    Example:
        config = Config()
        config.set("input.required", False)

        config.get("input.required")               # False
        config.get("input.missing", "default")     # "default"
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, Any]] = None,
        load_env: bool = True,
    ) -> None:
        self._sources: List[ConfigSource] = []
        self._cache: Dict[str, Any] = {}
        self._merged: Dict[str, Any] = {}
        self._dirty = True

        self.add_source("defaults", _copy_tree(DEFAULTS if defaults is None else defaults), priority=0)

        if load_env:
            self.load_env_overrides()

    def load_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Load overrides from NEXAFILTER_* environment variables."""
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        for key, value in environ.items():
            if key.startswith(ENV_PREFIX):
                # NEXAFILTER_INPUT__ALLOW_EMPTY -> input.allow_empty
                config_key = key[len(ENV_PREFIX):].lower().replace("__", ".")
                overrides[config_key] = self._parse_env_value(value)

        if overrides:
            self.add_source("env_vars", self._unflatten(overrides), priority=100)

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate type."""
        # Boolean
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        # Integer
        try:
            return int(value)
        except ValueError:
            pass

        # Float
        try:
            return float(value)
        except ValueError:
            pass

        # JSON (for complex values)
        if value.startswith(("{", "[")):
            try:
                return orjson.loads(value)
            except orjson.JSONDecodeError:
                pass

        return value

    def _unflatten(self, flat: Dict[str, Any]) -> Dict[str, Any]:
        """Convert flat dot-notation keys to nested dict."""
        result: Dict[str, Any] = {}

        for key, value in flat.items():
            parts = key.split(".")
            current = result

            for part in parts[:-1]:
                if part not in current:
                    current[part] = {}
                current = current[part]

            current[parts[-1]] = value

        return result

    def add_source(
        self,
        name: str,
        data: Dict[str, Any],
        priority: int = 0,
    ) -> None:
        """Add a configuration source."""
        self._sources.append(ConfigSource(name=name, data=data, priority=priority))
        self._dirty = True
        self._cache.clear()

    def _merge(self) -> None:
        """Merge all sources into single configuration."""
        if not self._dirty:
            return

        # Lower priority first, so higher overrides
        sorted_sources = sorted(self._sources, key=lambda s: s.priority)

        self._merged = {}
        for source in sorted_sources:
            self._deep_merge(self._merged, source.data)

        self._dirty = False
        self._cache.clear()

    def _deep_merge(self, base: Dict, override: Dict) -> None:
        """Deep merge override into base."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            elif isinstance(value, dict):
                base[key] = _copy_tree(value)
            else:
                base[key] = value

    def get(
        self,
        key: str,
        default: T = None,
    ) -> Union[Any, T]:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "input.required")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        self._merge()

        if key in self._cache:
            return self._cache[key]

        current: Any = self._merged
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        self._cache[key] = current
        return current

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as integer."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get configuration value as boolean."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "1", "on")
        return bool(value)

    def get_list(self, key: str, default: Optional[List] = None) -> List:
        """Get configuration value as list."""
        value = self.get(key, default)
        if value is None:
            return default or []
        if isinstance(value, list):
            return value
        return [value]

    def set(self, key: str, value: Any) -> None:
        """
        Set a runtime configuration value.

        Runtime values have the highest priority.
        """
        runtime_source = None
        for source in self._sources:
            if source.name == "runtime":
                runtime_source = source
                break

        if runtime_source is None:
            runtime_source = ConfigSource(name="runtime", data={}, priority=1000)
            self._sources.append(runtime_source)

        parts = key.split(".")
        current = runtime_source.data

        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value
        self._dirty = True
        self._cache.clear()

    def has(self, key: str) -> bool:
        """Check if configuration key exists."""
        return self.get(key) is not None

    def all(self) -> Dict[str, Any]:
        """Get all configuration as dict."""
        self._merge()
        return _copy_tree(self._merged)

    def section(self, prefix: str) -> Dict[str, Any]:
        """Get all values under a prefix."""
        value = self.get(prefix)
        if isinstance(value, dict):
            return _copy_tree(value)
        return {}

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.has(key)


def _copy_tree(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy nested dicts so sources never share mutable state."""
    return {
        key: _copy_tree(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the global configuration; next access reloads defaults and env."""
    global _config
    _config = None


def config(key: str, default: Any = None) -> Any:
    """Shortcut function for configuration access."""
    return get_config().get(key, default)
