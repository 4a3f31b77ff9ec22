"""Configuration for OverlapChain searches and the command-line front end."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from overlapchain.errors import ConfigError


@dataclass(frozen=True)
class SearchConfig:
    """Tunables shared by the CLI, the heartbeat and the search engine."""

    # Seconds between "still searching" heartbeat messages
    heartbeat_interval: float = 15.0

    # Above this many result sequences the CLI asks before listing them
    display_limit: int = 10

    # Total attempts to open the codes file in interactive mode
    max_attempts: int = 5

    # Extra stack frames reserved on top of the vertex count during search
    recursion_margin: int = 100

    def __post_init__(self) -> None:
        if self.heartbeat_interval <= 0:
            raise ConfigError(
                f"heartbeat_interval must be positive, got {self.heartbeat_interval}"
            )
        if self.display_limit < 0:
            raise ConfigError(
                f"display_limit must be non-negative, got {self.display_limit}"
            )
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.recursion_margin < 0:
            raise ConfigError(
                f"recursion_margin must be non-negative, got {self.recursion_margin}"
            )

    def with_overrides(self, **overrides: Any) -> SearchConfig:
        """Return a copy with ``None``-valued overrides ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()


def config_from_dict(data: Dict[str, Any]) -> SearchConfig:
    """Build a ``SearchConfig`` from a plain mapping.

    Raises:
        ConfigError: If the mapping has unknown keys or values of the wrong type.
    """
    known = {f.name: f for f in fields(SearchConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unrecognized config keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Config key '{key}' must be a number, got {value!r}")
        if key == "heartbeat_interval":
            values[key] = float(value)
        else:
            if int(value) != value:
                raise ConfigError(
                    f"Config key '{key}' must be an integer, got {value!r}"
                )
            values[key] = int(value)
    return SearchConfig(**values)


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a ``SearchConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does not
            map to a dictionary of known keys.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("The provided YAML must map to a dictionary at top-level.")
    return config_from_dict(data)
