"""Tests for `overlapchain.config`."""

from pathlib import Path

import pytest

from overlapchain.config import SEARCH_CONFIG, SearchConfig, config_from_dict, load_config
from overlapchain.errors import ConfigError


def test_defaults() -> None:
    config = SearchConfig()
    assert config.heartbeat_interval == 15.0
    assert config.display_limit == 10
    assert config.max_attempts == 5
    assert SEARCH_CONFIG == config


@pytest.mark.parametrize(
    "kwargs",
    [
        {"heartbeat_interval": 0},
        {"heartbeat_interval": -1.0},
        {"display_limit": -1},
        {"max_attempts": 0},
        {"recursion_margin": -5},
    ],
)
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(ConfigError):
        SearchConfig(**kwargs)


def test_with_overrides_ignores_none() -> None:
    config = SearchConfig().with_overrides(heartbeat_interval=None, display_limit=3)
    assert config.heartbeat_interval == 15.0
    assert config.display_limit == 3


def test_config_from_dict_types() -> None:
    config = config_from_dict({"heartbeat_interval": 2, "display_limit": 4.0})
    assert config.heartbeat_interval == 2.0
    assert isinstance(config.heartbeat_interval, float)
    assert config.display_limit == 4
    assert isinstance(config.display_limit, int)


@pytest.mark.parametrize(
    "data",
    [
        {"unknown_key": 1},
        {"display_limit": "ten"},
        {"display_limit": True},
        {"max_attempts": 2.5},
    ],
)
def test_config_from_dict_rejects_bad_input(data) -> None:
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_load_config_yaml(tmp_path: Path) -> None:
    path = tmp_path / "search.yaml"
    path.write_text("heartbeat_interval: 0.5\ndisplay_limit: 25\n")
    config = load_config(path)
    assert config.heartbeat_interval == 0.5
    assert config.display_limit == 25
    assert config.max_attempts == SEARCH_CONFIG.max_attempts


def test_load_config_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == SearchConfig()


def test_load_config_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError, match="dictionary"):
        load_config(path)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("display_limit: [1, 2\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "nope.yaml")
