"""
配置加载测试
Configuration Loader Tests
"""
from pathlib import Path

import pytest
import yaml

from rsp_game.utils.config_loader import ConfigLoader, GameSettings
from rsp_game.utils.exceptions import ConfigurationException

PROJECT_CONFIG = Path(__file__).resolve().parents[1] / "config" / "config.yaml"


def test_project_config_is_valid():
    config = ConfigLoader.load_config(str(PROJECT_CONFIG))
    settings = ConfigLoader.load_game_settings(config)
    assert settings.rounds == 10
    assert settings.computer_name == "Computer"
    assert ConfigLoader.get_logging_config(config)['level'] == "WARNING"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(str(tmp_path / "nope.yaml"))


def test_empty_file_is_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader.load_config(str(path)) == {}


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("game: [rounds: 3\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        ConfigLoader.load_config(str(path))


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationException):
        ConfigLoader.load_config(str(path))


def test_save_and_reload(tmp_path):
    path = tmp_path / "sub" / "config.yaml"
    config = {'game': GameSettings(rounds=4, player_name="Alice", seed=9).to_dict()}
    assert ConfigLoader.save_config(config, str(path))
    settings = ConfigLoader.load_game_settings(ConfigLoader.load_config(str(path)))
    assert settings == GameSettings(rounds=4, player_name="Alice", computer_name="Computer", seed=9)


def test_defaults_when_sections_missing():
    assert ConfigLoader.get_game_config({}) == {}
    assert ConfigLoader.get_logging_config({'logging': None}) == {}
    assert ConfigLoader.load_game_settings({}) == GameSettings()


@pytest.mark.parametrize("rounds", [0, -1, "ten", 1.5, True])
def test_bad_rounds(rounds):
    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.load_game_settings({'game': {'rounds': rounds}})
    assert exc_info.value.config_key == "game.rounds"


def test_bad_seed():
    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.load_game_settings({'game': {'seed': "abc"}})
    assert exc_info.value.config_key == "game.seed"
