import logging

import pytest

from linkscan.config import DEFAULT_MAX_INPUT_LENGTH, Config


def test_defaults(clean_env):
    config = Config.load()
    assert config.max_input_length == DEFAULT_MAX_INPUT_LENGTH
    assert config.log_level == logging.INFO
    assert config.unique is False
    assert config.validate() == []


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("LINKSCAN_MAX_INPUT_LENGTH", "0")
    monkeypatch.setenv("LINKSCAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINKSCAN_UNIQUE", "yes")

    config = Config.load()
    assert config.max_input_length == 0
    assert config.log_level == logging.DEBUG
    assert config.unique is True
    assert len(config.validate()) == 1


def test_env_file(clean_env):
    env_path = clean_env / "custom.env"
    env_path.write_text("LINKSCAN_MAX_INPUT_LENGTH=50\n")

    config = Config.load(env_path)
    assert config.max_input_length == 50


def test_invalid_max_length(clean_env, monkeypatch):
    monkeypatch.setenv("LINKSCAN_MAX_INPUT_LENGTH", "lots")
    with pytest.raises(ValueError):
        Config.load()

    monkeypatch.setenv("LINKSCAN_MAX_INPUT_LENGTH", "-1")
    with pytest.raises(ValueError):
        Config.load()


def test_invalid_log_level(clean_env, monkeypatch):
    monkeypatch.setenv("LINKSCAN_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        Config.load()


def test_accepts():
    assert Config(max_input_length=3, log_level=logging.INFO, unique=False).accepts("abc")
    assert not Config(max_input_length=3, log_level=logging.INFO, unique=False).accepts("abcd")
    assert Config(max_input_length=0, log_level=logging.INFO, unique=False).accepts("x" * 10)
