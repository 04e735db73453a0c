import os

from cliordle.config.app_config import ProductionConfig, TestingConfig, get_config, user_data_path


def test_user_data_path_is_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert user_data_path("logs") == os.path.join(str(tmp_path), ".cliordle", "logs")


def test_get_config_by_name():
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig


def test_get_config_falls_back_to_default():
    assert get_config("staging") is ProductionConfig


def test_get_config_reads_environment(monkeypatch):
    monkeypatch.setenv("CLIORDLE_ENV", "testing")
    assert get_config() is TestingConfig
