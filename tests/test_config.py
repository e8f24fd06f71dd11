"""Tests for environment-driven settings."""

import importlib

import pytest

import core.config as cfg


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(cfg)

    yield _reload
    monkeypatch.undo()
    importlib.reload(cfg)


def test_defaults(reload_config, monkeypatch):
    for key in ("ALGOD_URL", "NOTES_APP_ID", "NOTES_ABI_PATH", "CONFIRMATION_ROUNDS"):
        monkeypatch.delenv(key, raising=False)
    mod = reload_config()

    assert mod.settings.ALGOD_URL == "https://testnet-api.algonode.cloud"
    assert mod.settings.NOTES_APP_ID == 0
    assert mod.settings.NOTES_ABI_PATH == str(mod.DEFAULT_ABI_PATH)
    assert mod.settings.CONFIRMATION_ROUNDS == 4


def test_environment_overrides(reload_config):
    mod = reload_config(NOTES_APP_ID="1234", CONFIRMATION_ROUNDS="10", ALGOD_URL="http://localhost:4001")

    assert mod.settings.NOTES_APP_ID == 1234
    assert mod.settings.CONFIRMATION_ROUNDS == 10
    assert mod.settings.ALGOD_URL == "http://localhost:4001"


def test_malformed_integers_fall_back(reload_config):
    mod = reload_config(NOTES_APP_ID="abc", CONFIRMATION_ROUNDS=" ")

    assert mod.settings.NOTES_APP_ID == 0
    assert mod.settings.CONFIRMATION_ROUNDS == 4


def test_settings_are_frozen():
    with pytest.raises(Exception):
        cfg.settings.NOTES_APP_ID = 5
