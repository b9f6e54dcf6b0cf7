"""
Tests for environment-driven settings.
"""

import importlib

import pytest

from veritas_lens.core import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module under a patched environment, restoring it afterwards."""
    def _reload(**env):
        for name in ("BACKEND_PORT", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)


def test_default_port(reload_config):
    assert reload_config().BACKEND_PORT == 3000


def test_port_falls_back_to_port_variable(reload_config):
    assert reload_config(PORT="8080").BACKEND_PORT == 8080


def test_backend_port_wins_over_port(reload_config):
    assert reload_config(PORT="8080", BACKEND_PORT="9000").BACKEND_PORT == 9000


def test_cors_defaults_to_all_origins(reload_config):
    assert reload_config().CORS_ORIGINS == ["*"]


def test_empty_cors_setting_allows_all_origins(reload_config):
    assert reload_config(CORS_ORIGINS="").CORS_ORIGINS == ["*"]
    assert reload_config(CORS_ORIGINS=" , ").CORS_ORIGINS == ["*"]


def test_cors_origin_list(reload_config):
    origins = reload_config(CORS_ORIGINS="http://localhost:5173, https://veritas.example").CORS_ORIGINS
    assert origins == ["http://localhost:5173", "https://veritas.example"]
