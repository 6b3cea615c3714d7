"""Tests for environment configuration."""

import os

import pytest

from storefront.apis.Db import Db
from storefront.config.env_loader import (
    ensure_emulator_hosts,
    get_emulator_host,
    get_optional_env_var,
    get_required_env_var,
    get_storefront_config,
    get_web_api_key,
    load_environment,
)
from storefront.exceptions import ConfigError


def test_required_variable_missing(monkeypatch):
    monkeypatch.delenv("FIREBASE_WEB_API_KEY", raising=False)
    with pytest.raises(ConfigError) as exc_info:
        get_required_env_var("FIREBASE_WEB_API_KEY", "Web API key")
    assert exc_info.value.details["variable"] == "FIREBASE_WEB_API_KEY"
    assert "Hint" in exc_info.value.message


def test_required_variable_present(monkeypatch):
    monkeypatch.setenv("FIREBASE_STORAGE_BUCKET", "shop.appspot.com")
    assert get_required_env_var("FIREBASE_STORAGE_BUCKET") == "shop.appspot.com"


def test_optional_variable_default(monkeypatch):
    monkeypatch.delenv("STOREFRONT_UNSET", raising=False)
    assert get_optional_env_var("STOREFRONT_UNSET", "fallback") == "fallback"


def test_storefront_config_defaults(monkeypatch):
    monkeypatch.delenv("CHECKOUT_PHONE_NUMBER", raising=False)
    monkeypatch.delenv("FIREBASE_STORAGE_BUCKET", raising=False)
    monkeypatch.setenv("ENV", "development")

    config = get_storefront_config()

    assert config["checkout_phone"] == "1234567890"
    assert config["storage_bucket"] == ""
    assert config["env"] == "development"


def test_load_environment_reads_file(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_FROM_FILE", "placeholder")
    monkeypatch.delenv("STOREFRONT_FROM_FILE")
    env_file = tmp_path / ".env"
    env_file.write_text("STOREFRONT_FROM_FILE=loaded\n")

    load_environment(str(env_file))

    assert os.environ["STOREFRONT_FROM_FILE"] == "loaded"


def test_load_environment_tolerates_missing_file(tmp_path):
    load_environment(str(tmp_path / "missing.env"))


def test_ensure_emulator_hosts_fills_defaults(monkeypatch):
    monkeypatch.setenv("FUNCTIONS_EMULATOR", "true")
    monkeypatch.delenv("FIRESTORE_EMULATOR_HOST")

    ensure_emulator_hosts()

    assert get_emulator_host("firestore") == "localhost:8080"


def test_ensure_emulator_hosts_outside_emulator(monkeypatch):
    monkeypatch.setenv("FUNCTIONS_EMULATOR", "false")
    monkeypatch.delenv("FIRESTORE_EMULATOR_HOST")

    ensure_emulator_hosts()

    assert get_emulator_host("firestore") is None


def test_web_api_key_with_auth_emulator(monkeypatch):
    monkeypatch.setenv("FIREBASE_AUTH_EMULATOR_HOST", "localhost:9099")
    monkeypatch.delenv("FIREBASE_WEB_API_KEY", raising=False)
    assert get_web_api_key() == "fake-api-key"


def test_web_api_key_required_in_production(monkeypatch):
    monkeypatch.delenv("FIREBASE_AUTH_EMULATOR_HOST")
    monkeypatch.delenv("FIREBASE_WEB_API_KEY", raising=False)
    with pytest.raises(ConfigError):
        get_web_api_key()


@pytest.mark.parametrize("env,development", [
    (None, False),
    ("development", True),
    ("production", False),
    ("staging", False),
])
def test_environment_checks_follow_config(monkeypatch, env, development):
    if env is None:
        monkeypatch.delenv("ENV", raising=False)
    else:
        monkeypatch.setenv("ENV", env)

    assert get_storefront_config()["env"] == (env or "production")
    assert Db.is_development() is development
