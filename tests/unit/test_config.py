"""Tests for client settings."""

import pytest

from niu_cloud_client.auth import CredentialResolver
from niu_cloud_client.config import ACCOUNT_BASE_URL, APP_API_BASE_URL, ClientSettings


@pytest.mark.unit
def test_defaults():
    settings = ClientSettings()

    assert settings.account_base_url == "https://account.niu.com"
    assert settings.app_api_base_url == "https://app-api.niu.com"
    assert settings.language == "en-US"
    assert settings.timeout == 30.0


@pytest.mark.unit
def test_from_env_defaults():
    settings = ClientSettings.from_env(CredentialResolver(load_dotenv=False))

    assert settings.account_base_url == ACCOUNT_BASE_URL
    assert settings.app_api_base_url == APP_API_BASE_URL


@pytest.mark.unit
def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("NIU_APP_API_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("NIU_LANGUAGE", "de-DE")
    monkeypatch.setenv("NIU_TIMEOUT", "5")

    settings = ClientSettings.from_env(CredentialResolver(load_dotenv=False))

    assert settings.app_api_base_url == "http://localhost:8080"
    assert settings.language == "de-DE"
    assert settings.timeout == 5.0


@pytest.mark.unit
def test_from_env_invalid_timeout(monkeypatch):
    monkeypatch.setenv("NIU_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="NIU_TIMEOUT"):
        ClientSettings.from_env(CredentialResolver(load_dotenv=False))
