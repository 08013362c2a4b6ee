"""
Tests for environment configuration.
"""

import pytest

from splunk_sdk import ClientSettings, ConfigurationError, SplunkClient
from splunk_sdk.config import DEFAULT_BASE_URL


def test_defaults():
    settings = ClientSettings.from_env({})
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.token == ""
    assert settings.timeout == 30.0
    assert settings.verify_ssl is True


def test_reads_all_variables():
    settings = ClientSettings.from_env(
        {
            "SPLUNK_URL": "https://splunk.internal:8089",
            "SPLUNK_USERNAME": "admin",
            "SPLUNK_PASSWORD": "changeme",
            "SPLUNK_TOKEN": "tok",
            "SPLUNK_TIMEOUT": "12.5",
            "SPLUNK_VERIFY_SSL": "false",
        }
    )
    assert settings.base_url == "https://splunk.internal:8089"
    assert settings.username == "admin"
    assert settings.password == "changeme"
    assert settings.token == "tok"
    assert settings.timeout == 12.5
    assert settings.verify_ssl is False


def test_empty_values_use_defaults():
    settings = ClientSettings.from_env({"SPLUNK_URL": "", "SPLUNK_TIMEOUT": ""})
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 30.0


@pytest.mark.parametrize(
    "environ",
    [
        {"SPLUNK_TIMEOUT": "soon"},
        {"SPLUNK_TIMEOUT": "-1"},
        {"SPLUNK_VERIFY_SSL": "maybe"},
    ],
)
def test_invalid_values(environ):
    with pytest.raises(ConfigurationError, match="invalid Splunk configuration"):
        ClientSettings.from_env(environ)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SPLUNK_USERNAME", "admin")
    monkeypatch.setenv("SPLUNK_PASSWORD", "changeme")
    monkeypatch.delenv("SPLUNK_TOKEN", raising=False)

    client = SplunkClient.from_env()
    assert client.credentials.auth_method == "basic"


def test_client_without_credentials():
    with pytest.raises(ConfigurationError):
        SplunkClient.from_env({"SPLUNK_URL": "https://splunk:8089"})


def test_secrets_hidden_from_repr():
    settings = ClientSettings.from_env({"SPLUNK_PASSWORD": "s3cret", "SPLUNK_TOKEN": "t0ken"})
    assert "s3cret" not in repr(settings)
    assert "t0ken" not in repr(settings)
