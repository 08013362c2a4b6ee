"""
Environment configuration for the Splunk client.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError

from splunk_sdk.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://localhost:8089"


class ClientSettings(BaseModel):
    """Client settings, usually read from ``SPLUNK_*`` environment variables."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Management port URL")
    username: str = ""
    password: str = Field("", repr=False)
    token: str = Field("", repr=False)
    timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    verify_ssl: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientSettings":
        """
        Load settings from the environment.

        Recognised variables: SPLUNK_URL, SPLUNK_USERNAME, SPLUNK_PASSWORD,
        SPLUNK_TOKEN, SPLUNK_TIMEOUT, SPLUNK_VERIFY_SSL. Unset or empty
        variables fall back to the defaults.
        """
        if environ is None:
            environ = os.environ
        mapping = {
            "base_url": "SPLUNK_URL",
            "username": "SPLUNK_USERNAME",
            "password": "SPLUNK_PASSWORD",
            "token": "SPLUNK_TOKEN",
            "timeout": "SPLUNK_TIMEOUT",
            "verify_ssl": "SPLUNK_VERIFY_SSL",
        }
        values = {field: environ[var] for field, var in mapping.items() if environ.get(var)}
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"invalid Splunk configuration: {e}") from e
