"""
Splunk Python SDK

A small Python library for submitting searches to Splunk and sending
events through the HTTP Event Collector.
"""

import logging

from splunk_sdk._version import __version__
from splunk_sdk.client import BaseSplunkClient, parse_search_results
from splunk_sdk.config import ClientSettings
from splunk_sdk.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    ResponseError,
    SerializationError,
    SplunkError,
)
from splunk_sdk.models import Credentials, Event, HECPayload, SearchOptions
from splunk_sdk.sync_client import SplunkClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Clients
    "BaseSplunkClient",
    "SplunkClient",
    "ClientSettings",
    "parse_search_results",
    # Models
    "Credentials",
    "Event",
    "HECPayload",
    "SearchOptions",
    # Exceptions
    "SplunkError",
    "ConfigurationError",
    "AuthenticationError",
    "ConnectionError",
    "ResponseError",
    "SerializationError",
    "DecodeError",
]
