"""
Pytest configuration and fixtures for testing.
"""

import pytest

BASE_URL = "https://splunk.example.com:8089"


@pytest.fixture
def base_url():
    """Base URL used by mocked clients."""
    return BASE_URL


@pytest.fixture
def search_url():
    return f"{BASE_URL}/services/search/jobs"


@pytest.fixture
def hec_url():
    return f"{BASE_URL}/services/collector/event"


@pytest.fixture
def mock_search_response():
    """Mock search response for testing."""
    return {
        "preview": False,
        "init_offset": 0,
        "messages": [],
        "fields": [{"name": "host"}, {"name": "source"}],
        "results": [
            {
                "host": "web-server-01",
                "source": "/var/log/auth.log",
                "_raw": "Authentication failed for user admin",
            }
        ],
    }


@pytest.fixture
def mock_events():
    """Two events in the shape accepted by send_events."""
    return [
        {"time": 1672531200, "event": {"message": "Hello, Splunk!", "user_id": "12345"}},
        {"time": 1672531260, "event": "raw text event"},
    ]
