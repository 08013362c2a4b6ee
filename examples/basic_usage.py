"""
Basic usage examples for the Splunk Python SDK.

Credentials are read from SPLUNK_URL, SPLUNK_TOKEN or
SPLUNK_USERNAME/SPLUNK_PASSWORD.
"""

from datetime import datetime, timezone

from splunk_sdk import Event, SplunkClient


def example_create_client():
    """Example: Create a client from the environment."""
    client = SplunkClient.from_env()
    print("Splunk client created successfully!")
    if client.credentials.auth_method == "token":
        print("Authentication method: Token")
    else:
        print("Authentication method: Username/Password")
    client.close()


def example_search():
    """Example: Run a search."""
    with SplunkClient.from_env() as client:
        results = client.search("search index=_internal | head 10")
        for row in results.get("results", []):
            print(row)


def example_search_with_options():
    """Example: Run a blocking search over a time range."""
    with SplunkClient.from_env() as client:
        results = client.search(
            "search index=main error",
            "exec_mode=blocking",
            "earliest_time=-24h",
            "latest_time=now",
        )
        print(results)


def example_send_events():
    """Example: Send events through the HTTP Event Collector."""
    with SplunkClient("https://localhost:8088", token="your-hec-token") as client:
        events = [
            Event(
                time=datetime(2023, 1, 1, tzinfo=timezone.utc),
                event={"message": "Hello, Splunk!"},
            ),
            Event(time=1672531260, event="plain text event", sourcetype="demo"),
        ]
        client.send_events("test_index", events)
        print("Events sent successfully!")


if __name__ == "__main__":
    example_create_client()
    example_search()
