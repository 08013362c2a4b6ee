"""
Error handling examples for the Splunk Python SDK.
"""

from splunk_sdk import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    Event,
    ResponseError,
    SerializationError,
    SplunkClient,
    SplunkError,
)


def example_search_errors():
    """Example: Handle each search failure."""
    try:
        client = SplunkClient.from_env()
    except ConfigurationError as e:
        print(f"Error creating Splunk client: {e}")
        return

    try:
        results = client.search("search index=_internal | head 10")
        print(results)
    except ResponseError as e:
        print(f"Search rejected ({e.status_code}): {e.body}")
    except DecodeError:
        print("Error: server did not return JSON")
    except ConnectionError:
        print("Error: Failed to connect to server")
    except SplunkError as e:
        print(f"Error: {e}")
    finally:
        client.close()


def example_partial_delivery():
    """Example: Resume sending after a failed event."""
    events = [Event(time=1672531200 + i, event={"n": i}) for i in range(10)]

    with SplunkClient("https://localhost:8088", token="your-hec-token") as client:
        try:
            client.send_events("main", events)
        except AuthenticationError:
            print("Error: HEC needs a token")
        except (SerializationError, ResponseError, ConnectionError) as e:
            # Events before the failing one were already delivered
            print(f"Delivered {e.delivered} events, failed at {e.event_position}: {e}")
            remaining = events[e.event_position + 1 :]
            print(f"{len(remaining)} events were not attempted")


if __name__ == "__main__":
    example_search_errors()
    example_partial_delivery()
