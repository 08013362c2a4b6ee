"""
Synchronous client for the Splunk REST API using httpx.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from splunk_sdk.client import BaseSplunkClient
from splunk_sdk.config import ClientSettings
from splunk_sdk.exceptions import ConnectionError as SplunkConnectionError
from splunk_sdk.models import Event

logger = logging.getLogger(__name__)


class SplunkClient(BaseSplunkClient):
    """Synchronous client for the Splunk search and HTTP Event Collector APIs."""

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        token: str = "",
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> None:
        super().__init__(base_url, username, password, token, timeout, verify_ssl)
        self._client: httpx.Client | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SplunkClient":
        """
        Create a client from ``SPLUNK_*`` environment variables.

        Raises:
            ConfigurationError: If the settings are invalid or carry no usable credentials
        """
        settings = ClientSettings.from_env(environ)
        return cls(
            base_url=settings.base_url,
            username=settings.username,
            password=settings.password,
            token=settings.token,
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
        )

    @property
    def client(self) -> httpx.Client:
        """Lazy initialization of httpx client."""
        if self._client is None:
            self._client = httpx.Client(verify=self.verify_ssl)
        return self._client

    def _send(self, request: httpx.Request, position: int | None = None) -> httpx.Response:
        logger.debug("%s %s", request.method, request.url)
        try:
            return self.client.send(request)
        except httpx.RequestError as e:
            if position is None:
                raise SplunkConnectionError(f"Connection error: {e}") from e
            raise SplunkConnectionError(
                f"failed to send event {position}: {e}", event_position=position
            ) from e

    def search(
        self,
        query: str,
        *options: str,
        exec_mode: str | None = None,
        earliest_time: str | None = None,
        latest_time: str | None = None,
    ) -> dict[str, Any]:
        """
        Submit a search job and return the decoded JSON response.

        Args:
            query: The search query, e.g. ``"search index=_internal | head 10"``
            *options: Optional ``key=value`` strings (``exec_mode=blocking``,
                ``earliest_time=-1h``, ``latest_time=now``); malformed or
                unknown options are ignored
            exec_mode: Keyword form of the ``exec_mode`` option (default "normal")
            earliest_time: Keyword form of the ``earliest_time`` option
            latest_time: Keyword form of the ``latest_time`` option

        Returns:
            The response JSON object, unmodified

        Raises:
            AuthenticationError: If no credentials are usable
            ConnectionError: If the request cannot be sent
            ResponseError: If the server answers with a status other than 200
            DecodeError: If the body is not a JSON object

        Example:
            >>> client = SplunkClient("https://localhost:8089", token="your-token")
            >>> results = client.search("search index=_internal | head 10", "exec_mode=oneshot")
            >>> for row in results.get("results", []):
            ...     print(row)
        """
        request = self.build_search_request(
            query,
            *options,
            exec_mode=exec_mode,
            earliest_time=earliest_time,
            latest_time=latest_time,
        )
        response = self._send(request)
        return self._check_search_response(response)

    def send_events(self, index: str, events: Iterable[Event | dict[str, Any]]) -> None:
        """
        Send events to an index through the HTTP Event Collector.

        One request is issued per event, in order. Delivery is not atomic:
        when an event fails, the error is raised immediately and events
        sent before it stay delivered. The raised error's
        ``event_position`` is the 0-based index of the failing event.

        Args:
            index: Target index name
            events: Events as Event models or dictionaries with ``time`` and ``event``

        Raises:
            AuthenticationError: If no token is configured; nothing is sent
            SerializationError: If an event is malformed or cannot be encoded as JSON
            ConnectionError: If a request cannot be sent
            ResponseError: If the collector answers with a status other than 200

        Example:
            >>> client = SplunkClient("https://localhost:8088", token="hec-token")
            >>> client.send_events("main", [Event(time=1672531200, event={"message": "hello"})])
        """
        # Fail before touching the network when HEC cannot be authenticated
        self.auth.get_hec_headers()

        for position, event in enumerate(events):
            request = self.build_event_request(index, event, position)
            logger.debug("sending event %d to index %s", position, index)
            response = self._send(request, position)
            self._check_event_response(response, position)

    def close(self) -> None:
        """Close the session and release resources."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "SplunkClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
