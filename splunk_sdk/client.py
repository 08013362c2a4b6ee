"""
Base client class with the request construction, authentication and
response handling shared by the Splunk client.
"""

import base64
import json
from abc import ABC, abstractmethod
from typing import Any

import httpx
from pydantic import ValidationError

from splunk_sdk.exceptions import (
    AuthenticationError,
    DecodeError,
    ResponseError,
    SerializationError,
)
from splunk_sdk.models import Credentials, Event, HECPayload, SearchOptions

SEARCH_ENDPOINT = "/services/search/jobs"
HEC_ENDPOINT = "/services/collector/event"

# Maximum number of response body characters kept in error messages
BODY_SNIPPET_LENGTH = 512


class AuthConfig:
    """Selects the authorization header for each endpoint."""

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def get_search_headers(self) -> dict[str, str]:
        """Bearer token if present, otherwise HTTP basic auth."""
        creds = self.credentials
        if creds.token:
            return {"Authorization": f"Bearer {creds.token}"}
        if creds.has_basic:
            userpass = f"{creds.username}:{creds.password}".encode()
            return {"Authorization": f"Basic {base64.b64encode(userpass).decode('ascii')}"}
        raise AuthenticationError("no authentication credentials provided")

    def get_hec_headers(self) -> dict[str, str]:
        """HEC only accepts its own token scheme."""
        if not self.credentials.token:
            raise AuthenticationError("HEC requires a token for authentication")
        return {"Authorization": f"Splunk {self.credentials.token}"}


def parse_search_results(body: bytes | str) -> dict[str, Any]:
    """Decode a search response body into a mapping."""
    try:
        result = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"failed to decode search results: {e}") from e
    if not isinstance(result, dict):
        raise DecodeError(
            f"failed to decode search results: expected a JSON object, got {type(result).__name__}"
        )
    return result


class BaseSplunkClient(ABC):
    """Abstract base class for Splunk clients."""

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        token: str = "",
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> None:
        self.credentials = Credentials.resolve(username=username, password=password, token=token)
        # Trailing slashes are stripped once so both endpoints join the same way
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.auth = AuthConfig(self.credentials)

    @property
    def username(self) -> str:
        return self.credentials.username

    @property
    def password(self) -> str:
        return self.credentials.password

    @property
    def token(self) -> str:
        return self.credentials.token

    def _make_url(self, endpoint: str) -> str:
        """Construct full URL from endpoint."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _extensions(self) -> dict[str, Any]:
        """Per-request timeout; the only place the client timeout is applied."""
        return {"timeout": httpx.Timeout(self.timeout).as_dict()}

    def build_search_request(
        self,
        query: str,
        *options: str,
        exec_mode: str | None = None,
        earliest_time: str | None = None,
        latest_time: str | None = None,
    ) -> httpx.Request:
        """
        Build the form-encoded search-job submission.

        Args:
            query: Search query, sent as-is apart from form encoding
            *options: ``key=value`` strings; ``exec_mode``, ``earliest_time``
                and ``latest_time`` are recognised, anything else is ignored
            exec_mode: Overrides ``exec_mode`` given in options
            earliest_time: Overrides ``earliest_time`` given in options
            latest_time: Overrides ``latest_time`` given in options

        Raises:
            AuthenticationError: If no credentials are usable for search
        """
        search_options = SearchOptions.from_strings(
            options,
            exec_mode=exec_mode,
            earliest_time=earliest_time,
            latest_time=latest_time,
        )
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            **self.auth.get_search_headers(),
        }
        return httpx.Request(
            "POST",
            self._make_url(SEARCH_ENDPOINT),
            data=search_options.to_form(query),
            headers=headers,
            extensions=self._extensions(),
        )

    def build_event_request(
        self, index: str, event: Event | dict[str, Any], position: int = 0
    ) -> httpx.Request:
        """
        Build one HEC request for a single event.

        Raises:
            AuthenticationError: If no token is configured
            SerializationError: If the event is not a valid Event or cannot be
                encoded as JSON
        """
        headers = {"Content-Type": "application/json", **self.auth.get_hec_headers()}

        if isinstance(event, dict):
            try:
                event = Event(**event)
            except ValidationError as e:
                raise SerializationError(
                    f"failed to marshal event {position}: {e}", event_position=position
                ) from e
        payload = HECPayload.wrap(index, event)
        try:
            body = json.dumps(payload.to_wire(), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"failed to marshal event {position}: {e}", event_position=position
            ) from e

        return httpx.Request(
            "POST",
            self._make_url(HEC_ENDPOINT),
            content=body.encode("utf-8"),
            headers=headers,
            extensions=self._extensions(),
        )

    def _check_search_response(self, response: httpx.Response) -> dict[str, Any]:
        """Require 200 before parsing the search body."""
        if response.status_code != 200:
            raise ResponseError(
                f"search request failed: {_status_text(response)}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text[:BODY_SNIPPET_LENGTH],
            )
        return parse_search_results(response.content)

    def _check_event_response(self, response: httpx.Response, position: int) -> None:
        if response.status_code != 200:
            body = response.text[:BODY_SNIPPET_LENGTH]
            raise ResponseError(
                f"failed to send event {position}: {_status_text(response)} - {body}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=body,
                event_position=position,
            )

    @abstractmethod
    def search(self, query: str, *options: str, **kwargs: Any) -> Any:
        """Run a search."""
        pass

    @abstractmethod
    def send_events(self, index: str, events: Any) -> Any:
        """Send events to an index."""
        pass


def _status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()
