"""
Pydantic models for credentials, events and search options.

Event payloads are forwarded opaquely: only the envelope fields are
validated, never the contents of ``event``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splunk_sdk.exceptions import ConfigurationError

DEFAULT_EXEC_MODE = "normal"


class Credentials(BaseModel):
    """Immutable credential set; the token wins when both sets are present."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = Field("", repr=False)
    token: str = Field("", repr=False)

    @classmethod
    def resolve(cls, username: str = "", password: str = "", token: str = "") -> "Credentials":
        """Build credentials, failing when neither a token nor a full username/password pair is set."""
        if not token and (not username or not password):
            raise ConfigurationError(
                "either a token or a username and password must be provided"
            )
        return cls(username=username, password=password, token=token)

    @property
    def has_basic(self) -> bool:
        return bool(self.username and self.password)

    @property
    def auth_method(self) -> str:
        """Authentication method used for search requests: ``token`` or ``basic``."""
        return "token" if self.token else "basic"


class Event(BaseModel):
    """A single event to be sent to the HTTP Event Collector."""

    time: int | float = Field(
        ..., description="Seconds since epoch, or a timezone-aware datetime"
    )
    event: Any = Field(..., description="Event payload, forwarded as-is")
    host: str | None = Field(None, description="Optional host metadata")
    source: str | None = Field(None, description="Optional source metadata")
    sourcetype: str | None = Field(None, description="Optional sourcetype metadata")

    @field_validator("time", mode="before")
    @classmethod
    def convert_datetime(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            if v.tzinfo is None:
                raise ValueError("time must be timezone-aware when given as a datetime")
            return v.timestamp()
        return v


class HECPayload(BaseModel):
    """Wire envelope for one event posted to the collector."""

    index: str
    time: int | float
    event: Any
    host: str | None = None
    source: str | None = None
    sourcetype: str | None = None

    @classmethod
    def wrap(cls, index: str, event: Event) -> "HECPayload":
        return cls(
            index=index,
            time=event.time,
            event=event.event,
            host=event.host,
            source=event.source,
            sourcetype=event.sourcetype,
        )

    def to_wire(self) -> dict[str, Any]:
        """Plain dict for JSON encoding; the event payload is passed through untouched."""
        wire: dict[str, Any] = {"index": self.index, "time": self.time, "event": self.event}
        for key in ("host", "source", "sourcetype"):
            value = getattr(self, key)
            if value is not None:
                wire[key] = value
        return wire


class SearchOptions(BaseModel):
    """Recognised search-job submission parameters."""

    exec_mode: str = DEFAULT_EXEC_MODE
    earliest_time: str | None = None
    latest_time: str | None = None

    @classmethod
    def from_strings(cls, options: tuple[str, ...] | list[str], **overrides: str | None) -> "SearchOptions":
        """
        Parse ``key=value`` option strings.

        Strings without ``=`` and unknown keys are ignored. Keyword
        overrides that are not None take precedence over the strings.
        """
        values: dict[str, str] = {}
        for option in options:
            key, sep, value = option.partition("=")
            if not sep:
                continue
            if key in cls.model_fields:
                values[key] = value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_form(self, query: str) -> dict[str, str]:
        """Form fields for the search-job request, in submission order."""
        form = {
            "search": query,
            "exec_mode": self.exec_mode,
            "output_mode": "json",
        }
        if self.earliest_time:
            form["earliest_time"] = self.earliest_time
        if self.latest_time:
            form["latest_time"] = self.latest_time
        return form
