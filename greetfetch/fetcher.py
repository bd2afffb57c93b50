"""
Fetcher module: one GET through an injected HTTP client, failures returned as values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

from greetfetch.http.client import HttpClient
from greetfetch.http.models import HttpResponse


@dataclass(frozen=True, slots=True)
class Success:
    """The client's response, passed through unchanged."""

    value: Any

    @property
    def ok(self) -> bool:
        return True

    def render(self) -> str:
        return str(self.value)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"ok": True, "content": self.render()}
        if isinstance(self.value, HttpResponse):
            data["status"] = self.value.status
        return data


@dataclass(frozen=True, slots=True)
class Failure:
    """Human-readable message of the error the client raised."""

    message: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def value(self) -> str:
        return self.message

    def render(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "content": self.message}


Outcome = Union[Success, Failure]


def error_message(exc: BaseException) -> str:
    """Message of *exc*; the class name when the exception carries none."""
    message = str(exc)
    return message if message else type(exc).__name__


class Fetcher:
    """Wraps a single GET against an injected client; never raises on fetch errors."""

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def fetch(self, url: str) -> Outcome:
        """
        GET *url* through the client.

        Returns Success with the client's value on success, or Failure with
        the error message on any exception the client raises.
        """
        try:
            value = await self.client.get(url)
        except Exception as exc:
            return Failure(error_message(exc))
        return Success(value)


async def load_url(client: HttpClient, url: str) -> Any:
    """Response on success, error message string on failure."""
    outcome = await Fetcher(client).fetch(url)
    return outcome.value


__all__ = ["Success", "Failure", "Outcome", "Fetcher", "error_message", "load_url"]
