"""
HTTP client capability: the minimal ``get(url)`` contract and its aiohttp implementation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from aiohttp import ClientSession

from greetfetch.http.models import HttpResponse

if TYPE_CHECKING:
    from greetfetch.config import AppConfig


@runtime_checkable
class HttpClient(Protocol):
    """Anything with a coroutine ``get(url)`` that returns a response or raises."""

    async def get(self, url: str) -> Any:
        ...


class AiohttpClient:
    """Performs single GET requests through an :class:`aiohttp.ClientSession`.

    Use as an async context manager. An injected *session* is borrowed and
    left open on exit; otherwise the client owns and closes its own session.
    """

    def __init__(
        self,
        session: Optional[ClientSession] = None,
        *,
        user_agent: Optional[str] = None,
        raise_for_status: bool = True,
    ) -> None:
        self.session = session
        self.user_agent = user_agent
        self.raise_for_status = raise_for_status
        self._owns_session = session is None

    @classmethod
    def from_config(cls, config: AppConfig) -> AiohttpClient:
        return cls(user_agent=config.user_agent, raise_for_status=config.raise_for_status)

    async def __aenter__(self) -> AiohttpClient:
        if self.session is None:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self.session = ClientSession(headers=headers)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    async def get(self, url: str) -> HttpResponse:
        """
        Issue one GET to *url* and return its :class:`HttpResponse`.

        Network, DNS and URL errors propagate as raised by aiohttp; so does a
        non-2xx status when ``raise_for_status`` is set.
        """
        if self.session is None:
            raise RuntimeError("AiohttpClient session is not open; use 'async with'")

        async with self.session.get(url, raise_for_status=self.raise_for_status) as resp:
            ctype = resp.headers.get("Content-Type", "").lower()
            if "html" in ctype or "json" in ctype or ctype.startswith("text/"):
                content: str | bytes = await resp.text(errors="replace")
            else:
                content = await resp.read()
            return HttpResponse(
                url=str(resp.url),
                status=resp.status,
                headers=dict(resp.headers),
                content=content,
            )


__all__ = ["HttpClient", "AiohttpClient"]
