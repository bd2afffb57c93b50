# File: tests/conftest.py
from __future__ import annotations

from typing import Any, List

import pytest

from greetfetch.config import AppConfig


class FakeClient:
    """
    Test double for the HTTP client capability.
    Each call pops the next scripted result; exceptions are raised, values returned.
    """

    def __init__(self, *results: Any) -> None:
        self.results: List[Any] = list(results)
        self.calls: List[str] = []

    async def get(self, url: str) -> Any:
        self.calls.append(url)
        if not self.results:
            pytest.fail(f"FakeClient has no scripted result left for {url}")
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture()
def fake_client_factory():
    """Return the FakeClient class so tests can script their own responses."""
    return FakeClient


@pytest.fixture()
def basic_config() -> AppConfig:
    """
    Return a basic valid AppConfig for app and CLI tests.
    """
    return AppConfig(url="http://example-valid.test", name="bob", user_agent="TestAgent/1.0")
