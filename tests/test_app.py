# File: tests/test_app.py
import io

import pytest

import greetfetch.app as app_module
from greetfetch.app import fetch_url, run
from greetfetch.fetcher import Failure, Success


@pytest.mark.asyncio()
async def test_run_writes_greeting_transform_and_content(basic_config, fake_client_factory):
    sink = io.StringIO()
    client = fake_client_factory(OSError("ENOTFOUND"))

    outcome = await run(basic_config, client=client, sink=sink)

    assert outcome == Failure("ENOTFOUND")
    assert sink.getvalue().splitlines() == [
        "Hello bob!",
        "HELLO BOB!",
        "Content is ENOTFOUND",
    ]
    assert client.calls == [basic_config.url]


@pytest.mark.asyncio()
async def test_fetch_url_with_injected_client(basic_config, fake_client_factory):
    sink = io.StringIO()

    outcome = await fetch_url("http://other.test", basic_config, fake_client_factory("body"), sink)

    assert outcome == Success("body")
    assert sink.getvalue() == "Content is body\n"


@pytest.mark.asyncio()
async def test_fetch_url_opens_client_from_config(basic_config, fake_client_factory, monkeypatch):
    opened = []

    class DummyClient:
        @classmethod
        def from_config(cls, config):
            opened.append(config)
            return cls()

        async def __aenter__(self):
            return fake_client_factory("from dummy")

        async def __aexit__(self, *exc):
            return None

    monkeypatch.setattr(app_module, "AiohttpClient", DummyClient)
    sink = io.StringIO()

    outcome = await fetch_url("http://x.test", basic_config, sink=sink)

    assert opened == [basic_config]
    assert outcome == Success("from dummy")
