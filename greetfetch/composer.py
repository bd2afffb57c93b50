"""greetfetch.composer: fetches a URL and writes the outcome as one line."""

from __future__ import annotations

from typing import Optional, TextIO

import click

from greetfetch.fetcher import Fetcher, Outcome
from greetfetch.http.client import HttpClient
from greetfetch.logger import logger

CONTENT_PREFIX = "Content is "


def content_line(outcome: Outcome) -> str:
    """Line written for *outcome*, the same shape for success and failure."""
    return CONTENT_PREFIX + outcome.render()


async def get(url: str, client: HttpClient, sink: Optional[TextIO] = None) -> Outcome:
    """Fetch *url* with *client* and write ``Content is <outcome>`` to *sink* (stdout by default)."""
    logger.debug("Fetching %s", url)
    outcome = await Fetcher(client).fetch(url)
    click.echo(content_line(outcome), file=sink)
    return outcome


__all__ = ["CONTENT_PREFIX", "content_line", "get"]
