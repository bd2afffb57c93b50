# File: greetfetch/app.py
"""greetfetch.app: сценарий запуска — приветствие, преобразование строки и загрузка URL."""

from __future__ import annotations

from typing import Optional, TextIO

import click

from greetfetch import composer
from greetfetch.config import AppConfig
from greetfetch.fetcher import Outcome
from greetfetch.greeting import generate
from greetfetch.http.client import AiohttpClient, HttpClient
from greetfetch.logger import logger
from greetfetch.strings import magical

__all__ = ["run", "fetch_url"]


async def fetch_url(
    url: str,
    config: AppConfig,
    client: Optional[HttpClient] = None,
    sink: Optional[TextIO] = None,
) -> Outcome:
    """Загружает url и пишет строку результата; без client открывает AiohttpClient по конфигу."""
    if client is not None:
        return await composer.get(url, client, sink)
    async with AiohttpClient.from_config(config) as own_client:
        return await composer.get(url, own_client, sink)


async def run(
    config: AppConfig,
    client: Optional[HttpClient] = None,
    sink: Optional[TextIO] = None,
) -> Outcome:
    """Полный сценарий: печатает приветствие и его преобразование, затем загружает config.url."""
    msg = generate(config.name)
    click.echo(msg, file=sink)
    click.echo(magical(msg), file=sink)

    logger.info("Loading %s", config.url)
    outcome = await fetch_url(config.url, config, client=client, sink=sink)
    logger.info("Finished %s (ok=%s)", config.url, outcome.ok)
    return outcome
