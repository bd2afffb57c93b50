# === FILE: greetfetch/cli.py ===
#!/usr/bin/env python3
"""
Точка входа GreetFetch для командной строки.

Команды:
  run       Приветствие, его преобразование и загрузка URL из конфига
  fetch     Загрузить указанный URL и вывести "Content is ..."
  greet     Только приветствие и его преобразование, без сети
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Дополнительно:
  --version, -v       Показать версию GreetFetch

Пример:
  greetfetch run --url http://example.com --name alice --json outcome.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from greetfetch import __version__
from greetfetch.app import fetch_url, run as run_app
from greetfetch.config import load_config
from greetfetch.greeting import generate
from greetfetch.logger import DEFAULT_FORMAT, init_logging
from greetfetch.report.json_report import render_json
from greetfetch.strings import magical

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def save_report(outcome, url, json_output):
    try:
        saved = render_json(outcome, url, json_output)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')
    click.echo(f'JSON report: {saved}', err=True)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='GreetFetch, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд GreetFetch CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='URL вместо указанного в конфиге')
@click.option('--name', '-n', 'name', default=None, help='Имя для приветствия вместо конфига')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт о загрузке в файл'
)
@click.pass_context
def run(ctx, url, name, json_output):
    """Вывести приветствие, его преобразование и результат загрузки URL."""
    cfg = ctx.obj['config']
    overrides = {k: v for k, v in (('url', url), ('name', name)) if v is not None}
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    outcome = asyncio.run(run_app(cfg))

    if json_output:
        save_report(outcome, cfg.url, json_output)


@cli.command('fetch', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт о загрузке в файл'
)
@click.pass_context
def fetch(ctx, url, json_output):
    """Загрузить URL и вывести "Content is ..."."""
    cfg = ctx.obj['config']
    outcome = asyncio.run(fetch_url(url, cfg))

    if json_output:
        save_report(outcome, url, json_output)


@cli.command('greet', context_settings=CONTEXT_SETTINGS)
@click.argument('name')
def greet(name):
    """Вывести приветствие и его преобразование без обращения к сети."""
    msg = generate(name)
    click.echo(msg)
    click.echo(magical(msg))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
