# === FILE: robots_warden/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для проверки robots.txt через командную строку.

Команды:
  check       Можно ли агенту загрузить указанные пути
  delay       Показать Crawl-delay для агента
  disallowed  Показать запрещённые для агента пути
  sitemaps    Показать sitemap-ссылки из robots.txt
  inspect     Вывести/сохранить разобранный документ
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH         Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --user-agent UA       Заголовок User-Agent для загрузки (override user_agent)
  --redirect-limit INT  Лимит редиректов (override redirect_limit)
  --log-level LEVEL     Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH       Файл для логов (stderr, если не указан)
  --log-format FORMAT   Формат логирования

Пример:
  robots-warden check https://example.com /private /public --agent MyBot
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from robots_warden import __version__
from robots_warden.config import load_config
from robots_warden.crawler.fetcher import fetch_robots
from robots_warden.evaluator import evaluate, get_crawl_delay, get_disallowed_paths
from robots_warden.logger import init_logging
from robots_warden.report import build_report, render_json
from robots_warden.utils import robots_url

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

def _fetch(ctx, url: str):
    """Загружает robots.txt для url и возвращает (document, success)."""
    cfg = ctx.obj['config']
    return asyncio.run(fetch_robots(robots_url(url), cfg))

def _echo_json(data, pretty: bool = False):
    click.echo(json.dumps(data, ensure_ascii=False, indent=2 if pretty else None))

agent_option = click.option(
    '--agent', '-a', 'agent',
    default=None,
    help='Имя агента для проверки (по умолчанию user_agent из конфига)'
)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots-warden, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent для загрузки')
@click.option(
    '--redirect-limit', 'redirect_limit',
    type=click.IntRange(min=0),
    default=None,
    help='Сколько редиректов можно пройти (override redirect_limit)'
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
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, user_agent, redirect_limit, log_level, log_file, log_format):
    """Группа команд robots-warden."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    overrides = {}
    if user_agent:
        overrides['user_agent'] = user_agent
    if redirect_limit is not None:
        overrides['redirect_limit'] = redirect_limit
    if overrides:
        cfg = cfg.model_copy(update=overrides)
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg

@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.argument('paths', nargs=-1, required=True)
@agent_option
@click.pass_context
def check(ctx, url, paths, agent):
    """Проверить, можно ли агенту загрузить пути."""
    agent = agent or ctx.obj['config'].user_agent
    document, _ = _fetch(ctx, url)
    results = []
    for path in paths:
        decision = evaluate(document, agent, path)
        results.append({'path': decision.path, 'allowed': decision.allowed, 'type': decision.type.value})
    _echo_json(results)

@cli.command('delay', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@agent_option
@click.pass_context
def delay(ctx, url, agent):
    """Показать Crawl-delay (секунды) или null."""
    agent = agent or ctx.obj['config'].user_agent
    document, _ = _fetch(ctx, url)
    _echo_json(get_crawl_delay(document, agent))

@cli.command('disallowed', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@agent_option
@click.pass_context
def disallowed(ctx, url, agent):
    """Показать пути, запрещённые для агента."""
    agent = agent or ctx.obj['config'].user_agent
    document, _ = _fetch(ctx, url)
    _echo_json(get_disallowed_paths(document, agent))

@cli.command('sitemaps', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.pass_context
def sitemaps(ctx, url):
    """Показать ссылки Sitemap."""
    document, _ = _fetch(ctx, url)
    _echo_json(document.sitemaps)

@cli.command('inspect', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def inspect_document(ctx, url, json_output, pretty):
    """Вывести разобранный документ и флаг успешной загрузки."""
    document, success = _fetch(ctx, url)
    if not json_output:
        _echo_json(build_report(document, success), pretty)
        return
    try:
        saved = render_json(document, success, json_output)
        click.echo(f'JSON report: {saved}')
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
