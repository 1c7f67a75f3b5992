# === FILE: indexnow_push/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of indexnow-push.

Verifies the IndexNow key file of a site, collects every URL listed by its
sitemap (following sitemap indexes) and submits them to the IndexNow
providers.

Options:
  -k, --key KEY         IndexNow key, published at https://<host>/<key>.txt
  -s, --sitemap URL     Root sitemap or sitemap index
  -c, --config PATH     YAML/JSON config file (flags override it)
  -p, --provider NAME   Notify only this provider (repeatable)
  --dry-run             Verify and list the URLs without submitting
  --json PATH           Save the run report as JSON
  --log-level LEVEL     Logging level (DEBUG, INFO, ...)
  --log-file PATH       Log file (stdout only if omitted)
  --log-format FORMAT   Logging format string
  --version, -v         Show the version

Example:
  indexnow-push -k 0f6a3c1e -s https://example.com/sitemap_index.xml
"""
import asyncio
import sys
from pathlib import Path

import click

from indexnow_push import __version__
from indexnow_push.config import build_config, load_config_file
from indexnow_push.engine import start_push
from indexnow_push.errors import ConfigError, IndexNowPushError
from indexnow_push.logger import DEFAULT_FORMAT, configure
from indexnow_push.providers import PROVIDERS
from indexnow_push.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

MISSING_KEY = (
    "You have to specify your key file, without it, it's impossible to index your sites. "
    'Please use the "-k" argument, or "-h" for help.'
)
MISSING_SITEMAP = (
    "You have to specify your core/index sitemap, without it, it's impossible to find urls "
    'to index. Please use the "-s" argument, or "-h" for help.'
)


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='indexnow-push, version %(version)s')
@click.option(
    '--key', '-k', 'key',
    default=None,
    help='Key accessible from https://<domain>/<key>.txt'
)
@click.option(
    '--sitemap', '-s', 'sitemap_url',
    default=None,
    help='Core/index sitemap. Sitemaps referenced in it are taken into account as well.'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--provider', '-p', 'providers',
    multiple=True,
    type=click.Choice([p.name for p in PROVIDERS], case_sensitive=False),
    help='Submit only to this provider (repeatable).'
)
@click.option(
    '--dry-run', 'dry_run',
    is_flag=True,
    help='Check the key and list the URLs without submitting them.'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the run report as JSON'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    help='Format string for log records'
)
def cli(key, sitemap_url, config_path, providers, dry_run, json_output, log_level, log_file, log_format):
    """Submit every URL of a sitemap to the IndexNow providers."""
    logger = configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )

    try:
        base = load_config_file(config_path) if config_path else {}
    except ConfigError as e:
        print_error(f'Error loading configuration: {e}')

    if not (key or base.get('key')):
        print_error(MISSING_KEY)
    if not (sitemap_url or base.get('sitemap_url')):
        print_error(MISSING_SITEMAP)

    try:
        cfg = build_config(
            base,
            key=key,
            sitemap_url=sitemap_url,
            providers=tuple(providers) or None,
            dry_run=dry_run or None,
        )
    except ConfigError as e:
        print_error(str(e))

    try:
        report = asyncio.run(start_push(cfg))
    except IndexNowPushError as e:
        logger.error('%s', e)
        print_error(f'Push aborted: {e}')

    if cfg.dry_run:
        for url in report.urls:
            click.echo(url)

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Error saving JSON report: {e}')


if __name__ == "__main__":
    cli()
