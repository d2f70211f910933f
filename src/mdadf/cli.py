import json
import logging
import os
from pathlib import Path
import sys
from typing import TextIO

import click
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter
from rich.console import Console

from mdadf.config import CONFIGURATION, ApplicationConfiguration
from mdadf.constants import LOGGER_NAME
from mdadf.utils.adf_helpers import text_to_adf

console = Console(stderr=True)
logger = logging.getLogger(LOGGER_NAME)


def setup_logging() -> logging.Handler | None:
    settings = CONFIGURATION.get()
    logger.setLevel(settings.log_level or logging.WARNING)

    if mdadf_log_file := os.getenv('MDADF_LOG_FILE'):
        log_file = Path(mdadf_log_file).resolve()
    elif config_log_file := settings.log_file:
        log_file = Path(config_log_file).resolve()
    else:
        return None

    try:
        fh = logging.FileHandler(log_file)
    except Exception as e:
        logger.warning(f'Failed to create log file handler: {e}')
        return None
    else:
        fh.setLevel(settings.log_level or logging.WARNING)
        fh.setFormatter(
            JsonFormatter(
                '%(asctime)s %(levelname)s %(message)s %(lineno)s %(module)s %(pathname)s '
            )
        )
        logger.addHandler(fh)
        return fh


def load_settings() -> ApplicationConfiguration:
    try:
        return ApplicationConfiguration()
    except FileNotFoundError as e:
        console.print(e)
        sys.exit(1)
    except ValidationError as e:
        console.print('Configuration validation error. Make sure your config file is correct.')
        for _e in e.errors():
            if location := _e.get('loc'):
                console.print(f'Configuration error at {location[0]}: {_e.get("msg")}')
            else:
                console.print(f'Configuration error: {_e.get("msg")}')
        sys.exit(1)


@click.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option(
    '--output',
    '-o',
    type=click.File('w', encoding='utf-8'),
    default='-',
    help='The file to write the ADF document to. Defaults to standard output.',
)
@click.option(
    '--indent',
    '-i',
    type=click.IntRange(min=0),
    default=None,
    help='Indent the JSON document with this many spaces.',
)
@click.option(
    '--version',
    is_flag=True,
    default=False,
    help='Show the version of the tool.',
)
def cli(
    source: TextIO,
    output: TextIO,
    indent: int | None = None,
    version: bool = False,
):
    """Converts the Markdown in SOURCE (standard input by default) to an Atlassian Document Format JSON document."""

    if version:
        from importlib.metadata import version as get_version

        click.echo(get_version('mdadf'))
        return

    settings = load_settings()
    if indent is not None:
        settings.json_indent = indent

    token = CONFIGURATION.set(settings)
    log_handler = None
    try:
        log_handler = setup_logging()
        markdown = source.read()
        logger.debug(f'Converting {len(markdown)} characters of Markdown from {source.name}')
        document = text_to_adf(markdown)
        output.write(
            json.dumps(document, indent=settings.json_indent, ensure_ascii=settings.ensure_ascii)
        )
        output.write('\n')
    finally:
        if log_handler is not None:
            logger.removeHandler(log_handler)
            log_handler.close()
        CONFIGURATION.reset(token)


def mdadfCLI():
    cli()


if __name__ == '__main__':
    mdadfCLI()
