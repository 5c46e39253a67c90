#!/usr/bin/env python3
"""
compose-executor - start, stop and restart service containers.
"""
import logging
import sys
import time
from typing import Optional

import click

from compose_executor import __version__
from compose_executor.core.config import load_config
from compose_executor.core.exceptions import ConfigError, RuntimeUnavailable
from compose_executor.core.orchestrator import Orchestrator
from compose_executor.core.registry import ServiceRegistry
from compose_executor.core.utils import setup_logging
from compose_executor.ui.console import ConsoleUI

ui = ConsoleUI()
logger = logging.getLogger(__name__)
STARTED = time.monotonic()

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.argument('service', required=False)
@click.argument('operation', required=False)
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='YAML file with runtime and service table')
@click.option('--runtime', help='Container runtime executable (default: docker)')
@click.option('--list', 'list_services', is_flag=True, help='Show known services and exit')
@click.option('--strict', is_flag=True, help='Exit with a distinct non-zero status on failure')
def cli(service: Optional[str], operation: Optional[str], debug: bool,
        config_path: Optional[str], runtime: Optional[str], list_services: bool,
        strict: bool):
    """Run OPERATION (start, stop or restart) for SERVICE and verify the result."""
    ui.print_banner(time.monotonic() - STARTED)

    if not list_services and (not service or not operation):
        return

    try:
        config = load_config(config_path)
    except ConfigError as e:
        ui.print_error(e)
        sys.exit(1)
    if runtime:
        config.runtime = runtime

    setup_logging(debug, config.log_dir)
    if debug:
        logger.debug("Debug mode enabled")
        logger.debug(f"Using container runtime: {config.runtime}")

    if list_services:
        ui.display_services(ServiceRegistry(config.services))
        return

    orchestrator = Orchestrator.from_config(config)
    try:
        result = orchestrator.execute(service, operation)
    except RuntimeUnavailable as e:
        ui.print_error(e)
        sys.exit(1)

    ui.print_result(result)
    logger.info(f"{operation} {service}: {result.outcome.value}")

    if strict and not result.succeeded:
        sys.exit(result.exit_code)


if __name__ == '__main__':
    cli()
