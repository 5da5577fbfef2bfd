# Copyright pyu2fhost Developers
# SPDX-License-Identifier: Apache-2.0 OR MIT

import logging
import os
import platform
import sys
from datetime import datetime
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import click

from pyu2fhost.cli.authenticate import request, response
from pyu2fhost.cli.exceptions import CliException
from pyu2fhost.confconsts import ENV_DEV_VAR, LOG_FN, LOG_FORMAT
from pyu2fhost.helpers import local_critical

logger = logging.getLogger(__name__)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def u2fhost() -> None:
    handler = logging.FileHandler(filename=LOG_FN, delay=True, encoding="utf-8")
    logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG, handlers=[handler])

    logger.info(f"Timestamp: {datetime.now()}")
    logger.info(f"OS: {platform.uname()}")
    logger.info(f"Python version: {platform.python_version()}")
    logger.info(f"Cli arguments: {sys.argv[1:]}")
    for x in ["pyu2fhost", "cryptography", "fido2"]:
        try:
            logger.info(f"{x} version: {package_version(x)}")
        except PackageNotFoundError:
            logger.warning(f"package {x} not found")


u2fhost.add_command(request)
u2fhost.add_command(response)


@click.command()
def version() -> None:
    """Version of pyu2fhost library and tool."""
    try:
        print(package_version("pyu2fhost"))
    except PackageNotFoundError:
        raise CliException("pyu2fhost is not installed", support_hint=False)


u2fhost.add_command(version)


def main() -> None:
    development = os.environ.get(ENV_DEV_VAR)
    try:
        u2fhost()
    except CliException as e:
        if development:
            raise
        e.show()
    except Exception as e:
        if development:
            raise
        logger.warning("An unhandled exception occurred", exc_info=True)
        local_critical("An unhandled exception occurred", e)
