"""Logging setup for applications using telegraph-client.

The package disables its own loguru messages on import so library users see
nothing unless they opt in. ``configure_logging`` opts in and installs a
stderr sink; the CLI calls it on startup.
"""

import sys

from loguru import logger

PACKAGE = "telegraph_client"


def configure_logging(*, verbose: bool = False) -> None:
    """Enable telegraph-client logs on stderr at INFO, or DEBUG when verbose."""
    logger.remove()
    logger.enable(PACKAGE)
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format="{time:HH:mm:ss} {level: <7} {name}: {message}",
    )
