"""
Logging setup for passcheck.

The library logs through loguru but is disabled on import, so embedding
applications see nothing unless they opt in. The CLI calls
configure_logging() to send records to stderr.
"""

import sys

from loguru import logger


LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> {name}: {message}"


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Route passcheck logs to stderr.

    Args:
        verbose: Show INFO records
        debug: Show DEBUG records (takes precedence over verbose)
    """
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.enable("passcheck")
