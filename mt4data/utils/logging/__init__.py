"""
Logging for mt4data
===================

Usage:
    from mt4data.utils.logging import log, get_logger, setup_logging

    setup_logging(console_level=logging.DEBUG)

    # Simple API:
    log("History file written")
    log("Bar rejected", level="WARNING")

    # Advanced API:
    logger = get_logger(__name__)
    logger.info("Decoding symbols.raw...")
"""

from .api import log, get_logger
from .setup import setup_logging
from .formatters import Colors, ColoredFormatter

__all__ = [
    'log',
    'get_logger',
    'setup_logging',
    'Colors',
    'ColoredFormatter',
]
