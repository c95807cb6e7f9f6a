"""Logging configuration using loguru.

Output is plain, line oriented text on stderr.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY/MM/DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure loguru for the command line.

    Args:
        log_level: Minimum log level to output
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        colorize=sys.stderr.isatty(),
        backtrace=False,
        diagnose=False,
    )


# Re-export logger for convenience
__all__ = ["logger", "setup_logging"]
