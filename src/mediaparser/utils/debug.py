"""Debug/logging helpers for mediaparser.

All records go through the ``mediaparser`` logger, whose handler writes to
stderr so that JSON written to stdout by the CLI stays parseable. Debug output
is enabled by MEDIAPARSER_DEBUG=1 or by the CLI --debug flag via enable_debug().
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("MEDIAPARSER_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """Return the shared ``mediaparser`` logger, configuring it on first use."""
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("mediaparser")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def enable_debug() -> None:
    """Turn on debug output for the rest of the process."""
    global DEBUG_ON
    DEBUG_ON = True
    setup_logger().setLevel(logging.DEBUG)


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)


# Module loggers under "mediaparser" log before debug() is first called.
if DEBUG_ON:
    setup_logger()
