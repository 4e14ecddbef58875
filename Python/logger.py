"""Logger configuration for lazystreams.

The library logger only carries a NullHandler, so its records go wherever
the host application routes the "lazystreams" logger. Applications that want
console output call setup_logger.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]


def _has_console_handler(log):
    return any(type(handler) is logging.StreamHandler for handler in log.handlers)


def setup_logger(name="lazystreams", level=None, format_string=None):
    """Configure and return a logger instance that writes to stdout.

    The level defaults to the LOG_LEVEL environment variable, then INFO.
    A logger that already writes to the console is returned unchanged.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    log = logging.getLogger(name)

    if not _has_console_handler(log):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
        log.setLevel(getattr(logging, level.upper()))
        log.propagate = False

    return log


logger = logging.getLogger("lazystreams")
logger.addHandler(logging.NullHandler())
