"""Console logging for CLI runs."""

from __future__ import annotations

import logging
import sys

_PACKAGE_LOGGER = "dot_steward"


def setup_logging(level: str = "WARNING") -> None:
    """
    Send package logs to stderr at ``level``.

    Safe to call more than once: handlers installed by an earlier call are
    replaced, and the root logger is left alone.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
