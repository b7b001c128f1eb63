"""Logging configuration for dirdupes.

The duplicate report is the only thing written to stdout. Progress messages
and scan diagnostics (unreadable entries, directories that cannot be entered)
are log records and go to stderr, one line each.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def configure_logging(verbose: bool = False, quiet: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Configure the dirdupes logger and return its handler.

    Records are written to *stream*, ``sys.stderr`` at call time by default,
    never to stdout. --verbose shows DEBUG (including the scanned tree),
    --quiet keeps only the WARNING diagnostics.
    """
    if verbose:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(message)s"
    elif quiet:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        fmt = "%(message)s"

    logger = logging.getLogger("dirdupes")
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
