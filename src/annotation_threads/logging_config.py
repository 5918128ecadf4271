"""Logging configuration for the annotation threads CLI."""

import sys
from typing import TextIO

from loguru import logger

_FORMAT = "{level.icon} {message}"
# Debug lines name the threading step that emitted them
_DEBUG_FORMAT = "{level.icon} {name}:{function} {message}"


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Route log output to `sink` (stderr by default).

    The library only emits messages; configuring sinks is left to callers.
    """
    logger.remove()
    if verbose:
        logger.add(sink or sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
    else:
        logger.add(sink or sys.stderr, level="INFO", format=_FORMAT)
