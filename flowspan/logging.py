"""Logging setup for flowspan.

Algorithm modules never log directly. Observers, the input loader and the CLI
obtain loggers through :func:`get_logger` and share the single handler that is
installed on the ``flowspan`` logger.

Records go to stderr so that results printed on stdout (``--json`` output in
particular) stay machine-readable while tracing is enabled.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowspan"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        # sys.stderr is looked up on every access
        pass


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the flowspan handler once and return the ``flowspan`` logger.

    Later calls return the already configured logger unchanged until
    :func:`reset_logging` runs.

    Args:
        level: Initial level for the logger and its handler.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to one writing to the current
            ``sys.stderr``.
    """
    global _root_configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _root_configured:
        return root_logger

    if handler is None:
        handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler.setLevel(level)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # pytest's caplog hooks the stdlib root logger
    root_logger.propagate = True

    _root_configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that defers its level to the ``flowspan`` logger.

    Args:
        name: Logger name, normally ``__name__`` of the caller.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``flowspan`` logger and of its handlers."""
    root_logger = setup_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` flags to a logging level.

    ``--verbose`` wins when both are given. DEBUG also shows accepted MST edges
    and, with ``FlowConfig.log_residual_updates``, residual updates.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the installed handler so the next call configures afresh."""
    global _root_configured
    _root_configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
