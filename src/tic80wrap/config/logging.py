# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : logging.py
#   file_relpath : src/tic80wrap/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap logging: a TRACE level, a logger class and colored stderr output.

Diagnostics only. Everything the user is meant to read goes through
`tic80wrap.cli.console.ClickConsole` instead.

Handlers are attached to the ``tic80wrap`` package logger, not to the root
logger, so a host build tool that embeds the plugin keeps its own logging
configuration.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from tic80wrap.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

PACKAGE_LOGGER_NAME: Final[str] = "tic80wrap"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class Tic80WrapLogger(logging.Logger):
    """Logger with a `trace` method for per-line classification output."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(Tic80WrapLogger)

# Highest threshold first; a record takes the first style whose threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity; TRACE records are blue."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.blue(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TIC80WRAP_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``WARN``, ...) and plain
    numbers. Unknown names are ignored.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Send ``tic80wrap`` diagnostics to stderr at ``level``.

    When ``level`` is None the environment decides, and without it only
    CRITICAL records are shown. Calling this again replaces the handler.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    package_logger.addHandler(stream_handler)


def get_logger(name: str) -> Tic80WrapLogger:
    """Return the `Tic80WrapLogger` called ``name``."""
    return cast("Tic80WrapLogger", logging.getLogger(name))
