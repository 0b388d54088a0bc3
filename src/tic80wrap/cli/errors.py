# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : errors.py
#   file_relpath : src/tic80wrap/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Tic80Wrap CLI.

Usage:
    Commands translate core errors with `cli_error_from` and raise the result;
    Click prints the message and exits with the class' exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tic80wrap.cli.exit_codes import ExitCode
from tic80wrap.errors import ConfigurationError, FileAccessError, Tic80WrapError


class Tic80WrapCliError(click.ClickException):
    """Base class for all Tic80Wrap CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class Tic80WrapUsageError(Tic80WrapCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class Tic80WrapConfigError(Tic80WrapCliError):
    """Error for configuration errors (invalid options/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class Tic80WrapFileNotFoundError(Tic80WrapCliError):
    """Error when the cartridge does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class Tic80WrapPermissionDeniedError(Tic80WrapCliError):
    """Error for insufficient permissions reading the cartridge."""

    exit_code = ExitCode.PERMISSION_DENIED


class Tic80WrapIOError(Tic80WrapCliError):
    """Error for other I/O errors reading the cartridge."""

    exit_code = ExitCode.IO_ERROR


class Tic80WrapEncodingError(Tic80WrapCliError):
    """Error for cartridges that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


def cli_error_from(exc: Tic80WrapError) -> Tic80WrapCliError:
    """Map a core error onto the CLI error carrying the matching exit code.

    Args:
        exc (Tic80WrapError): The error raised by the config layer or the plugin.

    Returns:
        Tic80WrapCliError: The CLI error to raise.
    """
    message: str = str(exc)
    if isinstance(exc, ConfigurationError):
        return Tic80WrapConfigError(message)
    if isinstance(exc, FileAccessError):
        cause: BaseException = exc.cause
        if isinstance(cause, FileNotFoundError):
            return Tic80WrapFileNotFoundError(message)
        if isinstance(cause, PermissionError):
            return Tic80WrapPermissionDeniedError(message)
        if isinstance(cause, UnicodeDecodeError):
            return Tic80WrapEncodingError(message)
        return Tic80WrapIOError(message)
    return Tic80WrapCliError(message)
