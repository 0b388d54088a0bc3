# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : errors.py
#   file_relpath : src/tic80wrap/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Tic80Wrap core and plugin.

These are framework-agnostic; the CLI translates them into Click exceptions
with standardized exit codes (see `tic80wrap.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class Tic80WrapError(Exception):
    """Base class for all Tic80Wrap errors."""


class ConfigurationError(Tic80WrapError):
    """Invalid plugin options or configuration file.

    Raised eagerly at setup time, before any build pass runs.
    """


class FileAccessError(Tic80WrapError):
    """The cartridge file could not be opened, read or decoded.

    Aborts the wrap step of the current build pass: no artifact is wrapped.

    Attributes:
        path (Path): The file that failed.
        cause (BaseException): The underlying `OSError` or `UnicodeDecodeError`.
    """

    subject: str = "cartridge"
    path: Path
    cause: BaseException

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Cannot read {self.subject} '{path}': {cause}")
        self.path = path
        self.cause = cause


class ArtifactAccessError(FileAccessError):
    """An artifact selected by a store could not be read or decoded.

    Raised while the store lists the artifacts of a pass, before any of them
    is replaced, so the pass is aborted as a whole.
    """

    subject = "artifact"
