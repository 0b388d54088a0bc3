# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : reader.py
#   file_relpath : src/tic80wrap/core/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line reader for cartridge files.

Produces a lazy, finite, non-restartable sequence of lines from a cartridge
file. The file is decoded as UTF-8 (a leading BOM is dropped) with universal
newline handling, so ``\n``, ``\r\n`` and ``\r`` all terminate a line.
Terminators are stripped; a final newline does not produce a trailing empty
line and an empty file yields no lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tic80wrap.config.logging import get_logger
from tic80wrap.errors import FileAccessError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from tic80wrap.config.logging import Tic80WrapLogger

logger: Tic80WrapLogger = get_logger(__name__)


def iter_cartridge_lines(path: Path) -> Iterator[str]:
    """Yield the lines of ``path`` one at a time, without terminators.

    Args:
        path (Path): The cartridge file.

    Yields:
        str: Each line of the file, in order.

    Raises:
        FileAccessError: If the file cannot be opened, read, or decoded as UTF-8.
            Raised on first iteration (open) or on the offending line (read).
    """
    try:
        fh = path.open("r", encoding="utf-8-sig")
    except OSError as exc:
        logger.error("Cannot open cartridge %s: %s", path, exc)
        raise FileAccessError(path, exc) from exc

    count: int = 0
    with fh:
        while True:
            try:
                raw: str = fh.readline()
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read cartridge %s after %d line(s): %s", path, count, exc)
                raise FileAccessError(path, exc) from exc
            if not raw:
                break
            count += 1
            yield raw[:-1] if raw.endswith("\n") else raw

    logger.debug("Read %d line(s) from %s", count, path)
