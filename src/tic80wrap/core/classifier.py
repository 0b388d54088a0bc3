# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : classifier.py
#   file_relpath : src/tic80wrap/core/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Partition cartridge lines into header (metadata) and footer lines.

Header lines are the metadata comments matched by
`tic80wrap.core.pattern.METADATA_PATTERN`; every other line is a footer line.
Relative order is preserved within each sequence, and no line is dropped or
duplicated.

Once partitioned, an empty string is appended to the header lines and
prepended to the footer lines. When both sequences are joined with newlines
around an artifact, these act as the separators between header, artifact
and footer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from tic80wrap.config.logging import get_logger
from tic80wrap.core.pattern import is_metadata_line
from tic80wrap.core.reader import iter_cartridge_lines

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tic80wrap.config.logging import Tic80WrapLogger

logger: Tic80WrapLogger = get_logger(__name__)


class CartridgeSections(NamedTuple):
    """Result of classifying a cartridge.

    Attributes:
        header_lines: Metadata lines in original order, followed by ``""``.
        footer_lines: ``""``, followed by all other lines in original order.
    """

    header_lines: tuple[str, ...]
    footer_lines: tuple[str, ...]


def classify(lines: Iterable[str]) -> CartridgeSections:
    """Partition ``lines`` into header and footer lines.

    Args:
        lines (Iterable[str]): Cartridge lines without terminators. Consumed once.

    Returns:
        CartridgeSections: The header and footer sequences, separators included.
    """
    header: list[str] = []
    footer: list[str] = [""]
    for line in lines:
        if is_metadata_line(line):
            header.append(line)
        else:
            footer.append(line)
    header.append("")

    logger.trace("header lines: %r", header)
    logger.debug(
        "Classified %d metadata line(s) and %d other line(s)",
        len(header) - 1,
        len(footer) - 1,
    )
    return CartridgeSections(header_lines=tuple(header), footer_lines=tuple(footer))


def classify_file(path: Path) -> CartridgeSections:
    """Read the cartridge at ``path`` and classify its lines.

    The file is consumed entirely before returning, so a read failure never
    yields a partial result.

    Raises:
        FileAccessError: If the cartridge cannot be opened, read or decoded.
    """
    logger.info("Classifying cartridge %s", path)
    return classify(iter_cartridge_lines(path))
