# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : wrapper.py
#   file_relpath : src/tic80wrap/core/wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bracket artifact content with cartridge header and footer blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def wrap(content: str, header_lines: Sequence[str], footer_lines: Sequence[str]) -> str:
    r"""Return ``content`` preceded by the header block and followed by the footer block.

    Each block is its line sequence joined with ``"\n"``. The content is
    concatenated as-is and never inspected.

    Note:
        Not idempotent: wrapping an already wrapped artifact wraps it again.
        Callers must apply it once per artifact per build pass.

    Args:
        content (str): The artifact content.
        header_lines (Sequence[str]): Header lines, typically ending with ``""``.
        footer_lines (Sequence[str]): Footer lines, typically starting with ``""``.

    Returns:
        str: ``"\n".join(header_lines) + content + "\n".join(footer_lines)``.
    """
    return "\n".join(header_lines) + content + "\n".join(footer_lines)
