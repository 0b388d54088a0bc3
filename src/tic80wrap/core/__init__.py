# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core transforms: metadata matching, cartridge classification and wrapping."""

from __future__ import annotations

from tic80wrap.core.classifier import CartridgeSections, classify, classify_file
from tic80wrap.core.pattern import METADATA_PATTERN, METADATA_TAGS, is_metadata_line
from tic80wrap.core.reader import iter_cartridge_lines
from tic80wrap.core.wrapper import wrap

__all__ = [
    "METADATA_PATTERN",
    "METADATA_TAGS",
    "CartridgeSections",
    "classify",
    "classify_file",
    "is_metadata_line",
    "iter_cartridge_lines",
    "wrap",
]
