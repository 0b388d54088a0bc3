# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : pattern.py
#   file_relpath : src/tic80wrap/core/pattern.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""TIC-80 cartridge metadata line matcher.

A metadata line is a ``//`` line comment carrying one of the tags TIC-80 reads
from a cartridge header, e.g.::

    // title:  Demo
    // author: Jane
    // script: js

Only whitespace may precede the comment marker; whitespace is also allowed
between the marker and the tag. Tag names are matched case-insensitively and
must be followed directly by a colon.

Whitespace is the ECMAScript set: ASCII whitespace, line and paragraph
separators, the Unicode ``Zs`` spaces and U+FEFF. The C0 separators
U+001C..U+001F and U+0085, which Python's ``\s`` would also accept, are not
whitespace here.
"""

from __future__ import annotations

import re
from typing import Final

#: Closed set of recognized cartridge metadata tags.
METADATA_TAGS: Final[tuple[str, ...]] = ("title", "author", "desc", "script", "input", "saveid")

#: Comment marker introducing a metadata line.
COMMENT_MARKER: Final[str] = "//"

#: Character class of the whitespace allowed around the comment marker.
WHITESPACE_CLASS: Final[str] = (
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)

METADATA_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^{WHITESPACE_CLASS}*{re.escape(COMMENT_MARKER)}"
    rf"{WHITESPACE_CLASS}*(?:{'|'.join(METADATA_TAGS)}):",
    re.IGNORECASE,
)


def is_metadata_line(line: str) -> bool:
    """Return True if ``line`` is a cartridge metadata comment."""
    return METADATA_PATTERN.match(line) is not None
