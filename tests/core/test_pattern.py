# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : test_pattern.py
#   file_relpath : tests/core/test_pattern.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the cartridge metadata line matcher."""

from __future__ import annotations

import pytest

from tests.conftest import mark_core
from tic80wrap.core.pattern import METADATA_TAGS, is_metadata_line


@mark_core
@pytest.mark.parametrize("tag", METADATA_TAGS)
def test_every_known_tag_matches(tag: str) -> None:
    """Each recognized tag followed by a colon is a metadata line."""
    assert is_metadata_line(f"// {tag}: value")


@mark_core
@pytest.mark.parametrize(
    "line",
    [
        "// title: Demo",
        "//title:Demo",
        "//   author:   Jane",
        "    // desc: indented",
        "\t// script: js",
        "// TITLE: upper case",
        "// Input: gamepad",
        "// SaveId: demo-01",
        "// title:",
    ],
)
def test_metadata_lines_match(line: str) -> None:
    """Leading whitespace, spacing after the marker and tag case are all tolerated."""
    assert is_metadata_line(line)


@mark_core
@pytest.mark.parametrize(
    "line",
    [
        "",
        "print(1)",
        "// just a comment",
        "// title Demo",
        "// title : Demo",
        "# title: Demo",
        "/* title: Demo */",
        "code(); // title: Demo",
        "x // author: Jane",
        "// version: 0.1",
        "// titles: Demo",
        "// <TILES>",
    ],
)
def test_other_lines_do_not_match(line: str) -> None:
    """Unknown tags, missing colons and non-leading comments are not metadata."""
    assert not is_metadata_line(line)


@mark_core
def test_trailing_content_is_not_constrained() -> None:
    """Anything may follow the colon, including more colons and comment markers."""
    assert is_metadata_line("// desc: a: b // c /* d */")


@mark_core
@pytest.mark.parametrize(
    "line",
    [
        "\ufeff// title: BOM inside the file",
        "\u00a0// author: nbsp indent",
        "//\u3000desc: ideographic space",
        "\u2028// script: js",
        "\v\f// input: gamepad",
    ],
)
def test_ecmascript_whitespace_is_accepted(line: str) -> None:
    """BOM and Unicode space separators count as whitespace around the marker."""
    assert is_metadata_line(line)


@mark_core
@pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
def test_information_separators_are_not_whitespace(sep: str) -> None:
    """Control separators outside the ECMAScript set block a match."""
    assert not is_metadata_line(f"{sep}// title: x")
    assert not is_metadata_line(f"//{sep}title: x")
