# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : test_classifier.py
#   file_relpath : tests/core/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for cartridge classification into header and footer lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import mark_core
from tic80wrap.core.classifier import CartridgeSections, classify, classify_file
from tic80wrap.errors import FileAccessError

if TYPE_CHECKING:
    from pathlib import Path


@mark_core
def test_classify_partitions_and_adds_separators() -> None:
    """Metadata lines go to the header, others to the footer, with separators."""
    sections: CartridgeSections = classify(["// title: Demo", "print(1)", "// author: Jane"])

    assert sections.header_lines == ("// title: Demo", "// author: Jane", "")
    assert sections.footer_lines == ("", "print(1)")


@mark_core
def test_classify_empty_input() -> None:
    """No lines still produce the two separators."""
    header, footer = classify([])

    assert header == ("",)
    assert footer == ("",)


@mark_core
def test_classify_keeps_duplicates_and_blank_lines() -> None:
    """Lines are neither deduplicated nor dropped."""
    lines: list[str] = ["", "// title: A", "x", "", "// title: A", "x"]
    header, footer = classify(lines)

    assert header == ("// title: A", "// title: A", "")
    assert footer == ("", "", "x", "", "x")


@mark_core
def test_classify_preserves_interleaved_order() -> None:
    """Metadata lines found after code keep their relative order in the header."""
    lines: list[str] = [
        "function TIC() {}",
        "  // script: js",
        "// TITLE: late",
        "// <PALETTE>",
    ]
    header, footer = classify(lines)

    assert header == ("  // script: js", "// TITLE: late", "")
    assert footer == ("", "function TIC() {}", "// <PALETTE>")


@mark_core
def test_classify_accepts_a_generator() -> None:
    """Any single-pass iterable is consumed."""
    header, footer = classify(line for line in ["// saveid: s1", "rest"])

    assert header == ("// saveid: s1", "")
    assert footer == ("", "rest")


@mark_core
def test_classify_line_count_invariant() -> None:
    """Header and footer lengths add up to the input line count plus two."""
    lines: list[str] = ["// title: T", "a", "// desc: d", "b", "c"]
    header, footer = classify(lines)

    assert len(header) + len(footer) == len(lines) + 2


@mark_core
def test_classify_file_reads_cartridge(cartridge: Path) -> None:
    """Classifying a file gives the same result as classifying its lines."""
    sections: CartridgeSections = classify_file(cartridge)

    assert sections.header_lines == (
        "// title:  Demo",
        "// author: Jane",
        "// desc:   short demo",
        "// script: js",
        "",
    )
    assert sections.footer_lines[0] == ""
    assert "function TIC() {}" in sections.footer_lines
    assert sections.footer_lines[-1] == "// </TILES>"


@mark_core
def test_classify_file_missing_raises(tmp_path: Path) -> None:
    """A missing cartridge raises FileAccessError carrying the path."""
    missing: Path = tmp_path / "nope.js"

    with pytest.raises(FileAccessError) as excinfo:
        classify_file(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.cause, FileNotFoundError)
