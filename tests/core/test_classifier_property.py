# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : test_classifier_property.py
#   file_relpath : tests/core/test_classifier_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for classification and wrapping.

Checks, over generated cartridges:
1) the header holds exactly the metadata lines and the footer all others, in order,
2) no line is lost or added beyond the two separators,
3) wrapping has a closed form in terms of those lines, and
4) reading from disk with any line ending classifies like the in-memory lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from tests.strategies_tic80wrap import LINE_ENDINGS, s_free_text, s_labeled_lines
from tic80wrap.core.classifier import classify, classify_file
from tic80wrap.core.wrapper import wrap

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.tmpdir import TempPathFactory

    from tic80wrap.core.classifier import CartridgeSections

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=200)
@given(labeled=s_labeled_lines())
def test_partition_matches_labels(labeled: list[tuple[bool, str]]) -> None:
    """Metadata lines form the header, all others the footer, order preserved."""
    sections: CartridgeSections = classify(line for _, line in labeled)

    assert list(sections.header_lines) == [line for meta, line in labeled if meta] + [""]
    assert list(sections.footer_lines) == [""] + [line for meta, line in labeled if not meta]


@settings(max_examples=200)
@given(labeled=s_labeled_lines())
def test_line_count_invariant(labeled: list[tuple[bool, str]]) -> None:
    """Header and footer together hold every input line plus two separators."""
    header, footer = classify(line for _, line in labeled)

    assert len(header) + len(footer) == len(labeled) + 2


@settings(max_examples=200)
@given(labeled=s_labeled_lines(), content=s_free_text)
def test_wrap_closed_form(labeled: list[tuple[bool, str]], content: str) -> None:
    """Each metadata line is followed by a newline, each other line preceded by one."""
    header, footer = classify(line for _, line in labeled)

    expected: str = (
        "".join(line + "\n" for meta, line in labeled if meta)
        + content
        + "".join("\n" + line for meta, line in labeled if not meta)
    )
    assert wrap(content, header, footer) == expected


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=50,
)
@given(
    labeled=s_labeled_lines(max_size=15),
    le=st.sampled_from(LINE_ENDINGS),
    trailing=st.booleans(),
    bom=st.booleans(),
)
def test_file_classification_matches_lines(
    tmp_path_factory: TempPathFactory,
    labeled: list[tuple[bool, str]],
    le: str,
    trailing: bool,
    bom: bool,
) -> None:
    """Line endings, a final newline and a BOM do not change the result."""
    lines: list[str] = [line for _, line in labeled]
    # A final empty line only survives when it is terminated.
    if lines and lines[-1] == "":
        trailing = True
    text: str = le.join(lines) + (le if trailing and lines else "")
    path: Path = tmp_path_factory.mktemp("prop-cart") / "cartridge.js"
    path.write_bytes((("\ufeff" if bom else "") + text).encode("utf-8"))

    assert classify_file(path) == classify(lines)
