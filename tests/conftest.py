# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Tic80Wrap test suite.

Sets up global fixtures, typed marker helpers and verbose logging for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tic80wrap.config import logging
from tic80wrap.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

#: A small cartridge in the shape TIC-80 expects for JavaScript carts.
SAMPLE_CARTRIDGE: str = (
    "// title:  Demo\n"
    "// author: Jane\n"
    "// desc:   short demo\n"
    "// script: js\n"
    "\n"
    "function TIC() {}\n"
    "\n"
    "// <TILES>\n"
    "// 001:eccccccccc888888caaaaaaaca888888cacccccccacc0ccccacc0ccccacc0cccc\n"
    "// </TILES>\n"
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_core: DecoratorType[Any] = as_typed_mark(pytest.mark.core)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tic80wrap_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def cartridge(tmp_path: Path) -> Path:
    """Write `SAMPLE_CARTRIDGE` as ``cartridge.js`` in a temporary build context.

    Returns:
        Path: The cartridge path; its parent is the build context.
    """
    path: Path = tmp_path / "cartridge.js"
    path.write_text(SAMPLE_CARTRIDGE, encoding="utf-8")
    return path


#: Text placed before an artifact wrapped with `SAMPLE_CARTRIDGE`.
SAMPLE_PREFIX: str = "// title:  Demo\n// author: Jane\n// desc:   short demo\n// script: js\n"

#: Text placed after an artifact wrapped with `SAMPLE_CARTRIDGE`.
SAMPLE_SUFFIX: str = (
    "\n\nfunction TIC() {}\n\n// <TILES>\n"
    "// 001:eccccccccc888888caaaaaaaca888888cacccccccacc0ccccacc0ccccacc0cccc\n"
    "// </TILES>"
)
