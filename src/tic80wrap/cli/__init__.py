# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap CLI package.

This package groups the Click command definitions and supporting utilities
for the Tic80Wrap command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        tic80wrap = "tic80wrap.cli.main:cli"

All subcommands live in `tic80wrap.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
