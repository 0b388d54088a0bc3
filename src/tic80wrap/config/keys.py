# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : keys.py
#   file_relpath : src/tic80wrap/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical option names for Tic80Wrap configuration.

The same keys are accepted in the plugin options mapping, at the top level of
``tic80wrap.toml``, and in the ``[tool.tic80wrap]`` table of ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Options:
    """Option keys of the external configuration schema."""

    KEY_CARTRIDGE_PATH: Final[str] = "cartridge_path"

    #: All accepted keys; anything else is rejected.
    ALLOWED: Final[frozenset[str]] = frozenset({KEY_CARTRIDGE_PATH})
