# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap package.

Tic80Wrap hoists TIC-80 cartridge metadata comments (``// title: ...``,
``// author: ...``) out of a cartridge source file and wraps freshly generated
build artifacts with them, so bundled output can be loaded as a cartridge.
It exposes a small typed API for build-tool hooks and a CLI.
"""

from __future__ import annotations
