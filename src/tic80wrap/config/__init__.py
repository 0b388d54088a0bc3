# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Tic80Wrap: options model, TOML loaders and logging setup."""

from __future__ import annotations

from tic80wrap.config.loaders import load_options, load_options_file
from tic80wrap.config.model import PluginOptions, validate_options

__all__ = [
    "PluginOptions",
    "load_options",
    "load_options_file",
    "validate_options",
]
