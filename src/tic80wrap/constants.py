# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : constants.py
#   file_relpath : src/tic80wrap/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TIC80WRAP_VERSION: str = get_version("tic80wrap")

# Name used to prefix option validation errors (mirrors the bundler plugin name).
PLUGIN_NAME: str = "tic80-wrap"

# Cartridge looked up in the build context when no path is configured.
DEFAULT_CARTRIDGE_PATH: str = "cartridge.js"

# Configuration sources, looked up in the build context directory.
TIC80WRAP_TOML_NAME: str = "tic80wrap.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.tic80wrap"

# Environment variable consulted by `setup_logging()`.
LOG_LEVEL_ENV_VAR: str = "TIC80WRAP_LOG_LEVEL"

# Artifacts wrapped by the CLI when no include pattern is given.
DEFAULT_ARTIFACT_PATTERNS: tuple[str, ...] = ("*.js",)
