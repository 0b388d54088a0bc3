# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : loaders.py
#   file_relpath : src/tic80wrap/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Tic80Wrap configuration from TOML sources.

This module provides I/O helpers for reading options from:
- a dedicated ``tic80wrap.toml`` (top-level keys), and
- the ``[tool.tic80wrap]`` table of a ``pyproject.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures, then
validated through `tic80wrap.config.model.validate_options`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tic80wrap.config.logging import get_logger
from tic80wrap.config.model import PluginOptions, validate_options
from tic80wrap.constants import (
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    TIC80WRAP_TOML_NAME,
)
from tic80wrap.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from tic80wrap.config.logging import Tic80WrapLogger

TomlTable = dict[str, Any]

logger: Tic80WrapLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``tic80wrap.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigurationError: If the file cannot be read, is not UTF-8, or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read config file '{path}': {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigurationError(f"Invalid TOML in config file '{path}': {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(doc: TomlTable) -> TomlTable | None:
    """Return the ``[tool.tic80wrap]`` table of a parsed ``pyproject.toml``.

    Args:
        doc: Parsed ``pyproject.toml`` content.

    Returns:
        The nested table, or ``None`` when the section is absent.
    """
    node: Any = doc
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = cast("TomlTable", node)[part]
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def load_options_file(path: Path) -> PluginOptions:
    """Load options from an explicit config file.

    A file named ``pyproject.toml`` is read from its ``[tool.tic80wrap]`` table
    (missing table means defaults); any other file is read from its top level.

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or contains
            invalid options.
    """
    doc: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        table: TomlTable | None = extract_tool_table(doc)
        if table is None:
            logger.debug("No [%s] table in %s", PYPROJECT_TOOL_SECTION, path)
            return PluginOptions()
        return validate_options(table, where=f"[{PYPROJECT_TOOL_SECTION}] in {path}")
    return validate_options(doc, where=f"options in {path}")


def discover_config_file(context: Path) -> Path | None:
    """Find the config file that applies to a build context directory.

    ``tic80wrap.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    is only selected when it carries a ``[tool.tic80wrap]`` table.

    Args:
        context: The build context directory.

    Returns:
        The config file path, or ``None`` when no source applies.
    """
    dedicated: Path = context / TIC80WRAP_TOML_NAME
    if dedicated.is_file():
        return dedicated
    pyproject: Path = context / PYPROJECT_TOML_NAME
    if pyproject.is_file() and extract_tool_table(load_toml_dict(pyproject)) is not None:
        return pyproject
    return None


def load_options(context: Path, config_file: Path | None = None) -> PluginOptions:
    """Resolve the plugin options for a build context.

    Args:
        context: The build context directory used for discovery.
        config_file: Explicit config file; disables discovery when given.

    Returns:
        Validated options; defaults when no config source exists.
    """
    path: Path | None = config_file or discover_config_file(context)
    if path is None:
        logger.debug("No configuration found in %s; using defaults", context)
        return PluginOptions()
    logger.info("Loading configuration from %s", path)
    return load_options_file(path)
