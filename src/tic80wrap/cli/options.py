# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : options.py
#   file_relpath : src/tic80wrap/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Tic80Wrap CLI.

This module centralizes reusable options (verbosity, cartridge selection) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from tic80wrap.cli.errors import Tic80WrapUsageError, cli_error_from
from tic80wrap.config.loaders import load_options
from tic80wrap.config.logging import get_logger
from tic80wrap.errors import ConfigurationError

if TYPE_CHECKING:
    from tic80wrap.config.model import PluginOptions

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` (max 2).

    Raises:
        Tic80WrapUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise Tic80WrapUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_cartridge_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--cartridge``, ``--context`` and ``--config`` to a command."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read options from this TOML file instead of discovering one in the context.",
    )(f)
    f = click.option(
        "--context",
        "context",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help="Build context directory (cartridge and config lookup). Defaults to CWD.",
    )(f)
    f = click.option(
        "--cartridge",
        "cartridge",
        type=str,
        default=None,
        help="Cartridge path, relative to the context. Overrides the config file.",
    )(f)
    return f


def resolve_options(
    *,
    context: Path,
    config_file: Path | None,
    cartridge: str | None,
) -> PluginOptions:
    """Load options for ``context`` and apply the CLI ``--cartridge`` override.

    Raises:
        Tic80WrapConfigError: If the configuration is invalid.
    """
    try:
        options: PluginOptions = load_options(context, config_file)
    except ConfigurationError as exc:
        raise cli_error_from(exc) from exc
    return options.with_overrides(cartridge_path=cartridge)
