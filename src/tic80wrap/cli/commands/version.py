# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : version.py
#   file_relpath : src/tic80wrap/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap `version` command.

Prints the current Tic80Wrap version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tic80wrap.constants import TIC80WRAP_VERSION

if TYPE_CHECKING:
    from tic80wrap.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Tic80Wrap.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of Tic80Wrap.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": TIC80WRAP_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Tic80Wrap version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TIC80WRAP_VERSION, bold=True)}")
    else:
        console.print(console.styled(TIC80WRAP_VERSION, bold=True))
