# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : classify.py
#   file_relpath : src/tic80wrap/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap `classify` command.

Shows how a cartridge splits into header (metadata) and footer lines, without
touching any artifact. Useful to check which comments will be hoisted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tic80wrap.cli.errors import cli_error_from
from tic80wrap.cli.options import common_cartridge_options, resolve_options
from tic80wrap.config.logging import get_logger
from tic80wrap.core.classifier import classify_file
from tic80wrap.errors import FileAccessError
from tic80wrap.plugin import Tic80Plugin

if TYPE_CHECKING:
    from tic80wrap.cli.console import ClickConsole
    from tic80wrap.config.logging import Tic80WrapLogger
    from tic80wrap.core.classifier import CartridgeSections

logger: Tic80WrapLogger = get_logger(__name__)


@click.command(
    name="classify",
    help="Show the header and footer lines of a cartridge.",
)
@common_cartridge_options
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit {'cartridge', 'header', 'footer'} as JSON.",
)
def classify_command(
    *,
    cartridge: str | None,
    context: Path | None,
    config_file: Path | None,
    as_json: bool,
) -> None:
    """Classify the cartridge and print both line sequences.

    Separator lines added for wrapping are not shown.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    base: Path = context or Path.cwd()
    plugin = Tic80Plugin(resolve_options(context=base, config_file=config_file, cartridge=cartridge))
    path: Path = plugin.resolve_cartridge_path(base)

    try:
        sections: CartridgeSections = classify_file(path)
    except FileAccessError as exc:
        raise cli_error_from(exc) from exc

    header: list[str] = list(sections.header_lines[:-1])
    footer: list[str] = list(sections.footer_lines[1:])

    if as_json:
        console.print(json.dumps({"cartridge": str(path), "header": header, "footer": footer}))
        return

    console.print(console.styled(f"Header ({len(header)} line(s)):", bold=True))
    for line in header:
        console.print(f"  {line}")
    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled(f"Footer ({len(footer)} line(s)):", bold=True))
        for line in footer:
            console.print(f"  {line}")
    else:
        console.print(console.styled(f"Footer: {len(footer)} line(s)", bold=True))
