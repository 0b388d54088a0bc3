# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : main.py
#   file_relpath : src/tic80wrap/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI for Tic80Wrap.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read the shared console and verbosity from ``ctx.obj``.
"""

from __future__ import annotations

import click

from tic80wrap.cli.commands.classify import classify_command
from tic80wrap.cli.commands.version import version_command
from tic80wrap.cli.commands.wrap import wrap_command
from tic80wrap.cli.console import ClickConsole
from tic80wrap.cli.options import common_verbose_options, resolve_verbosity
from tic80wrap.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Wrap bundled TIC-80 cartridge code with its metadata header.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Tic80Wrap CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tic80wrap wrap OUTPUT_DIR' to wrap bundled artifacts.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(classify_command)

cli.add_command(wrap_command)

if __name__ == "__main__":
    cli()
