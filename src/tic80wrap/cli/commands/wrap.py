# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : wrap.py
#   file_relpath : src/tic80wrap/cli/commands/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tic80Wrap `wrap` command.

Acts as a minimal filesystem host: every file of ``OUTPUT_DIR`` matching the
include patterns (default ``*.js``) is wrapped in place with the cartridge
header and footer. The cartridge itself is never wrapped, even when it lives
in the output directory.

Running the command twice wraps twice; use ``--fresh-after`` from build
scripts to restrict the pass to files written after a given time.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tic80wrap.cli.errors import cli_error_from
from tic80wrap.cli.options import common_cartridge_options, resolve_options
from tic80wrap.config.logging import get_logger
from tic80wrap.constants import DEFAULT_ARTIFACT_PATTERNS
from tic80wrap.errors import FileAccessError
from tic80wrap.host.directory import DirectoryArtifactStore
from tic80wrap.plugin import Tic80Plugin

if TYPE_CHECKING:
    from tic80wrap.cli.console import ClickConsole
    from tic80wrap.config.logging import Tic80WrapLogger

logger: Tic80WrapLogger = get_logger(__name__)


@click.command(
    name="wrap",
    help="Wrap the artifacts of OUTPUT_DIR with the cartridge header and footer.",
)
@click.argument(
    "output_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@common_cartridge_options
@click.option(
    "--include",
    "include_patterns",
    multiple=True,
    help=f"Gitignore-style pattern selecting artifacts (default: {', '.join(DEFAULT_ARTIFACT_PATTERNS)}).",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    help="Gitignore-style pattern excluding artifacts.",
)
@click.option(
    "--fresh-after",
    "fresh_after",
    type=click.DateTime(),
    default=None,
    help="Only wrap files modified at or after this local time.",
)
def wrap_command(
    *,
    output_dir: Path,
    cartridge: str | None,
    context: Path | None,
    config_file: Path | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    fresh_after: datetime | None,
) -> None:
    """Wrap every eligible artifact of ``output_dir`` in place."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    base: Path = context or Path.cwd()
    plugin = Tic80Plugin(resolve_options(context=base, config_file=config_file, cartridge=cartridge))

    store = DirectoryArtifactStore(
        output_dir,
        include=include_patterns or DEFAULT_ARTIFACT_PATTERNS,
        exclude=exclude_patterns,
        fresh_after=fresh_after.timestamp() if fresh_after is not None else None,
        ignore=(plugin.resolve_cartridge_path(base),),
    )

    try:
        plugin.apply(store, context=base)
    except FileAccessError as exc:
        raise cli_error_from(exc) from exc

    if vlevel < 0:
        return
    if vlevel > 0:
        for artifact_id in store.replaced:
            console.print(f"  wrapped {artifact_id}")
    console.print(
        console.styled(f"Wrapped {len(store.replaced)} artifact(s) in {output_dir}", bold=True)
    )
