# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : plugin.py
#   file_relpath : src/tic80wrap/plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build-tool hook that wraps generated artifacts with cartridge metadata.

A host build tool creates one `Tic80Plugin` at setup time (options are
validated immediately) and calls `Tic80Plugin.apply` once per build pass,
after its artifacts are rendered:

    plugin = Tic80Plugin({"cartridge_path": "src/cartridge.js"})
    plugin.apply(store, context=project_dir)

Each pass classifies the cartridge once and wraps every eligible artifact of
the store. If the cartridge or one of the listed artifacts cannot be read,
no artifact is wrapped.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from tic80wrap.config.logging import get_logger
from tic80wrap.config.model import PluginOptions, validate_options
from tic80wrap.core.classifier import classify_file
from tic80wrap.core.wrapper import wrap
from tic80wrap.errors import FileAccessError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from tic80wrap.config.logging import Tic80WrapLogger
    from tic80wrap.core.classifier import CartridgeSections
    from tic80wrap.host.protocols import Artifact, ArtifactStore

logger: Tic80WrapLogger = get_logger(__name__)


class Tic80Plugin:
    """Wrap the artifacts of each build pass with the cartridge header and footer.

    Args:
        options (Mapping[str, Any] | PluginOptions | None): Raw options mapping
            (validated here) or an already validated `PluginOptions`.

    Raises:
        ConfigurationError: If ``options`` does not match the options schema.
    """

    options: PluginOptions

    def __init__(self, options: Mapping[str, Any] | PluginOptions | None = None) -> None:
        if isinstance(options, PluginOptions):
            self.options = options
        else:
            self.options = validate_options(options)

    def resolve_cartridge_path(self, context: Path | None = None) -> Path:
        """Return the cartridge path resolved against the build context directory.

        Args:
            context (Path | None): Build context; defaults to the current working directory.

        Returns:
            Path: Absolute cartridge path (absolute configured paths are kept as-is).
        """
        base: Path = context if context is not None else Path.cwd()
        return (base / self.options.effective_cartridge_path).absolute()

    def apply(
        self,
        store: ArtifactStore,
        *,
        context: Path | None = None,
        done: Callable[[Exception | None], None] | None = None,
    ) -> int:
        """Run one build pass: classify the cartridge, then wrap every eligible artifact.

        Args:
            store (ArtifactStore): Host store listing eligible artifacts and
                receiving the wrapped content.
            context (Path | None): Build context used to resolve the cartridge path.
            done (Callable[[Exception | None], None] | None): Completion callback.
                When given, it is called with ``None`` after all artifacts are
                wrapped, or with the `FileAccessError` that aborted the pass (the
                error is then not raised).

        Returns:
            int: Number of artifacts wrapped (0 when the pass was aborted).

        Raises:
            FileAccessError: If the cartridge, or an artifact listed by the store,
                cannot be read and no ``done`` callback was supplied.
        """
        cartridge: Path = self.resolve_cartridge_path(context)
        try:
            sections: CartridgeSections = classify_file(cartridge)
            artifacts: list[Artifact] = list(store.list_eligible_artifacts())
        except FileAccessError as exc:
            logger.error("Aborting wrap step: %s", exc)
            if done is None:
                raise
            done(exc)
            return 0

        for artifact in artifacts:
            store.replace_artifact(
                artifact.id,
                wrap(artifact.content, sections.header_lines, sections.footer_lines),
            )
            logger.debug("Wrapped %s", artifact.id)

        logger.info("Wrapped %d artifact(s) with %s", len(artifacts), cartridge)
        if done is not None:
            done(None)
        return len(artifacts)
