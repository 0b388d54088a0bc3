# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : memory.py
#   file_relpath : src/tic80wrap/host/memory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory artifact store modeled on a bundler compilation.

A compilation holds named assets and a list of chunks; each chunk lists the
asset files it produced and whether it was rendered in this pass. Chunks
restored from cache are not rendered and their files must not be wrapped
again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tic80wrap.config.logging import get_logger
from tic80wrap.host.protocols import Artifact

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tic80wrap.config.logging import Tic80WrapLogger

logger: Tic80WrapLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Chunk:
    """A bundler chunk.

    Attributes:
        files (tuple[str, ...]): Names of the assets emitted for this chunk.
        rendered (bool): True if the chunk was (re)rendered in the current pass.
    """

    files: tuple[str, ...]
    rendered: bool = True


@dataclass
class InMemoryArtifactStore:
    """Artifact store over a mapping of asset names to content.

    Attributes:
        assets (dict[str, str]): Asset contents keyed by file name. Mutated by
            `replace_artifact`.
        chunks (list[Chunk]): Chunks of the current pass.
    """

    assets: dict[str, str] = field(default_factory=lambda: {})
    chunks: list[Chunk] = field(default_factory=lambda: [])

    def list_eligible_artifacts(self) -> Iterator[Artifact]:
        """Yield the files of rendered chunks, in chunk order, each at most once."""
        seen: set[str] = set()
        for chunk in self.chunks:
            if not chunk.rendered:
                # Cached chunk: already wrapped in an earlier pass
                logger.debug("Skipping cached chunk %r", chunk.files)
                continue
            for name in chunk.files:
                if name in seen:
                    continue
                seen.add(name)
                if name not in self.assets:
                    logger.warning("Chunk lists file %r which has no asset; skipping", name)
                    continue
                yield Artifact(id=name, content=self.assets[name])

    def replace_artifact(self, artifact_id: str, content: str) -> None:
        """Replace an existing asset.

        Raises:
            KeyError: If no asset named ``artifact_id`` exists.
        """
        if artifact_id not in self.assets:
            raise KeyError(artifact_id)
        self.assets[artifact_id] = content
