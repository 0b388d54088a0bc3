# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : directory.py
#   file_relpath : src/tic80wrap/host/directory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem artifact store over a build output directory.

Artifacts are the regular files below ``root`` selected by gitignore-style
include/exclude patterns (evaluated relative to ``root``). Artifact ids are
POSIX paths relative to ``root``; listing order is sorted and deterministic.

When ``fresh_after`` is set, only files modified at or after that POSIX
timestamp are eligible, which keeps output left over from earlier passes from
being wrapped twice.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from tic80wrap.config.logging import get_logger
from tic80wrap.constants import DEFAULT_ARTIFACT_PATTERNS
from tic80wrap.errors import ArtifactAccessError
from tic80wrap.host.protocols import Artifact

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tic80wrap.config.logging import Tic80WrapLogger

logger: Tic80WrapLogger = get_logger(__name__)


class DirectoryArtifactStore:
    """Artifact store backed by files in a directory tree.

    Args:
        root (Path): Build output directory.
        include (Iterable[str]): Patterns selecting artifacts (default ``*.js``).
        exclude (Iterable[str]): Patterns removing artifacts from the selection.
        fresh_after (float | None): Only list files whose mtime is ``>=`` this timestamp.
        ignore (Iterable[Path]): Paths never listed (e.g. the cartridge itself).

    Attributes:
        replaced (list[str]): Ids of the artifacts replaced so far, in order.
    """

    root: Path
    fresh_after: float | None
    replaced: list[str]

    def __init__(
        self,
        root: Path,
        *,
        include: Iterable[str] = DEFAULT_ARTIFACT_PATTERNS,
        exclude: Iterable[str] = (),
        fresh_after: float | None = None,
        ignore: Iterable[Path] = (),
    ) -> None:
        self.root = root
        self.fresh_after = fresh_after
        self._include: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(include))
        self._exclude: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(exclude))
        self._ignore: frozenset[Path] = frozenset(p.resolve() for p in ignore)
        self.replaced = []

    def _is_fresh(self, path: Path) -> bool:
        if self.fresh_after is None:
            return True
        return path.stat().st_mtime >= self.fresh_after

    def iter_artifact_paths(self) -> Iterator[Path]:
        """Yield eligible artifact paths, sorted by relative path."""
        candidates: list[Path] = sorted(p for p in self.root.rglob("*") if p.is_file())
        for path in candidates:
            rel: str = path.relative_to(self.root).as_posix()
            if not self._include.match_file(rel) or self._exclude.match_file(rel):
                continue
            if path.resolve() in self._ignore:
                logger.debug("Ignoring %s", rel)
                continue
            if not self._is_fresh(path):
                logger.debug("Skipping %s (not rendered in this pass)", rel)
                continue
            yield path

    def list_eligible_artifacts(self) -> Iterator[Artifact]:
        """Yield eligible artifacts with their current content.

        Raises:
            ArtifactAccessError: If an eligible file cannot be read as UTF-8.
        """
        for path in self.iter_artifact_paths():
            rel: str = path.relative_to(self.root).as_posix()
            try:
                with open(path, encoding="utf-8", newline="") as f:
                    content: str = f.read()
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read artifact %s: %s", rel, exc)
                raise ArtifactAccessError(path, exc) from exc
            yield Artifact(id=rel, content=content)

    def replace_artifact(self, artifact_id: str, content: str) -> None:
        """Overwrite the artifact file in place (no newline translation)."""
        path: Path = self.root / artifact_id
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        self.replaced.append(artifact_id)
        logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)
