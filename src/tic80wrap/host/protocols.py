# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : protocols.py
#   file_relpath : src/tic80wrap/host/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host-side interface used by the plugin to reach generated artifacts.

The host build tool owns artifact storage and decides which artifacts are
eligible in a build pass (typically: freshly rendered, not served from cache).
The plugin only lists eligible artifacts and replaces their content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class Artifact:
    """A generated artifact as seen by the plugin.

    Attributes:
        id (str): Store-specific identifier (asset name, relative path, ...).
        content (str): Current text content.
    """

    id: str
    content: str


class ArtifactStore(Protocol):
    """Protocol for artifact stores driven by `tic80wrap.plugin.Tic80Plugin`."""

    def list_eligible_artifacts(self) -> Iterable[Artifact]:
        """Return the artifacts to wrap in the current build pass.

        Each artifact must be listed at most once per pass.
        """
        ...

    def replace_artifact(self, artifact_id: str, content: str) -> None:
        """Replace the content of the artifact identified by ``artifact_id``."""
        ...
