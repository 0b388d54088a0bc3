# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : __init__.py
#   file_relpath : src/tic80wrap/host/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host adapters: the artifact store protocol and its bundled implementations."""

from __future__ import annotations

from tic80wrap.host.directory import DirectoryArtifactStore
from tic80wrap.host.memory import Chunk, InMemoryArtifactStore
from tic80wrap.host.protocols import Artifact, ArtifactStore

__all__ = [
    "Artifact",
    "ArtifactStore",
    "Chunk",
    "DirectoryArtifactStore",
    "InMemoryArtifactStore",
]
