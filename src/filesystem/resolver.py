"""OS-backed PathResolver.

Canonicalizes through os.path.realpath, which follows symlinks and
collapses '.'/'..' against the real filesystem. This is the slow lookup
the canonicalization caches sit in front of.
"""

from __future__ import annotations

import os


class OsPathResolver:
    # PathResolver implementation on top of the host filesystem.

    def canonicalize(self, path: str) -> str:
        return os.path.realpath(path)

    def canonicalize_with_prefix(self, canonical_prefix: str, filename: str) -> str:
        # Prefix is already canonical; only the last element still needs resolving
        return os.path.realpath(os.path.join(canonical_prefix, filename))

    def keeps_parent(self, path: str, canonical: str) -> bool:
        # A symlinked final component may point into another directory
        return os.path.isfile(canonical) and not os.path.islink(path)
