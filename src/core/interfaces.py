"""Core protocol definitions.

Defines the PathResolver protocol: the expensive, idempotent lookup that
PathCanonicalizer memoizes. Tests substitute counting fakes for it.
"""

from __future__ import annotations

from typing import Protocol


class PathResolver(Protocol):
    """Contract for a canonical-path lookup (OS-backed or fake)."""
    def canonicalize(self, path: str) -> str:
        ...

    def canonicalize_with_prefix(self, canonical_prefix: str, filename: str) -> str:
        ...

    def keeps_parent(self, path: str, canonical: str) -> bool:
        # True when dirname(canonical) is the canonical form of dirname(path)
        ...
