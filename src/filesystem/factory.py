"""Factory for the shared LocalFileSystem.

Exposes build_local_filesystem which wires an OsPathResolver, a
PathCanonicalizer and a LocalFileSystem from configuration values.
"""

from __future__ import annotations

from pathlib import Path

from core.models import CacheSettings
from filesystem.canonicalizer import PathCanonicalizer
from filesystem.local_fs import LocalFileSystem
from filesystem.resolver import OsPathResolver


def build_local_filesystem(
    *,
    project_root: Path,
    settings: CacheSettings = CacheSettings(),
    use_caches: bool = True,
    use_prefix_cache: bool = True,
) -> LocalFileSystem:
    """
    Build one LocalFileSystem whose caches are meant to be shared.

    Call once per process and inject the result into every tool; a new
    instance starts with empty caches.
    """
    canonicalizer = PathCanonicalizer(
        OsPathResolver(),
        settings=settings,
        use_caches=use_caches,
        use_prefix_cache=use_prefix_cache,
    )
    return LocalFileSystem(project_root=project_root, canonicalizer=canonicalizer)
