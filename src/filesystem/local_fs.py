"""Sandboxed local filesystem backed by the canonicalization caches.

Every user path is joined onto PROJECT_ROOT and canonicalized through a
PathCanonicalizer; the canonical result must stay under the root.
Mutating operations invalidate the caches before resolving their targets
and act on the entry itself (a symlink is removed or moved, not followed).
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from core.errors import AccessDeniedError, NotFoundError, ValidationError
from core.paths import normalize_posix_relpath
from filesystem.canonicalizer import PathCanonicalizer

logger = logging.getLogger(__name__)


class LocalFileSystem:
    # Local filesystem operations confined to a project root.

    def __init__(self, *, project_root: Path, canonicalizer: PathCanonicalizer) -> None:
        self._project_root = project_root.resolve()
        self._canonicalizer = canonicalizer

    @property
    def canonicalizer(self) -> PathCanonicalizer:
        return self._canonicalizer

    def _joined(self, rel_path: str) -> str:
        if not (rel_path or "").strip():
            raise ValidationError("Path is empty")

        # "/a" and "a" both mean <root>/a; "./" alone is the root
        raw = normalize_posix_relpath(rel_path) or "."
        return os.path.join(str(self._project_root), raw)

    def _check_under_root(self, p: Path) -> Path:
        # Strong containment check to prevent directory traversal/outside access
        try:
            p.relative_to(self._project_root)
        except ValueError as e:
            raise AccessDeniedError("Access outside project root is not allowed") from e
        return p

    def _resolve_under_root(self, rel_path: str) -> Path:
        p = Path(self._canonicalizer.canonicalize(self._joined(rel_path)))
        return self._check_under_root(p)

    def _entry_under_root(self, rel_path: str) -> Path:
        # Canonical parent + final component as given: the entry a mutation acts on.
        # Callers must invalidate() first so no cached result decides containment.
        joined = self._joined(rel_path).rstrip(os.sep) or os.sep
        parent, name = os.path.split(joined)
        if name in ("", ".", ".."):
            return self._resolve_under_root(rel_path)

        canonical_parent = Path(self._canonicalizer.canonicalize(parent))
        return self._check_under_root(canonical_parent / name)

    def _relative(self, p: Path) -> str:
        # POSIX-style result keeps output stable across OSes
        return p.relative_to(self._project_root).as_posix()

    async def canonicalize(self, *, path: str) -> str:
        # Cache lookups take a threading.Lock and may stat the disk; keep them off the loop
        def _do() -> str:
            return self._relative(self._resolve_under_root(path))

        return await asyncio.to_thread(_do)

    async def delete(self, *, path: str) -> str:
        def _do() -> str:
            self._canonicalizer.invalidate()
            p = self._entry_under_root(path)
            if p == self._project_root:
                raise AccessDeniedError("Refusing to delete the project root")
            if not os.path.lexists(p):
                raise NotFoundError(f"Path not found: {path}")

            try:
                if p.is_dir() and not p.is_symlink():
                    p.rmdir()
                else:
                    p.unlink()
            except OSError as e:
                raise ValidationError(f"Cannot delete {path}: {e.strerror or e}") from e
            finally:
                self._canonicalizer.invalidate()

            rel = self._relative(p)
            logger.info("Deleted %s", rel)
            return rel

        return await asyncio.to_thread(_do)

    async def rename(self, *, source: str, target: str) -> str:
        def _do() -> str:
            self._canonicalizer.invalidate()
            src = self._entry_under_root(source)
            dst = self._entry_under_root(target)
            if src == self._project_root or dst == self._project_root:
                raise AccessDeniedError("Refusing to rename the project root")
            if not os.path.lexists(src):
                raise NotFoundError(f"Path not found: {source}")

            try:
                src.rename(dst)
            except OSError as e:
                raise ValidationError(f"Cannot rename {source} to {target}: {e.strerror or e}") from e
            finally:
                self._canonicalizer.invalidate()

            rel = self._relative(dst)
            logger.info("Renamed %s -> %s", self._relative(src), rel)
            return rel

        return await asyncio.to_thread(_do)
