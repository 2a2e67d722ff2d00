"""MCP tool that canonicalizes a path under the project root.

Registers the 'canonicalize_path' tool which validates input and delegates
to the shared LocalFileSystem, whose canonicalization caches memoize the
underlying realpath lookups.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import CACHE_SETTINGS, PROJECT_ROOT, USE_CANON_CACHES, USE_CANON_PREFIX_CACHE
from core.errors import ValidationError
from filesystem.factory import build_local_filesystem
from filesystem.local_fs import LocalFileSystem


def register(mcp: FastMCP, *, filesystem: Optional[LocalFileSystem] = None) -> None:
    fs = filesystem or build_local_filesystem(
        project_root=PROJECT_ROOT,
        settings=CACHE_SETTINGS,
        use_caches=USE_CANON_CACHES,
        use_prefix_cache=USE_CANON_PREFIX_CACHE,
    )

    @mcp.tool(name="canonicalize_path")
    async def canonicalize_path(path: str = "") -> str:
        """Return the canonical form of a path inside the project root.

        Symlinks are followed and '.'/'..' segments collapsed against the
        real filesystem. The path does not need to exist.

        Parameters:
          - path: path relative to the project root (required).

        Returns:
          The canonical path relative to the project root, POSIX style
          ("." for the root itself).

        Raises:
          ValidationError for a missing path, AccessDeniedError when the
          canonical path escapes the project root.
        """
        if not path or not path.strip():
            raise ValidationError("Missing path")

        return await fs.canonicalize(path=path)
