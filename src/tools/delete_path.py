"""MCP tool that deletes a file or empty directory under the project root.

Registers the 'delete_path' tool. Deleting invalidates the shared
canonicalization caches before the filesystem is touched.
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

    @mcp.tool(name="delete_path")
    async def delete_path(path: str = "") -> str:
        """Delete a file or an empty directory inside the project root.

        Parameters:
          - path: path relative to the project root (required).

        Returns:
          A short confirmation naming the deleted canonical path.

        Raises:
          ValidationError for a missing path or a non-empty directory,
          NotFoundError when nothing exists at the path, AccessDeniedError
          for the project root itself or anything outside it.
        """
        if not path or not path.strip():
            raise ValidationError("Missing path")

        deleted = await fs.delete(path=path)
        return f"Deleted: {deleted}"
