"""MCP tool that renames a path within the project root.

Registers the 'rename_path' tool; both ends must stay inside the root.
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

    @mcp.tool(name="rename_path")
    async def rename_path(source: str = "", target: str = "") -> str:
        """Rename (move) a file or directory inside the project root.

        Params:
          - source: existing path relative to the project root (required).
          - target: new path relative to the project root (required).

        Returns:
          A short confirmation naming the new canonical path.

        Raises:
          ValidationError for missing inputs or an OS-level rename failure,
          NotFoundError when the source does not exist, AccessDeniedError
          when either path escapes the project root.
        """
        if not source or not source.strip():
            raise ValidationError("Missing source path")
        if not target or not target.strip():
            raise ValidationError("Missing target path")

        renamed = await fs.rename(source=source, target=target)
        return f"Renamed: {source.strip()} -> {renamed}"
