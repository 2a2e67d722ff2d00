"""Server bootstrap for the canonicalization cache MCP service.

Creates the FastMCP instance, builds the shared LocalFileSystem (and with
it the canonicalization caches), registers the tools and starts the MCP
server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from config import CACHE_SETTINGS, LOG_LEVEL, PROJECT_ROOT, USE_CANON_CACHES, USE_CANON_PREFIX_CACHE
from filesystem.factory import build_local_filesystem

from tools.canonicalize_path import register as register_canonicalize_path
from tools.delete_path import register as register_delete_path
from tools.rename_path import register as register_rename_path

mcp = FastMCP("canon-cache-mcp")


def register_tools() -> None:
    # One filesystem so every tool shares the same caches
    filesystem = build_local_filesystem(
        project_root=PROJECT_ROOT,
        settings=CACHE_SETTINGS,
        use_caches=USE_CANON_CACHES,
        use_prefix_cache=USE_CANON_PREFIX_CACHE,
    )

    register_canonicalize_path(mcp, filesystem=filesystem)
    register_delete_path(mcp, filesystem=filesystem)
    register_rename_path(mcp, filesystem=filesystem)


register_tools()


def main() -> None:
    # basicConfig logs to stderr, leaving stdout to the stdio transport
    logging.basicConfig(level=LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
