"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
PROJECT_ROOT, cache TTL and size bounds, cache toggles, LOG_LEVEL).
"""

from __future__ import annotations

import os
from pathlib import Path

from core.cache import DEFAULT_MAX_ENTRIES, DEFAULT_QUERY_OVERFLOW, DEFAULT_TTL_MILLIS
from core.models import CacheSettings


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# Project root for the LocalFileSystem sandbox
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

# Canonicalization caches
CACHE_SETTINGS = CacheSettings(
    ttl_millis=_env_int("CANON_CACHE_TTL_MS", DEFAULT_TTL_MILLIS),
    max_entries=_env_int("CANON_CACHE_MAX_ENTRIES", DEFAULT_MAX_ENTRIES),
    query_overflow=_env_int("CANON_CACHE_QUERY_OVERFLOW", DEFAULT_QUERY_OVERFLOW),
)
USE_CANON_CACHES = _env_bool("USE_CANON_CACHES", True)
USE_CANON_PREFIX_CACHE = _env_bool("USE_CANON_PREFIX_CACHE", True)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
