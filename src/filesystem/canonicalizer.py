"""Memoizing path canonicalizer.

Two ExpiringCaches sit in front of a PathResolver:

- `cache` maps an absolute path to its canonical form and serves repeated
  canonicalizations of the same path.
- `prefix_cache` maps a parent directory to its canonical form and serves
  canonicalizations of other files in that directory. It is conservative:
  only simple paths (see core.paths.parent_or_null) whose parent is known
  to be preserved by the resolver are recorded.

Any filesystem mutation can make cached results wrong, so callers must
invalidate() before deleting or renaming.
"""

from __future__ import annotations

import logging
import os

from core.errors import ValidationError
from core.interfaces import PathResolver
from core.models import CacheSettings
from core.paths import parent_or_null

logger = logging.getLogger(__name__)


class PathCanonicalizer:
    def __init__(
        self,
        resolver: PathResolver,
        *,
        settings: CacheSettings = CacheSettings(),
        use_caches: bool = True,
        use_prefix_cache: bool = True,
    ) -> None:
        self._resolver = resolver
        self._use_caches = bool(use_caches)
        self._use_prefix_cache = bool(use_prefix_cache)
        self.cache = settings.new_cache()
        self.prefix_cache = settings.new_cache()

    def canonicalize(self, path: str) -> str:
        if not path or not path.strip():
            raise ValidationError("Path is empty")
        if not os.path.isabs(path):
            raise ValidationError(f"Path must be absolute: {path}")

        if not self._use_caches:
            return self._resolver.canonicalize(path)

        res = self.cache.get(path)
        if res is not None:
            return res

        parent = None
        if self._use_prefix_cache:
            parent = parent_or_null(path)
            if parent is not None:
                res_parent = self.prefix_cache.get(parent)
                if res_parent is not None:
                    # Parent already canonical; resolve only the last element
                    filename = path[len(parent) + 1:]
                    res = self._resolver.canonicalize_with_prefix(res_parent, filename)
                    self.cache.put(parent + os.sep + filename, res)
                    return res

        res = self._resolver.canonicalize(path)
        self.cache.put(path, res)

        if parent is not None:
            res_parent = parent_or_null(res)
            if res_parent is not None and self._resolver.keeps_parent(path, res):
                self.prefix_cache.put(parent, res_parent)
        return res

    def invalidate(self) -> None:
        # Drops every entry, not only the ones under the mutated path
        self.cache.clear()
        self.prefix_cache.clear()
        logger.debug("Canonicalization caches invalidated")
