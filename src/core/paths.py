from __future__ import annotations

import os
from typing import Optional

"""
Path utilities used across the project.

Provides POSIX-style normalization of tool inputs and the conservative
parent lookup that decides whether a path may use the prefix cache.
"""


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Keep the path relative to the root.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    return s


def parent_or_null(path: Optional[str], sep: str = os.sep, alt_sep: Optional[str] = None) -> Optional[str]:
    """Best-effort parent of a simple path, or None.

    Only the final component is inspected. Returns None when it is '.' or
    '..', ends in '.', contains the alternate separator or a wildcard, is
    shorter than two characters, or follows a doubled separator. Returning
    None only means the prefix cache is skipped.
    """
    if path is None:
        return None
    if alt_sep is None:
        alt_sep = "/" if sep == "\\" else "\\"

    last = len(path) - 1
    idx = last
    adjacent_dots = 0
    non_dot_count = 0
    while idx > 0:
        c = path[idx]
        if c == ".":
            adjacent_dots += 1
            if adjacent_dots >= 2:
                return None     # ".." segment
            if non_dot_count == 0:
                return None     # trailing "."
        elif c == sep:
            if adjacent_dots == 1 and non_dot_count == 0:
                return None     # "." segment
            if idx >= last - 1 or path[idx - 1] == sep or path[idx - 1] == alt_sep:
                return None
            return path[:idx]
        elif c == alt_sep:
            return None
        elif c in ("*", "?"):
            return None
        else:
            non_dot_count += 1
            adjacent_dots = 0
        idx -= 1
    return None
