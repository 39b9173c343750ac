"""
Filesystem helpers shared by the staging and recovery components.

Keeping these in one place lets the rest of the package stay free of
platform special cases and makes the filesystem easy to fake in tests.
"""

from __future__ import annotations

import os
import shutil

def long_path(p: str) -> str:
    """Return ``p`` with the Windows long path prefix where needed."""
    if os.name == "nt":
        ap = os.path.abspath(p)
        if not ap.startswith("\\\\?\\"):
            ap = "\\\\?\\" + ap
        return ap
    return p

def ensure_dir(p: str) -> None:
    """Create ``p`` and any missing parents; existing directories are fine."""
    os.makedirs(long_path(p), exist_ok=True)

def write_file(path: str, data) -> str:
    """Write ``data`` (any bytes-like object) to ``path``, replacing any existing file."""
    with open(long_path(path), "wb") as fo:
        fo.write(data)
    return path

def remove_tree(p: str) -> None:
    """Recursively delete directory ``p``. Raises ``OSError`` on failure."""
    shutil.rmtree(long_path(p))
