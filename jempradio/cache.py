"""JSON file cache with an mtime-based freshness window (atomic writes)."""

import json
import os
import tempfile
import time
from pathlib import Path

from loguru import logger


def cache_age(path, now=None):
    """Seconds since ``path`` was last modified, or None if it is missing."""
    try:
        mtime = Path(path).stat().st_mtime
    except FileNotFoundError:
        return None
    if now is None:
        now = time.time()
    return now - mtime


def read_cache(path, max_age_seconds=0, now=None):
    """Read cached JSON from ``path``.

    Returns None if the file is missing, undecodable, or at least
    ``max_age_seconds`` old (0 = never expire).
    """
    age = cache_age(path, now)
    if age is None:
        return None
    if max_age_seconds > 0 and age >= max_age_seconds:
        logger.debug(f"cache {path} is stale ({age:.0f}s old)")
        return None
    try:
        return json.loads(Path(path).read_text())
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"cannot decode cache {path}: {e}")
        return None


def write_cache(path, data):
    """Replace the JSON file at ``path``; readers see either the old or new content."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=1)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
