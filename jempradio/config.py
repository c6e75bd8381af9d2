"""Constants, cache locations, and API URLs for JEMP Radio lookups."""

import os
import sys


def user_cache_dir():
    """Per-user cache directory following the platform convention."""
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
        if base:
            return base
        return os.path.expanduser("~\\AppData\\Local")
    if sys.platform == "darwin":
        return os.path.expanduser("~/Library/Caches")
    return os.environ.get("XDG_CACHE_HOME") or os.path.expanduser("~/.cache")


# ── Paths ──────────────────────────────────────────────────────────────
CACHE_DIR = os.path.join(user_cache_dir(), "ph")
RELISTEN_CACHE_FILE = os.path.join(CACHE_DIR, "relisten-artists.json")
RELISTEN_CACHE_MAX_AGE = 7 * 24 * 60 * 60  # one week, in seconds

# ── JEMP Radio (radio.co station status) ──────────────────────────────
STATUS_URL = "https://public.radio.co/stations/sd71de59b3/status"
USER_AGENT = "jempradio/1.0 (JEMP Radio now-playing lookup)"

# Pseudo-artists the station uses for its own announcements.
META_ARTISTS = frozenset({"jempradio.com", "www.jempradio.com"})

# ── Relisten (streaming archive) ──────────────────────────────────────
RELISTEN_ARTISTS_API = "https://api.relisten.net/api/v2/artists"
RELISTEN_BASE = "https://relisten.net"

# ── phish.net (setlists) ──────────────────────────────────────────────
# Only one performer has a setlist service we can link to by date alone.
SETLIST_ARTIST = "Phish"
PHISHNET_SETLIST_URL = "https://phish.net/setlists/?d={date}"
