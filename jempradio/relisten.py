"""Relisten artist lookup: display name → URL slug.

Relisten addresses shows as ``https://relisten.net/<slug>/YYYY/MM/DD``.
The slug for each artist comes from the Relisten artists API, e.g. the
artist "Umphrey's McGee" has the slug "umphreys".  That list changes
rarely, so it is kept in a local cache file and only refetched once the
cache is a week old.
"""

import time

import requests
from loguru import logger

from jempradio.cache import read_cache, write_cache
from jempradio.config import (
    RELISTEN_ARTISTS_API,
    RELISTEN_BASE,
    RELISTEN_CACHE_FILE,
    RELISTEN_CACHE_MAX_AGE,
    USER_AGENT,
)
from jempradio.http_utils import api_get, create_session


class RelistenError(Exception):
    """The Relisten artist list could not be obtained."""


def make_artists_map(records):
    """Build {name: slug} from a list of Relisten artist records.

    Records missing either field are skipped.
    """
    artists = {}
    for rec in records:
        if not isinstance(rec, dict):
            continue
        name, slug = rec.get("name"), rec.get("slug")
        if name and slug:
            artists[name] = slug
    return artists


def show_url(slug, d):
    """Relisten URL for one artist's show on date ``d``."""
    return f"{RELISTEN_BASE}/{slug}/{d.year:04d}/{d.month:02d}/{d.day:02d}"


class RelistenResolver:
    """Resolves artist display names to Relisten slugs.

    The index is populated once, on first use: from the cache file when
    it is fresh, otherwise from the Relisten API (and the cache file is
    rewritten).  Construct one per run and pass it to whatever needs it.
    """

    def __init__(self, session=None, cache_file=RELISTEN_CACHE_FILE,
                 max_age_seconds=RELISTEN_CACHE_MAX_AGE, clock=time.time,
                 api_url=RELISTEN_ARTISTS_API):
        self.session = session
        self.cache_file = cache_file
        self.max_age_seconds = max_age_seconds
        self.clock = clock
        self.api_url = api_url
        self._artists = None

    @classmethod
    def from_artists(cls, records):
        """Resolver over a fixed artist list; never touches disk or network."""
        resolver = cls(cache_file=None)
        resolver._artists = make_artists_map(records)
        return resolver

    @property
    def artists(self):
        return self.load()

    def load(self):
        """Populate the name → slug index if needed and return it."""
        if self._artists is not None:
            return self._artists

        records = self._read_cached()
        if records is None:
            records = self._fetch()
            self._write_cached(records)
        self._artists = make_artists_map(records)
        logger.debug(f"loaded {len(self._artists)} Relisten artists")
        return self._artists

    def resolve(self, name):
        """Return ``(slug, found)`` for an exact, case-sensitive name."""
        artists = self.load()
        if name in artists:
            return artists[name], True
        return "", False

    def _read_cached(self):
        if not self.cache_file:
            return None
        try:
            records = read_cache(self.cache_file, self.max_age_seconds,
                                 now=self.clock())
        except OSError as e:
            logger.warning(f"cannot read Relisten artists cache: {e}")
            return None
        if records is None:
            return None
        if not isinstance(records, list) or not records:
            logger.warning("ignoring malformed Relisten artists cache "
                           f"{self.cache_file}")
            return None
        return records

    def _fetch(self):
        session = self.session or create_session(USER_AGENT)
        logger.debug(f"fetching Relisten artists from {self.api_url}")
        try:
            records = api_get(session, self.api_url)
        except (requests.RequestException, ValueError) as e:
            raise RelistenError(f"get Relisten artists: {e}") from e
        if not isinstance(records, list):
            raise RelistenError("get Relisten artists: expected a list, "
                                f"got {type(records).__name__}")
        return records

    def _write_cached(self, records):
        if not self.cache_file:
            return
        # Keep only what lookups need; the API returns much more per artist
        slim = [{"name": r.get("name"), "slug": r.get("slug")}
                for r in records if isinstance(r, dict)]
        try:
            write_cache(self.cache_file, slim)
        except OSError as e:
            logger.warning(f"could not write Relisten artists cache: {e}")
