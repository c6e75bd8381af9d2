"""Track model: one entry from the JEMP Radio status feed."""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from jempradio.config import META_ARTISTS, PHISHNET_SETLIST_URL, SETLIST_ARTIST
from jempradio.duration import started_string
from jempradio.normalize import parse_title
from jempradio.relisten import show_url

_FRACTION_RE = re.compile(r"(:\d{2}\.)(\d+)")


def parse_start_time(value):
    """Parse an RFC 3339 timestamp; None if missing or malformed.

    Timestamps without an offset are taken as UTC.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # Pad or cut any fraction to microseconds for fromisoformat
    text = _FRACTION_RE.sub(lambda m: m.group(1) + (m.group(2) + "000000")[:6], text)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Track:
    """A parsed station track.

    ``performance_date`` is only set when a date appeared in the raw title
    and parsed cleanly; the date text is then no longer part of ``title``.
    """

    title: str
    artist: Optional[str] = None
    performance_date: Optional[date] = None
    start_time: Optional[datetime] = None

    @classmethod
    def from_title(cls, raw, start_time=None):
        parsed = parse_title(raw)
        return cls(
            title=parsed.title,
            artist=parsed.artist,
            performance_date=parsed.performance_date,
            start_time=start_time,
        )

    @classmethod
    def from_json(cls, record):
        """Build a Track from a feed record (``title``, ``start_time``)."""
        return cls.from_title(
            record.get("title") or "",
            start_time=parse_start_time(record.get("start_time")),
        )

    def elapsed(self, now=None):
        """Time since playback started, truncated to whole seconds."""
        if self.start_time is None:
            return timedelta(0)
        if now is None:
            now = datetime.now(timezone.utc)
        seconds = int((now - self.start_time).total_seconds())
        return timedelta(seconds=max(seconds, 0))

    def streaming_url(self, resolver):
        """Relisten link for the show, if the artist is on Relisten.

        There is no guarantee the show itself is available there.
        """
        if resolver is None or not self.artist or self.performance_date is None:
            return ""
        slug, found = resolver.resolve(self.artist)
        if not found:
            return ""
        return show_url(slug, self.performance_date)

    def setlist_url(self):
        if self.artist != SETLIST_ARTIST or self.performance_date is None:
            return ""
        return PHISHNET_SETLIST_URL.format(date=self.performance_date.isoformat())

    def urls(self, resolver=None):
        candidates = (self.streaming_url(resolver), self.setlist_url())
        return [u for u in candidates if u]

    def headline(self, now=None):
        """Single-line form: artist, title, show date, time since start."""
        s = f"{self.artist} - {self.title}" if self.artist else self.title
        if self.performance_date is not None:
            d = self.performance_date
            s += f" ({d:%a} {d.day}-{d:%b}-{d.year})"
        elapsed = self.elapsed(now)
        if elapsed:
            s += f" (started {started_string(elapsed)})"
        return s

    def render(self, resolver=None, now=None):
        """Headline followed by each derived link on its own line."""
        return "\n".join([self.headline(now)] + self.urls(resolver))

    def to_dict(self, resolver=None, now=None):
        return {
            "artist": self.artist,
            "title": self.title,
            "performance_date": (self.performance_date.isoformat()
                                 if self.performance_date else None),
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "elapsed_seconds": int(self.elapsed(now).total_seconds()),
            "urls": self.urls(resolver),
        }

    def __str__(self):
        return self.headline()


def filter_artist(tracks, keep):
    """Tracks whose artist (``""`` when unknown) satisfies ``keep``."""
    return [t for t in tracks if keep(t.artist or "")]


def without_meta_tracks(tracks):
    """Drop the station's own announcement tracks."""
    return filter_artist(tracks, lambda artist: artist not in META_ARTISTS)
