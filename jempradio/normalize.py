"""Title parsing for JEMP Radio track titles.

The station renders everything into one free-text title, roughly
``Artist - Song (M-D-YY, Venue)``.  Full-show segments use a different
shape, ``Artist - M-D-YY Set 2 (Venue)``, which the regular-track rule
would happily swallow, so rules are tried in a fixed order and the first
one that produces a result wins.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

# Month-day-2-digit-year with one separator used throughout.
_DATE = r'(?P<date>\d{1,2}(?P<sep>[-./])\d{1,2}(?P=sep)\d{2})'

_FULL_SHOW_RE = re.compile(
    r'^(?P<artist>.+?)\s+-\s+' + _DATE +
    r'\s+(?P<set_label>Encore|Set\s*\d+(?:\s*\+\s*E)?)'
    r'(?:\s*\((?P<location>[^()]*)\))?\s*$'
)

_TRACK_RE = re.compile(
    r'^(?P<artist>.+?)\s+-\s+(?P<title>.+?)'
    r'(?:\s*\(' + _DATE + r'(?:(?:\s*,\s*|\s+)(?P<location>[^()]*?))?\s*\))?\s*$'
)


@dataclass(frozen=True)
class ParsedTitle:
    """Structured fields recovered from a raw title."""

    title: str
    artist: Optional[str] = None
    performance_date: Optional[date] = None
    location: Optional[str] = None
    set_label: Optional[str] = None


def parse_performance_date(text, separator):
    """Parse ``M<sep>D<sep>YY`` into a date, or None if it isn't one."""
    fmt = f"%m{separator}%d{separator}%y"
    try:
        return datetime.strptime(text.strip(), fmt).date()
    except ValueError:
        return None


def format_show_date(d):
    """``18-Jul-2014``"""
    return f"{d.day}-{d:%b}-{d.year}"


def _clean(value):
    if value is None:
        return None
    value = value.strip()
    return value or None


def _full_show(m, raw):
    performed = parse_performance_date(m.group("date"), m.group("sep"))
    if performed is None:
        return None
    set_label = _clean(m.group("set_label"))
    location = _clean(m.group("location"))
    pieces = [format_show_date(performed), location, set_label]
    return ParsedTitle(
        title=" ".join(p for p in pieces if p),
        artist=_clean(m.group("artist")),
        performance_date=performed,
        location=location,
        set_label=set_label,
    )


def _regular_track(m, raw):
    artist = _clean(m.group("artist"))
    if m.group("date") is not None:
        performed = parse_performance_date(m.group("date"), m.group("sep"))
        if performed is not None:
            return ParsedTitle(
                title=m.group("title").strip(),
                artist=artist,
                performance_date=performed,
                location=_clean(m.group("location")),
            )
        # Unparsable date: keep the parenthetical as part of the title
        return ParsedTitle(title=raw[m.start("title"):].strip(), artist=artist)
    return ParsedTitle(title=m.group("title").strip(), artist=artist)


# Order matters: the full-show shape is a special case of a regular track.
RULES = (
    (_FULL_SHOW_RE, _full_show),
    (_TRACK_RE, _regular_track),
)


def parse_title(raw, rules=RULES):
    """Split a raw station title into artist, title, date and location.

    Returns a ParsedTitle.  When no rule matches, the raw string is the
    title and every other field is unset.
    """
    raw = raw or ""
    for pattern, extract in rules:
        m = pattern.match(raw)
        if not m:
            continue
        parsed = extract(m, raw)
        if parsed is not None:
            return parsed
    return ParsedTitle(title=raw)
