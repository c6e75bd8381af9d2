"""JEMP Radio station status feed (radio.co)."""

from dataclasses import dataclass, field
from typing import List, Optional

import requests

from jempradio.config import STATUS_URL
from jempradio.http_utils import api_get
from jempradio.track import Track


class FeedError(Exception):
    """The station status could not be fetched or decoded."""


@dataclass(frozen=True)
class Status:
    current_track: Optional[Track] = None
    history: List[Track] = field(default_factory=list)

    @classmethod
    def from_json(cls, doc):
        if not isinstance(doc, dict):
            raise FeedError("parsing status response: expected an object")
        current = doc.get("current_track")
        history = doc.get("history") or []
        if not isinstance(history, list):
            raise FeedError("parsing status response: history is not a list")
        return cls(
            current_track=Track.from_json(current) if isinstance(current, dict) else None,
            history=[Track.from_json(rec) for rec in history if isinstance(rec, dict)],
        )

    def last_n(self, n):
        """The ``n`` most recent history entries; 0 returns all of them."""
        if n == 0:
            return list(self.history)
        return list(self.history[:n])


def fetch_status(session, url=STATUS_URL):
    """GET the station status and parse it into a Status."""
    try:
        doc = api_get(session, url)
    except (requests.RequestException, ValueError) as e:
        raise FeedError(f"get JEMP Radio status: {e}") from e
    return Status.from_json(doc)
