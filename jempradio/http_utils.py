"""Shared HTTP helpers."""

import requests


def create_session(user_agent):
    """Session shared by the status feed and the Relisten lookup."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session


def api_get(session, url, params=None):
    """GET ``url`` once and return the decoded JSON body.

    Raises requests.RequestException on transport or HTTP errors and
    ValueError if the body is not JSON.
    """
    resp = session.get(url, params=params)
    resp.raise_for_status()
    return resp.json()
