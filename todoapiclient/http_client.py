"""Shared HTTP session for the todo API."""

import requests

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session.

    No retry adapter is mounted: a connection failure surfaces on the first attempt.
    """
    global _session
    if _session is None:
        _session = requests.Session()
    return _session
