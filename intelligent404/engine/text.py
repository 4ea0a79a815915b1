"""Display helpers for the suggestions shown on a not-found page."""

from __future__ import annotations

import re

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9\-_.]+")
_SEPARATOR_RE = re.compile(r"[_-]+")


def sanitize_query(key: str) -> str:
    """Turn a match key into a search phrase safe to show to visitors."""

    # Removal runs first so only surviving separators become spaces.
    cleaned = _DISALLOWED_RE.sub("", key)
    return _SEPARATOR_RE.sub(" ", cleaned)
