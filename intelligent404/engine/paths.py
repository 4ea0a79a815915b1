"""Request path and link normalisation for the 404 guessing engine."""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urlsplit

# Leading run of characters that may appear in a page URL
_PATH_PREFIX_RE = re.compile(r"^[a-z0-9._\-/]+", re.IGNORECASE)

# Legacy page extensions dropped before comparing segments
_PAGE_EXTENSION_RE = re.compile(r"\.(aspx?|html?|php[34]?)$", re.IGNORECASE)


def split_segments(path: str) -> List[str]:
    """Split ``path`` on ``/`` and drop empty components."""

    return [part for part in path.split("/") if part]


def normalize_request_path(raw_path: str | None) -> str | None:
    """Return the match key for a raw request path.

    ``None`` means nothing usable could be extracted and the lookup should be
    abandoned. An empty string is a valid key that simply matches nothing,
    e.g. for ``/`` or ``/.html``.
    """

    if not raw_path:
        return None
    prefix = _PATH_PREFIX_RE.match(raw_path)
    if prefix is None:
        return None
    uri = _PAGE_EXTENSION_RE.sub("", prefix.group(0))
    parts = split_segments(uri)
    return parts[-1] if parts else ""


def relative_link(link: str) -> str:
    """Return ``link`` relative to the site root, without a leading slash."""

    path = urlsplit(link).path
    return path.lstrip("/")


def candidate_segment(link: str) -> str:
    """Return the last path segment of ``link``; empty for the site root."""

    parts = split_segments(relative_link(link))
    return parts[-1] if parts else ""
