"""Match a request key against grouped candidate links."""

from __future__ import annotations

from typing import Iterable

from .paths import candidate_segment
from .phonetic import soundex
from .types import DataSource, MatchSet


def match_candidates(key: str, sources: Iterable[DataSource]) -> MatchSet:
    """Classify every candidate as an exact match, a possible match or neither.

    Exact and possible matches are keyed by link so that one page reachable
    through several data sources is counted once. The grouped view keeps one
    entry per source the candidate matched in, in source order.
    """

    matches = MatchSet(key=key)
    sounds_like = soundex(key)

    for source in sources:
        for candidate in source.candidates:
            segment = candidate_segment(candidate.link)
            if not segment:
                continue  # site root

            if key and segment == key:
                matches.exact[candidate.link] = candidate
            elif sounds_like and sounds_like == soundex(segment):
                matches.possible[candidate.link] = candidate
            else:
                continue
            matches.grouped.setdefault(source.group, []).append(candidate)

    return matches
