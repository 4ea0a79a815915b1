"""Typed data structures used by the 404 guessing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union


@dataclass(frozen=True)
class Candidate:
    """Linkable entity that a not-found request may have been aiming for."""

    link: str
    group: str
    title: str = ""
    obj: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DataSource:
    """Already-filtered candidates presented under a single group label."""

    group: str
    candidates: Sequence[Candidate]


@dataclass
class MatchSet:
    """Exact and phonetic matches for a match key, deduplicated by link."""

    key: str
    exact: Dict[str, Candidate] = field(default_factory=dict)
    possible: Dict[str, Candidate] = field(default_factory=dict)
    grouped: Dict[str, List[Candidate]] = field(default_factory=dict)

    @property
    def exact_count(self) -> int:
        return len(self.exact)

    @property
    def possible_count(self) -> int:
        return len(self.possible)


@dataclass(frozen=True)
class Redirect:
    """Send the visitor to ``link`` with a permanent redirect."""

    link: str
    status_code: int = 301


@dataclass(frozen=True)
class Present:
    """Show the grouped candidates alongside the not-found page."""

    groups: Dict[str, List[Candidate]]
    search_query: str


@dataclass(frozen=True)
class NoAction:
    """Leave the not-found response as it is."""


Decision = Union[Redirect, Present, NoAction]
