"""Redirect decision tests."""

from __future__ import annotations

import pytest

from intelligent404.engine.policy import decide
from intelligent404.engine.types import MatchSet, NoAction, Present, Redirect

from .conftest import make_candidate


def build_matches(exact=(), possible=(), key="some-page") -> MatchSet:
    matches = MatchSet(key=key)
    for link in exact:
        matches.exact[link] = make_candidate(link)
        matches.grouped.setdefault("Pages", []).append(matches.exact[link])
    for link in possible:
        matches.possible[link] = make_candidate(link)
        matches.grouped.setdefault("Pages", []).append(matches.possible[link])
    return matches


def test_single_exact_match_redirects_even_with_possibles():
    matches = build_matches(exact=["/one/"], possible=["/two/", "/three/"])

    assert decide(matches, True) == Redirect(link="/one/")


def test_single_possible_match_redirects_when_no_exact():
    decision = decide(build_matches(possible=["/two/"]), True)

    assert isinstance(decision, Redirect)
    assert decision.link == "/two/"
    assert decision.status_code == 301


@pytest.mark.parametrize(
    ("exact", "possible"),
    [
        (["/one/", "/two/"], []),
        ([], ["/one/", "/two/"]),
        (["/one/", "/two/"], ["/three/"]),
    ],
)
def test_ambiguous_matches_are_presented(exact, possible):
    matches = build_matches(exact=exact, possible=possible, key="my_page-name!!")

    decision = decide(matches, True)

    assert isinstance(decision, Present)
    assert decision.groups is matches.grouped
    assert decision.search_query == "my page name"


def test_no_matches_means_no_action():
    assert decide(build_matches(), True) == NoAction()
    assert decide(build_matches(), False) == NoAction()


@pytest.mark.parametrize(
    ("exact", "possible"),
    [
        (["/one/"], []),
        ([], ["/one/"]),
        (["/one/"], ["/two/"]),
    ],
)
def test_redirect_disabled_always_presents(exact, possible):
    decision = decide(build_matches(exact=exact, possible=possible), False)

    assert isinstance(decision, Present)
