"""Candidate matching tests."""

from __future__ import annotations

from intelligent404.engine.matcher import match_candidates
from intelligent404.engine.types import DataSource

from .conftest import make_candidate, make_source


def test_exact_match_takes_precedence_over_phonetic():
    source = make_source("Pages", ["/about-us/", "/company/about-us/", "/contact/"])

    matches = match_candidates("about-us", [source])

    assert list(matches.exact) == ["/about-us/", "/company/about-us/"]
    assert matches.possible == {}
    assert [item.link for item in matches.grouped["Pages"]] == ["/about-us/", "/company/about-us/"]


def test_similar_sounding_segment_is_a_possible_match():
    source = make_source("Pages", ["/about-us/", "/services/"])

    matches = match_candidates("abuot-us", [source])

    assert matches.exact == {}
    assert list(matches.possible) == ["/about-us/"]


def test_segment_comparison_is_case_sensitive():
    source = make_source("Pages", ["/about-us/"])

    matches = match_candidates("About-Us", [source])

    assert matches.exact_count == 0
    assert matches.possible_count == 1


def test_same_link_in_two_groups_counts_once():
    pages = make_source("Pages", ["/about-us/"])
    featured = make_source("Featured", ["/about-us/"])

    matches = match_candidates("about-us", [pages, featured])

    assert matches.exact_count == 1
    assert list(matches.grouped) == ["Pages", "Featured"]
    assert matches.grouped["Featured"][0].link == "/about-us/"


def test_same_possible_link_in_two_groups_counts_once():
    pages = make_source("Pages", ["/about-us/"])
    featured = make_source("Featured", ["/about-us/"])

    matches = match_candidates("abuot-us", [pages, featured])

    assert matches.exact_count == 0
    assert matches.possible_count == 1
    assert list(matches.grouped) == ["Pages", "Featured"]


def test_root_links_are_never_matched():
    source = make_source("Pages", ["/", "https://example.com/"])

    assert match_candidates("", [source]).grouped == {}
    assert match_candidates("home", [source]).grouped == {}


def test_empty_key_matches_nothing():
    source = make_source("Pages", ["/a/", "/2024/"])

    matches = match_candidates("", [source])

    assert matches.exact_count == 0
    assert matches.possible_count == 0
    assert matches.grouped == {}


def test_absolute_links_are_compared_by_last_segment():
    source = make_source("Pages", ["https://example.com/team/jane-doe"])

    matches = match_candidates("jane-doe", [source])

    assert list(matches.exact) == ["https://example.com/team/jane-doe"]


def test_groups_without_matches_are_left_out():
    pages = make_source("Pages", ["/pricing/"])
    blog = make_source("Blog", ["/blog/unrelated-story/"])

    matches = match_candidates("pricing", [pages, blog])

    assert list(matches.grouped) == ["Pages"]


def test_matched_candidate_is_returned_unchanged():
    candidate = make_candidate("/pricing/", title="Pricing")
    source = DataSource(group="Pages", candidates=[candidate])

    matches = match_candidates("pricing", [source])

    assert matches.exact["/pricing/"] is candidate
    assert matches.grouped["Pages"] == [candidate]
