"""Search phrase sanitising tests."""

from __future__ import annotations

import pytest

from intelligent404.engine.text import sanitize_query


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("my_page-name!!", "my page name"),
        ("about--us", "about us"),
        ("a_-_b", "a b"),
        ("version-2.0", "version 2.0"),
        ("naïve-café", "nave caf"),
        ("", ""),
    ],
)
def test_sanitize_query(key, expected):
    assert sanitize_query(key) == expected


def test_removal_happens_before_separator_collapse():
    # The "!" sits between two dashes; once removed they form a single run.
    assert sanitize_query("a-!-b") == "a b"
