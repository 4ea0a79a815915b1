"""Decide what to do with the matches found for a not-found request."""

from __future__ import annotations

from .text import sanitize_query
from .types import Decision, MatchSet, NoAction, Present, Redirect


def decide(matches: MatchSet, redirect_on_single_match: bool) -> Decision:
    """Return the action for ``matches``.

    A single exact match, or failing that a single possible match, is
    redirected to when ``redirect_on_single_match`` is enabled. Any other
    non-empty result is presented for the visitor to choose from.
    """

    exact_count = matches.exact_count
    possible_count = matches.possible_count

    if exact_count == 1 and redirect_on_single_match:
        return Redirect(link=next(iter(matches.exact)))
    if exact_count == 0 and possible_count == 1 and redirect_on_single_match:
        return Redirect(link=next(iter(matches.possible)))
    if exact_count > 0 or possible_count > 0:
        return Present(groups=matches.grouped, search_query=sanitize_query(matches.key))
    return NoAction()
