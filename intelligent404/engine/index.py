"""Coordinator for the 404 guessing pipeline."""

from __future__ import annotations

from typing import Sequence

from .config import GuessConfig, load_config
from .matcher import match_candidates
from .paths import normalize_request_path
from .policy import decide
from .types import DataSource, Decision, NoAction


def guess(
    raw_path: str | None,
    sources: Sequence[DataSource] | None,
    config: GuessConfig | None = None,
) -> Decision:
    """Return the decision for a request path that produced a 404."""

    guess_config = config or load_config(None)

    key = normalize_request_path(raw_path)
    if key is None:
        return NoAction()
    if sources is None or not isinstance(sources, (list, tuple)):
        return NoAction()

    matches = match_candidates(key, sources)
    return decide(matches, guess_config.redirect_on_single_match)
