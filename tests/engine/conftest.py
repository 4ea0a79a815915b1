"""Shared fixtures for engine tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from intelligent404.engine.config import load_config
from intelligent404.engine.types import Candidate, DataSource


@pytest.fixture()
def guess_config():
    """Provide a mutable copy of the default configuration."""

    return load_config(None)


def make_candidate(link: str, group: str = "Pages", title: str = "") -> Candidate:
    return Candidate(link=link, group=group, title=title or link)


def make_source(group: str, links: Iterable[str]) -> DataSource:
    return DataSource(group=group, candidates=[make_candidate(link, group) for link in links])
