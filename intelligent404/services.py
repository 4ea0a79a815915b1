"""Service functions connecting the guessing engine to the Django site.

These functions resolve the configured data sources into candidate lists,
decide whether a not-found request is eligible for guessing at all, and run
the engine for a request. They are kept apart from the middleware so they
can be unit tested and reused from views.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from django.apps import apps
from django.conf import settings
from django.core.exceptions import FieldError, ValidationError
from django.http import HttpRequest

from .engine.config import DEFAULT_GROUP, GuessConfig, load_config
from .engine.index import guess
from .engine.paths import normalize_request_path
from .engine.types import Candidate, DataSource, Decision, NoAction
from .models import Page, PageType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataSourceSpec:
    """One configured model to search, with its queryset lookups."""

    model: str
    group: str = DEFAULT_GROUP
    filter: Dict[str, Any] = field(default_factory=dict)
    exclude: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> 'DataSourceSpec':
        return cls(
            model=str(entry.get('model', '')),
            group=entry.get('group') or DEFAULT_GROUP,
            filter=dict(entry.get('filter') or {}),
            exclude=dict(entry.get('exclude') or {}),
        )


def resolve_config() -> GuessConfig:
    """Build the configuration from the ``INTELLIGENT404`` settings."""

    return load_config(
        getattr(settings, 'INTELLIGENT404_CONFIG_FILE', None),
        overrides=getattr(settings, 'INTELLIGENT404', None),
    )


def _resolve_model(label: str):
    try:
        model = apps.get_model(label)
    except (LookupError, ValueError):
        logger.debug('Skipping data source %r: unknown model', label)
        return None
    if not callable(getattr(model, 'get_absolute_url', None)):
        logger.debug('Skipping data source %r: model has no get_absolute_url()', label)
        return None
    return model


def collect_sources(config: GuessConfig) -> List[DataSource] | None:
    """Return the candidates for every usable configured data source.

    ``None`` is returned when no list of data sources is configured, which
    disables guessing altogether. Entries naming unknown models, models
    that cannot produce a link, or lookups the model rejects are skipped.
    """

    entries = config.data_sources
    if entries is None:
        return None

    sources: List[DataSource] = []
    for entry in entries:
        try:
            spec = DataSourceSpec.from_entry(entry)
        except (TypeError, ValueError):
            logger.debug('Skipping data source %r: malformed filter or exclude', entry)
            continue
        model = _resolve_model(spec.model)
        if model is None:
            continue

        try:
            candidates = _load_candidates(model, spec)
        except (FieldError, ValidationError, TypeError, ValueError) as exc:
            logger.debug('Skipping data source %r: %s', spec.model, exc)
            continue
        sources.append(DataSource(group=spec.group, candidates=candidates))
    return sources


def _load_candidates(model, spec: DataSourceSpec) -> List[Candidate]:
    results = model._default_manager.all()
    if spec.filter:
        results = results.filter(**spec.filter)
    if spec.exclude:
        results = results.exclude(**spec.exclude)

    # Managers offering link_map() resolve every URL in a single query.
    link_map = getattr(model._default_manager, 'link_map', None)
    links = link_map() if callable(link_map) else {}

    return [
        Candidate(
            link=links.get(obj.pk) or obj.get_absolute_url(),
            group=spec.group,
            title=str(getattr(obj, 'title', '') or obj),
            obj=obj,
        )
        for obj in results
    ]


def error_page_link(error_code: int = 404) -> str | None:
    """Return the URL of the error page for ``error_code``, if one exists."""

    page = (
        Page.objects
        .filter(page_type=PageType.ERROR, error_code=error_code)
        .order_by('pk')
        .first()
    )
    return page.get_absolute_url() if page else None


def is_error_page_request(path: str, error_code: int = 404) -> bool:
    """Return True when ``path`` is the not-found page itself."""

    link = error_page_link(error_code)
    return link is not None and link == path


def guessing_enabled(config: GuessConfig) -> bool:
    """Guessing runs outside debug mode unless explicitly allowed."""

    return not settings.DEBUG or config.allow_in_dev_mode


def guess_for_request(request: HttpRequest, config: GuessConfig | None = None) -> Decision:
    """Run the guessing engine for a request that resulted in a 404."""

    guess_config = config or resolve_config()

    if not guessing_enabled(guess_config):
        logger.debug('Not guessing for %s: debug mode', request.path)
        return NoAction()
    raw_path = request.get_full_path()
    if not normalize_request_path(raw_path):
        return NoAction()  # an empty key matches nothing
    if is_error_page_request(request.path):
        return NoAction()

    sources = collect_sources(guess_config)
    return guess(raw_path, sources, guess_config)
