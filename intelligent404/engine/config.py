"""Configuration helpers for the 404 guessing engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

DEFAULT_GROUP = "Pages"


@dataclass(frozen=True)
class GuessConfig:
    """Typed wrapper around the resolved configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    @property
    def allow_in_dev_mode(self) -> bool:
        return bool(self.raw.get("allow_in_dev_mode", False))

    @property
    def redirect_on_single_match(self) -> bool:
        return bool(self.raw.get("redirect_on_single_match", True))

    @property
    def data_sources(self) -> List[Dict[str, Any]] | None:
        """Configured data sources in search order, or ``None`` if unusable.

        Besides a list of entries carrying a ``model`` key, a mapping of model
        label to options is accepted.
        """

        sources = self.raw.get("data_sources")
        if isinstance(sources, Mapping):
            return [
                {"model": label, **(options or {})}
                for label, options in sources.items()
            ]
        if not sources or not isinstance(sources, (list, tuple)):
            return None
        return [dict(entry) for entry in sources if isinstance(entry, Mapping)]


DEFAULTS: Dict[str, Any] = {
    "allow_in_dev_mode": False,
    "redirect_on_single_match": True,
    "data_sources": [
        {
            "model": "intelligent404.Page",
            "group": DEFAULT_GROUP,
            "filter": {},
            "exclude": {"page_type__in": ["error", "redirector", "virtual"]},
        },
    ],
}


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GuessConfig:
    """Load configuration from YAML and ``overrides``, merging with defaults."""

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        merge_into(data, user)

    if overrides:
        merge_into(data, dict(overrides))

    return GuessConfig(data)


def merge_into(base: Dict[str, Any], override: Mapping[str, Any]) -> None:
    """Recursively merge override into base dict; lists are replaced."""

    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value
