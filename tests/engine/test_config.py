"""Configuration loading tests."""

from __future__ import annotations

import textwrap

from intelligent404.engine.config import DEFAULTS, GuessConfig, load_config


def test_defaults(guess_config):
    assert guess_config.allow_in_dev_mode is False
    assert guess_config.redirect_on_single_match is True
    assert guess_config.data_sources == DEFAULTS["data_sources"]


def test_defaults_are_not_shared_between_loads(guess_config):
    guess_config.raw["data_sources"][0]["group"] = "Changed"

    assert load_config(None).data_sources[0]["group"] == "Pages"


def test_yaml_file_and_overrides_are_merged(tmp_path):
    path = tmp_path / "intelligent404.yaml"
    path.write_text(
        textwrap.dedent(
            """
            allow_in_dev_mode: true
            redirect_on_single_match: true
            data_sources:
              - model: intelligent404.Page
                group: Articles
                filter:
                  parent__slug: blog
            """
        ),
        encoding="utf-8",
    )

    config = load_config(path, overrides={"redirect_on_single_match": False})

    assert config.allow_in_dev_mode is True
    assert config.redirect_on_single_match is False
    assert config.data_sources == [
        {"model": "intelligent404.Page", "group": "Articles", "filter": {"parent__slug": "blog"}},
    ]


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yaml")

    assert config.raw == DEFAULTS


def test_mapping_of_models_is_accepted():
    config = GuessConfig({"data_sources": {"intelligent404.Page": {"group": "Pages"}, "auth.User": None}})

    assert config.data_sources == [
        {"model": "intelligent404.Page", "group": "Pages"},
        {"model": "auth.User"},
    ]


def test_missing_or_invalid_data_sources():
    assert GuessConfig({}).data_sources is None
    assert GuessConfig({"data_sources": "intelligent404.Page"}).data_sources is None
    assert GuessConfig({"data_sources": []}).data_sources is None
