from __future__ import annotations

import json

import pytest

from directory_browser.config.loader import load_config
from directory_browser.config.model import DEFAULT_INDUSTRIES, DEFAULT_LOCATIONS
from directory_browser.core.exceptions import ConfigError
from directory_browser.core.sort_key import SortKey
from directory_browser.sources.http_source import HttpRecordSource
from directory_browser.sources.json_file import JsonFileRecordSource


def _write_config(tmp_path, raw):
    (tmp_path / "directory.json").write_text(json.dumps(raw), encoding="utf-8")
    return tmp_path


def test_minimal_config_uses_defaults(tmp_path):
    root = _write_config(tmp_path, {"records": {"file": "companies.json"}})

    cfg = load_config(root)

    assert cfg.ui_title == "Companies Directory"
    assert cfg.locations == DEFAULT_LOCATIONS
    assert cfg.industries == DEFAULT_INDUSTRIES
    assert cfg.page_size_choices == [6, 9, 12]
    assert cfg.default_page_size == 9
    assert cfg.collation_locale is None

    defaults = cfg.default_view_state()
    assert defaults.sort is SortKey.NAME_ASC
    assert defaults.page.page_size == 9
    assert defaults.page.page_number == 1


def test_relative_records_file_resolves_against_root(tmp_path):
    root = _write_config(tmp_path, {"records": {"file": "data/companies.json"}})

    cfg = load_config(root)

    assert cfg.records.file == (tmp_path / "data" / "companies.json").resolve()
    assert isinstance(cfg.records.build_source(), JsonFileRecordSource)


def test_url_records_build_http_source(tmp_path):
    root = _write_config(
        tmp_path,
        {"records": {"url": "https://example.test/companies.json", "timeout": 3}},
    )

    source = load_config(root).records.build_source()

    assert isinstance(source, HttpRecordSource)
    assert source.timeout == 3.0


def test_overrides_are_applied(tmp_path):
    root = _write_config(
        tmp_path,
        {
            "ui_title": "Partners",
            "records": {"file": "companies.json"},
            "locations": ["Oslo"],
            "industries": ["Energy"],
            "page_size_choices": [5, 10],
            "default_page_size": 10,
        },
    )

    cfg = load_config(root)

    assert cfg.ui_title == "Partners"
    assert cfg.locations == ["Oslo"]
    assert cfg.industries == ["Energy"]
    assert cfg.default_view_state().page.page_size == 10


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"records": {}},
        {"records": {"file": "a.json", "url": "https://example.test/a.json"}},
        {"records": {"url": "ftp://example.test/a.json"}},
        {"records": {"file": "a.json", "timeout": 0}},
        {"records": {"file": "a.json"}, "page_size_choices": [0, 6]},
        {"records": {"file": "a.json"}, "page_size_choices": []},
        {"records": {"file": "a.json"}, "default_page_size": 7},
        {"records": {"file": "a.json"}, "locations": "London"},
        {"records": {"file": "a.json"}, "industries": [""]},
    ],
)
def test_invalid_config_values(tmp_path, raw):
    root = _write_config(tmp_path, raw)
    with pytest.raises(ConfigError):
        load_config(root)


def test_invalid_json_is_config_error(tmp_path):
    (tmp_path / "directory.json").write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
