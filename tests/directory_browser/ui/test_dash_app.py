from __future__ import annotations

import json

from directory_browser.ui.dash_app import create_dash_app


def _write_config_dir(tmp_path, companies):
    (tmp_path / "directory.json").write_text(
        json.dumps({"ui_title": "Test Directory", "records": {"file": "companies.json"}}),
        encoding="utf-8",
    )
    (tmp_path / "companies.json").write_text(json.dumps(companies), encoding="utf-8")
    return tmp_path


def test_create_dash_app_builds_layout(tmp_path):
    root = _write_config_dir(
        tmp_path,
        [{"name": "Acme", "location": "London", "industry": "Finance"}],
    )

    app = create_dash_app(root, load_in_background=False)

    assert app.title == "Test Directory"
    assert app.layout is not None


def test_create_dash_app_survives_broken_records_file(tmp_path):
    root = _write_config_dir(tmp_path, {"not": "a list"})

    app = create_dash_app(root, load_in_background=False)

    assert app.title == "Test Directory"


def test_create_dash_app_registers_state_and_render_callbacks(tmp_path):
    root = _write_config_dir(
        tmp_path,
        [{"name": "Acme", "location": "London", "industry": "Finance"}],
    )

    app = create_dash_app(root, load_in_background=False)

    outputs = " ".join(app.callback_map)
    assert "view-state.data" in outputs
    assert "company-grid.children" in outputs
    assert "load-poll.disabled" in outputs
