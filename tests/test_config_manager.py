import json

import pytest

from errvalue.core.config import (
    create_default_settings,
    get_settings,
    reset_settings,
    save_settings,
)
from errvalue.core.errors import ErrvalueError


def test_defaults():
    s = get_settings()
    assert s.output_format == "text"
    assert s.json_logs is False


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_env_override_for_output_format(monkeypatch):
    monkeypatch.setenv("ERRV_OUTPUT_FORMAT", "json")
    reset_settings()

    assert get_settings().output_format == "json"


def test_env_override_for_json_logs(monkeypatch):
    monkeypatch.setenv("ERRV_JSON_LOGS", "true")
    reset_settings()

    assert get_settings().json_logs is True


def test_settings_file_layer(isolated_settings):
    (isolated_settings / "settings.json").write_text(
        json.dumps({"output_format": "json", "unrelated": 1}), encoding="utf-8"
    )
    reset_settings()

    assert get_settings().output_format == "json"


def test_malformed_settings_file_is_ignored(isolated_settings):
    (isolated_settings / "settings.json").write_text("{not json", encoding="utf-8")
    reset_settings()

    assert get_settings().output_format == "text"


def test_invalid_value_raises_app_error(monkeypatch):
    monkeypatch.setenv("ERRV_OUTPUT_FORMAT", "yaml")
    reset_settings()

    with pytest.raises(ErrvalueError):
        get_settings()


def test_save_and_reload_settings(isolated_settings):
    s = create_default_settings()
    s.output_format = "json"
    path = save_settings(s)
    assert path == isolated_settings / "settings.json"

    # New process simulation: clear singleton, reload from file
    reset_settings()
    s2 = get_settings()
    assert s2.output_format == "json"


def test_assignment_is_validated():
    s = create_default_settings()
    with pytest.raises(ValueError):
        s.output_format = "xml"


def test_non_object_settings_file_is_ignored(isolated_settings):
    (isolated_settings / "settings.json").write_text("[1]", encoding="utf-8")
    reset_settings()

    assert get_settings().output_format == "text"


def test_output_format_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("ERRV_OUTPUT_FORMAT", "JSON")
    reset_settings()

    assert get_settings().output_format == "json"
