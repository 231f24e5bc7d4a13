import logging

import pytest

from errvalue.core.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from real settings files and restore root logging."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ERRV_SETTINGS_PATH", str(tmp_path / "settings.json"))
    for name in ("ERRV_OUTPUT_FORMAT", "ERRV_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield tmp_path
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_settings()
