import json

from typer.testing import CliRunner

from errvalue.cli import app

runner = CliRunner()


def test_config_show_lists_settings():
    res = runner.invoke(app, ["config", "show"])
    assert res.exit_code == 0, res.output
    assert "output_format" in res.output
    assert "json_logs" in res.output


def test_config_show_json():
    res = runner.invoke(app, ["config", "show", "--json"])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout) == {"output_format": "text", "json_logs": False}


def test_config_format_persists(isolated_settings):
    res = runner.invoke(app, ["config", "format", "JSON"])
    assert res.exit_code == 0, res.output

    saved = json.loads((isolated_settings / "settings.json").read_text(encoding="utf-8"))
    assert saved["output_format"] == "json"

    res2 = runner.invoke(app, ["new", "timeout"])
    assert json.loads(res2.stdout) == {"message": "timeout"}


def test_config_format_rejects_unknown(isolated_settings):
    res = runner.invoke(app, ["config", "format", "xml"])
    assert res.exit_code == 1
    assert "Unsupported output format" in res.output
    assert not (isolated_settings / "settings.json").exists()
