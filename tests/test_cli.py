import json
from pathlib import Path

from webweaver.presentation.cli import config as cli_config
from webweaver.presentation.cli.app import main
from webweaver.presentation.cli.render import describe_tool, format_field_value
from webweaver.services.tool_service import ToolService


def _write_save(path: Path) -> Path:
    payload = {
        "playerData": {
            "playTime": 3725,
            "defeatedMossMother": True,
            "Tools": {"savedData": [{"Name": "Compass", "Data": {"IsUnlocked": True}}]},
        }
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_text_output(tmp_path: Path, capsys) -> None:
    save = _write_save(tmp_path / "save.json")
    exit_code = main([str(save), "--config", str(tmp_path / "config.json")])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "=== General ===" in out
    assert "01h 02m 05s" in out
    assert "=== Bosses (1/" in out
    assert "[x] Compass (Yellow)" in out
    assert "Nothing equipped." in out
    assert "Other Tools" not in out


def test_show_other_tools(tmp_path: Path, capsys) -> None:
    save = _write_save(tmp_path / "save.json")
    main([str(save), "--show-other", "--config", str(tmp_path / "config.json")])
    assert "=== Other Tools (not counted) ===" in capsys.readouterr().out


def test_json_output(tmp_path: Path, capsys) -> None:
    save = _write_save(tmp_path / "save.json")
    exit_code = main([str(save), "--json", "--config", str(tmp_path / "config.json")])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["tools"]["stats"]["unlocked"] == 1
    assert payload["general"]["playTime"]["value"] == 3725


def test_config_selects_json_output(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"
    cli_config.save_config({"output_format": "json"}, config_path)
    save = _write_save(tmp_path / "save.json")

    main([str(save), "--config", str(config_path)])
    assert json.loads(capsys.readouterr().out)["bosses"]["stats"]["defeated"] == 1


def test_missing_save_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main([str(tmp_path / "nope.json"), "--config", str(tmp_path / "config.json")])
    assert exit_code == 1
    assert "Failed to analyze save file" in capsys.readouterr().out


def test_config_round_trip_normalizes(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cli_config.save_config({"output_format": "xml", "show_other_tools": "yes", "log_level": "debug"}, path)

    assert cli_config.load_config(path) == {
        "output_format": "text",
        "show_other_tools": False,
        "log_level": "DEBUG",
    }


def test_config_defaults_when_unreadable(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    assert cli_config.load_config(path) == cli_config.default_config()
    path.write_text("[]", encoding="utf-8")
    assert cli_config.load_config(path) == cli_config.default_config()


def test_format_field_value() -> None:
    assert format_field_value("playTime", 90) == "00h 01m 30s"
    assert format_field_value("geo", 12345) == "12,345"
    assert format_field_value("permadeathMode", 1) == "Steel Soul"
    assert format_field_value("version", None) == "-"
    assert format_field_value("playTime", "bad") == "bad"


def test_describe_upgrade_set() -> None:
    record = {"Tools": {"savedData": [{"Name": "Curve Claws", "Data": {"IsUnlocked": True}}]}}
    tools = ToolService().project(record).tools
    curve = next(tool for tool in tools if tool.upgrade_set_name == "Curveclaw")

    assert describe_tool(curve) == "[x] Curveclaw (Red) [Curveclaw: Curveclaw*, Curvesickle]"


def test_format_field_value_falls_back_on_infinite_play_time() -> None:
    assert format_field_value("playTime", float("inf")) == "inf"


def test_text_output_with_infinite_play_time(tmp_path: Path, capsys) -> None:
    save = tmp_path / "save.json"
    save.write_text('{"playerData": {"playTime": Infinity}}', encoding="utf-8")

    exit_code = main([str(save), "--config", str(tmp_path / "config.json")])
    assert exit_code == 0
    assert "inf" in capsys.readouterr().out
