import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from clockface.cli import app

runner = CliRunner()


def _invoke(args):
    result = runner.invoke(app, args)
    if result.exit_code != 0:
        print(result.stdout)
        print(result.exception)
    return result


def test_render_json():
    result = _invoke(["clock", "render", "--time", "03:00", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data) == 76
    assert data[0]["kind"] == "circle"
    hour = next(p for p in data if p["kind"] == "hand" and p["hand"] == "hour")
    assert hour["angle"] == 90


def test_render_json_degenerate():
    result = _invoke(["clock", "render", "--time", "03:00", "--padding", "500", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == []


def test_render_table():
    result = _invoke(["clock", "render", "--time", "15:00:00"])

    assert result.exit_code == 0
    assert "Clock face at 03:00:00" in result.stdout
    assert "circle" in result.stdout


def test_render_nothing_to_draw():
    result = _invoke(["clock", "render", "--time", "03:00", "--width", "50", "--height", "50"])

    assert result.exit_code == 0
    assert "Nothing to draw" in result.stdout


def test_render_svg(tmp_path):
    out = tmp_path / "out" / "clock.svg"
    result = _invoke(["clock", "render", "--time", "10:10:30", "--svg", str(out)])

    assert result.exit_code == 0
    assert out.exists()
    assert "<svg" in out.read_text()


def test_render_invalid_time():
    result = runner.invoke(app, ["clock", "render", "--time", "25:00"])

    assert result.exit_code == 1
    assert "Invalid time" in result.stdout


def test_angles():
    result = _invoke(["clock", "angles", "--time", "06:30"])

    assert result.exit_code == 0
    assert "Hour: 195" in result.stdout
    assert "Minute: 180" in result.stdout
    assert "Second: 0" in result.stdout


def test_config_show_json(monkeypatch):
    monkeypatch.setenv("CLOCKFACE_PADDING", "12")
    result = _invoke(["config", "show", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["padding"] == 12
    assert data["tick_length"] == 20


def test_clock_run_starts_service():
    service = MagicMock()
    with patch("clockface.clock.service.ClockService", return_value=service):
        result = _invoke(["clock", "run"])

    assert result.exit_code == 0
    service.run_daemon.assert_called_once()
