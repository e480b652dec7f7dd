"""Tests for geoaccuracy.cli module."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from geoaccuracy import AccuracyScale, cli
from geoaccuracy.exceptions import InvalidAccuracyCode, InvalidCoordinate


class TestParseAccuracy:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("City", AccuracyScale.City),
            ("extendedzip", AccuracyScale.ExtendedZip),
            ("  ZIP ", AccuracyScale.Zip),
            ("0", AccuracyScale.Unknown),
            ("10", AccuracyScale.State),
        ],
    )
    def test_by_name_or_code(self, raw: str, expected: AccuracyScale):
        assert cli.parse_accuracy(raw) is expected

    @pytest.mark.parametrize("bad", ["Planet", "11", "-3", ""])
    def test_unknown_raises(self, bad: str):
        with pytest.raises(InvalidAccuracyCode):
            cli.parse_accuracy(bad)


class TestRender:
    def test_radius(self):
        lines = cli.render(["0.3"])
        assert any(line.endswith("accuracy: ExtendedZip") for line in lines)

    def test_geolocation(self):
        lines = cli.render(["37.77493", "-122.41942", "City"])
        assert lines[0].endswith("Geolocation(37.77493, -122.41942, City)")
        assert lines[1].endswith("code: 8")

    def test_wrong_argument_count(self):
        with pytest.raises(ValueError, match="expected 1 or 3 values"):
            cli.render(["1", "2"])

    def test_invalid_coordinate(self):
        with pytest.raises(InvalidCoordinate):
            cli.render(["91", "0", "City"])


class TestMain:
    def test_single_shot(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["geoaccuracy", "10", "20", "Block"])
        cli.main()
        out = capsys.readouterr().out
        assert "Geolocation(10.00000, 20.00000, Block)" in out

    def test_bad_input_exits_1(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["geoaccuracy", "10", "-181", "Block"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert "Invalid longitude" in capsys.readouterr().err

    def test_non_numeric_exits_1(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["geoaccuracy", "far"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1

    def test_interactive(self, monkeypatch, capsys):
        answers = iter(["12", "1, 2, Street", "1 2", "q"])
        monkeypatch.setattr("sys.argv", ["geoaccuracy"])
        monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
        cli.main()
        out = capsys.readouterr().out
        assert "accuracy: City" in out
        assert "Geolocation(1.00000, 2.00000, Street)" in out
        assert "expected 1 or 3 values" in out
        assert "Bye!" in out


class TestScriptEntry:
    def test_runs_as_plain_script(self):
        src = Path(cli.__file__).resolve().parents[1]
        env = dict(os.environ, PYTHONPATH=str(src))
        result = subprocess.run(
            [sys.executable, str(Path(cli.__file__).resolve()), "0.3"],
            capture_output=True,
            text=True,
            env=env,
            check=False,
        )
        assert result.returncode == 0, result.stderr
        assert "accuracy: ExtendedZip" in result.stdout
