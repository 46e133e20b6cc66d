"""End-to-end tests for the command-line front end."""

import sys
import os
import shutil

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import cli
from config import LOCATION_EXPORT_NAME, RAINFALL_EXPORT_NAME

SAMPLE_CSV = os.path.join(os.path.dirname(__file__), "..", "data", "samples", "weather_sample.csv")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary working directory holding a copy of the sample file."""
    shutil.copy(SAMPLE_CSV, tmp_path / "weather.csv")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCommands:
    def test_location_default_export(self, workdir, capsys):
        assert cli.main(["weather", "location"]) == 0
        out = capsys.readouterr().out
        assert "# 2009-01-05 # Sydney" in out
        assert "Data was saved in the file" in out
        exported = (workdir / LOCATION_EXPORT_NAME).read_text().splitlines()
        assert len(exported) == 4

    def test_location_arguments(self, workdir):
        assert cli.main([
            "weather.csv", "location", "--location", "Perth", "--years", "2010",
            "--output", "perth.csv",
        ]) == 0
        exported = (workdir / "perth.csv").read_text().splitlines()
        assert len(exported) == 4
        assert all(",Perth," in line for line in exported[1:])

    def test_rainfall(self, workdir, capsys):
        assert cli.main(["weather.csv", "rainfall", "--precision", "1"]) == 0
        out = capsys.readouterr().out
        assert "# Average rainfall in the Albury: 0.3 mm" in out
        assert "# Average rainfall in the Sydney: 5.9 mm" in out
        assert (workdir / RAINFALL_EXPORT_NAME).exists()

    def test_sunshine(self, workdir, capsys):
        assert cli.main(["weather.csv", "sunshine", "--output", "sunny.csv"]) == 0
        out = capsys.readouterr().out
        assert "Longest sunshine period was on 2010-2-20." in out
        assert len((workdir / "sunny.csv").read_text().splitlines()) == 4

    def test_stats(self, workdir, capsys):
        assert cli.main(["weather.csv", "stats"]) == 0
        out = capsys.readouterr().out
        assert "Amount of days suitable for fishing: 5" in out
        assert "Skipped 1 blank rows" in out


class TestErrors:
    def test_missing_file(self, workdir, capsys):
        assert cli.main(["missing", "stats"]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_unwritable_export(self, workdir, capsys):
        code = cli.main(["weather.csv", "sunshine", "--output", str(workdir / "no_dir" / "x.csv")])
        assert code == 1
        assert "error occurred while writing" in capsys.readouterr().out

    def test_unknown_command(self, workdir):
        with pytest.raises(SystemExit):
            cli.main(["weather.csv", "bogus"])
