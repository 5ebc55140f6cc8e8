"""Tests for the command line entry point."""

import pytest

import main
from routegpx.config import settings
from routegpx.tools.parser import parse_gpx


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "loop.gpx"
    path.write_text(
        "<gpx><metadata><name>Equator</name></metadata><trk><trkseg>"
        '<trkpt lat="0" lon="0"><ele>10</ele></trkpt>'
        '<trkpt lat="0" lon="1"><ele>25</ele></trkpt>'
        "</trkseg></trk></gpx>",
        encoding="utf-8",
    )
    return path


class TestCli:
    """Test CLI commands."""

    def test_summary(self, gpx_file, capsys):
        assert main.main(["summary", str(gpx_file)]) == 0

        out = capsys.readouterr().out
        assert "Equator" in out
        assert "111.2 km" in out
        assert "15 m" in out

    def test_export(self, gpx_file, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "output_dir", tmp_path / "output")

        assert main.main(["export", str(gpx_file), "Equator ride"]) == 0

        written = tmp_path / "output" / "Equator_ride.gpx"
        route = parse_gpx(written.read_text(encoding="utf-8"))
        assert route.name == "Equator ride"
        assert [(p.lat, p.lng, p.ele) for p in route.trackpoints] == [
            (0.0, 0.0, 10.0), (0.0, 1.0, 25.0)
        ]

    def test_missing_file(self, tmp_path, capsys):
        assert main.main(["summary", str(tmp_path / "nope.gpx")]) == 1
        assert "Error" in capsys.readouterr().out

    def test_usage(self, capsys):
        assert main.main([]) == 1
        assert main.main(["convert", "x.gpx"]) == 1
        assert "Usage" in capsys.readouterr().out
