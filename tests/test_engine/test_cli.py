"""Tests for the command-line entry point."""

import numpy as np

from vectorloop.cli import main


def test_cli_prints_points(square_file, capsys):
    assert main([str(square_file), "-n", "4"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 8
    assert lines[1] == "5.0 0.0"


def test_cli_segments(square_file, capsys):
    assert main([str(square_file), "--segments"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("M0.0,0.0 L10.0,0.0")
    assert out.endswith("Z")


def test_cli_writes_npy(square_file, tmp_path):
    out = tmp_path / "points.npy"
    assert main([str(square_file), "-n", "4", "-p", "float32", "-o", str(out)]) == 0
    flat = np.load(out)
    assert flat.dtype == np.float32
    assert flat.shape == (16,)


def test_cli_reports_errors(tmp_path, capsys):
    assert main([str(tmp_path / "nope.svg")]) == 1
    assert "SourceIOError" in capsys.readouterr().err
