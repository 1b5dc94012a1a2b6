"""Tests for the command-line interface."""

import json
import pytest
from solar_sim.cli.main import main


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "solarLite" in out
    assert "threeBody" in out


def test_short_run(capsys):
    code = main(["--preset", "sunEarthMoon", "--steps", "20", "--report-every", "10", "--damping", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Sun-Earth-Moon" in out
    assert "Simulation complete!" in out


def test_config_file_with_override(tmp_path, capsys):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"preset": "threeBody", "steps": 5, "report_every": 5}))
    code = main(["--config", str(path), "--steps", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "steps: 3" in out


def test_invalid_value_reports_error(capsys):
    code = main(["--preset", "sunEarthMoon", "--steps", "1", "--dt", "0", "--validate"])
    out = capsys.readouterr().out
    assert code == 1
    assert "Error:" in out


def test_instability_exit_code(tmp_path, capsys):
    path = tmp_path / "unstable.json"
    path.write_text(json.dumps({"preset": "threeBody", "steps": 2, "g_scale": float("inf")}))
    code = main(["--config", str(path), "--on-instability", "raise"])
    assert code == 2
    assert "Numerical instability" in capsys.readouterr().out


def test_yaml_config_with_exponent_floats(tmp_path, capsys):
    """Exponent-only floats in a hand-written YAML file run cleanly."""
    pytest.importorskip("yaml")
    path = tmp_path / "run.yaml"
    path.write_text("preset: sunEarthMoon\nsteps: 4\nreport_every: 2\nsoftening: 1e-5\ndt: 1e-2\n")
    code = main(["--config", str(path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "softening: 1e-05" in out
    assert "Simulation complete!" in out


def test_bad_config_value_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"dt": "fast"}))
    assert main(["--config", str(path)]) == 1
    assert "Error:" in capsys.readouterr().out


def test_missing_config_file_reports_error(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Error:" in capsys.readouterr().out
