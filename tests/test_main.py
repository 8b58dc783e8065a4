"""Smoke test for the scripted demonstration driver."""

import main
import vehicle_sim.config


def test_demo_runs_and_reports_checkpoints(capsys) -> None:
    main.main()
    out = capsys.readouterr().out
    assert "VW Golf" in out
    for label in ("initial", "after drive", "high speed", "parked"):
        assert label in out
    assert "Demonstration complete." in out


def test_demo_reference_values(capsys) -> None:
    main.main()
    lines = capsys.readouterr().out.splitlines()
    after_drive = next(line for line in lines if "after drive" in line)
    assert "31.0" in after_drive
    assert "24.949" in after_drive
    parked = next(line for line in lines if "parked" in line)
    assert "off" in parked
    assert "0.0" in parked


def test_demo_independent_of_preset_file(monkeypatch, tmp_path, capsys) -> None:
    """The reference vehicle is built in code, not read from data/."""
    monkeypatch.setattr(vehicle_sim.config, "PRESETS_PATH", tmp_path / "gone.yaml")
    main.main()
    out = capsys.readouterr().out
    assert "Tank  : 5.0 / 50.0" in out
    assert "Vmax  : 200" in out
