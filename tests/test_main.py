import pytest

import tcxkit.appconfig as tcfg
from tcxkit.__main__ import main


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(tcfg, "_FILE_PATHS", [])
    for env in tcfg._ENV_OVERRIDES:
        monkeypatch.delenv(env, raising=False)


def test_help(capsys):
    main(["help"])
    assert "python -m tcxkit <command>" in capsys.readouterr().out


def test_summary_dispatch(sample_path, capsys):
    main(["summary", sample_path, "--json"])
    assert '"indoor_bike_ride"' in capsys.readouterr().out


def test_laps_dispatch(sample_path, capsys):
    main(["laps", "--threshold", "0.1", sample_path])
    assert "Activity 1 (run):" in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["summary", str(tmp_path / "missing.tcx")])

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_avg_speed_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bare.tcx"
    path.write_text("<TrainingCenterDatabase><Activities><Activity Sport='Running'><Lap/></Activity></Activities></TrainingCenterDatabase>")

    with pytest.raises(SystemExit) as exc_info:
        main(["summary", str(path)])

    assert exc_info.value.code == 1
    assert "Missing required field: Extensions -> LX -> AvgSpeed" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        main([])


def test_invalid_env_config_exits_with_error(sample_path, monkeypatch, capsys):
    monkeypatch.setenv("TCXKIT_MOVING_SPEED_THRESHOLD", "one")

    with pytest.raises(SystemExit) as exc_info:
        main(["summary", sample_path])

    assert exc_info.value.code == 1
    assert "Invalid value for TCXKIT_MOVING_SPEED_THRESHOLD" in capsys.readouterr().err
