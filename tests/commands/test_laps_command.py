import pytest

import tcxkit.appconfig as tcfg
import tcxkit.commands.laps as laps


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(tcfg, "_FILE_PATHS", [])
    for env in tcfg._ENV_OVERRIDES:
        monkeypatch.delenv(env, raising=False)


def test_laps_table(sample_path, capsys):
    laps.run([sample_path])

    out = capsys.readouterr().out
    assert "Activity 1 (run):" in out
    assert "Activity 2 (indoor_bike_ride):" in out
    assert "2024-05-27 12:05" in out
    assert "00:00:30" in out


def test_laps_uses_home_timezone(sample_path, monkeypatch, capsys):
    monkeypatch.setenv("TCXKIT_HOME_TIMEZONE", "US/Eastern")

    laps.run([sample_path])

    assert "2024-05-27 08:05" in capsys.readouterr().out
