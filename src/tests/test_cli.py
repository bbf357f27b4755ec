import pandas as pd

from conftest import NFLVERSE, parquet_bytes
from nflverse_fetch import CacheMode, get_config
from nflverse_fetch.cli import main


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_season_command(capsys):
    assert main(["season", "--roster"]) == 0
    assert capsys.readouterr().out.strip().isdigit()


def test_week_command(capsys):
    assert main(["week"]) == 0
    assert 1 <= int(capsys.readouterr().out.strip()) <= 22


def test_load_prints_table(active_session, capsys):
    active_session.add(
        f"{NFLVERSE}teams/teams_colors_logos.parquet",
        parquet_bytes(pd.DataFrame({"team_abbr": ["KC", "BUF"], "team_conf": ["AFC", "AFC"]})),
    )

    assert main(["load", "teams"]) == 0
    assert "Rows: 2, Columns: 2" in capsys.readouterr().out


def test_load_writes_output_file(active_session, tmp_path):
    active_session.add(
        f"{NFLVERSE}pbp/play_by_play_2023.parquet",
        parquet_bytes(pd.DataFrame({"season": [2023], "play_id": [1]})),
    )
    output = tmp_path / "out" / "pbp.csv"

    assert main(["load", "pbp", "--seasons", "2023", "--output", str(output)]) == 0
    assert pd.read_csv(output)["play_id"].tolist() == [1]


def test_load_reports_library_errors(active_session, capsys):
    assert main(["load", "nextgen_stats", "--stat-type", "kicking"]) == 1
    assert "Invalid stat_type" in capsys.readouterr().out
    assert active_session.calls == []


def test_load_rejects_unsupported_option(active_session, capsys):
    assert main(["load", "teams", "--stat-type", "passing"]) == 1
    assert "does not accept --stat-type" in capsys.readouterr().out


def test_cache_flag_installs_config(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("NFLVERSE_CACHE_DIR", str(tmp_path))

    assert main(["--cache", "filesystem", "cache", "info"]) == 0

    assert get_config().cache_mode == CacheMode.FILESYSTEM
    out = capsys.readouterr().out
    assert "Mode: filesystem" in out
    assert "Entries: 0" in out


def test_cache_clear(capsys):
    assert main(["cache", "clear", "--pattern", "abc"]) == 0
    assert "matching 'abc'" in capsys.readouterr().out
