from __future__ import annotations

import json

import pytest

from pouring import cli
from pouring.report import NO_SOLUTION, render_text
from pouring.search import solve


@pytest.fixture(autouse=True)
def _clear_format_env(monkeypatch):
    monkeypatch.delenv("POURING_REPORT_FORMAT", raising=False)


def test_solved_puzzle_prints_text_report(capsys) -> None:
    code = cli.main(["--goal", "4", "3", "5"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_SOLVED
    assert out.startswith("# moves: 6\n")


def test_unsolvable_puzzle_exits_with_one(capsys) -> None:
    code = cli.main(["--goal", "5", "2"])
    assert code == cli.EXIT_UNSOLVED
    assert capsys.readouterr().out.strip() == NO_SOLUTION


def test_invalid_request_exits_with_two(capsys) -> None:
    code = cli.main(["--goal=-1", "3", "5"])
    captured = capsys.readouterr()
    assert code == cli.EXIT_INVALID
    assert "invalid-goal" in captured.err


def test_capacities_require_goal(capsys) -> None:
    assert cli.main(["3", "5"]) == cli.EXIT_INVALID
    assert "--goal" in capsys.readouterr().err


def test_json_report(capsys) -> None:
    code = cli.main(["--format", "json", "--goal", "4", "3", "5"])
    payload = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_SOLVED
    assert payload["moves"] == 6
    assert payload["capacities"] == [3, 5]


def test_environment_selects_json(monkeypatch, capsys) -> None:
    monkeypatch.setenv("POURING_REPORT_FORMAT", "json")
    cli.main(["--goal", "0", "6", "10"])
    assert json.loads(capsys.readouterr().out)["moves"] == 0


def test_defaults_to_configured_example(capsys) -> None:
    code = cli.main(["--format", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_SOLVED
    assert payload["goal"] == 41
    assert payload["capacities"] == [4, 9, 17, 51]


def test_verbose_prints_timing(capsys) -> None:
    cli.main(["--verbose", "--goal", "4", "3", "5"])
    assert "Time:" in capsys.readouterr().err


def test_log_dir_records_completed_event(tmp_path, capsys) -> None:
    code = cli.main(["--log-dir", str(tmp_path), "--goal", "4", "3", "5"])
    capsys.readouterr()
    assert code == cli.EXIT_SOLVED

    files = list(tmp_path.glob("*/*.jsonl"))
    assert len(files) == 1
    event = json.loads(files[0].read_text("utf-8").splitlines()[-1])
    assert event["event"] == "solve.completed"
    assert event["reason"] == "solved"
    assert event["moves"] == 6
    assert event["report_digest"].startswith("sha256-")


@pytest.fixture
def _missing_config(monkeypatch, tmp_path):
    import project_config

    monkeypatch.setattr(project_config, "_config_path", lambda: tmp_path / "absent" / "config.toml")
    project_config.get_config.cache_clear()
    yield
    project_config.get_config.cache_clear()


def test_runs_without_config_file(_missing_config, capsys) -> None:
    code = cli.main(["--format", "text", "--goal", "4", "3", "5"])
    assert code == cli.EXIT_SOLVED
    assert capsys.readouterr().out.startswith("# moves: 6\n")


def test_example_defaults_without_config_file(_missing_config, capsys) -> None:
    assert cli.main([]) == cli.EXIT_SOLVED
    assert capsys.readouterr().out.startswith("# moves: ")


def test_malformed_config_exits_invalid(monkeypatch, tmp_path, capsys) -> None:
    import project_config

    broken = tmp_path / "config.toml"
    broken.write_text("[REPORT\nformat = ", encoding="utf-8")
    monkeypatch.setattr(project_config, "_config_path", lambda: broken)
    project_config.get_config.cache_clear()
    try:
        assert cli.main([]) == cli.EXIT_INVALID
        assert "error:" in capsys.readouterr().err
    finally:
        project_config.get_config.cache_clear()


def test_text_report_is_written_verbatim(capsys) -> None:
    cli.main(["--goal", "4", "3", "5"])
    assert capsys.readouterr().out == render_text(solve(4, [3, 5]))


def test_verbose_lists_moves(capsys) -> None:
    cli.main(["--verbose", "--goal", "4", "3", "5"])
    err = capsys.readouterr().err
    moves = [line for line in err.splitlines() if line.startswith("Step ")]
    assert len(moves) == 6
    assert moves[0].startswith("Step 1: fill ")
    assert moves[-1] == "Step 6: pour 5 -> 3"
