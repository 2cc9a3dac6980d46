"""Tests for the wcheck command-line entrypoint and its exit codes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.models import ExitCode
from src.word_check.cli import create_configuration, main, parse_args


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory with a small dictionary wired up through WCHECK_* variables."""
    dict_dir = tmp_path / "dict"
    dict_dir.mkdir()
    (dict_dir / "british-english").write_text("team\nwork\ncolour\n", encoding="utf-8")
    (dict_dir / "american-english").write_text("team\nwork\ncolor\n", encoding="utf-8")
    (dict_dir / "wcheck-reserved-words").write_text("struct\n", encoding="utf-8")

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("WCHECK_DICTIONARY_DIR", str(dict_dir))
    monkeypatch.setenv("WCHECK_RESERVED_WORDS", str(dict_dir / "wcheck-reserved-words"))
    monkeypatch.delenv("WCHECK_DICTIONARY_VARIANT", raising=False)
    monkeypatch.delenv("WCHECK_BASELINE_FILE", raising=False)
    return workdir


def test_exit_status_is_misspelling_count(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    Path("code.txt").write_text("teamWork teamWorkWrkTeam\n", encoding="utf-8")

    exit_code = main(["code.txt"])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert out.splitlines() == ["Misspelled word in code.txt:1: 'Wrk' within 'teamWorkWrkTeam'"]


def test_clean_file_exits_zero(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    Path("code.txt").write_text("struct team_work colour\n", encoding="utf-8")

    assert main(["code.txt"]) == ExitCode.SUCCESS
    assert capsys.readouterr().out == ""


def test_dictionary_variant_switches_word_list(cli_env: Path) -> None:
    Path("code.txt").write_text("color\n", encoding="utf-8")

    assert main(["code.txt"]) == 1
    assert main(["--dictionary-variant", "american-english", "code.txt"]) == 0


def test_extra_dictionary_is_merged(cli_env: Path) -> None:
    Path("code.txt").write_text("kubectl\n", encoding="utf-8")
    Path("project-words").write_text("kubectl\n", encoding="utf-8")

    assert main(["--dictionary", "project-words", "code.txt"]) == 0


def test_missing_reserved_words_is_a_configuration_error(
    cli_env: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("WCHECK_RESERVED_WORDS", str(cli_env / "missing-reserved"))
    Path("code.txt").write_text("team\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        exit_code = main(["code.txt"])

    assert exit_code == ExitCode.CONFIGURATION_ERROR
    assert "missing-reserved" in caplog.text
    assert main(["--no-reserved-words", "code.txt"]) == 0


def test_directory_without_recursive_is_an_input_error(cli_env: Path) -> None:
    Path("src").mkdir()

    assert main(["src"]) == ExitCode.INPUT_ERROR


def test_recursive_directory(cli_env: Path) -> None:
    Path("src").mkdir()
    (Path("src") / "a.txt").write_text("wrk\n", encoding="utf-8")
    (Path("src") / "b.txt").write_text("tem\n", encoding="utf-8")

    assert main(["-r", "src"]) == 2


def test_malformed_baseline_is_reported(cli_env: Path, caplog: pytest.LogCaptureFixture) -> None:
    Path(".wcheck-baseline").write_text("garbage\n", encoding="utf-8")
    Path("code.txt").write_text("team\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        exit_code = main(["code.txt"])

    assert exit_code == ExitCode.BASELINE_READ_ERROR
    assert ".wcheck-baseline:1" in caplog.text


def test_generate_baseline_then_rerun(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    Path("code.txt").write_text("teamWrk wrk\n", encoding="utf-8")

    assert main(["--baseline", "code.txt"]) == 2
    assert "Generating baseline file" in capsys.readouterr().out
    assert main(["code.txt"]) == 0
    assert Path(".wcheck-baseline").read_text(encoding="utf-8") == (
        "code.txt: teamWrk\ncode.txt: wrk\n"
    )


def test_baseline_file_override(cli_env: Path) -> None:
    Path("code.txt").write_text("wrk\n", encoding="utf-8")

    assert main(["--baseline", "--baseline-file", "custom-baseline", "code.txt"]) == 1
    assert Path("custom-baseline").read_text(encoding="utf-8") == "code.txt: wrk\n"
    assert not Path(".wcheck-baseline").exists()


def test_dotenv_file_supplies_settings(cli_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Registered first so the value loaded from the file is undone after the test.
    monkeypatch.setenv("WCHECK_DICTIONARY_VARIANT", "british-english")
    env_file = cli_env / "wcheck.env"
    env_file.write_text("WCHECK_DICTIONARY_VARIANT=american-english\n", encoding="utf-8")
    Path("code.txt").write_text("color\n", encoding="utf-8")

    assert main(["--dotenv", str(env_file), "code.txt"]) == 0


def test_missing_dotenv_file(cli_env: Path) -> None:
    Path("code.txt").write_text("team\n", encoding="utf-8")

    assert main(["--dotenv", "nope.env", "code.txt"]) == ExitCode.CONFIGURATION_ERROR


def test_create_configuration_from_args(cli_env: Path) -> None:
    args = parse_args(["--no-color", "--report", "out.csv", "-r", "a", "b"])

    config = create_configuration(args, {"WCHECK_DICTIONARY_DIR": "/d"})

    assert config.targets == [Path("a"), Path("b")]
    assert config.recursive is True
    assert config.color is False
    assert config.report_path == Path("out.csv")
    assert config.dictionary_files == [
        Path("/d/british-english"),
        Path("/usr/share/dict/wcheck-reserved-words"),
    ]


def test_paths_are_required(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        parse_args([])
