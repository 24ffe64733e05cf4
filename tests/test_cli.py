import io
import logging
from pathlib import Path

import pytest
from apps.cli import play, replay
from clidle.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def lists(tmp_path: Path):
    words = tmp_path / "words.txt"
    sol = tmp_path / "solutions.txt"
    words.write_text("crane\ntrace\nslate\n", encoding="utf-8")
    sol.write_text("crane\n", encoding="utf-8")
    return ["--words", str(words), "--solutions", str(sol)]


def test_play_win(lists, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("trace\ncrane\n"))
    rc = play.main(lists + ["--index", "0", "--color", "never", "--no-delay"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "trace  -GGYG" in out
    assert "crane  GGGGG" in out
    assert "The word was" not in out


def test_play_end_of_input(lists, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("slate\n"))
    rc = play.main(lists + ["--seed", "1", "--color", "never", "--no-delay"])
    assert rc == 0
    assert "The word was" not in capsys.readouterr().out


def test_play_missing_word_list(tmp_path: Path, capsys):
    rc = play.main(["--words", str(tmp_path / "nope.txt"), "--solutions",
                    str(tmp_path / "nope.txt")])
    assert rc == 1
    assert "clidle:" in capsys.readouterr().err


def test_play_check(lists, capsys):
    assert play.main(lists + ["--check"]) == 0
    assert "OK" in capsys.readouterr().out


def test_replay_writes_reports(lists, tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    rc = replay.main(lists + ["--script", "slate,crane", "--outdir", str(outdir),
                              "--progress", "off"])
    assert rc == 0
    assert "won 1/1" in capsys.readouterr().out
    assert len(list(outdir.glob("replay_*.csv"))) == 1
    assert len(list(outdir.glob("replay_*_manifest.json"))) == 1
