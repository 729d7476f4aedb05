"""Tests for the command-line interface (cli.py)."""

import io

import pytest
from dzongkha_roman.cli import main


@pytest.fixture(autouse=True)
def _no_local_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_convert_text(capsys):
    assert main(["\u0f40\u0f0b\u0f41\u0f0d \u0f42"]) == 0
    assert capsys.readouterr().out == "ka kha. g’a\n"


def test_syllable_flag(capsys):
    main(["--syllable", "\u0f56\u0f5f\u0f44\u0f0b\u0f54\u0f7c"])
    assert capsys.readouterr().out == "zangpo\n"


def test_explain(capsys):
    main(["--explain", "\u0f51\u0f40\u0f62"])
    out = capsys.readouterr().out
    assert "head=\u0f40" in out
    assert "(prefix)" in out


def test_summary_only(capsys):
    assert main(["--summary"]) == 0
    out = capsys.readouterr().out
    assert "Exception table" in out
    assert "Grapheme tables" in out


def test_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\u0f40\n\u0f63\u0fb7\n"))
    main([])
    assert capsys.readouterr().out == "ka\nlha\n"


def test_config_flag(capsys, tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text('[converter]\npunctuation_marker = "|"\n', encoding="utf-8")
    main(["--config", str(path), "\u0f40\u0f0d"])
    assert capsys.readouterr().out == "ka|\n"


def test_missing_config_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "nope.toml"), "\u0f40"])
    assert exc.value.code == 2
