"""Tests for the REPL and the command-line entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from simian.__main__ import main
from simian.repl import PROMPT, print_tokens, start


class TestRepl:
    """The loop prints one token per line for each input line."""

    def test_prints_tokens_per_line(self) -> None:
        out = io.StringIO()
        start(io.StringIO("my $x = 5;\n$i++\n"), out)
        assert out.getvalue() == (
            PROMPT
            + 'MY("my")\nIDENTIFIER("$x")\nASSIGN("=")\nDIGIT("5")\nSEMICOLON(";")\n'
            + PROMPT
            + 'IDENTIFIER("$i")\nPLUS("++")\n'
            + PROMPT
        )

    def test_blank_line_prints_nothing(self) -> None:
        out = io.StringIO()
        start(io.StringIO("\n"), out, prompt="> ")
        assert out.getvalue() == "> > "

    def test_last_line_without_newline(self) -> None:
        out = io.StringIO()
        start(io.StringIO(";"), out, prompt="")
        assert out.getvalue() == 'SEMICOLON(";")\n'

    def test_print_tokens_count(self) -> None:
        out = io.StringIO()
        assert print_tokens("field $id :reader", out) == 3
        assert out.getvalue().splitlines() == [
            'FIELD("field")',
            'IDENTIFIER("$id")',
            'IDENTIFIER(":reader")',
        ]


class TestCli:
    """simian [path] [--parse]."""

    def test_tokenize_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "demo.sim"
        path.write_text("my $x = 5;\n", encoding="utf-8")

        assert main([str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            'MY("my")',
            'IDENTIFIER("$x")',
            'ASSIGN("=")',
            'DIGIT("5")',
            'SEMICOLON(";")',
        ]

    def test_parse_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "demo.sim"
        path.write_text("my $x = 5;\nmy $y = $x + 1;\n", encoding="utf-8")

        assert main(["--parse", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["my $x = 5", "my $y = ..."]

    def test_parse_errors_exit_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.sim"
        path.write_text("my = 5;", encoding="utf-8")

        assert main(["--parse", str(path)]) == 1
        err = capsys.readouterr().err
        assert "expected next token IDENTIFIER, got ASSIGN" in err
        assert "bad.sim" in err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.sim")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_repl_without_path(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("my\n"))
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "This is the Simian language!" in out
        assert 'MY("my")' in out
