"""Tests for the passguardian command-line interface."""

import logging
from unittest.mock import patch

from passguardian import WORDLIST_FILENAME, generate_wordlist
from passguardian.cli import main


# ── analyze ────────────────────────────────────────────────────────────────


class TestAnalyzeCommand:
    def test_reports_strength(self, capsys):
        assert main(["analyze", "Tr0ub4dor&3"]) == 0
        out = capsys.readouterr().out
        assert "Strong (75%)" in out
        assert "72 bits" in out

    def test_reports_patterns(self, capsys):
        assert main(["analyze", "password"]) == 0
        assert "! Common passwords" in capsys.readouterr().out

    def test_reads_file(self, tmp_path, capsys):
        path = tmp_path / "pw.txt"
        path.write_text("letmein\n\nZq8!mR2#vK5@\n")
        assert main(["analyze", "-f", str(path)]) == 0
        out = capsys.readouterr().out
        assert "'letmein'" in out
        assert "Very Strong (100%)" in out

    def test_empty_argument(self, capsys):
        assert main(["analyze", ""]) == 0
        assert "nothing to analyse" in capsys.readouterr().out

    def test_no_passwords(self, capsys):
        assert main(["analyze"]) == 1
        assert "Error" in capsys.readouterr().err


# ── wordlist ───────────────────────────────────────────────────────────────


class TestWordlistCommand:
    def test_writes_file(self, tmp_path, capsys):
        out_file = tmp_path / "words.txt"
        assert main(["wordlist", "--name", "Max", "--birthdate", "2020", "-o", str(out_file)]) == 0
        lines = out_file.read_text().split("\n")
        assert lines == generate_wordlist({"name": "Max", "birthdate": "2020"})
        assert "Max2020" in lines
        assert str(out_file) in capsys.readouterr().out

    def test_writes_utf8(self, tmp_path):
        out_file = tmp_path / "words.txt"
        with patch("passguardian.cli.open", wraps=open, create=True) as mock_open:
            assert main(["wordlist", "--location", "Zürich", "-o", str(out_file)]) == 0
        assert mock_open.call_args.kwargs["encoding"] == "utf-8"
        lines = out_file.read_text(encoding="utf-8").split("\n")
        assert "Zürich" in lines
        assert "zürich123" in lines

    def test_default_filename(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["wordlist", "--pet", "Rex"]) == 0
        assert (tmp_path / WORDLIST_FILENAME).exists()

    def test_print(self, capsys):
        assert main(["wordlist", "--pet", "Rex", "--print"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == ["Rex", "rex", "REX"]

    def test_max_truncates(self, capsys, caplog):
        with caplog.at_level(logging.WARNING):
            assert main(["wordlist", "--pet", "Rex", "--max", "5", "--print"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 5
        assert "Truncating" in caplog.text

    def test_negative_max(self, capsys):
        assert main(["wordlist", "--pet", "Rex", "--max", "-1"]) == 1
        assert "--max" in capsys.readouterr().err

    def test_no_fields(self, capsys):
        assert main(["wordlist", "--name", "  "]) == 1
        assert "--location" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
