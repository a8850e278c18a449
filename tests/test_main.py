#!/usr/bin/env python3

# Copyright (c) 2026 Marc Rivero López
# Licensed under GPLv3. See LICENSE file for details.
# This test suite validates real code behavior without mocks or stubs.

"""
Tests for the command line interface.
"""

import io
import json
import sys

import pytest

from contextualizer.main import create_argument_parser, main, validate_file_size
from contextualizer.modules.exceptions import FileSizeError


class TTYStdin(io.StringIO):
    """Stdin stand-in attached to a terminal."""

    def isatty(self) -> bool:
        return True


class TestArgumentParser:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = create_argument_parser().parse_args([])

        assert args.file is None
        assert args.kind is None
        assert args.ignore_private_ips is None
        assert args.ignored_domains is None

    def test_repeatable_ignore_flags(self) -> None:
        args = create_argument_parser().parse_args(
            ["--ignore-domain", "a.com", "--ignore-domain", "b.com", "--ignore-email", "x@y.com"],
        )

        assert args.ignored_domains == ["a.com", "b.com"]
        assert args.ignored_emails == ["x@y.com"]

    def test_file_and_multiple_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["-f", "a.txt", "-m", "b.txt"])

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["-k", "bitcoin"])

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "contextualizer v1.0.0" in capsys.readouterr().out


class TestMain:
    """Test end to end CLI runs."""

    def test_single_kind_json(self, tmp_path, capsys) -> None:
        input_file = tmp_path / "ips.txt"
        input_file.write_text("hosts 10.0.0.1 8.8.8.8 1.1.1.1 127.0.0.1", encoding="utf-8")

        main(["-f", str(input_file), "-k", "ipv4", "--ignore-private-ips", "--json"])

        output = json.loads(capsys.readouterr().out)
        assert output == {"ipv4": ["8.8.8.8", "1.1.1.1"]}

    def test_stdin_text_output(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("Callback to sub.test.org observed"))

        main([])

        captured = capsys.readouterr()
        assert "## Domains\n\nsub.test.org" in captured.out
        assert "## Base Domains\n\ntest.org" in captured.out
        assert "domain: 1" in captured.err

    def test_stdin_marker(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("mail ops@evil.com"))

        main(["-f", "-", "--json", "-k", "email"])

        assert json.loads(capsys.readouterr().out) == {"email": ["ops@evil.com"]}

    def test_ignore_domain_flag(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("c2.evil.com and cdn.good.org"))

        main(["--json", "--ignore-domain", "evil.com"])

        output = json.loads(capsys.readouterr().out)
        assert output["domain"] == ["cdn.good.org"]
        assert output["base_domain"] == ["good.org"]

    def test_config_file(self, tmp_path, monkeypatch, capsys) -> None:
        config_file = tmp_path / "filters.ini"
        config_file.write_text("[filters]\nignored_emails = ops@evil.com\n", encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", io.StringIO("ops@evil.com soc@evil.com"))

        main(["--json", "-k", "email", "--config", str(config_file)])

        assert json.loads(capsys.readouterr().out) == {"email": ["soc@evil.com"]}

    def test_output_file(self, tmp_path, capsys) -> None:
        input_file = tmp_path / "report.txt"
        input_file.write_text("beacon 8.8.8.8", encoding="utf-8")
        output_file = tmp_path / "results" / "iocs.json"

        main(["-f", str(input_file), "--json", "-o", str(output_file)])

        assert capsys.readouterr().out == ""
        assert json.loads(output_file.read_text(encoding="utf-8")) == {"ipv4": ["8.8.8.8"]}

    def test_multiple_files_are_merged(self, tmp_path, capsys) -> None:
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_text("beacon 8.8.8.8", encoding="utf-8")
        second.write_text("beacon 8.8.8.8 and 1.1.1.1", encoding="utf-8")

        main(["-m", str(first), str(second), "--json", "-k", "ipv4"])

        output = json.loads(capsys.readouterr().out)
        assert output == {"ipv4": ["8.8.8.8", "1.1.1.1"]}

    def test_missing_file_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-f", str(tmp_path / "missing.txt")])

        assert exc_info.value.code == 1

    def test_missing_config_exits(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("evil.com"))

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.ini")])

        assert exc_info.value.code == 1

    def test_no_input_on_terminal(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", TTYStdin(""))

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().out


def test_validate_file_size(tmp_path) -> None:
    big_file = tmp_path / "big.txt"
    big_file.write_text("x" * 2048, encoding="utf-8")

    validate_file_size(big_file, max_size=4096)
    with pytest.raises(FileSizeError):
        validate_file_size(big_file, max_size=1024)
