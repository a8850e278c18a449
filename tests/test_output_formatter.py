#!/usr/bin/env python3

"""
Test suite for output_formatter.py module

Copyright (c) 2026 Marc Rivero López
Licensed under GPLv3. See LICENSE file for details.
This test suite validates real code behavior without mocks or stubs.

Author: Marc Rivero | @seifreed
"""

import json

from contextualizer.modules.extractor_base import Match
from contextualizer.modules.output_formatter import JSONFormatter, TextFormatter


def sample_results():
    return {
        "url": [Match("http://example.com/page", "url")],
        "domain": [Match("sub.test.org", "domain"), Match("example.com", "domain")],
        "base_domain": [Match("test.org", "base_domain")],
        "ipv4": [Match("8.8.8.8", "ipv4")],
    }


class TestJSONFormatter:
    """Test suite for JSONFormatter class"""

    def test_format_values_by_type(self):
        """Values keep first-occurrence order under sorted keys."""
        output = JSONFormatter(sample_results()).format()
        parsed = json.loads(output)

        assert parsed == {
            "base_domain": ["test.org"],
            "domain": ["sub.test.org", "example.com"],
            "ipv4": ["8.8.8.8"],
            "url": ["http://example.com/page"],
        }
        assert list(parsed) == sorted(parsed)

    def test_format_empty(self):
        assert json.loads(JSONFormatter({}).format()) == {}

    def test_save_creates_parent_directories(self, tmp_path):
        output_file = tmp_path / "out" / "iocs.json"

        JSONFormatter(sample_results()).save(output_file)

        assert json.loads(output_file.read_text(encoding="utf-8"))["ipv4"] == ["8.8.8.8"]


class TestTextFormatter:
    """Test suite for TextFormatter class"""

    def test_sections_follow_fixed_order(self):
        output = TextFormatter(sample_results()).format()

        assert output.startswith("# Indicators of Compromise (IOCs) Extracted\n")
        assert output.index("## URLs") < output.index("## Domains")
        assert output.index("## Domains") < output.index("## Base Domains")
        assert output.index("## Base Domains") < output.index("## IPv4 Addresses")
        assert "sub.test.org\nexample.com" in output

    def test_empty_sections_are_skipped(self):
        output = TextFormatter({"md5": [], "ipv4": [Match("1.1.1.1", "ipv4")]}).format()

        assert "MD5" not in output
        assert "## IPv4 Addresses" in output

    def test_unknown_types_go_last(self):
        data = {
            "custom": [Match("value", "custom")],
            "email": [Match("ops@evil.com", "email")],
        }

        output = TextFormatter(data).format()

        assert output.index("## Email Addresses") < output.index("## custom")

    def test_save(self, tmp_path):
        output_file = tmp_path / "iocs.txt"

        TextFormatter(sample_results()).save(output_file)

        assert "## URLs" in output_file.read_text(encoding="utf-8")
