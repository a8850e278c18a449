#!/usr/bin/env python3

"""
Module for formatting extraction results in different formats

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

from contextualizer.modules.extractor_base import Match
from contextualizer.modules.utils import values_by_type

SECTION_ORDER = [
    ("md5", "MD5 Hashes"),
    ("sha1", "SHA1 Hashes"),
    ("sha256", "SHA256 Hashes"),
    ("sha512", "SHA512 Hashes"),
    ("url", "URLs"),
    ("domain", "Domains"),
    ("base_domain", "Base Domains"),
    ("ipv4", "IPv4 Addresses"),
    ("ipv6", "IPv6 Addresses"),
    ("email", "Email Addresses"),
    ("filepath", "File Paths"),
    ("filename", "Filenames"),
]


class OutputFormatter(ABC):
    """Abstract base class for all output formatters."""

    def __init__(self, data: dict[str, list[Match]]) -> None:
        """
        Initialize the output formatter.

        Args:
            data: Matches keyed by match type
        """
        self.data = data

    @abstractmethod
    def format(self) -> str:
        """
        Format the data.

        Returns:
            The formatted data
        """

    def save(self, output_file: str | Path) -> None:
        """
        Save the formatted data to a file.

        Args:
            output_file: Path to the output file
        """
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.format(), encoding="utf-8")


class JSONFormatter(OutputFormatter):
    """Class for formatting output in JSON."""

    def format(self) -> str:
        """
        Format the data in JSON.

        Values keep their first-occurrence order; keys are sorted.

        Returns:
            The data formatted in JSON
        """
        return json.dumps(values_by_type(self.data), indent=4, sort_keys=True, ensure_ascii=False)


class TextFormatter(OutputFormatter):
    """Class for formatting output in plain text."""

    def format(self) -> str:
        """
        Format the data in plain text, one section per match type.

        Returns:
            The data formatted in plain text
        """
        output = ["# Indicators of Compromise (IOCs) Extracted\n"]

        known_types = {match_type for match_type, _ in SECTION_ORDER}
        # Types outside the fixed order go last under their raw name
        extra_sections = [
            (match_type, match_type) for match_type in sorted(self.data) if match_type not in known_types
        ]

        for section_key, section_title in SECTION_ORDER + extra_sections:
            matches = self.data.get(section_key)
            if not matches:
                continue
            output.append(f"\n## {section_title}\n")
            output.extend(match.value for match in matches)

        return "\n".join(output)
