"""
contextualizer - Extract and filter Indicators of Compromise from free text

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from pathlib import Path

from contextualizer.modules.config import FilterConfig, load_config
from contextualizer.modules.extractor import Contextualizer
from contextualizer.modules.extractor_base import Match
from contextualizer.modules.extractor_network import get_base_domain, is_private_ip
from contextualizer.modules.extractor_patterns import MATCH_TYPES
from contextualizer.modules.file_parser import get_parser

__version__ = "1.0.0"

# Export main functionality for library use
__all__ = [
    "MATCH_TYPES",
    "Contextualizer",
    "FilterConfig",
    "Match",
    "extract_from_file",
    "extract_from_text",
    "get_base_domain",
    "is_private_ip",
    "load_config",
]


def extract_from_text(text: str, config: FilterConfig | None = None) -> dict[str, list[Match]]:
    """
    Extract IOCs from text content.

    Args:
        text: The text to extract IOCs from
        config: Suppression settings; no suppression when omitted

    Returns:
        Dictionary with match types as keys and lists of matches as values
    """
    extractor = config.build() if config else Contextualizer()
    return extractor.extract_all(text)


def extract_from_file(
    file_path: str | Path,
    config: FilterConfig | None = None,
    file_type: str | None = None,
) -> dict[str, list[Match]]:
    """
    Extract IOCs from a text, HTML or PDF file.

    Args:
        file_path: Path to the file
        config: Suppression settings; no suppression when omitted
        file_type: Force a specific file type (pdf, html, text)

    Returns:
        Dictionary with match types as keys and lists of matches as values
    """
    text_content = get_parser(file_path, file_type).extract_text()
    return extract_from_text(text_content, config)
