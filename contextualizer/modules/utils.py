#!/usr/bin/env python3

"""
Shared utilities for contextualizer modules.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from collections.abc import Iterable

from contextualizer.modules.extractor_base import Match


def merge_results(
    results: Iterable[dict[str, list[Match]]],
) -> dict[str, list[Match]]:
    """
    Merge extraction results from several inputs, removing duplicates.

    Values are compared case-insensitively within each type and the first
    occurrence wins.

    Args:
        results: Per-input dictionaries of match type to matches

    Returns:
        Single dictionary with deduplicated match lists
    """
    merged: dict[str, list[Match]] = {}
    seen_keys: dict[str, set[str]] = {}

    for result in results:
        for match_type, matches in result.items():
            seen = seen_keys.setdefault(match_type, set())
            for match in matches:
                key = match.value.lower()
                if key in seen:
                    continue
                seen.add(key)
                merged.setdefault(match_type, []).append(match)

    return merged


def values_by_type(results: dict[str, list[Match]]) -> dict[str, list[str]]:
    """Flatten matches to their values, keyed by match type."""
    return {match_type: [match.value for match in matches] for match_type, matches in results.items()}


def group_by_type(matches: Iterable[Match]) -> dict[str, list[Match]]:
    """Group a flat sequence of matches by their type, keeping order."""
    grouped: dict[str, list[Match]] = {}
    for match in matches:
        grouped.setdefault(match.type, []).append(match)
    return grouped
