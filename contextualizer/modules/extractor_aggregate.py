#!/usr/bin/env python3

"""
Aggregation mixin for IOC extraction.

URLs are extracted first. Their spans are claimed so that domains, paths and
other indicators embedded in a URL are not reported a second time.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from contextualizer.modules.extractor_base import Match, trim_url
from contextualizer.modules.extractor_matching import MatchingMixin
from contextualizer.modules.extractor_patterns import BASE_DOMAIN, DOMAIN, URL
from contextualizer.modules.logger import get_logger

logger = get_logger(__name__)

Span = tuple[int, int]


def _is_inside(start: int, end: int, spans: list[Span]) -> bool:
    """Check if ``[start, end)`` lies fully within one of the spans."""
    return any(span_start <= start and end <= span_end for span_start, span_end in spans)


class ExtractionAggregateMixin(MatchingMixin):
    """Extract every IOC type in one pass."""

    def _extract_urls(self, text: str, results: dict[str, list[Match]]) -> list[Span]:
        """
        Extract URLs into ``results`` and return the spans they occupy.

        Every occurrence of a non-ignored URL claims its span, repeated ones
        included. Spans cover the raw match before trailing punctuation is
        trimmed.
        """
        claimed: list[Span] = []
        seen: set[str] = set()

        for found in self.patterns[URL].finditer(text):
            value = trim_url(found.group(0))
            clean_value = value.lower()

            if not self._passes_filters(URL, value, clean_value):
                continue

            claimed.append(found.span())
            if clean_value in seen or not value:
                continue
            seen.add(clean_value)
            results.setdefault(URL, []).append(Match(value=value, type=URL))

        return claimed

    def extract_all(self, text: str) -> dict[str, list[Match]]:
        """
        Extract all types of IOCs from text.

        Args:
            text: Text to extract IOCs from

        Returns:
            Dictionary with match types as keys and lists of matches as values.
            Types without matches are left out.
        """
        results: dict[str, list[Match]] = {}
        claimed = self._extract_urls(text, results)
        seen_base_domains: set[str] = set()

        for match_type, pattern in self.patterns.items():
            if match_type == URL:
                continue

            seen: set[str] = set()
            for found in pattern.finditer(text):
                start, end = found.span()
                if _is_inside(start, end, claimed):
                    continue

                value = found.group(0)
                clean_value = value.lower()
                if clean_value in seen:
                    continue

                if not self._passes_filters(match_type, value, clean_value):
                    continue

                if match_type == DOMAIN:
                    base_match = self._base_domain_match(clean_value, seen_base_domains)
                    if base_match is not None:
                        results.setdefault(BASE_DOMAIN, []).append(base_match)

                final_value = self._normalize(match_type, value, clean_value)
                if final_value:
                    seen.add(clean_value)
                    results.setdefault(match_type, []).append(
                        Match(value=final_value, type=match_type),
                    )

        logger.debug(
            "Extracted %d indicators across %d types",
            sum(len(matches) for matches in results.values()),
            len(results),
        )
        return results
