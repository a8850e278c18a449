#!/usr/bin/env python3

"""
Single-type matching for IOC extraction.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from re import Pattern

from contextualizer.modules.exceptions import UnknownMatchTypeError
from contextualizer.modules.extractor_base import Match, trim_url
from contextualizer.modules.extractor_network import NetworkFilterMixin
from contextualizer.modules.extractor_patterns import (
    BASE_DOMAIN,
    CASE_FOLDED_TYPES,
    DOMAIN,
    EMAIL,
    FILEPATH,
    IPV4,
    URL,
    URL_LIKE_PREFIXES,
)


class MatchingMixin(NetworkFilterMixin):
    """Match one IOC type at a time."""

    def _passes_filters(self, match_type: str, value: str, clean_value: str) -> bool:
        """
        Apply the suppression rules for a match type.

        Args:
            match_type: Type of the candidate
            value: Candidate as found in the text
            clean_value: Case-folded candidate

        Returns:
            True if the candidate should be reported
        """
        if match_type == URL:
            return not self._is_url_ignored(clean_value)
        if match_type == FILEPATH:
            return not clean_value.startswith(URL_LIKE_PREFIXES)
        if match_type == IPV4:
            return not self._is_ip_suppressed(value)
        if match_type == EMAIL:
            return not self._is_email_ignored(clean_value)
        if match_type == DOMAIN:
            return not self.is_domain_ignored(clean_value)
        return True

    def _base_domain_match(self, clean_value: str, seen_base_domains: set[str]) -> Match | None:
        """Return a new base_domain match for a domain, if one applies."""
        base_domain = self._lookup_base_domain(clean_value)
        if base_domain is None or base_domain in seen_base_domains:
            return None
        seen_base_domains.add(base_domain)
        return Match(value=base_domain, type=BASE_DOMAIN)

    @staticmethod
    def _normalize(match_type: str, value: str, clean_value: str) -> str:
        return clean_value if match_type in CASE_FOLDED_TYPES else value

    def get_matches(self, text: str, match_type: str, pattern: Pattern[str]) -> list[Match]:
        """
        Extract, filter and de-duplicate matches of one type.

        The pattern must be the one registered for ``match_type``. Domain
        matches may be preceded by a ``base_domain`` match for their
        registrable domain.

        Args:
            text: Text to search in
            match_type: Type to report the matches as
            pattern: Compiled pattern for that type

        Returns:
            Matches in order of first occurrence
        """
        results: list[Match] = []
        seen: set[str] = set()
        seen_base_domains: set[str] = set()

        for found in pattern.finditer(text):
            value = found.group(0)
            if match_type == URL:
                value = trim_url(value)

            clean_value = value.lower()
            if clean_value in seen:
                continue

            if not self._passes_filters(match_type, value, clean_value):
                continue

            if match_type == DOMAIN:
                base_match = self._base_domain_match(clean_value, seen_base_domains)
                if base_match is not None:
                    results.append(base_match)

            final_value = self._normalize(match_type, value, clean_value)
            if final_value:
                results.append(Match(value=final_value, type=match_type))
                seen.add(clean_value)

        return results

    def match_one(self, text: str, match_type: str) -> list[Match]:
        """
        Extract matches of a single type using its registered pattern.

        Args:
            text: Text to search in
            match_type: One of the registered match types

        Returns:
            Matches in order of first occurrence

        Raises:
            UnknownMatchTypeError: If no pattern is registered for the type
        """
        pattern = self.patterns.get(match_type)
        if pattern is None:
            raise UnknownMatchTypeError(match_type)
        return self.get_matches(text, match_type, pattern)
