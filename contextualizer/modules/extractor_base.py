#!/usr/bin/env python3

"""
Core types and helpers shared by the extraction mixins.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from re import Pattern

from contextualizer.modules.extractor_patterns import PATTERNS, URL_TRAILING_CHARS
from contextualizer.modules.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Match:
    """A single extracted indicator."""

    value: str
    type: str

    def to_dict(self) -> dict[str, str]:
        """Return the match as a plain dictionary."""
        return {"value": self.value, "type": self.type}


def _fold_domains(domains: Iterable[str] | None) -> frozenset[str]:
    """Case-fold ignored domains and drop a single leading dot."""
    return frozenset(domain.lower().removeprefix(".") for domain in domains or ())


def _fold_emails(emails: Iterable[str] | None) -> frozenset[str]:
    return frozenset(email.lower() for email in emails or ())


def trim_url(url: str) -> str:
    """
    Remove trailing punctuation picked up by the URL pattern.

    Args:
        url: Raw URL match

    Returns:
        URL without trailing ``/ . , ; :`` characters
    """
    return url.rstrip(URL_TRAILING_CHARS).removesuffix("/")


class ExtractorBase:
    """Filter configuration and pattern table shared by all extraction methods."""

    def __init__(
        self,
        ignore_private_ips: bool = False,
        ignored_domains: Iterable[str] | None = None,
        ignored_emails: Iterable[str] | None = None,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            ignore_private_ips: Drop private, loopback and link-local IPv4 matches
            ignored_domains: Domains whose names and subdomains are suppressed
            ignored_emails: Email addresses that are suppressed
        """
        self.ignore_private_ips = ignore_private_ips
        self.ignored_domains: frozenset[str] = _fold_domains(ignored_domains)
        self.ignored_emails: frozenset[str] = _fold_emails(ignored_emails)

        # Compiled once at import, shared read-only between instances
        self.patterns: Mapping[str, Pattern[str]] = PATTERNS

        logger.debug(
            "Extractor ready: ignore_private_ips=%s, %d ignored domains, %d ignored emails",
            self.ignore_private_ips,
            len(self.ignored_domains),
            len(self.ignored_emails),
        )
