#!/usr/bin/env python3

"""
Regex patterns for IOC extraction.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

import re
from re import Pattern

# Match types
MD5 = "md5"
SHA1 = "sha1"
SHA256 = "sha256"
SHA512 = "sha512"
IPV4 = "ipv4"
IPV6 = "ipv6"
EMAIL = "email"
URL = "url"
DOMAIN = "domain"
FILEPATH = "filepath"
FILENAME = "filename"
# Synthesized from domain matches, never scanned for directly
BASE_DOMAIN = "base_domain"

# Candidates of these kinds are compared and reported case-folded
CASE_FOLDED_TYPES = frozenset({DOMAIN, EMAIL})

# Trailing punctuation that belongs to the surrounding prose, not the URL
URL_TRAILING_CHARS = "/.,;:"

# A filepath starting like this is a piece of a URL
URL_LIKE_PREFIXES = ("http", "www", "ftp")

# Word boundaries and classes are ASCII-only
PATTERNS: dict[str, Pattern[str]] = {
    # Hashes
    MD5: re.compile(r"\b[a-f0-9]{32}\b", re.IGNORECASE | re.ASCII),
    SHA1: re.compile(r"\b[a-f0-9]{40}\b", re.IGNORECASE | re.ASCII),
    SHA256: re.compile(r"\b[a-f0-9]{64}\b", re.IGNORECASE | re.ASCII),
    SHA512: re.compile(r"\b[a-f0-9]{128}\b", re.IGNORECASE | re.ASCII),
    # Network indicators
    IPV4: re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}", re.ASCII),
    # Full form only, no :: compression
    IPV6: re.compile(r"[a-f0-9]{4}(?::[a-f0-9]{4}){7}", re.IGNORECASE | re.ASCII),
    EMAIL: re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE | re.ASCII),
    URL: re.compile(r"(?:https?|ftp)://[^\s/$.?#].\S*", re.IGNORECASE | re.ASCII),
    DOMAIN: re.compile(r"[a-z0-9.-]+\.[a-z]{2,24}\b", re.IGNORECASE | re.ASCII),
    # File indicators
    FILEPATH: re.compile(r"[a-zA-Z0-9.-]+/[a-zA-Z0-9.-]+", re.ASCII),
    # Only matches when the whole text is a single file name
    FILENAME: re.compile(r"\A[\w.-]+\.[a-zA-Z]{2,4}\Z", re.ASCII),
}

MATCH_TYPES: tuple[str, ...] = tuple(PATTERNS)
