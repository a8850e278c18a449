#!/usr/bin/env python3

"""
Network-related suppression rules and lookups.

Covers the ignored-domain suffix walk, the private address predicate and the
registrable (eTLD+1) domain lookup backed by the Public Suffix List.

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

import ipaddress
import urllib.parse

import tldextract

from contextualizer.modules.exceptions import BaseDomainError
from contextualizer.modules.extractor_base import ExtractorBase
from contextualizer.modules.logger import get_logger

logger = get_logger(__name__)

PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)

# Bundled PSL snapshot only: no HTTP fetch, no cache directory
_SUFFIX_EXTRACT = tldextract.TLDExtract(
    cache_dir=None,
    suffix_list_urls=(),
    include_psl_private_domains=True,
)


def is_private_ip(literal: str) -> bool:
    """
    Check if an IP literal is private, loopback or link-local.

    Unparseable literals are never considered private.

    Args:
        literal: IPv4 or IPv6 address text

    Returns:
        True if the address is not publicly routable
    """
    try:
        address = ipaddress.ip_address(literal)
    except ValueError:
        return False

    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        address = address.ipv4_mapped

    if address.is_loopback or address.is_link_local:
        return True
    return any(
        address in network
        for network in PRIVATE_NETWORKS
        if network.version == address.version
    )


def get_base_domain(domain: str) -> str:
    """
    Return the registrable domain (public suffix plus one label).

    Args:
        domain: Lowercase domain name

    Returns:
        The base domain, e.g. ``test.org`` for ``sub.test.org``

    Raises:
        BaseDomainError: If the domain is malformed or has no public suffix
    """
    if domain.startswith(".") or domain.endswith(".") or ".." in domain:
        raise BaseDomainError(domain, "empty label")

    extracted = _SUFFIX_EXTRACT(domain)
    if not extracted.suffix:
        raise BaseDomainError(domain, "no public suffix")
    if not extracted.domain:
        raise BaseDomainError(domain, "domain is a public suffix")

    return f"{extracted.domain}.{extracted.suffix}"


class NetworkFilterMixin(ExtractorBase):
    """Suppression checks for domains, URLs, emails and IPs."""

    def is_domain_ignored(self, domain: str) -> bool:
        """
        Check a domain and each of its parent domains against the ignore list.

        Ignoring ``example.com`` also ignores ``a.b.example.com`` but not
        ``notexample.com``.

        Args:
            domain: Domain name in any case, optionally with a trailing dot

        Returns:
            True if the domain or one of its parents is ignored
        """
        current = domain.lower().removesuffix(".")
        while True:
            if current in self.ignored_domains:
                return True
            _, dot, rest = current.partition(".")
            if not dot:
                return False
            current = rest

    def _is_url_ignored(self, url: str) -> bool:
        """Check the URL hostname; URLs that cannot be parsed are kept."""
        try:
            hostname = urllib.parse.urlsplit(url).hostname
        except ValueError as exc:
            logger.debug("Failed to parse URL %s: %s", url, exc)
            return False
        return self.is_domain_ignored(hostname or "")

    def _is_email_ignored(self, email: str) -> bool:
        """Check the address itself, then the domain after the ``@``."""
        if email in self.ignored_emails:
            return True
        parts = email.split("@")
        return len(parts) == 2 and self.is_domain_ignored(parts[1])

    def _is_ip_suppressed(self, literal: str) -> bool:
        return self.ignore_private_ips and is_private_ip(literal)

    def _lookup_base_domain(self, domain: str) -> str | None:
        """
        Find the base domain to report alongside a domain match.

        Args:
            domain: Lowercase domain that already passed the ignore check

        Returns:
            The base domain, or None when it is unknown, equal to the domain or ignored
        """
        try:
            base_domain = get_base_domain(domain)
        except BaseDomainError as exc:
            logger.debug("%s", exc)
            return None

        if not base_domain or base_domain == domain or self.is_domain_ignored(base_domain):
            return None
        return base_domain
