#!/usr/bin/env python3

"""
Configuration loader for contextualizer.

Supports .env, environment variables, and INI config files.
"""

from __future__ import annotations

import configparser
import os
import re
from collections.abc import Iterable
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from contextualizer.modules.exceptions import ConfigurationError
from contextualizer.modules.extractor import Contextualizer

ENV_IGNORE_PRIVATE_IPS = "CONTEXTUALIZER_IGNORE_PRIVATE_IPS"
ENV_IGNORED_DOMAINS = "CONTEXTUALIZER_IGNORED_DOMAINS"
ENV_IGNORED_EMAILS = "CONTEXTUALIZER_IGNORED_EMAILS"

CONFIG_SECTION = "filters"
TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FilterConfig:
    """Resolved suppression settings."""

    ignore_private_ips: bool
    ignored_domains: tuple[str, ...]
    ignored_emails: tuple[str, ...]
    config_path: Path | None = None

    def build(self) -> Contextualizer:
        """Create an extractor with these settings."""
        return Contextualizer(
            ignore_private_ips=self.ignore_private_ips,
            ignored_domains=self.ignored_domains,
            ignored_emails=self.ignored_emails,
        )


def _parse_bool(raw_value: str) -> bool:
    return raw_value.strip().lower() in TRUE_VALUES


def _split_list(raw_value: str) -> tuple[str, ...]:
    """Split a comma- or newline-separated list, dropping blanks."""
    return tuple(item.strip() for item in re.split(r"[,\n]", raw_value) if item.strip())


def _find_default_config_paths() -> Iterable[Path]:
    """Return default config locations in priority order."""
    yield Path.cwd() / "contextualizer.ini"
    yield Path.home() / ".config" / "contextualizer" / "config.ini"


def _load_ini_config(
    config_path: Path,
) -> tuple[bool | None, tuple[str, ...] | None, tuple[str, ...] | None]:
    """Load filter values from an INI file."""
    parser = ConfigParser()
    try:
        parser.read(config_path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as exc:
        raise ConfigurationError(str(config_path), str(exc)) from exc

    if not parser.has_section(CONFIG_SECTION):
        return None, None, None

    ignore_private_ips: bool | None = None
    if parser.has_option(CONFIG_SECTION, "ignore_private_ips"):
        ignore_private_ips = _parse_bool(parser.get(CONFIG_SECTION, "ignore_private_ips"))

    domains = parser.get(CONFIG_SECTION, "ignored_domains", fallback=None)
    emails = parser.get(CONFIG_SECTION, "ignored_emails", fallback=None)
    return (
        ignore_private_ips,
        _split_list(domains) if domains is not None else None,
        _split_list(emails) if emails is not None else None,
    )


def load_config(
    cli_ignore_private_ips: bool | None = None,
    cli_ignored_domains: Iterable[str] | None = None,
    cli_ignored_emails: Iterable[str] | None = None,
    cli_config_path: str | None = None,
) -> FilterConfig:
    """Load configuration with precedence: CLI > env > config file."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    config_path: Path | None = None
    file_ignore_ips: bool | None = None
    file_domains: tuple[str, ...] | None = None
    file_emails: tuple[str, ...] | None = None

    if cli_config_path:
        config_path = Path(cli_config_path)
        if not config_path.is_file():
            raise ConfigurationError(str(config_path), "file does not exist")
        file_ignore_ips, file_domains, file_emails = _load_ini_config(config_path)
    else:
        for path in _find_default_config_paths():
            if path.exists():
                config_path = path
                file_ignore_ips, file_domains, file_emails = _load_ini_config(path)
                break

    env_ignore_ips: bool | None = None
    if ENV_IGNORE_PRIVATE_IPS in os.environ:
        env_ignore_ips = _parse_bool(os.environ[ENV_IGNORE_PRIVATE_IPS])

    env_domains = os.environ.get(ENV_IGNORED_DOMAINS)
    env_emails = os.environ.get(ENV_IGNORED_EMAILS)

    resolved_ignore_ips = (
        cli_ignore_private_ips
        if cli_ignore_private_ips is not None
        else env_ignore_ips
        if env_ignore_ips is not None
        else file_ignore_ips or False
    )

    if cli_ignored_domains:
        resolved_domains = tuple(cli_ignored_domains)
    elif env_domains is not None:
        resolved_domains = _split_list(env_domains)
    else:
        resolved_domains = file_domains or ()

    if cli_ignored_emails:
        resolved_emails = tuple(cli_ignored_emails)
    elif env_emails is not None:
        resolved_emails = _split_list(env_emails)
    else:
        resolved_emails = file_emails or ()

    return FilterConfig(
        ignore_private_ips=bool(resolved_ignore_ips),
        ignored_domains=resolved_domains,
        ignored_emails=resolved_emails,
        config_path=config_path,
    )
