#!/usr/bin/env python3

"""
Module for extracting and contextualizing indicators of compromise (IOCs).

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

from contextualizer.modules.extractor_aggregate import ExtractionAggregateMixin


class Contextualizer(ExtractionAggregateMixin):
    """
    Extract IOCs from free text and apply the configured suppression rules.

    Instances are immutable after construction and can be shared between
    threads.

    Example:
        >>> ctx = Contextualizer(True, ["google.com"], ["admin@test.com"])
        >>> ctx.match_one("Visit example.com", "domain")
        [Match(value='example.com', type='domain')]
    """
