"""
script_gate/drm/header_parser.py

Parses the raw DRM request header.

Single responsibility: turn ``DRM-<digits>-<hex>`` into a DrmHeader, or
report that the value is malformed. Allowlist and hash checks belong to
the gatekeeper, not here.
"""

from __future__ import annotations

from typing import Optional

from script_gate.core.constants import DRM_HEADER_PATTERN
from script_gate.models.drm_models import DrmHeader


class DrmHeaderParser:
    """Strict parser for the DRM header value."""

    def parse(self, value: str) -> Optional[DrmHeader]:
        """
        Parse a raw header value.

        Args:
            value : The header value exactly as received.

        Returns:
            A DrmHeader when the whole value matches the pattern, otherwise None.
            Leading/trailing whitespace is not stripped, so it fails the match.
            Leading zeros are dropped from the id ("007" reads as "7").
        """
        match = DRM_HEADER_PATTERN.fullmatch(value)
        if match is None:
            return None

        digits, startup_hash = match.groups()
        return DrmHeader(client_id=digits.lstrip("0") or "0", startup_hash=startup_hash)
