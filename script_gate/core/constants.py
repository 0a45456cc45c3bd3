"""
script_gate/core/constants.py

Application-wide fixed constants.

These are part of the wire contract with DRM clients and are NOT
configurable via environment variables.
"""

import re

# ── DRM header ─────────────────────────────────────────────────────────────────

#: ``DRM-<decimal client id>-<lowercase hex startup hash>``.
#: Always applied with ``fullmatch`` so both ends are anchored.
DRM_HEADER_PATTERN: "re.Pattern[str]" = re.compile(
    r"DRM-([0-9]+)-([a-f0-9]+)", re.ASCII
)

# ── Response bodies ────────────────────────────────────────────────────────────

NOT_FOUND_BODY: str = "Not Found"
INTERNAL_ERROR_BODY: str = "Internal Server Error"
