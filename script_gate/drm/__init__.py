"""script_gate/drm/__init__.py — public API of the drm package."""

from script_gate.drm.header_parser import DrmHeaderParser

__all__ = [
    "DrmHeaderParser",
]
