"""
script_gate/core/exceptions.py

Custom exception hierarchy for the application.

Each gate in the validation ladder raises its own typed exception. The
class carries the HTTP status and the public plaintext body so the
controller can answer without leaking internals (paths, configured hashes).
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""

    status_code: int = 500
    public_message: str = "Internal Server Error"


# ── Gate rejections ────────────────────────────────────────────────────────────

class GateRejectedError(AppBaseException):
    """Base for every pass/fail check that turns a request away."""


class InvalidSourceAddressError(GateRejectedError):
    """Raised when the client address is not on the allowlist."""

    status_code = 403
    public_message = "Forbidden: invalid IP"


class MissingHeaderError(GateRejectedError):
    """Raised when the DRM header is absent or empty."""

    status_code = 400
    public_message = "Bad Request: missing header"


class InvalidHeaderFormatError(GateRejectedError):
    """Raised when the DRM header does not match DRM-<digits>-<hex>."""

    status_code = 400
    public_message = "Bad Request: invalid header format"


class InvalidClientIdError(GateRejectedError):
    """Raised when the parsed client id is not on the allowlist."""

    status_code = 403
    public_message = "Forbidden: invalid ID"


class InvalidStartupHashError(GateRejectedError):
    """Raised when the claimed startup hash differs from the configured one."""

    status_code = 403
    public_message = "Forbidden: invalid hash"


# ── Storage exceptions ─────────────────────────────────────────────────────────

class ScriptReadError(AppBaseException):
    """Raised when the served script cannot be read from disk."""

    status_code = 500
    public_message = "Internal Server Error: could not read file"
