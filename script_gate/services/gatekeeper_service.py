"""
script_gate/services/gatekeeper_service.py

Runs a script request through the validation ladder:

    client address
      └─ address allowlist          → InvalidSourceAddressError
           └─ DRM header present     → MissingHeaderError
                └─ DRM header syntax  → InvalidHeaderFormatError
                     └─ id allowlist   → InvalidClientIdError
                          └─ hash match → InvalidStartupHashError
                               └─ ScriptStore.read() → str | ScriptReadError

The first failing gate wins; later gates never run. Same
constructor-injection pattern as the other services: settings are
passed in, parser and store default to the real implementations.
"""

from __future__ import annotations

from typing import Optional

from script_gate.core.config import Settings
from script_gate.core.exceptions import (
    InvalidClientIdError,
    InvalidHeaderFormatError,
    InvalidSourceAddressError,
    InvalidStartupHashError,
    MissingHeaderError,
)
from script_gate.core.logger import get_logger
from script_gate.drm.header_parser import DrmHeaderParser
from script_gate.models.drm_models import DrmHeader
from script_gate.script_store.base import ScriptStore
from script_gate.script_store.file_store import FileScriptStore

logger = get_logger(__name__)


class GatekeeperService:
    """
    Decides whether a request may receive the script, and fetches it.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(
        self,
        settings: Settings,
        parser: DrmHeaderParser | None = None,
        store: ScriptStore | None = None,
    ) -> None:
        self._settings = settings
        self._parser: DrmHeaderParser = parser or DrmHeaderParser()
        self._store: ScriptStore = store or FileScriptStore(settings.script_path)
        # Compared as strings so an arbitrarily long client id is never parsed.
        self._allowed_ids = frozenset(str(i) for i in settings.allowed_ids)

    # ── Gates ──────────────────────────────────────────────────────────────────

    def check_address(self, client_host: Optional[str]) -> None:
        """Reject clients whose transport-level address is not allowlisted."""
        if client_host is None or client_host not in self._settings.allowed_ips:
            logger.warning("Forbidden IP: %s", client_host)
            raise InvalidSourceAddressError(f"Address {client_host!r} is not allowed.")

    def parse_header(self, header_value: Optional[str]) -> DrmHeader:
        """
        Presence and syntax gates.

        Raises:
            MissingHeaderError       : The header is absent or empty.
            InvalidHeaderFormatError : The value is not DRM-<digits>-<hex>.
        """
        if not header_value:
            logger.warning("Missing header: %s", self._settings.drm_header_name)
            raise MissingHeaderError("DRM header is missing.")

        parsed = self._parser.parse(header_value)
        if parsed is None:
            logger.warning("Invalid header: %s", header_value)
            raise InvalidHeaderFormatError("DRM header is malformed.")
        return parsed

    def check_client_id(self, header: DrmHeader) -> None:
        if header.client_id not in self._allowed_ids:
            logger.warning("Forbidden ID: %s", header.client_id)
            raise InvalidClientIdError("Client id is not allowed.")

    def check_startup_hash(self, header: DrmHeader) -> None:
        # Plain equality, not hmac.compare_digest. See DESIGN.md.
        if header.startup_hash != self._settings.required_startup_hash:
            logger.warning("Invalid hash: %s", header.startup_hash)
            raise InvalidStartupHashError("Startup hash does not match.")

    # ── Public API ─────────────────────────────────────────────────────────────

    def authorize(self, client_host: Optional[str], header_value: Optional[str]) -> DrmHeader:
        """
        Run every gate in order.

        Args:
            client_host  : Client address as seen by the transport, or None if unknown.
            header_value : Raw DRM header value, or None if the header was not sent.

        Returns:
            The parsed header of an authorised client.

        Raises:
            GateRejectedError subclass for the earliest failing gate.
        """
        self.check_address(client_host)
        header = self.parse_header(header_value)
        self.check_client_id(header)
        self.check_startup_hash(header)
        return header

    async def serve(self, client_host: Optional[str], header_value: Optional[str]) -> str:
        """
        Authorise the request, then return the script contents.

        Raises:
            GateRejectedError : A gate turned the request away.
            ScriptReadError   : The script could not be read.
        """
        header = self.authorize(client_host, header_value)
        content = await self._store.read()
        logger.info("Served script to client %s at %s.", header.client_id, client_host)
        return content
