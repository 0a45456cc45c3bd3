"""
script_gate/api/script_controller.py

Handles incoming requests to GET <script_route> (``/script.lua`` by default).

This layer is responsible only for HTTP concerns:
  - Insisting on the exact request target (a query string is a mismatch).
  - Pulling the client address and the DRM header off the request.
  - Delegating the gate ladder and the file read to GatekeeperService.
  - Translating gate failures into their fixed plaintext responses.

Responses:
  200  Every gate passed.  Body is the script, verbatim, as text/plain.
  400  The DRM header was missing or malformed.
  403  The address, client id or startup hash was rejected.
  404  The request target was not exactly the script route.
  500  The script could not be read.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from script_gate.core.exceptions import AppBaseException, GateRejectedError, ScriptReadError
from script_gate.core.logger import get_logger
from script_gate.services.gatekeeper_service import GatekeeperService

logger = get_logger(__name__)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(exc: AppBaseException) -> PlainTextResponse:
    """Return the fixed plaintext response for an application error."""
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


def get_gatekeeper(request: Request) -> GatekeeperService:
    """Dependency — the gatekeeper built by the app factory."""
    return request.app.state.gatekeeper


# ── Router ─────────────────────────────────────────────────────────────────────

def build_router(script_route: str, drm_header_name: str) -> APIRouter:
    """
    Build the router for a configured route and header name.

    Both come from Settings, so redeploying under a different path or
    header needs no code change.
    """
    router = APIRouter(tags=["Script"])
    raw_route = quote(script_route, safe="/").encode("ascii")

    @router.get(script_route, response_class=PlainTextResponse, summary="Fetch the DRM-protected script")
    async def get_script(
        request: Request,
        gatekeeper: GatekeeperService = Depends(get_gatekeeper),
    ) -> PlainTextResponse:
        """
        Serve the script to a client that passes every gate:

          1. address is allowlisted
          2. the DRM header is present
          3. it reads DRM-<client id>-<startup hash>
          4. the client id is allowlisted
          5. the startup hash equals the configured one
        """
        # Routing matched the decoded path; the raw target must match too,
        # so "/script%2Elua" and any query string are not the script route.
        raw_path = request.scope.get("raw_path") or request.url.path.encode("utf-8")
        if raw_path != raw_route or request.scope.get("query_string"):
            raise HTTPException(status_code=404)

        client_host = request.client.host if request.client else None
        header_value = request.headers.get(drm_header_name)

        try:
            content = await gatekeeper.serve(client_host, header_value)

        except (GateRejectedError, ScriptReadError) as exc:
            # Already logged with the offending value where it was raised.
            return _err(exc)

        return PlainTextResponse(content, status_code=200)

    return router
