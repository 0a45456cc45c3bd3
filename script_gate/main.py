"""
script_gate/main.py

FastAPI application entry point.

Responsibilities:
  - Build the FastAPI app from an explicit Settings object
  - Wire a single GatekeeperService onto app.state
  - Register the script router
  - Collapse every unmatched method/path into a plaintext 404
  - Add a global safety-net for uncaught AppBaseException
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from script_gate.api.script_controller import build_router
from script_gate.core.config import Settings, settings as default_settings
from script_gate.core.constants import INTERNAL_ERROR_BODY, NOT_FOUND_BODY
from script_gate.core.exceptions import AppBaseException
from script_gate.core.logger import get_logger
from script_gate.services.gatekeeper_service import GatekeeperService

logger = get_logger(__name__)


# ── Exception handlers ─────────────────────────────────────────────────────────

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """
    Routing failures. A wrong method is reported exactly like a wrong
    path: the script route is the only thing this server knows about.
    """
    if exc.status_code in (404, 405):
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


async def app_exception_handler(request: Request, exc: AppBaseException) -> PlainTextResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Never echoes the exception text, which may name paths or configuration.
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)


# ── App factory ────────────────────────────────────────────────────────────────

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application for the given settings.

    Falls back to the process-wide settings loaded from the environment.
    Docs and OpenAPI routes are disabled so that every path other than
    the script route answers 404.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Serves a single script to clients that pass the DRM gate.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.gatekeeper = GatekeeperService(settings)

    app.include_router(build_router(settings.script_route, settings.drm_header_name))

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppBaseException, app_exception_handler)

    logger.debug(
        "App ready — route %s, header %s, %d allowed IP(s), %d allowed ID(s).",
        settings.script_route,
        settings.drm_header_name,
        len(settings.allowed_ips),
        len(settings.allowed_ids),
    )
    return app


# ── App instance ───────────────────────────────────────────────────────────────
# `uvicorn script_gate.main:app` serves this one.

app = create_app()
