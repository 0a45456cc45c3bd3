"""
script_gate/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the deployment injects these at runtime.

Settings are frozen: they are read once at process start and handed to
the app factory and the gatekeeper, never mutated afterwards.
"""

import re
from pathlib import Path
from typing import FrozenSet

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOWER_HEX = re.compile(r"[a-f0-9]+", re.ASCII)

#: Bundled script, next to the package rather than the working directory.
DEFAULT_SCRIPT_PATH = Path(__file__).resolve().parent.parent / "script.lua"


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "DRM Script Gate"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Listener ───────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000

    # ── Served script ──────────────────────────────────────────────────────────
    script_route: str = "/script.lua"
    script_path: Path = DEFAULT_SCRIPT_PATH

    # ── DRM gate ───────────────────────────────────────────────────────────────
    drm_header_name: str = "cc-rom-drm"
    allowed_ips: FrozenSet[str] = frozenset({"127.0.0.1", "::ffff:127.0.0.1"})
    allowed_ids: FrozenSet[int] = frozenset({7})
    required_startup_hash: str = (
        "086954732407f2e4a011d75cade1382fd2ba67b10472be931837009b612c15b5"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("script_route")
    @classmethod
    def route_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("script_route must start with '/'.")
        return v

    @field_validator("drm_header_name")
    @classmethod
    def header_name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("drm_header_name cannot be empty.")
        return v.strip()

    @field_validator("required_startup_hash")
    @classmethod
    def hash_must_be_lowercase_hex(cls, v: str) -> str:
        # A hash outside this alphabet could never pass the header syntax gate.
        if not _LOWER_HEX.fullmatch(v):
            raise ValueError("required_startup_hash must be lowercase hexadecimal.")
        return v


# Process default — the app factory falls back to this when none is passed.
settings = Settings()
