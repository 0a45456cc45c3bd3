"""
script_gate/models/drm_models.py

Pydantic DTOs for the DRM header carried by every script request.
"""

from pydantic import BaseModel, ConfigDict, Field


class DrmHeader(BaseModel):
    """
    Parsed form of the DRM header value.

        "DRM-007-0869547324..."  →  DrmHeader(client_id="7", startup_hash="0869547324...")

    ``client_id`` stays a canonical decimal string (no leading zeros).
    Clients control its length, so it is never converted to an int;
    allowlist checks compare it against the string form of each allowed id.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(pattern=r"^(0|[1-9][0-9]*)$", description="Computer id the client claims to be.")
    startup_hash: str = Field(min_length=1, description="Lowercase hex hash of the client's startup state.")
