"""
tests/helpers.py

Constants and builders shared by several test modules.
"""

from fastapi.testclient import TestClient

from script_gate.core.config import Settings
from script_gate.main import create_app

VALID_HASH = "086954732407f2e4a011d75cade1382fd2ba67b10472be931837009b612c15b5"
VALID_HEADER = f"DRM-7-{VALID_HASH}"
SCRIPT_BODY = 'print("Hello from the protected script!")\n'


def make_client(settings: Settings) -> TestClient:
    """A TestClient for an app built from ``settings``."""
    return TestClient(create_app(settings), raise_server_exceptions=False)
