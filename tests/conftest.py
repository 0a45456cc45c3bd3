"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
Starlette's TestClient reports its peer address as "testclient", so the
default fixtures allowlist that address.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from script_gate.core.config import Settings
from tests.helpers import SCRIPT_BODY, VALID_HASH, make_client


# ── Settings fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def script_file(tmp_path: Path) -> Path:
    """A script on disk with known contents."""
    path = tmp_path / "script.lua"
    path.write_text(SCRIPT_BODY, encoding="utf-8")
    return path


@pytest.fixture
def gate_settings(script_file: Path) -> Settings:
    """Settings that let the test client through the address gate."""
    return Settings(
        script_path=script_file,
        allowed_ips=frozenset({"testclient"}),
        allowed_ids=frozenset({7}),
        required_startup_hash=VALID_HASH,
    )


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture
def client(gate_settings: Settings) -> TestClient:
    """
    A synchronous TestClient wrapping an app built from ``gate_settings``.

    Function-scoped: every test gets its own script file and app.
    """
    with make_client(gate_settings) as c:
        yield c
