"""
tests/script_store/test_file_store.py

Tests for FileScriptStore against real files under tmp_path.
"""

import asyncio
import threading
from pathlib import Path

import pytest

from script_gate.core.exceptions import ScriptReadError
from script_gate.script_store.file_store import FileScriptStore


class TestFileScriptStore:

    @pytest.mark.asyncio
    async def test_read_returns_contents(self, tmp_path: Path) -> None:
        path = tmp_path / "script.lua"
        path.write_text("print('hi')\n", encoding="utf-8")

        assert await FileScriptStore(path).read() == "print('hi')\n"

    @pytest.mark.asyncio
    async def test_read_is_not_cached(self, tmp_path: Path) -> None:
        path = tmp_path / "script.lua"
        path.write_text("one", encoding="utf-8")
        store = FileScriptStore(path)

        await store.read()
        path.write_text("two", encoding="utf-8")

        assert await store.read() == "two"

    @pytest.mark.asyncio
    async def test_crlf_is_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "script.lua"
        path.write_bytes(b"a\r\nb")

        assert await FileScriptStore(path).read() == "a\r\nb"

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "script.lua"
        path.write_bytes(b"ok\xffok")

        assert await FileScriptStore(path).read() == "ok\ufffdok"

    @pytest.mark.asyncio
    async def test_missing_file_raises_script_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ScriptReadError):
            await FileScriptStore(tmp_path / "missing.lua").read()

    @pytest.mark.asyncio
    async def test_directory_raises_script_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ScriptReadError):
            await FileScriptStore(tmp_path).read()


class TestNonBlockingRead:
    """A slow read must not stall the event loop for other requests."""

    @pytest.mark.asyncio
    async def test_slow_read_does_not_block_other_reads(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        slow_path = tmp_path / "slow.lua"
        fast_path = tmp_path / "fast.lua"
        slow_path.write_text("slow", encoding="utf-8")
        fast_path.write_text("fast", encoding="utf-8")

        release = threading.Event()
        finished: list[str] = []
        original_read_bytes = Path.read_bytes

        def read_bytes(self: Path) -> bytes:
            if self == slow_path:
                # Times out (rather than hangs) if the loop itself is blocked.
                release.wait(timeout=5)
                finished.append("slow")
            return original_read_bytes(self)

        monkeypatch.setattr(Path, "read_bytes", read_bytes)

        slow_task = asyncio.create_task(FileScriptStore(slow_path).read())
        try:
            await asyncio.sleep(0)
            fast = await asyncio.wait_for(FileScriptStore(fast_path).read(), timeout=2)
            finished.append("fast")
        finally:
            release.set()

        assert fast == "fast"
        assert await slow_task == "slow"
        assert finished == ["fast", "slow"]
