"""
script_gate/script_store/file_store.py

Reads the served script from the local filesystem.

The blocking read runs in Starlette's thread pool so one slow disk
access never stalls other in-flight requests.
"""

from __future__ import annotations

from pathlib import Path

from starlette.concurrency import run_in_threadpool

from script_gate.core.exceptions import ScriptReadError
from script_gate.core.logger import get_logger
from script_gate.script_store.base import ScriptStore

logger = get_logger(__name__)


class FileScriptStore(ScriptStore):
    """
    ScriptStore backed by a single file on disk.

    The file is read in full on every call and decoded as UTF-8.
    Line endings are kept as-is; undecodable bytes are replaced
    instead of failing the request.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def read(self) -> str:
        try:
            raw = await run_in_threadpool(self._path.read_bytes)
        except OSError as exc:
            # Path stays in the log, never in the response body.
            logger.error("Could not read script '%s': %s", self._path, exc)
            raise ScriptReadError(f"Could not read '{self._path}'.") from exc

        logger.debug("Read %d byte(s) from '%s'.", len(raw), self._path)
        return raw.decode("utf-8", errors="replace")
