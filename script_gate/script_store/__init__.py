"""script_gate/script_store/__init__.py — public API of the script_store package."""

from script_gate.script_store.base import ScriptStore
from script_gate.script_store.file_store import FileScriptStore

__all__ = [
    "ScriptStore",
    "FileScriptStore",
]
