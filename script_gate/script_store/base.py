"""
script_gate/script_store/base.py

Abstract interface for wherever the served script comes from.

The gatekeeper depends only on this interface, so tests can swap the
filesystem for an in-memory double.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScriptStore(ABC):
    """Contract every script source must fulfil."""

    @abstractmethod
    async def read(self) -> str:
        """
        Return the full current contents of the script.

        Must not block the event loop; the content is re-read on every
        call, nothing is cached.

        Raises:
            ScriptReadError: If the script cannot be read.
        """
