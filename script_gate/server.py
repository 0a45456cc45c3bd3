"""
script_gate/server.py

Process launcher: serves the app with uvicorn on the configured port.

A port that cannot be bound is fatal; uvicorn logs the error and the
process exits non-zero before the "Server running" line is written.
"""

import uvicorn

from script_gate.core.config import Settings, settings
from script_gate.core.logger import get_logger
from script_gate.main import create_app

logger = get_logger(__name__)


class ScriptGateServer(uvicorn.Server):
    """uvicorn server that announces itself once its socket is listening."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # startup() exits on a bind failure; reaching here with
        # ``started`` unset means the server is shutting down instead.
        if self.started:
            logger.info("Server running at http://localhost:%d/", self.config.port)


def build_server(app_settings: Settings) -> ScriptGateServer:
    config = uvicorn.Config(
        create_app(app_settings),
        host=app_settings.host,
        port=app_settings.port,
    )
    return ScriptGateServer(config)


def run() -> None:
    build_server(settings).run()


if __name__ == "__main__":
    run()
