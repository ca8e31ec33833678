"""WebSocket transport for navigation shell events.

Each connected page gets its own ShellSession. The browser sends viewport,
route and interaction events; the server answers every event with the
resulting shell state. Closing the connection unmounts the shell and
discards its state.
"""

import json
import logging
import weakref
from collections.abc import Callable

from aiohttp import WSMsgType, web

from agora.shell.session import ShellSession

logger = logging.getLogger(__name__)


class ShellSocketManager:
    """Manages WebSocket connections of mounted shells."""

    def __init__(self, session_factory: Callable[[], ShellSession]) -> None:
        """Initialize the manager.

        Args:
            session_factory: Creates the session for a new connection
        """
        self._session_factory = session_factory
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def close_all(self) -> None:
        """Close all open connections."""
        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle a shell WebSocket connection.

        Args:
            request: aiohttp request

        Returns:
            WebSocket response
        """
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        session = self._session_factory()
        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    logger.warning(f"Shell connection closed with error: {ws.exception()}")
                    break
                if msg.type != WSMsgType.TEXT:
                    continue
                await ws.send_json(session.handle(_parse_event(msg.data)))
        finally:
            self._connections.discard(ws)
            session.reset()

        return ws


def _parse_event(data: str) -> object:
    try:
        return json.loads(data)
    except ValueError:
        logger.warning(f"Ignoring non-JSON shell event: {data[:100]!r}")
        return None


def create_shell_socket_routes(manager: ShellSocketManager) -> list[web.RouteDef]:
    """Create routes for the shell WebSocket.

    Args:
        manager: ShellSocketManager instance

    Returns:
        List of route definitions
    """
    return [web.get("/ws/shell", manager.handle_websocket)]
