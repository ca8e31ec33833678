"""aiohttp server for Agora.

Application factory and route registration.
"""

import logging

import httpx
from aiohttp import web

from agora.app_keys import api_key, config_key, http_client_key, layout_key, shell_sockets_key
from agora.assets import get_static_dir
from agora.client import build_api
from agora.config import Config
from agora.live.shell_socket import ShellSocketManager, create_shell_socket_routes
from agora.shell.layout import ShellLayout
from agora.shell.session import ShellSession
from agora.shell.user_menu import SessionActions
from agora.views.pages import create_pages_routes

logger = logging.getLogger(__name__)


def create_app(
    config: Config,
    *,
    http_client: httpx.AsyncClient | None = None,
    session_actions: SessionActions | None = None,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        http_client: Transport for backend API calls. When omitted the app
            creates one and closes it on cleanup.
        session_actions: Session collaborator for the user menu

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    owns_client = http_client is None
    if http_client is None:
        http_client = httpx.AsyncClient(timeout=config.api.timeout)

    layout = ShellLayout(config.shell.app_name)
    sockets = ShellSocketManager(
        lambda: ShellSession(
            entries=layout.entries,
            breakpoint=config.shell.breakpoint,
            session_actions=session_actions,
        )
    )

    app[config_key] = config
    app[http_client_key] = http_client
    app[api_key] = build_api(http_client, config.api.base_url)
    app[layout_key] = layout
    app[shell_sockets_key] = sockets

    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_shell_socket_routes(sockets))
    app.router.add_static("/static", get_static_dir())

    app.on_shutdown.append(_close_shell_sockets)
    if owns_client:
        app.on_cleanup.append(_close_http_client)

    return app


async def _close_shell_sockets(app: web.Application) -> None:
    """Close shell connections on shutdown."""
    await app[shell_sockets_key].close_all()


async def _close_http_client(app: web.Application) -> None:
    """Close the backend API transport on application cleanup."""
    await app[http_client_key].aclose()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Backend API: {config.api.effective_base_url}")
    web.run_app(app, host=config.server.host, port=config.server.port)
