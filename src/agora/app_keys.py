"""Application keys for type-safe app configuration access."""

import httpx
from aiohttp import web

from agora.client import ApiInstance
from agora.config import Config
from agora.live.shell_socket import ShellSocketManager
from agora.shell.layout import ShellLayout

config_key = web.AppKey("config", Config)
api_key = web.AppKey("api", ApiInstance)
http_client_key = web.AppKey("http_client", httpx.AsyncClient)
layout_key = web.AppKey("layout", ShellLayout)
shell_sockets_key = web.AppKey("shell_sockets", ShellSocketManager)
