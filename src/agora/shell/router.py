"""Router collaborators used by the shell.

The shell only needs the current route path, an imperative "navigate to"
operation and a way to produce link targets. Page renders read the path
from the aiohttp request; shell sessions track client-side transitions
reported over the WebSocket.
"""

from typing import NoReturn, Protocol

from aiohttp import web

from agora.core.paths import canonical_path
from agora.core.types import URLPath


class Router(Protocol):
    @property
    def pathname(self) -> URLPath | None: ...

    def push(self, path: str) -> None: ...

    def href(self, path: str) -> str: ...


class RequestRouter:
    """Router view of a server-side page request."""

    def __init__(self, request: web.Request) -> None:
        self._request = request

    @property
    def pathname(self) -> URLPath | None:
        return canonical_path(self._request.path)

    def push(self, path: str) -> NoReturn:
        raise web.HTTPFound(self.href(path))

    def href(self, path: str) -> str:
        return canonical_path(path) or "/"


class SessionRouter:
    """Router state of one connected shell.

    ``push`` records the navigation so the client can perform it; the
    pending target is consumed with ``take_navigation``.
    """

    def __init__(self, pathname: str | None = None) -> None:
        self._pathname = canonical_path(pathname)
        self._pending: URLPath | None = None

    @property
    def pathname(self) -> URLPath | None:
        return self._pathname

    def set_pathname(self, path: str | None) -> None:
        self._pathname = canonical_path(path)

    def push(self, path: str) -> None:
        target = canonical_path(path)
        if target is None:
            return
        self._pathname = target
        self._pending = target

    def href(self, path: str) -> str:
        return canonical_path(path) or "/"

    def take_navigation(self) -> URLPath | None:
        pending, self._pending = self._pending, None
        return pending
