"""Page endpoints.

Every page renders its body template and wraps it in the navigation shell.
"""

from typing import Any

from aiohttp import web

from agora.app_keys import api_key, config_key, layout_key
from agora.core import paths
from agora.features.users import load_users
from agora.shell.panel import ViewportClass, classify_viewport
from agora.shell.router import RequestRouter

# Client hint headers carrying the layout viewport width in CSS pixels
VIEWPORT_HEADERS = ("Sec-CH-Viewport-Width", "Viewport-Width")


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/", redirect_to_app),
        web.get(paths.APP, dashboard),
        web.get(paths.DISCUSSIONS, discussions),
        web.get(paths.USERS, users),
        web.get(paths.PROFILE, profile),
    ]


async def redirect_to_app(request: web.Request) -> web.Response:
    RequestRouter(request).push(paths.APP)


async def dashboard(request: web.Request) -> web.Response:
    return render_page(request, "pages/dashboard.html", "Dashboard")


async def discussions(request: web.Request) -> web.Response:
    return render_page(request, "pages/discussions.html", "Discussions")


async def users(request: web.Request) -> web.Response:
    state = await load_users(request.app[api_key])
    status = 502 if state.is_error else 200
    return render_page(request, "pages/users.html", "Users", status=status, state=state)


async def profile(request: web.Request) -> web.Response:
    return render_page(request, "pages/profile.html", "Your Profile")


def viewport_from_request(request: web.Request) -> ViewportClass | None:
    """Classify the viewport from client hint headers, None if not sent."""
    breakpoint = request.app[config_key].shell.breakpoint
    for header in VIEWPORT_HEADERS:
        viewport = classify_viewport(request.headers.get(header), breakpoint)
        if viewport is not None:
            return viewport
    return None


def render_page(
    request: web.Request,
    template_name: str,
    title: str | None = None,
    *,
    status: int = 200,
    **context: Any,
) -> web.Response:
    """Render a page body inside the shell layout."""
    layout = request.app[layout_key]
    router = RequestRouter(request)
    children = layout.render_content(template_name, app_name=layout.app_name, **context)
    html = layout.render(
        children,
        title,
        router=router,
        viewport=viewport_from_request(request),
    )
    return web.Response(
        text=html,
        status=status,
        content_type="text/html",
        headers={"Accept-CH": ", ".join(VIEWPORT_HEADERS), "Vary": ", ".join(VIEWPORT_HEADERS)},
    )
