"""Page paths of the application.

Single source of the URLs pages are served at, so navigation entries,
menu actions and route registration cannot drift apart.
"""

from agora.core.types import URLPath

APP = URLPath("/app")
DISCUSSIONS = URLPath("/app/discussions")
USERS = URLPath("/app/users")
PROFILE = URLPath("/app/profile")


def canonical_path(path: str | None) -> URLPath | None:
    """Normalize a route path for comparison.

    Strips query string and fragment, ensures a leading slash and removes
    trailing slashes except for the root path.

    Args:
        path: Raw path (e.g., "app/users/?page=2"), or None when unknown

    Returns:
        Canonical path, or None if path is missing or empty
    """
    if not path:
        return None
    path = path.split("#", 1)[0].split("?", 1)[0]
    if not path.startswith("/"):
        path = f"/{path}"
    stripped = path.rstrip("/")
    return URLPath(stripped or "/")
