"""Typed API client built from the route table.

Each backend route gets its own Endpoint subclass bound to exactly one path
of ROUTES. An endpoint only exposes accessors for the methods its route
declares, so an undeclared path/method pair cannot be called:

    api = build_api(httpx.AsyncClient())
    response = await api.users.get()        # ApiResponse, status not raised
    body = await api.users.get_body()       # body only, raises StatusError
    url = api.users.path()                  # no request issued
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Generic, TypedDict, TypeVar

import httpx

from agora.client.errors import DecodeError, NetworkError, StatusError
from agora.client.routes import ROUTES, MethodSpec, RouteSpec, UsersResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"

# Accessor names an Endpoint subclass may define, mapped to their HTTP method
_ACCESSORS = {"get": "GET", "post": "POST", "put": "PUT", "patch": "PATCH", "delete": "DELETE"}

T = TypeVar("T")


class RequestConfig(TypedDict, total=False):
    """Per-request options forwarded to the transport."""

    headers: dict[str, str]
    params: dict[str, str]
    timeout: float


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded response envelope."""

    body: T
    status: int
    headers: httpx.Headers

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def resolve_prefix(base_url: str | None) -> str:
    """Return the URL prefix all endpoint paths are appended to.

    Args:
        base_url: Configured base URL, None for DEFAULT_BASE_URL

    Returns:
        Base URL with one trailing slash removed
    """
    base = DEFAULT_BASE_URL if base_url is None else base_url
    return base.removesuffix("/")


class Endpoint:
    """Base class of per-route accessors.

    Subclasses name their route with the ``path`` class keyword. The path
    must exist in ROUTES and every accessor the subclass defines must be
    declared by the route, otherwise the class definition fails.
    """

    route: ClassVar[RouteSpec]

    def __init_subclass__(cls, *, path: str, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if path not in ROUTES:
            raise TypeError(f"{cls.__name__}: {path} is not in the route table")
        cls.route = ROUTES[path]
        for accessor, method in _ACCESSORS.items():
            defined = accessor in vars(cls) or f"{accessor}_body" in vars(cls)
            if defined and method not in cls.route.methods:
                raise TypeError(f"{cls.__name__}: {method} is not declared for {path}")

    def __init__(self, client: httpx.AsyncClient, prefix: str) -> None:
        self._client = client
        self._prefix = prefix

    @property
    def methods(self) -> tuple[str, ...]:
        """HTTP methods declared for this endpoint's route."""
        return tuple(self.route.methods)

    def path(self) -> str:
        """Return the fully qualified URL of this endpoint."""
        return f"{self._prefix}{self.route.path}"

    async def _fetch(
        self,
        method: str,
        config: RequestConfig | None = None,
        json: object = None,
    ) -> ApiResponse[Any]:
        """Issue one request and decode its body.

        Raises:
            NetworkError: If the transport fails
            DecodeError: If a declared success status carries an invalid body
        """
        spec = self.route.method(method)
        url = self.path()
        options: dict[str, Any] = dict(config or {})

        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(method, url, json=json, **options)
        except httpx.TransportError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise NetworkError(method, url, e) from e

        body = _decode(method, url, response, spec)
        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {url} returned status {response.status_code}")
        return ApiResponse(body=body, status=response.status_code, headers=response.headers)

    async def _fetch_body(
        self,
        method: str,
        config: RequestConfig | None = None,
        json: object = None,
    ) -> Any:
        response = await self._fetch(method, config, json)
        if not response.ok:
            raise StatusError(method, self.path(), response.status, response.body)
        return response.body


class UsersEndpoint(Endpoint, path="/users"):
    """User collection."""

    async def get(self, config: RequestConfig | None = None) -> ApiResponse[UsersResponse]:
        """Fetch all users.

        Args:
            config: Optional per-request options

        Returns:
            Response envelope; non-2xx statuses are returned, not raised

        Raises:
            NetworkError: If the request cannot be completed
        """
        return await self._fetch("GET", config)

    async def get_body(self, config: RequestConfig | None = None) -> UsersResponse:
        """Fetch all users and return the body only.

        Raises:
            NetworkError: If the request cannot be completed
            StatusError: If the response status is outside 200-299
        """
        return await self._fetch_body("GET", config)


@dataclass(frozen=True)
class ApiInstance:
    """Client object with one accessor per route."""

    users: UsersEndpoint

    def endpoints(self) -> list[Endpoint]:
        """Return all endpoints in route table order."""
        return [getattr(self, f.name) for f in fields(self)]


def build_api(client: httpx.AsyncClient, base_url: str | None = None) -> ApiInstance:
    """Build the API client.

    Args:
        client: Transport used for every request; owned by the caller
        base_url: API base URL (default: DEFAULT_BASE_URL)

    Returns:
        ApiInstance bound to the resolved prefix
    """
    prefix = resolve_prefix(base_url)
    return ApiInstance(users=UsersEndpoint(client, prefix))


def _decode(method: str, url: str, response: httpx.Response, spec: MethodSpec) -> Any:
    """Decode a JSON body, validating it when the status is a declared success."""
    declared = response.status_code in spec.statuses
    if not response.content:
        if declared:
            raise DecodeError(method, url, "empty response body")
        return None

    try:
        body = response.json()
    except ValueError as e:
        if declared:
            raise DecodeError(method, url, f"invalid JSON body: {e}") from e
        return None

    if declared:
        _check_schema(method, url, body, spec.response)
    return body


def _check_schema(method: str, url: str, body: object, schema: type) -> None:
    if not isinstance(body, dict):
        raise DecodeError(method, url, f"expected a JSON object for {schema.__name__}")
    required: frozenset[str] = getattr(schema, "__required_keys__", frozenset())
    missing = sorted(key for key in required if key not in body)
    if missing:
        raise DecodeError(
            method, url, f"{schema.__name__} is missing keys: {', '.join(missing)}"
        )
