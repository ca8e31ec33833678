"""Route table for the backend API.

Declares every path the backend exposes, the HTTP methods allowed on each,
and the request/response schemas of each method. The table is built once
at import time and cannot be modified afterwards.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypedDict


class User(TypedDict):
    """User record as returned by the backend."""

    id: str
    name: str
    email: str


class UsersResponse(TypedDict):
    """Response body of GET /users."""

    users: list[User]


@dataclass(frozen=True)
class MethodSpec:
    """Contract of one HTTP method on a path.

    Attributes:
        response: TypedDict describing the decoded response body
        statuses: Status codes the backend declares for a successful call
        request: TypedDict describing the request body, None for bodiless methods
    """

    response: type
    statuses: frozenset[int] = frozenset({200})
    request: type | None = None


@dataclass(frozen=True)
class RouteSpec:
    """A backend path with the methods it allows."""

    path: str
    methods: Mapping[str, MethodSpec]

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"Route path must start with '/': {self.path!r}")
        if not self.methods:
            raise ValueError(f"Route {self.path} declares no methods")
        methods = {}
        for name, spec in self.methods.items():
            if name != name.upper():
                raise ValueError(f"Method name must be upper-case: {name!r}")
            methods[name] = spec
        object.__setattr__(self, "methods", MappingProxyType(methods))

    def method(self, name: str) -> MethodSpec:
        """Return the spec of a declared method.

        Raises:
            ValueError: If the route does not declare the method
        """
        try:
            return self.methods[name.upper()]
        except KeyError:
            allowed = ", ".join(self.methods)
            raise ValueError(
                f"{name.upper()} is not declared for {self.path} (allowed: {allowed})"
            ) from None


class RouteTable(Mapping[str, RouteSpec]):
    """Immutable mapping from path to route, in declaration order."""

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[RouteSpec]) -> None:
        table: dict[str, RouteSpec] = {}
        for route in routes:
            if route.path in table:
                raise ValueError(f"Duplicate route path: {route.path}")
            table[route.path] = route
        self._routes = MappingProxyType(table)

    def __getitem__(self, path: str) -> RouteSpec:
        return self._routes[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)


ROUTES = RouteTable(
    [
        RouteSpec(
            "/users",
            {"GET": MethodSpec(response=UsersResponse, statuses=frozenset({200}))},
        ),
    ]
)
