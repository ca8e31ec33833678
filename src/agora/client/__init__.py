"""Typed client for the backend API.

Endpoints, their methods and schemas are declared in the route table;
build_api() turns the table into an object with one accessor per route.
"""

from .endpoints import (
    DEFAULT_BASE_URL,
    ApiInstance,
    ApiResponse,
    Endpoint,
    RequestConfig,
    UsersEndpoint,
    build_api,
)
from .errors import ApiError, DecodeError, NetworkError, StatusError
from .fetching import Resource
from .routes import ROUTES, MethodSpec, RouteSpec, RouteTable, User, UsersResponse

__all__ = [
    "DEFAULT_BASE_URL",
    "ROUTES",
    "ApiError",
    "ApiInstance",
    "ApiResponse",
    "DecodeError",
    "Endpoint",
    "MethodSpec",
    "NetworkError",
    "RequestConfig",
    "Resource",
    "RouteSpec",
    "RouteTable",
    "StatusError",
    "User",
    "UsersEndpoint",
    "UsersResponse",
    "build_api",
]
