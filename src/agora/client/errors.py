"""API client exception hierarchy.

Every failure surfaced by an endpoint accessor derives from ApiError so
callers can catch client problems without catching unrelated errors.
"""

import httpx


class ApiError(Exception):
    """Base for all API client errors."""


class NetworkError(ApiError):
    """Transport-level failure: connection refused, DNS error, timeout."""

    def __init__(self, method: str, url: str, cause: httpx.TransportError) -> None:
        super().__init__(f"{method} {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class StatusError(ApiError):
    """Response status outside 200-299 where a successful body was required."""

    def __init__(self, method: str, url: str, status: int, body: object) -> None:
        super().__init__(f"{method} {url} returned status {status}")
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class DecodeError(ApiError):
    """Successful response whose body does not match the declared schema."""

    def __init__(self, method: str, url: str, detail: str) -> None:
        super().__init__(f"{method} {url}: {detail}")
        self.method = method
        self.url = url
        self.detail = detail
