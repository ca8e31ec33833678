"""Data loading on top of endpoint accessors.

Wraps one endpoint call in a ``data`` / ``is_loading`` / ``error`` triple for
views. There is no caching, de-duplication or retrying: every ``load()``
issues exactly one request.
"""

import logging
from typing import Any

from agora.client.endpoints import ApiResponse, Endpoint
from agora.client.errors import ApiError, StatusError

logger = logging.getLogger(__name__)


class Resource:
    """Result holder for a single endpoint call.

    ``data`` stays None while loading and after a failure, and is set to the
    response envelope once a 2xx response has been received.
    """

    def __init__(self, endpoint: Endpoint, method: str = "get") -> None:
        """Initialize the resource.

        Args:
            endpoint: Endpoint to call
            method: HTTP method name, must be declared by the endpoint's route

        Raises:
            ValueError: If the method is not declared for the endpoint
        """
        method = method.upper()
        if method not in endpoint.methods:
            raise ValueError(f"{method} is not declared for {endpoint.route.path}")
        self._endpoint = endpoint
        self._method = method
        self._settled = False
        self.data: ApiResponse[Any] | None = None
        self.error: ApiError | None = None

    @property
    def is_loading(self) -> bool:
        return not self._settled

    async def load(self) -> "Resource":
        """Issue the request and record its outcome."""
        accessor = getattr(self._endpoint, self._method.lower())
        self.data = None
        self.error = None
        try:
            response = await accessor()
        except ApiError as e:
            logger.warning(f"Loading {self._endpoint.path()} failed: {e}")
            self.error = e
        else:
            if response.ok:
                self.data = response
            else:
                self.error = StatusError(
                    self._method, self._endpoint.path(), response.status, response.body
                )
        self._settled = True
        return self
