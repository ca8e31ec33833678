"""User list loading for the users page."""

from dataclasses import dataclass

from agora.client import ApiError, ApiInstance, Resource, User


@dataclass(frozen=True)
class UsersState:
    """Settled view state of the user list.

    Exactly one of ``users`` and ``error`` is set.
    """

    users: list[User] | None
    error: ApiError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


async def load_users(api: ApiInstance) -> UsersState:
    """Load the user list.

    Returns only after the request settles. Failures are reported in the
    returned state, never raised.
    """
    resource = await Resource(api.users, "get").load()
    users = resource.data.body["users"] if resource.data is not None else None
    return UsersState(users=users, error=resource.error)
