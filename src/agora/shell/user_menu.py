"""User menu actions.

The menu is a fixed, ordered table of label/effect pairs; the header
template iterates it to render the menu items.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from agora.core import paths
from agora.shell.router import Router

logger = logging.getLogger(__name__)


class SessionActions(Protocol):
    def sign_out(self) -> None: ...


class LoggingSessionActions:
    """Placeholder session collaborator until authentication is integrated."""

    def sign_out(self) -> None:
        logger.info("Sign out requested")


@dataclass(frozen=True)
class UserAction:
    label: str
    effect: Callable[[Router, SessionActions], None]


def _open_profile(router: Router, session: SessionActions) -> None:
    router.push(paths.PROFILE)


def _sign_out(router: Router, session: SessionActions) -> None:
    session.sign_out()


USER_ACTIONS = (
    UserAction(label="Your Profile", effect=_open_profile),
    UserAction(label="Log out", effect=_sign_out),
)


def run_user_action(label: str, router: Router, session: SessionActions) -> bool:
    """Run the action with the given label.

    Returns:
        True if an action matched, False otherwise
    """
    for action in USER_ACTIONS:
        if action.label == label:
            action.effect(router, session)
            return True
    logger.warning(f"Unknown user action: {label!r}")
    return False
