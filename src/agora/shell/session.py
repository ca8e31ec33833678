"""Event handling for one mounted navigation shell.

A ShellSession owns the panel state and router state of a single browser
page. Events arrive one at a time and are applied synchronously; after each
event the session returns a snapshot the client renders from.

Events are JSON objects with a ``type`` key:

    {"type": "viewport", "width": 640}      or {"type": "viewport", "class": "narrow"}
    {"type": "open"} / {"type": "close"} / {"type": "dismiss"} / {"type": "toggle"}
    {"type": "select", "name": "Users"}
    {"type": "route", "path": "/app/users"}
    {"type": "user_action", "label": "Your Profile"}
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypedDict

from agora.shell.navigation import (
    NAVIGATION,
    NavigationEntry,
    NavItemDict,
    build_navigation,
    find_active,
    find_entry,
)
from agora.shell.panel import (
    DEFAULT_BREAKPOINT,
    PanelState,
    ViewportClass,
    classify_viewport,
    parse_viewport_class,
)
from agora.shell.router import SessionRouter
from agora.shell.user_menu import LoggingSessionActions, SessionActions, run_user_action

logger = logging.getLogger(__name__)


class ShellSnapshot(TypedDict):
    """State pushed to the client after each event."""

    type: str
    mode: str
    isOpen: bool
    showOpenControl: bool
    panelVisible: bool
    active: str | None
    navigate: str | None
    navigation: list[NavItemDict]


class ShellSession:
    """Panel and route state of one shell instance."""

    def __init__(
        self,
        *,
        entries: Sequence[NavigationEntry] = NAVIGATION,
        breakpoint: int = DEFAULT_BREAKPOINT,
        session_actions: SessionActions | None = None,
        pathname: str | None = None,
        viewport: ViewportClass | None = None,
    ) -> None:
        self._entries = entries
        self._breakpoint = breakpoint
        self._session_actions = session_actions or LoggingSessionActions()
        self.panel = PanelState(viewport)
        self.router = SessionRouter(pathname)
        self._handlers: dict[str, Callable[[dict[str, Any]], None]] = {
            "viewport": self._on_viewport,
            "open": lambda event: self.panel.open(),
            "close": lambda event: self.panel.close(),
            "dismiss": lambda event: self.panel.dismiss(),
            "toggle": lambda event: self.panel.toggle(),
            "select": self._on_select,
            "route": self._on_route,
            "user_action": self._on_user_action,
        }

    def handle(self, event: object) -> ShellSnapshot:
        """Apply one event and return the resulting state.

        Malformed and unknown events are logged and leave the state unchanged.
        """
        if not isinstance(event, dict):
            logger.warning(f"Ignoring malformed shell event: {event!r}")
            return self.snapshot()

        kind = event.get("type")
        handler = self._handlers.get(kind) if isinstance(kind, str) else None
        if handler is None:
            logger.warning(f"Ignoring unknown shell event type: {kind!r}")
            return self.snapshot()

        handler(event)
        return self.snapshot()

    def snapshot(self) -> ShellSnapshot:
        active = find_active(self._entries, self.router.pathname)
        return {
            "type": "state",
            "mode": self.panel.mode.value,
            "isOpen": self.panel.is_open,
            "showOpenControl": self.panel.shows_open_control,
            "panelVisible": self.panel.is_visible,
            "active": active.name if active else None,
            "navigate": self.router.take_navigation(),
            "navigation": [
                item.to_dict()
                for item in build_navigation(self._entries, self.router.pathname)
            ],
        }

    def reset(self) -> None:
        """Discard all state, as when the shell is unmounted."""
        self.panel.reset()
        self.router = SessionRouter()

    def _on_viewport(self, event: dict[str, Any]) -> None:
        if "class" in event:
            viewport = parse_viewport_class(event["class"])
        else:
            viewport = classify_viewport(event.get("width"), self._breakpoint)
        if viewport is None:
            logger.debug("Unknown viewport in event, using default")
        self.panel.set_viewport(viewport)

    def _on_select(self, event: dict[str, Any]) -> None:
        name = event.get("name")
        entry = find_entry(self._entries, name) if isinstance(name, str) else None
        if entry is None:
            logger.warning(f"Unknown navigation entry: {name!r}")
            return
        self.panel.select()
        self.router.push(entry.to)

    def _on_route(self, event: dict[str, Any]) -> None:
        path = event.get("path")
        self.router.set_pathname(path if isinstance(path, str) else None)

    def _on_user_action(self, event: dict[str, Any]) -> None:
        label = event.get("label")
        if not isinstance(label, str):
            logger.warning(f"Malformed user action event: {event!r}")
            return
        run_user_action(label, self.router, self._session_actions)
