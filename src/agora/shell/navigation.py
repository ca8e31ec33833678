"""Side panel navigation entries.

Entries are a static, ordered list; their order is the on-screen order.
The view layer marks at most one entry active: the first whose target
equals the current route path exactly.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypedDict

from agora.core import paths
from agora.core.paths import canonical_path
from agora.core.types import URLPath


class NavItemDict(TypedDict):
    """Dictionary representation of a navigation item."""

    name: str
    path: str
    icon: str
    active: bool


@dataclass(frozen=True)
class NavigationEntry:
    """Navigation target shown in the side panel."""

    name: str
    to: URLPath
    icon: str


@dataclass(frozen=True)
class NavItem:
    """Navigation entry with its highlight state for rendering."""

    entry: NavigationEntry
    active: bool

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.entry.name,
            "path": self.entry.to,
            "icon": self.entry.icon,
            "active": self.active,
        }


def validate_entries(entries: Iterable[NavigationEntry]) -> tuple[NavigationEntry, ...]:
    """Freeze an entry list, checking that names are unique.

    Raises:
        ValueError: If two entries share a name
    """
    result = tuple(entries)
    seen: set[str] = set()
    for entry in result:
        if entry.name in seen:
            raise ValueError(f"Duplicate navigation entry: {entry.name}")
        seen.add(entry.name)
    return result


NAVIGATION = validate_entries(
    [
        NavigationEntry(name="Dashboard", to=paths.APP, icon="home"),
        NavigationEntry(name="Discussions", to=paths.DISCUSSIONS, icon="message-square"),
        NavigationEntry(name="Users", to=paths.USERS, icon="users"),
    ]
)


def find_active(
    entries: Sequence[NavigationEntry], current_path: str | None
) -> NavigationEntry | None:
    """Return the entry matching the current route.

    Args:
        entries: Navigation entries in display order
        current_path: Current route path, None if unknown

    Returns:
        First entry whose target equals the current path, None if none does
    """
    current = canonical_path(current_path)
    if current is None:
        return None
    for entry in entries:
        if canonical_path(entry.to) == current:
            return entry
    return None


def find_entry(entries: Sequence[NavigationEntry], name: str) -> NavigationEntry | None:
    """Look up an entry by name."""
    return next((entry for entry in entries if entry.name == name), None)


def build_navigation(
    entries: Sequence[NavigationEntry], current_path: str | None
) -> list[NavItem]:
    """Build navigation items with the active entry highlighted."""
    active = find_active(entries, current_path)
    return [NavItem(entry=entry, active=entry is active) for entry in entries]
