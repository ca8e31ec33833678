"""Tests for side panel navigation entries."""

import pytest
from agora.core.types import URLPath
from agora.shell.navigation import (
    NAVIGATION,
    NavigationEntry,
    NavItem,
    build_navigation,
    find_active,
    find_entry,
    validate_entries,
)

ENTRIES = validate_entries(
    [
        NavigationEntry(name="Home", to=URLPath("/"), icon="home"),
        NavigationEntry(name="Docs", to=URLPath("/docs"), icon="book"),
        NavigationEntry(name="Guide", to=URLPath("/docs/guide"), icon="map"),
    ]
)


class TestValidateEntries:
    """Tests for validate_entries()."""

    def test__unique_names__keeps_order(self) -> None:
        assert [entry.name for entry in ENTRIES] == ["Home", "Docs", "Guide"]

    def test__duplicate_name__raises_value_error(self) -> None:
        """Entry names must be unique."""
        entries = [
            NavigationEntry(name="Docs", to=URLPath("/a"), icon="x"),
            NavigationEntry(name="Docs", to=URLPath("/b"), icon="x"),
        ]

        with pytest.raises(ValueError, match="Duplicate navigation entry: Docs"):
            validate_entries(entries)


class TestDefaultNavigation:
    """Tests for the application's navigation entries."""

    def test__entries__in_display_order(self) -> None:
        assert [(entry.name, entry.to) for entry in NAVIGATION] == [
            ("Dashboard", "/app"),
            ("Discussions", "/app/discussions"),
            ("Users", "/app/users"),
        ]


class TestFindActive:
    """Tests for find_active()."""

    def test__exact_match__returns_entry(self) -> None:
        assert find_active(ENTRIES, "/docs") is ENTRIES[1]

    def test__prefix__does_not_match(self) -> None:
        """Highlighting uses exact matches, not prefixes."""
        assert find_active(ENTRIES, "/docs/guide/setup") is None

    def test__nested_exact__matches_deeper_entry(self) -> None:
        """A parent entry is not highlighted for a child route."""
        assert find_active(ENTRIES, "/docs/guide") is ENTRIES[2]

    @pytest.mark.parametrize("path", ["/docs/", "docs", "/docs?tab=1", "/docs#top"])
    def test__equivalent_paths__match(self, path: str) -> None:
        """Compare canonical paths."""
        assert find_active(ENTRIES, path) is ENTRIES[1]

    @pytest.mark.parametrize("path", [None, "", "/unknown"])
    def test__no_match__returns_none(self, path: str | None) -> None:
        """Unknown or missing routes highlight nothing."""
        assert find_active(ENTRIES, path) is None

    def test__duplicate_targets__first_entry_wins(self) -> None:
        """Never more than one active entry."""
        entries = validate_entries(
            [
                NavigationEntry(name="A", to=URLPath("/same"), icon="x"),
                NavigationEntry(name="B", to=URLPath("/same"), icon="x"),
            ]
        )

        items = build_navigation(entries, "/same")

        assert [item.active for item in items] == [True, False]


class TestFindEntry:
    """Tests for find_entry()."""

    def test__known_name__returns_entry(self) -> None:
        assert find_entry(ENTRIES, "Guide") is ENTRIES[2]

    def test__unknown_name__returns_none(self) -> None:
        assert find_entry(ENTRIES, "Missing") is None


class TestBuildNavigation:
    """Tests for build_navigation()."""

    def test__current_path__highlights_single_entry(self) -> None:
        items = build_navigation(ENTRIES, "/")

        assert [item.active for item in items] == [True, False, False]

    def test__every_route__highlights_at_most_one(self) -> None:
        for path in ["/", "/docs", "/docs/guide", "/other", None]:
            items = build_navigation(ENTRIES, path)
            assert sum(item.active for item in items) <= 1

    def test__to_dict__serializes_item(self) -> None:
        item = NavItem(entry=ENTRIES[1], active=True)

        assert item.to_dict() == {
            "name": "Docs",
            "path": "/docs",
            "icon": "book",
            "active": True,
        }
