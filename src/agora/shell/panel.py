"""Side panel presentation state.

The panel is either PERSISTENT (always shown, reserves layout space) or an
OVERLAY opened on demand above the content. The mode is never stored: it
is computed from the current viewport class on every read, so it cannot
fall out of sync with the viewport.
"""

import logging
import math
from enum import StrEnum

logger = logging.getLogger(__name__)

# Width in CSS pixels from which the viewport counts as wide
DEFAULT_BREAKPOINT = 768


class ViewportClass(StrEnum):
    NARROW = "narrow"
    WIDE = "wide"


class PanelMode(StrEnum):
    OVERLAY = "overlay"
    PERSISTENT = "persistent"


# Assumed until the viewport has been classified
DEFAULT_VIEWPORT = ViewportClass.WIDE


def classify_viewport(
    width: object, breakpoint: int = DEFAULT_BREAKPOINT
) -> ViewportClass | None:
    """Classify a viewport width.

    Args:
        width: Width in CSS pixels; strings are parsed
        breakpoint: Smallest width classified as wide

    Returns:
        ViewportClass, or None if width is missing or not a usable number
    """
    if width is None or isinstance(width, bool):
        return None
    try:
        value = float(width)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Ignoring unparseable viewport width of type {type(width).__name__}")
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return ViewportClass.NARROW if value < breakpoint else ViewportClass.WIDE


def parse_viewport_class(value: object) -> ViewportClass | None:
    """Parse a viewport class name, None if unknown."""
    try:
        return ViewportClass(value)
    except (TypeError, ValueError):
        return None


def panel_mode(viewport: ViewportClass | None) -> PanelMode:
    """Map a viewport class to the panel mode.

    Unknown viewports map to the mode of DEFAULT_VIEWPORT.
    """
    if viewport is None:
        viewport = DEFAULT_VIEWPORT
    if viewport is ViewportClass.NARROW:
        return PanelMode.OVERLAY
    return PanelMode.PERSISTENT


class PanelState:
    """Open/closed state of the panel, owned by one shell instance."""

    __slots__ = ("_is_open", "_viewport")

    def __init__(self, viewport: ViewportClass | None = None) -> None:
        self._viewport = viewport
        self._is_open = False

    @property
    def viewport(self) -> ViewportClass | None:
        return self._viewport

    @property
    def mode(self) -> PanelMode:
        return panel_mode(self._viewport)

    @property
    def is_open(self) -> bool:
        """Whether the overlay is open; always False in persistent mode."""
        return self._is_open and self.mode is PanelMode.OVERLAY

    @property
    def is_visible(self) -> bool:
        return self.mode is PanelMode.PERSISTENT or self._is_open

    @property
    def shows_open_control(self) -> bool:
        return self.mode is PanelMode.OVERLAY

    def set_viewport(self, viewport: ViewportClass | None) -> None:
        """Apply a viewport change.

        Switching to persistent mode discards the overlay's open state, so
        the overlay starts closed the next time the viewport narrows.
        """
        self._viewport = viewport
        if self.mode is PanelMode.PERSISTENT:
            self._is_open = False

    def open(self) -> None:
        if self.mode is PanelMode.OVERLAY:
            self._is_open = True

    def close(self) -> None:
        self._is_open = False

    def dismiss(self) -> None:
        """Close the overlay from a click on its backdrop."""
        self.close()

    def select(self) -> None:
        """Record a navigation entry selection, which closes the overlay."""
        self.close()

    def toggle(self) -> None:
        if self._is_open:
            self.close()
        else:
            self.open()

    def reset(self) -> None:
        self._viewport = None
        self._is_open = False
