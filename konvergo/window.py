"""Window geometry: rectangles, screens and the stored window position."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

WEBUI_WIDTH = 1280
WEBUI_HEIGHT = 720
WEBUI_MAX_HEIGHT = 1440.0
WINDOW_MIN_WIDTH = 213
WINDOW_MIN_HEIGHT = 120


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """The x coordinate of the last column inside the rectangle."""
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        """The y coordinate of the last row inside the rectangle."""
        return self.y + self.height - 1

    def is_valid(self) -> bool:
        """Whether both width and height are positive."""
        return self.width > 0 and self.height > 0

    def is_empty(self) -> bool:
        """Whether the rectangle covers no pixels."""
        return not self.is_valid()

    def contains(self, other: Rect) -> bool:
        """Whether *other* lies entirely inside this rectangle."""
        if not self.is_valid() or not other.is_valid():
            return False
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.x + other.width <= self.x + self.width
            and other.y + other.height <= self.y + self.height
        )

    def intersected(self, other: Rect) -> Rect:
        """The overlap of both rectangles; an empty rectangle if they do not overlap."""
        if not self.is_valid() or not other.is_valid():
            return Rect(0, 0, 0, 0)
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        if right <= left or bottom <= top:
            return Rect(0, 0, 0, 0)
        return Rect(left, top, right - left, bottom - top)

    def area(self) -> int:
        """Number of pixels covered; 0 for an empty rectangle."""
        if self.is_empty():
            return 0
        return self.width * self.height


@dataclass(frozen=True)
class Screen:
    """A display with its own geometry and that of the virtual desktop it belongs to."""

    name: str
    geometry: Rect
    virtual_geometry: Rect | None = field(default=None)

    def __post_init__(self) -> None:
        if self.virtual_geometry is None:
            object.__setattr__(self, "virtual_geometry", self.geometry)


def fits_in_screens(rect: Rect, screens: Iterable[Screen]) -> bool:
    """Whether *rect* lies fully inside the virtual desktop of any screen."""
    for screen in screens:
        virtual = screen.virtual_geometry
        if virtual is not None and virtual.is_valid() and virtual.contains(rect):
            return True
    return False


def default_geometry(screen: Screen | None) -> Rect:
    """A 720p window centred on *screen*, or at the origin without a screen."""
    if screen is None:
        return Rect(0, 0, WEBUI_WIDTH, WEBUI_HEIGHT)
    geo = screen.geometry
    return Rect(
        (geo.width - WEBUI_WIDTH) // 2,
        (geo.height - WEBUI_HEIGHT) // 2,
        WEBUI_WIDTH,
        WEBUI_HEIGHT,
    )


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def load_geometry_rect(
    stored: Mapping[str, Any] | None,
    screens: Iterable[Screen],
    current_screen: Screen | None,
) -> Rect:
    """The window rectangle to restore from the stored settings.

    Falls back to the default geometry when nothing usable is stored or the
    stored rectangle does not fit on any screen; too small sizes are raised
    to the minimum window size.
    """
    default = default_geometry(current_screen)
    if not stored:
        return default

    rect = Rect(
        _to_int(stored.get("x")),
        _to_int(stored.get("y")),
        _to_int(stored.get("width")),
        _to_int(stored.get("height")),
    )
    logger.debug("Restoring geo: %s", rect)

    if not rect.is_valid():
        logger.debug("Geo bad, going for defaults")
        return default

    rect = Rect(
        rect.x,
        rect.y,
        max(rect.width, WINDOW_MIN_WIDTH),
        max(rect.height, WINDOW_MIN_HEIGHT),
    )

    if not fits_in_screens(rect, screens):
        logger.debug("Could not fit stored geo into current screens")
        return default

    return rect


def geometry_to_settings(rect: Rect) -> dict[str, int]:
    """The settings value stored for a window rectangle.

    Raises ValueError if the rectangle is smaller than the minimum window size.
    """
    if rect.width < WINDOW_MIN_WIDTH or rect.height < WINDOW_MIN_HEIGHT:
        raise ValueError(f"window geometry {rect} is below the minimum size")
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}