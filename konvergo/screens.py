"""Choosing screens for the window and listing them for the screen setting."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from konvergo.window import Rect, Screen

logger = logging.getLogger(__name__)

AUTO_ENTRY_TITLE = "Auto"


def find_current_screen(
    window_rect: Rect,
    screens: Iterable[Screen],
    fallback: Screen | None = None,
) -> Screen | None:
    """The screen covering the largest part of *window_rect*.

    When several screens cover the same area the first of them wins; with
    no screens at all *fallback* is returned.
    """
    best: Screen | None = None
    best_area = 0
    for screen in screens:
        area = screen.geometry.intersected(window_rect).area()
        if best is None or area > best_area:
            best = screen
            best_area = area
    return best if best is not None else fallback


def find_screen(
    screens: Iterable[Screen],
    forced_name: str = "",
    last_used_name: str = "",
) -> Screen | None:
    """The screen to open the window on.

    The forced screen name takes precedence over the last used one. Returns
    None when neither name is set or no screen carries the chosen name.
    """
    name = forced_name or last_used_name
    if not name:
        return None

    for screen in screens:
        if screen.name == name:
            return screen

    logger.debug("Tried to find screen: %s but it was not present", name)
    return None


def _screen_title(screen: Screen, active: bool) -> str:
    geo = screen.geometry
    title = f"{geo.x},{geo.y} {geo.right}x{geo.bottom} ({screen.name})"
    return title + " *" if active else title


def screen_setting_entries(
    screens: Iterable[Screen],
    active_screen: Screen | None = None,
    forced_name: str = "",
) -> list[dict[str, Any]]:
    """The possible values of the forced-screen setting.

    The list starts with an "Auto" entry, then has one entry per screen, the
    one the window is on marked with " *". A forced screen that is not
    connected is listed last as disconnected.
    """
    entries: list[dict[str, Any]] = [{"value": "", "title": AUTO_ENTRY_TITLE}]
    current_present = False

    for number, screen in enumerate(screens):
        active = active_screen is not None and screen == active_screen
        selected = screen.name == forced_name
        if selected:
            current_present = True
        entries.append({"value": screen.name, "title": _screen_title(screen, active)})
        logger.debug(
            "Screen %d %s %s %s active: %s selected: %s",
            number,
            screen.name,
            screen.geometry,
            screen.virtual_geometry,
            active,
            selected,
        )

    if not current_present and forced_name:
        entries.append(
            {"value": forced_name, "title": f"[Disconnected: {forced_name}]"}
        )

    return entries