"""Media transport controls: button actions, progress and now-playing metadata."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)


class MediaButton(enum.IntEnum):
    """Buttons of the system media transport controls."""

    PLAY = 0
    PAUSE = 1
    STOP = 2
    RECORD = 3
    FAST_FORWARD = 4
    REWIND = 5
    NEXT = 6
    PREVIOUS = 7
    CHANNEL_UP = 8
    CHANNEL_DOWN = 9


_BUTTON_ACTIONS = {
    MediaButton.PLAY: "play_pause",
    MediaButton.PAUSE: "play_pause",
    MediaButton.NEXT: "next",
    MediaButton.PREVIOUS: "previous",
    MediaButton.STOP: "stop",
    MediaButton.FAST_FORWARD: "seek_forward",
    MediaButton.REWIND: "seek_backward",
    MediaButton.CHANNEL_UP: "channelup",
    MediaButton.CHANNEL_DOWN: "channeldown",
}


def button_action(button: MediaButton | int) -> str | None:
    """The input action sent for a pressed button, or None if it is unsupported.

    Raises ValueError for a value that is not a known button.
    """
    pressed = MediaButton(button)
    action = _BUTTON_ACTIONS.get(pressed)
    if action is None:
        logger.debug("Received unsupported button press")
    else:
        logger.debug("Received %s button press", action)
    return action


def progress_value(position: int, duration: int) -> int:
    """The taskbar progress value for a playback *position* within *duration*.

    A zero duration gives 0. Raises ValueError for negative values.
    """
    if position < 0 or duration < 0:
        raise ValueError("position and duration must not be negative")
    if duration == 0:
        return 0
    return position // duration // 10


def _as_string(value: Any) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _text(value: Any) -> str:
    converted = _as_string(value)
    return "" if converted is None else converted


def thumbnail_url(meta: Mapping[str, Any], base_url: str) -> str | None:
    """The primary image URL for an item, or None if it has no primary image.

    The item's own primary image is preferred; otherwise the album's image is
    used when both the album id and its image tag are present.
    """
    images = meta.get("ImageTags")
    if isinstance(images, Mapping) and "Primary" in images:
        item_id = _text(meta.get("Id"))
        tag = _text(images["Primary"])
    else:
        album_id = _as_string(meta.get("AlbumId"))
        album_tag = _as_string(meta.get("AlbumPrimaryImageTag"))
        if album_id is None or album_tag is None:
            logger.debug("No Primary image found. Do nothing")
            return None
        item_id, tag = album_id, album_tag

    parts = urlsplit(base_url)
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            f"/Items/{item_id}/Images/Primary",
            urlencode({"tag": tag}),
            parts.fragment,
        )
    )


def _artists(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [_text(item) for item in value]
    return []


def display_metadata(meta: Mapping[str, Any]) -> dict[str, str]:
    """The now-playing properties shown by the system for an item.

    Videos get a title and, for episodes, the series name as subtitle;
    everything else is shown as music with artist, title and album artist.
    """
    if _text(meta.get("MediaType")) == "Video":
        result = {"type": "video", "title": _text(meta.get("Name"))}
        if meta.get("Type") == "Episode":
            result["subtitle"] = _text(meta.get("SeriesName"))
        return result

    return {
        "type": "music",
        "artist": ", ".join(_artists(meta.get("Artists"))),
        "title": _text(meta.get("Name")),
        "album_artist": _text(meta.get("AlbumArtist")),
    }