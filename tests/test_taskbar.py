from urllib.parse import parse_qs, urlsplit

import pytest

from konvergo.taskbar import (
    MediaButton,
    button_action,
    display_metadata,
    progress_value,
    thumbnail_url,
)


@pytest.mark.parametrize(
    "button, action",
    [
        (MediaButton.PLAY, "play_pause"),
        (MediaButton.PAUSE, "play_pause"),
        (MediaButton.NEXT, "next"),
        (MediaButton.PREVIOUS, "previous"),
        (MediaButton.STOP, "stop"),
        (MediaButton.FAST_FORWARD, "seek_forward"),
        (MediaButton.REWIND, "seek_backward"),
        (MediaButton.CHANNEL_UP, "channelup"),
        (MediaButton.CHANNEL_DOWN, "channeldown"),
    ],
)
def test_button_action(button, action):
    assert button_action(button) == action


def test_record_button_is_unsupported():
    assert button_action(MediaButton.RECORD) is None


def test_button_action_accepts_int():
    assert button_action(int(MediaButton.NEXT)) == "next"


def test_unknown_button_raises():
    with pytest.raises(ValueError):
        button_action(42)


def test_progress_zero_duration():
    assert progress_value(12345, 0) == 0


def test_progress_zero_position():
    assert progress_value(0, 5000) == 0


def test_progress_is_monotonic():
    values = [progress_value(p, 7) for p in range(0, 2000, 13)]
    assert values == sorted(values)


def test_progress_negative_raises():
    with pytest.raises(ValueError):
        progress_value(-1, 10)
    with pytest.raises(ValueError):
        progress_value(10, -1)


def test_thumbnail_from_primary_image():
    meta = {"Id": "item1", "ImageTags": {"Primary": "tag1"}}
    url = thumbnail_url(meta, "http://localhost:8096/web/index.html")
    parts = urlsplit(url)
    assert parts.netloc == "localhost:8096"
    assert parts.path == "/Items/item1/Images/Primary"
    assert parse_qs(parts.query) == {"tag": ["tag1"]}


def test_thumbnail_falls_back_to_album():
    meta = {"Id": "item1", "AlbumId": "album7", "AlbumPrimaryImageTag": "atag"}
    url = thumbnail_url(meta, "http://localhost:8096")
    parts = urlsplit(url)
    assert parts.path == "/Items/album7/Images/Primary"
    assert parse_qs(parts.query) == {"tag": ["atag"]}


def test_thumbnail_prefers_primary_over_album():
    meta = {
        "Id": "item1",
        "ImageTags": {"Primary": "tag1"},
        "AlbumId": "album7",
        "AlbumPrimaryImageTag": "atag",
    }
    assert urlsplit(thumbnail_url(meta, "http://localhost")).path == "/Items/item1/Images/Primary"


def test_thumbnail_missing_returns_none():
    assert thumbnail_url({"Id": "item1", "ImageTags": {}}, "http://localhost") is None
    assert thumbnail_url({"AlbumId": "album7"}, "http://localhost") is None
    assert thumbnail_url({"AlbumId": None, "AlbumPrimaryImageTag": "x"}, "http://localhost") is None


def test_display_metadata_video_movie():
    result = display_metadata({"MediaType": "Video", "Name": "Film", "Type": "Movie"})
    assert result == {"type": "video", "title": "Film"}


def test_display_metadata_video_episode():
    result = display_metadata(
        {"MediaType": "Video", "Name": "Pilot", "Type": "Episode", "SeriesName": "Show"}
    )
    assert result == {"type": "video", "title": "Pilot", "subtitle": "Show"}


def test_display_metadata_audio():
    result = display_metadata(
        {
            "MediaType": "Audio",
            "Name": "Song",
            "Artists": ["A", "B"],
            "AlbumArtist": "A",
        }
    )
    assert result == {"type": "music", "artist": "A, B", "title": "Song", "album_artist": "A"}


def test_display_metadata_defaults_to_music_with_empty_fields():
    result = display_metadata({})
    assert result == {"type": "music", "artist": "", "title": "", "album_artist": ""}