import pytest

from konvergo.window import (
    Rect,
    Screen,
    default_geometry,
    fits_in_screens,
    geometry_to_settings,
    load_geometry_rect,
)

FULL_HD = Screen("main", Rect(0, 0, 1920, 1080))


def test_rect_validity():
    assert Rect(0, 0, 10, 10).is_valid()
    assert not Rect(0, 0, 0, 10).is_valid()
    assert Rect(0, 0, 10, -1).is_empty()


def test_rect_right_and_bottom():
    rect = Rect(5, 7, 10, 20)
    assert rect.right == rect.x + rect.width - 1
    assert rect.bottom == rect.y + rect.height - 1


def test_rect_contains():
    outer = Rect(0, 0, 100, 100)
    assert outer.contains(Rect(10, 10, 50, 50))
    assert outer.contains(outer)
    assert not outer.contains(Rect(60, 60, 50, 50))
    assert not outer.contains(Rect(10, 10, 0, 0))


def test_rect_intersected():
    a = Rect(0, 0, 100, 100)
    b = Rect(50, 50, 100, 100)
    overlap = a.intersected(b)
    assert overlap == b.intersected(a)
    assert a.contains(overlap) and b.contains(overlap)
    assert a.intersected(Rect(200, 200, 10, 10)).is_empty()


def test_rect_area():
    assert Rect(0, 0, 4, 5).area() == 20
    assert Rect(0, 0, 0, 5).area() == 0


def test_screen_virtual_geometry_defaults_to_geometry():
    assert FULL_HD.virtual_geometry == FULL_HD.geometry


def test_fits_in_screens():
    assert fits_in_screens(Rect(100, 100, 200, 200), [FULL_HD])
    assert not fits_in_screens(Rect(1900, 100, 200, 200), [FULL_HD])
    assert not fits_in_screens(Rect(100, 100, 200, 200), [])


def test_default_geometry_without_screen():
    assert default_geometry(None) == Rect(0, 0, 1280, 720)


def test_default_geometry_is_centred():
    rect = default_geometry(FULL_HD)
    assert (rect.width, rect.height) == (1280, 720)
    assert rect.x * 2 + rect.width == FULL_HD.geometry.width
    assert rect.y * 2 + rect.height == FULL_HD.geometry.height


def test_load_empty_gives_default():
    assert load_geometry_rect({}, [FULL_HD], FULL_HD) == default_geometry(FULL_HD)
    assert load_geometry_rect(None, [FULL_HD], None) == default_geometry(None)


def test_load_stored_rect():
    stored = {"x": 10, "y": 20, "width": 800, "height": 600}
    assert load_geometry_rect(stored, [FULL_HD], FULL_HD) == Rect(10, 20, 800, 600)


def test_load_clamps_to_min_size():
    stored = {"x": 10, "y": 20, "width": 50, "height": 40}
    assert load_geometry_rect(stored, [FULL_HD], FULL_HD) == Rect(10, 20, 213, 120)


def test_load_invalid_gives_default():
    stored = {"x": 10, "y": 20, "width": 0, "height": 600}
    assert load_geometry_rect(stored, [FULL_HD], FULL_HD) == default_geometry(FULL_HD)


def test_load_off_screen_gives_default():
    stored = {"x": 5000, "y": 20, "width": 800, "height": 600}
    assert load_geometry_rect(stored, [FULL_HD], FULL_HD) == default_geometry(FULL_HD)


def test_settings_round_trip():
    rect = Rect(100, 50, 1024, 768)
    assert load_geometry_rect(geometry_to_settings(rect), [FULL_HD], FULL_HD) == rect


def test_settings_keys():
    assert set(geometry_to_settings(Rect(0, 0, 800, 600))) == {"x", "y", "width", "height"}


def test_settings_rejects_tiny_window():
    with pytest.raises(ValueError):
        geometry_to_settings(Rect(0, 0, 100, 100))