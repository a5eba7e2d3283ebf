# konvergo

Building blocks for the host side of a media player shell: where its files
live, where its window goes, what a key press is called and what the system
media controls should do. Pure Python, no third-party dependencies.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `konvergo.paths`

- `socket_name(server_name)` – a per-user local socket name, `jmp_<server>_<user>.sock`,
  placed in `/tmp/` on POSIX systems. The user comes from `USER`, then `USERNAME`,
  else `unknown`.
- `AppPaths` – a dataclass built from a few base locations (`app_dir`, `prefix`,
  `data_location`, `cache_location`, `home`, `builtin_sounds`, `is_mac`), each with a
  platform default:
  - `data_dir(file)`, `cache_dir(file)` and `log_dir(file)` create the directory
    when needed and return it, or the path of `file` inside it.
  - `resource_dir(file)` looks for `file` next to the application, in
    `../Resources/`, in `<prefix>/share/jellyfinmediaplayer/` and in
    `<prefix>/jellyfinmediaplayer/`, falling back to the path next to the application.
  - `sounds_path(sound)` prefers the user's copy under `sounds/` in the data
    directory, then the bundled one, and returns `None` if neither exists.
  - `web_client_path(mode="tv")` and `web_extension_path(mode="extension")`
    locate the web client under `web-client/<mode>/`.

### `konvergo.window`

- `Rect` – an immutable integer rectangle with `right`, `bottom`, `is_valid()`,
  `is_empty()`, `contains(other)`, `intersected(other)` and `area()`.
- `Screen` – a named display with its `geometry` and `virtual_geometry`
  (defaulting to its own geometry).
- `fits_in_screens(rect, screens)` – whether the rectangle lies fully inside the
  virtual desktop of any screen.
- `default_geometry(screen)` – a 1280x720 window centred on the screen, or at the
  origin without one.
- `load_geometry_rect(stored, screens, current_screen)` – the window rectangle to
  restore from a stored `{"x", "y", "width", "height"}` mapping; raises too small
  sizes to the minimum of 213x120 and falls back to the default geometry when the
  stored value is missing, invalid or off-screen.
- `geometry_to_settings(rect)` – the mapping to store for a rectangle; raises
  `ValueError` below the minimum size.

### `konvergo.screens`

- `find_current_screen(window_rect, screens, fallback)` – the screen covering most
  of the window (the first one on a tie), or `fallback` if there are no screens.
- `find_screen(screens, forced_name, last_used_name)` – the forced screen, else the
  last used one, by name; `None` if neither is set or found.
- `screen_setting_entries(screens, active_screen, forced_name)` – the choices for a
  forced-screen setting: an `Auto` entry, one entry per screen titled
  `"x,y rightxbottom (name)"` with ` *` on the active one, and a
  `[Disconnected: name]` entry for a forced screen that is not present.

### `konvergo.keys`

- `key_to_string(modifiers, key, native_virtual_key=0)` – a key name such as
  `Ctrl+A`. Modifiers are among `Meta`, `Ctrl`, `Alt`, `Shift` and `Keypad`
  (ignored); keys that are not printable Latin-1 become `0x..V` (native virtual
  key) or `0x..Q` codes. Unknown modifiers raise `ValueError`.
- `is_desktop_whitelisted(key_name)` and `is_win32_blacklisted(key_name)` – the
  media keys (and `Back`) the host handles itself in desktop mode, and those
  ignored on Windows.
- `KeyRepeatFilter.accept(pressed, text)` – returns `False` for repeated presses of
  a character key until it is released.

### `konvergo.taskbar`

- `MediaButton` – the buttons of the system media transport controls.
- `button_action(button)` – the input action for a button (`play_pause`, `next`,
  `previous`, `stop`, `seek_forward`, `seek_backward`, `channelup`,
  `channeldown`), or `None` for `RECORD`.
- `progress_value(position, duration)` – the taskbar progress value; 0 for a zero
  duration, `ValueError` for negative values.
- `thumbnail_url(meta, base_url)` – the `/Items/<id>/Images/Primary?tag=<tag>` URL
  for an item's own primary image or, failing that, its album's; `None` if it has
  neither.
- `display_metadata(meta)` – the now-playing properties: title and, for episodes,
  series name for videos; artist, title and album artist for everything else.

## Example

```python
from konvergo.keys import key_to_string
from konvergo.taskbar import thumbnail_url
from konvergo.window import Rect, Screen, load_geometry_rect

print(key_to_string(["Ctrl"], "A"))       # Ctrl+A

screens = [Screen("HDMI-1", Rect(0, 0, 1920, 1080))]
stored = {"x": 100, "y": 100, "width": 100, "height": 50}
print(load_geometry_rect(stored, screens, screens[0]))
# Rect(x=100, y=100, width=213, height=120)

meta = {"Id": "abc", "ImageTags": {"Primary": "t1"}}
print(thumbnail_url(meta, "http://localhost:8096"))
# http://localhost:8096/Items/abc/Images/Primary?tag=t1
```

## What it does not do

The package computes values and decisions; it draws no window, plays no media
and talks to no operating-system media controls. It has no command-line
program, no logging setup, no local socket server or client, no
single-instance guard and no system information or settings storage. Callers
supply screens, stored settings and key events themselves.