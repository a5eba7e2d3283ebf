"""Key names for keyboard events and the host's key filtering rules."""

from __future__ import annotations

from collections.abc import Iterable

DESKTOP_WHITELISTED_KEYS = frozenset(
    {
        "Media Play",
        "Media Pause",
        "Media Stop",
        "Media Next",
        "Media Previous",
        "Media Rewind",
        "Media FastForward",
        "Back",
    }
)

WIN32_BLACKLISTED_KEYS = frozenset(
    {
        "Media Play",
        "Media Pause",
        "Media Stop",
        "Media Next",
        "Media Previous",
        "Media Rewind",
        "Media FastForward",
    }
)

# Modifiers in the order they appear in a key name.
_MODIFIER_ORDER = ("Meta", "Ctrl", "Alt", "Shift")
_IGNORED_MODIFIERS = frozenset({"Keypad"})


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def key_to_string(modifiers: Iterable[str], key: str, native_virtual_key: int = 0) -> str:
    """The name of a key press, e.g. "Ctrl+A".

    *modifiers* are names among Meta, Ctrl, Alt, Shift and Keypad (the latter
    is ignored). Keys whose name is not printable Latin-1 are replaced by the
    native virtual key code ("0x..V") or, without one, by their character
    codes ("0x..Q" joined with "+"). Raises ValueError for an unknown modifier.
    """
    held = set(modifiers)
    unknown = held - set(_MODIFIER_ORDER) - _IGNORED_MODIFIERS
    if unknown:
        raise ValueError(f"unknown modifier(s): {', '.join(sorted(unknown))}")

    prefix = "".join(f"{name}+" for name in _MODIFIER_ORDER if name in held)

    units = _utf16_units(key)
    if units and (units[0] < 32 or units[0] > 255):
        if native_virtual_key != 0:
            key = f"0x{native_virtual_key:x}V"
        else:
            key = "+".join(f"0x{unit:x}Q" for unit in units)

    return prefix + key


def is_desktop_whitelisted(key_name: str) -> bool:
    """Whether the host handles this key itself in desktop mode."""
    return key_name in DESKTOP_WHITELISTED_KEYS


def is_win32_blacklisted(key_name: str) -> bool:
    """Whether this key is ignored on Windows because it is handled elsewhere."""
    return key_name in WIN32_BLACKLISTED_KEYS


class KeyRepeatFilter:
    """Swallows auto-repeated presses of character keys until the key is released."""

    def __init__(self) -> None:
        self.key_down = False

    def accept(self, pressed: bool, text: str) -> bool:
        """Return False for a repeated press that should be dropped, True otherwise.

        *text* is the text the key produces; modifier keys produce none and are
        never treated as repeats.
        """
        if pressed:
            if text:
                if self.key_down:
                    return False
                self.key_down = True
        else:
            self.key_down = False
        return True