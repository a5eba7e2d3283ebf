"""Locations of the application's resources, data, cache, logs and local sockets."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAIN_NAME = "JellyfinMediaPlayer"
_RESOURCE_SUBDIR = "jellyfinmediaplayer"


def socket_name(server_name: str) -> str:
    """The local socket path for *server_name*, unique per user."""
    user = os.environ.get("USER") or os.environ.get("USERNAME") or "unknown"
    name = f"jmp_{server_name}_{user}.sock"
    if os.name == "posix":
        return f"/tmp/{name}"
    return name


def _default_app_dir() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def _default_data_location() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if os.name == "nt":
        return Path(os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    return Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")


def _default_cache_location() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local"
        return Path(base) / "cache"
    return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")


@dataclass
class AppPaths:
    """Resolves the application's directories from a few base locations."""

    main_name: str = DEFAULT_MAIN_NAME
    app_dir: Path = field(default_factory=_default_app_dir)
    prefix: Path = field(default_factory=lambda: Path(sys.prefix))
    data_location: Path = field(default_factory=_default_data_location)
    cache_location: Path = field(default_factory=_default_cache_location)
    home: Path = field(default_factory=Path.home)
    builtin_sounds: Path | None = None
    is_mac: bool = sys.platform == "darwin"

    def _writable(self, root: Path) -> Path:
        directory = Path(root) / self.main_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.warning("Failed to create directory: %s", directory)
            raise
        return directory.absolute()

    @staticmethod
    def _file_in(directory: Path, file: str) -> str:
        return str(directory / file) if file else str(directory)

    def resource_dir(self, file: str = "") -> str:
        """Find *file* next to the binary, in ../Resources or under the install prefix.

        Falls back to the path next to the binary when it is found nowhere.
        """
        app_resource_dir = f"{self.app_dir}/"
        candidates = (
            app_resource_dir,
            app_resource_dir + "../Resources/",
            f"{self.prefix}/share/{_RESOURCE_SUBDIR}/",
            f"{self.prefix}/{_RESOURCE_SUBDIR}/",
        )
        for candidate in candidates:
            if os.path.exists(candidate + file):
                return candidate + file
        return app_resource_dir + file

    def data_dir(self, file: str = "") -> str:
        """The data directory (created if needed), or *file* inside it."""
        return self._file_in(self._writable(self.data_location), file)

    def cache_dir(self, file: str = "") -> str:
        """The cache directory (created if needed), or *file* inside it."""
        return self._file_in(self._writable(self.cache_location), file)

    def log_dir(self, file: str = "") -> str:
        """The log directory (created if needed), or *file* inside it."""
        if self.is_mac:
            directory = Path(self.home) / "Library" / "Logs" / self.main_name
            directory.mkdir(parents=True, exist_ok=True)
        else:
            directory = self._writable(self.data_location) / "logs"
            directory.mkdir(parents=True, exist_ok=True)
        return self._file_in(directory.absolute(), file)

    def sounds_path(self, sound: str) -> str | None:
        """The user's copy of *sound* if present, else the bundled one, else None."""
        local = Path(self.data_dir("sounds/" + sound))
        if local.exists():
            return str(local.absolute())

        if self.builtin_sounds is not None:
            bundled = Path(self.builtin_sounds) / sound
            if bundled.exists():
                return str(bundled.absolute())

        logger.warning("Can't find sound: %s", sound)
        return None

    def web_client_path(self, mode: str = "tv") -> str:
        """The index page of the web client for *mode*."""
        return self.resource_dir(f"web-client/{mode}/index.html")

    def web_extension_path(self, mode: str = "extension") -> str:
        """The directory of the web client for *mode*, with a trailing slash."""
        return self.resource_dir(f"web-client/{mode}/")