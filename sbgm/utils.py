"""Paths, index checks and media discovery."""

from __future__ import annotations

import os
from collections.abc import Sequence

MEDIA_EXT = ("mkv", "mp4", "avi", "mov", "jpg", "jpeg", "png", "gif", "webp")


def home_dir() -> str:
    """Return the user's home directory from $HOME."""
    try:
        return os.environ["HOME"]
    except KeyError:
        raise RuntimeError("Please set $HOME") from None


def cfg_dir() -> str:
    """Return the directory holding the configuration file."""
    return f"{home_dir()}/.config/sbgm"


def cfg_path() -> str:
    """Return the path of the configuration file."""
    return f"{cfg_dir()}/config.json"


def check_index(seq: Sequence, index: int) -> bool:
    """Tell whether ``index`` points at an element of ``seq``."""
    return 0 <= index < len(seq)


def get_media_files(path: str) -> list[str]:
    """List the media files directly inside ``path``.

    An unreadable or missing directory yields an empty list.
    """
    try:
        entries = list(os.scandir(path))
    except OSError:
        return []
    media = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        ext = os.path.splitext(entry.name)[1][1:].lower()
        if ext in MEDIA_EXT:
            media.append(os.path.join(path, entry.name))
    return media


def replace_tilde(text: str) -> str:
    """Replace the first ``~`` in ``text`` with the home directory."""
    return text.replace("~", home_dir(), 1)