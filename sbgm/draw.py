"""Launching mpvpaper to show a background."""

from __future__ import annotations

import subprocess


def build_command(path: str, display: str, mpv_args: str, mpvpaper_args: str) -> list[str]:
    """Build the mpvpaper command line."""
    extra = [arg for arg in mpvpaper_args.split(" ") if arg.strip()]
    return ["mpvpaper", "-o", mpv_args, *extra, display, path]


def draw(path: str, display: str, mpv_args: str, mpvpaper_args: str) -> None:
    """Stop any running mpvpaper and start a new one on ``path``."""
    try:
        subprocess.run(["pkill", "-x", "mpvpaper"])
    except OSError:
        pass
    try:
        subprocess.run(build_command(path, display, mpv_args, mpvpaper_args))
    except OSError:
        pass