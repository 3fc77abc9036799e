"""Persistent configuration and background navigation."""

from __future__ import annotations

import json
import os
from typing import Any

from .draw import draw as draw_wallpaper
from .utils import cfg_dir, cfg_path, check_index, get_media_files, replace_tilde

_DEFAULT_DISPLAY = "DP-1"


class ParserError(Exception):
    """The configuration file could not be read or decoded."""

    def __init__(self, cause: Exception):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        if isinstance(self.cause, OSError):
            return f"Input/Output error: {self.cause}"
        return f"JSON Parse/Stringify error: {self.cause}"


def _serialize(data: dict[str, Any]) -> str:
    return json.dumps(data, sort_keys=True, separators=(",", ":"))


class Config:
    """Selected folder and background, with display and player options."""

    def __init__(
        self,
        bg_index: int,
        folder_index: int,
        folders: list[str],
        display: str | None = None,
        mpv_args: str | None = None,
        mpvpaper_args: str | None = None,
    ):
        if folders and not check_index(folders, folder_index):
            folder_index = len(folders) - 1
        self.bg_index = bg_index
        self.folder_index = folder_index
        self.folders = [replace_tilde(folder) for folder in folders]
        self.display = _DEFAULT_DISPLAY if display is None else display
        self.mpv_args = "" if mpv_args is None else mpv_args
        self.mpvpaper_args = "" if mpvpaper_args is None else mpvpaper_args

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a JSON-ready mapping."""
        return {
            "bg_index": self.bg_index,
            "folder_index": self.folder_index,
            "folders": list(self.folders),
            "display": self.display,
            "mpv_args": self.mpv_args,
            "mpvpaper_args": self.mpvpaper_args,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a configuration from a decoded mapping, validating every field."""
        if not isinstance(data, dict):
            raise ParserError(ValueError("expected a JSON object"))
        try:
            bg_index = data["bg_index"]
            folder_index = data["folder_index"]
            folders = data["folders"]
            display = data["display"]
            mpv_args = data["mpv_args"]
            mpvpaper_args = data["mpvpaper_args"]
        except KeyError as exc:
            raise ParserError(ValueError(f"missing field {exc.args[0]}")) from None
        for name, value in (("bg_index", bg_index), ("folder_index", folder_index)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ParserError(ValueError(f"{name} must be a non-negative integer"))
        if not isinstance(folders, list) or not all(isinstance(f, str) for f in folders):
            raise ParserError(ValueError("folders must be a list of strings"))
        for name, value in (
            ("display", display),
            ("mpv_args", mpv_args),
            ("mpvpaper_args", mpvpaper_args),
        ):
            if not isinstance(value, str):
                raise ParserError(ValueError(f"{name} must be a string"))
        return cls(bg_index, folder_index, folders, display, mpv_args, mpvpaper_args)

    def backgrounds(self) -> list[str]:
        """Return the media files of the selected folder."""
        if not check_index(self.folders, self.folder_index):
            raise RuntimeError("no folder configured at the selected index")
        images = get_media_files(self.folders[self.folder_index])
        if not images:
            raise RuntimeError("can't load bg files")
        return images

    def background(self) -> str:
        """Return the selected background, clamping the index to the last one."""
        images = self.backgrounds()
        if not check_index(images, self.bg_index):
            self.bg_index = len(images) - 1
        return images[self.bg_index]

    def set_bg(self, index: int) -> None:
        self.bg_index = index

    def set_folder(self, index: int) -> None:
        self.folder_index = index

    def next_bg(self) -> int:
        """Select the next background, wrapping to the first."""
        images = self.backgrounds()
        i = self.bg_index + 1
        self.bg_index = i if check_index(images, i) else 0
        return self.bg_index

    def prev_bg(self) -> int:
        """Select the previous background, wrapping to the last."""
        images = self.backgrounds()
        i = self.bg_index - 1
        self.bg_index = i if check_index(images, i) else len(images) - 1
        return self.bg_index

    def next_folder(self) -> int:
        """Select the next folder, wrapping to the first."""
        i = self.folder_index + 1
        self.folder_index = i if check_index(self.folders, i) else 0
        return self.folder_index

    def prev_folder(self) -> int:
        """Select the previous folder, wrapping to the last."""
        i = self.folder_index - 1
        self.folder_index = i if check_index(self.folders, i) else len(self.folders) - 1
        return self.folder_index

    def draw(self, path: str | None = None) -> None:
        """Show ``path``, or the selected background when none is given."""
        bg_path = self.background() if path is None else path
        draw_wallpaper(bg_path, self.display, self.mpv_args, self.mpvpaper_args)

    def save(self) -> None:
        """Write the configuration file."""
        with open(cfg_path(), "w", encoding="utf-8") as fh:
            fh.write(_serialize(self.to_dict()))

    @classmethod
    def load(cls) -> Config:
        """Read the configuration file.

        A missing file is replaced by a default one and reported as an error.
        """
        path = cfg_path()
        try:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
        except FileNotFoundError as exc:
            create_default_config()
            print(f"created default config file on: {path}")
            print("configure it)")
            print(f"can't read cfg file: {path}")
            raise ParserError(exc) from exc
        except OSError as exc:
            print(f"config path: {path}")
            raise ParserError(exc) from exc
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ParserError(exc) from exc
        return cls.from_dict(data)


def create_default_config() -> None:
    """Create the configuration directory and write a default configuration."""
    try:
        os.mkdir(cfg_dir())
    except FileExistsError:
        pass
    default = Config(0, 0, ["~/bg/"])
    with open(cfg_path(), "w", encoding="utf-8") as fh:
        fh.write(_serialize(default.to_dict()))