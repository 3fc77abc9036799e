"""Wallpaper manager that cycles through folders of media files with mpvpaper."""

__version__ = "0.1.0"
__all__ = ["__version__"]