"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .config import Config, ParserError
from .utils import cfg_path

_COMMANDS = (
    "folder-index",
    "index",
    "prev",
    "next",
    "prev-folder",
    "next-folder",
    "set",
    "set-folder",
)
_REPORTING = {"folder-index", "index"}


def _usize(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid index: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(prog="sbgm", description="Switch backgrounds with mpvpaper.")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-p", "--path", help="show this file instead of the selected one")
    parser.set_defaults(command=None, index=None)
    sub = parser.add_subparsers(dest="command")
    for name in _COMMANDS:
        command = sub.add_parser(name)
        if name in ("set", "set-folder"):
            command.add_argument("-i", "--index", type=_usize, required=True)
    return parser


def _print_folder_index(cfg: Config, index: int | None) -> None:
    print(cfg.folder_index)


def _print_index(cfg: Config, index: int | None) -> None:
    print(cfg.bg_index)


def _next(cfg: Config, index: int | None) -> None:
    cfg.next_bg()
    cfg.save()


def _prev(cfg: Config, index: int | None) -> None:
    cfg.prev_bg()
    cfg.save()


def _next_folder(cfg: Config, index: int | None) -> None:
    cfg.set_bg(0)
    cfg.next_folder()
    cfg.save()


def _prev_folder(cfg: Config, index: int | None) -> None:
    cfg.set_bg(0)
    cfg.prev_folder()
    cfg.save()


def _set(cfg: Config, index: int | None) -> None:
    cfg.set_bg(index)
    cfg.save()


def _set_folder(cfg: Config, index: int | None) -> None:
    cfg.set_bg(0)
    cfg.set_folder(index)
    cfg.save()


_HANDLERS: dict[str, Callable[[Config, int | None], None]] = {
    "folder-index": _print_folder_index,
    "index": _print_index,
    "next": _next,
    "prev": _prev,
    "next-folder": _next_folder,
    "prev-folder": _prev_folder,
    "set": _set,
    "set-folder": _set_folder,
}


def run_command(config: Config, command: str, index: int | None = None) -> None:
    """Apply ``command`` to ``config``."""
    try:
        handler = _HANDLERS[command]
    except KeyError:
        raise ValueError(f"unknown command: {command}") from None
    if command in ("set", "set-folder") and index is None:
        raise ValueError(f"{command} needs an index")
    handler(config, index)


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        config = Config.load()
    except ParserError as exc:
        print(f"can't load cfg file at: {cfg_path()}: {exc}", file=sys.stderr)
        return 1
    if args.command is None:
        config.draw(args.path)
        return 0
    run_command(config, args.command, args.index)
    if args.command not in _REPORTING:
        config.draw(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())