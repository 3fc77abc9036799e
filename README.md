# sbgm

sbgm is a small command-line wallpaper manager. It keeps a list of folders
that hold images and videos. It remembers which folder and which file you
are on, and passes the current file to `mpvpaper`, which draws it on your
display.

These media files are recognised, in any letter case: `mkv`, `mp4`, `avi`,
`mov`, `jpg`, `jpeg`, `png`, `gif`, `webp`. Only files directly inside a
folder are considered. Subdirectories are not searched.

## Requirements

- Python 3.10 or later.
- `mpvpaper` on your `PATH`.
- `pkill` on your `PATH`. It is used to stop the running `mpvpaper`.
- `$HOME` set in the environment.

## Installation

```
pip install .
```

## Configuration

The configuration is stored in `~/.config/sbgm/config.json`.

If that file does not exist, sbgm creates a default one and exits with status
1. Edit the file, then run sbgm again.

The default configuration is:

```json
{
  "bg_index": 0,
  "display": "DP-1",
  "folder_index": 0,
  "folders": ["~/bg/"],
  "mpv_args": "",
  "mpvpaper_args": ""
}
```

- `folders`: the directories that wallpapers are taken from. The first `~` in
  each entry is replaced with your home directory.
- `display`: the output name passed to `mpvpaper`.
- `mpv_args`: passed to `mpvpaper` with `-o`.
- `mpvpaper_args`: extra arguments for `mpvpaper`, separated by spaces.
- `bg_index` and `folder_index`: the current file and folder. The commands
  below update these two fields.

All six fields must be present. A file that is not valid JSON, or that has a
missing field or a field of the wrong type, is reported as an error and sbgm
exits with status 1. When sbgm saves the file, it writes compact JSON with the
keys in sorted order.

## Usage

```
sbgm                      # draw the current wallpaper
sbgm --path FILE          # draw FILE instead, without changing the state
sbgm next                 # next file in the current folder, then draw
sbgm prev                 # previous file in the current folder, then draw
sbgm next-folder          # first file of the next folder, then draw
sbgm prev-folder          # first file of the previous folder, then draw
sbgm set --index N        # jump to file N in the current folder, then draw
sbgm set-folder --index N # jump to folder N, starting at its first file, then draw
sbgm index                # print the current file index
sbgm folder-index         # print the current folder index
sbgm --version
```

Short options work as well: `-p` for `--path` and `-i` for `--index`.

Each time sbgm draws, it first stops any running `mpvpaper` with
`pkill -x mpvpaper`. It then starts a new one:

```
mpvpaper -o <mpv_args> <mpvpaper_args...> <display> <file>
```

Index handling:

- Stepping past either end of a folder, or of the folder list, wraps around.
- A folder index that is out of range is clamped to the last folder when the
  configuration is loaded.
- A file index that is out of range is clamped to the last file when that
  file is drawn.
- If the current folder holds no media files, sbgm stops with an error.

## Using it from Python

The pieces behind the command can also be used on their own:

- `sbgm.config.Config` holds the state. `Config.load()` reads the
  configuration file and `save()` writes it back. `backgrounds()` lists the
  media files of the current folder and `background()` returns the current
  one. `next_bg()`, `prev_bg()`, `next_folder()`, `prev_folder()`,
  `set_bg(index)` and `set_folder(index)` move the selection. `draw(path)`
  shows a file.
- `sbgm.config.ParserError` is raised when the configuration file cannot be
  read or decoded.
- `sbgm.draw.build_command(...)` returns the `mpvpaper` command line as a list
  of strings.
- `sbgm.utils.get_media_files(path)` lists the media files in a directory.
- `sbgm.cli.run_command(config, command, index)` applies one of the commands
  above to a `Config`.

## What it does not do

sbgm has no command for adding or removing folders, or for changing the
display or player options. Edit `config.json` by hand for those. It does not
watch folders, and it does not rotate wallpapers on a timer. Each run draws
once and exits.

## Development

```
pip install -e ".[test]"
pytest
```