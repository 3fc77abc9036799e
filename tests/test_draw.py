from unittest import mock

from sbgm.draw import build_command, draw


def test_build_command_splits_extra_args():
    cmd = build_command("/p/a.png", "DP-1", "--loop", "-v  -f")
    assert cmd == ["mpvpaper", "-o", "--loop", "-v", "-f", "DP-1", "/p/a.png"]


def test_build_command_empty_args():
    assert build_command("/p/a.png", "HDMI", "", "") == [
        "mpvpaper",
        "-o",
        "",
        "HDMI",
        "/p/a.png",
    ]


def test_draw_kills_then_launches():
    with mock.patch("subprocess.run") as run:
        draw("/p/a.png", "DP-1", "x", "-v")
    calls = [c.args[0] for c in run.call_args_list]
    assert calls == [
        ["pkill", "-x", "mpvpaper"],
        build_command("/p/a.png", "DP-1", "x", "-v"),
    ]


def test_draw_ignores_missing_programs():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError) as run:
        result = draw("/p/a.png", "DP-1", "", "")
    assert result is None
    calls = [c.args[0] for c in run.call_args_list]
    assert calls == [
        ["pkill", "-x", "mpvpaper"],
        ["mpvpaper", "-o", "", "DP-1", "/p/a.png"],
    ]