from unittest import mock

import pytest

from sbgm.cli import build_parser, main, run_command
from sbgm.config import Config


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".config" / "sbgm").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def saved(home):
    folders = []
    for name in ["one", "two"]:
        folder = home / name
        folder.mkdir()
        for image in ["a.png", "b.png"]:
            (folder / image).write_text("x")
        folders.append(str(folder))
    cfg = Config(0, 0, folders)
    cfg.save()
    return cfg


def test_parser_set_index():
    args = build_parser().parse_args(["set", "-i", "3"])
    assert (args.command, args.index) == ("set", 3)


def test_parser_path_without_command():
    args = build_parser().parse_args(["-p", "/x.png"])
    assert (args.command, args.path) == (None, "/x.png")


def test_parser_rejects_negative_index():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["set-folder", "--index", "-1"])


def test_run_command_prints_index(home, capsys):
    run_command(Config(2, 0, ["a"]), "index")
    assert capsys.readouterr().out == "2\n"


def test_run_command_unknown(home):
    with pytest.raises(ValueError):
        run_command(Config(0, 0, ["a"]), "bogus")


def test_main_next_saves_and_draws(saved):
    with mock.patch("subprocess.run") as run:
        assert main(["next"]) == 0
    cfg = Config.load()
    assert cfg.bg_index == 1
    assert run.call_args_list[-1].args[0][-1] == cfg.backgrounds()[1]


def test_main_index_does_not_draw(saved, capsys):
    with mock.patch("subprocess.run") as run:
        assert main(["folder-index"]) == 0
    assert run.call_count == 0
    assert capsys.readouterr().out == "0\n"


def test_main_set_folder_resets_bg(saved):
    Config(1, 0, saved.folders).save()
    with mock.patch("subprocess.run"):
        assert main(["set-folder", "-i", "1"]) == 0
    cfg = Config.load()
    assert (cfg.folder_index, cfg.bg_index) == (1, 0)


def test_main_prev_folder_wraps(saved):
    with mock.patch("subprocess.run"):
        main(["prev-folder"])
    assert Config.load().folder_index == 1


def test_main_draws_given_path(saved):
    with mock.patch("subprocess.run") as run:
        assert main(["-p", "/x/y.gif"]) == 0
    assert run.call_args_list[-1].args[0][-1] == "/x/y.gif"


def test_main_missing_config(home):
    with mock.patch("subprocess.run") as run:
        assert main(["index"]) == 1
    assert run.call_count == 0
    assert Config.load().folders == [f"{home}/bg/"]