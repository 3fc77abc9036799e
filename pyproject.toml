[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbgm"
version = "0.1.0"
description = "Switch wallpapers from folders of images and videos using mpvpaper"
requires-python = ">=3.10"
dependencies = []
keywords = ["wallpaper", "background", "mpvpaper", "wayland", "desktop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sbgm = "sbgm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sbgm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
