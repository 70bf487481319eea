[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledsnake"
version = "0.1.0"
description = "Snake on an emulated 8x8 MAX7219 LED matrix, with a scrolling text displayer"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "led", "matrix", "max7219", "game", "scrolling text", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledsnake = "ledsnake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ledsnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
