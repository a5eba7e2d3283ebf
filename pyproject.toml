[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konvergo"
version = "0.1.0"
description = "Helpers for a media player shell: application paths, window and screen geometry, key names and media transport controls."
requires-python = ">=3.10"
dependencies = []
keywords = ["media player", "window geometry", "screens", "keyboard", "media controls"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["konvergo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
