[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catboy"
version = "1.0.0"
description = "Core pieces of a side-scrolling platformer: asset bundles, save files, audio mixing, sfxr synthesis, menus, HUD and screen transitions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "platformer",
    "sfxr",
    "asset-bundle",
    "easing",
    "audio-mixer",
    "menu",
]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catboy-assets = "catboy.assets:main"

[tool.hatch.build.targets.wheel]
packages = ["catboy"]

[tool.hatch.build.targets.sdist]
include = ["catboy", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
