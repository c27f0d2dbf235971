[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redwall"
version = "0.1.0"
description = "Pick a wallpaper from the hot posts of a subreddit, crop it to your screen and set it on KDE Plasma"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["wallpaper", "reddit", "kde", "plasma", "desktop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
redwall = "redwall.gui:main"
redwall-cli = "redwall.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["redwall"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
