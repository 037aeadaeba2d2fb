[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackertyper"
version = "1.0.0"
description = "A terminal toy that makes any keystroke look like furious hacking"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "toy", "hacker", "typing", "retro"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hackertyper = "hackertyper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hackertyper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
