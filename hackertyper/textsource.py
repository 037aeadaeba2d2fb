"""Locating, choosing and reading the text files that get "typed" on screen."""

from __future__ import annotations

import os
import random
import re
import sys
from collections.abc import Iterable, Sequence

TEXT_FILE_PATTERN = "hackertext[0-9]*.txt"
DEFAULT_FILE_NAME = "hackertext.txt"
SYSTEM_DATA_DIRS = ("/usr/local/share/hackertyper", "/usr/share/hackertyper")


class NoTextFilesError(LookupError):
    """Raised when no text file can be found or chosen."""


def list_matching_files(directory: str, pattern: str) -> list[str]:
    """Return ``directory/name`` for every entry whose whole name matches ``pattern``.

    A directory that cannot be read yields an empty list.
    """
    regex = re.compile(pattern)
    try:
        names = os.listdir(directory)
    except OSError:
        return []
    return [f"{directory}/{name}" for name in sorted(names) if regex.fullmatch(name)]


def read_text(filename: str) -> str:
    """Return the whole contents of ``filename``; raises ``OSError`` if it cannot be read."""
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def executable_dir() -> str:
    """Return the directory holding the running program, or ``"."`` if unknown."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return "."
    return os.path.dirname(os.path.realpath(program)) or "."


def default_search_paths() -> list[str]:
    """Return the directories searched for text files, most preferred first."""
    return [".", executable_dir(), *SYSTEM_DATA_DIRS]


def find_text_files(paths: Iterable[str]) -> list[str]:
    """Return the text files of the first path that has any.

    If no path holds a numbered text file, the first readable
    ``hackertext.txt`` is used instead. Raises ``NoTextFilesError`` when
    nothing is found.
    """
    paths = list(paths)
    for path in paths:
        found = list_matching_files(path, TEXT_FILE_PATTERN)
        if found:
            return found
    for path in paths:
        candidate = f"{path}/{DEFAULT_FILE_NAME}"
        if os.path.isfile(candidate) and os.access(candidate, os.R_OK):
            return [candidate]
    raise NoTextFilesError(
        "cannot find any hackertext files; make sure "
        f"{DEFAULT_FILE_NAME} exists in one of the search paths"
    )


def choose_file(files: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one file uniformly at random."""
    if not files:
        raise NoTextFilesError("no files to choose from")
    return (rng or random.Random()).choice(list(files))