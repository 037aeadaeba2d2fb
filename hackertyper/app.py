"""The interactive typer: every key press reveals more of the text."""

from __future__ import annotations

import os
import random
import re
import sys
from collections.abc import Sequence

from hackertyper.effects import display_text, setup_msdos_style, show_fake_error
from hackertyper.terminal import Color, Terminal
from hackertyper.textsource import (
    DEFAULT_FILE_NAME,
    NoTextFilesError,
    choose_file,
    default_search_paths,
    find_text_files,
    read_text,
)

DEFAULT_CHARS_PER_KEY = 5
FAKE_ERROR_AFTER_KEYS = 10
FAKE_ERROR_THRESHOLD = 0.5
LOOP_PAUSE_MS = 10
START_PAUSE_MS = 500

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TextFeeder:
    """Hands out a growing prefix of ``source``, ``chunk`` characters per call.

    When the end of the source is reached, reading starts again from its
    beginning while the text shown so far keeps growing.
    """

    def __init__(self, source: str, chunk: int = DEFAULT_CHARS_PER_KEY) -> None:
        if not source:
            raise ValueError("source text is empty")
        if chunk <= 0:
            raise ValueError("chunk must be positive")
        self.source = source
        self.chunk = chunk
        self.position = 0
        self.text = ""

    def feed(self) -> str:
        """Append the next chunk and return everything revealed so far."""
        end = min(self.position + self.chunk, len(self.source))
        self.text += self.source[self.position:end]
        self.position = 0 if end >= len(self.source) else end
        return self.text


def parse_chars_per_key(value: str | None) -> int:
    """Read a leading integer from ``value``; anything not positive gives the default."""
    if value is None:
        return DEFAULT_CHARS_PER_KEY
    match = _LEADING_INT.match(value)
    number = int(match.group(1)) if match else 0
    return number if number > 0 else DEFAULT_CHARS_PER_KEY


def _render_header(term: Terminal) -> None:
    term.clear()
    term.set_color(Color.GRAY)
    term.writeline("C:\\HACK>DECRYPT.EXE")
    term.writeline("SCANNING NETWORK...")
    term.writeline()


def _render_body(term: Terminal, text: str) -> None:
    display_text(term, text)
    term.set_color(Color.GRAY)
    term.writeline("_")


def render_frame(term: Terminal, text: str) -> None:
    """Redraw the screen with the header, ``text`` and a cursor."""
    _render_header(term)
    _render_body(term, text)


def run(
    term: Terminal,
    source: str,
    chars_per_key: int = DEFAULT_CHARS_PER_KEY,
    rng: random.Random | None = None,
) -> str:
    """Run the interactive session until the exit key; return the text shown."""
    rng = rng or random.Random()
    feeder = TextFeeder(source, chars_per_key)
    presses = 0
    with term.raw_mode():
        setup_msdos_style(term, rng)
        term.write("C:\\HACK>")
        term.flush()
        term.sleep_ms(START_PAUSE_MS)

        while True:
            if term.key_pressed():
                key = term.read_key()
                if term.is_exit_key(key):
                    break
                _render_header(term)
                text = feeder.feed()
                presses += 1
                if presses > FAKE_ERROR_AFTER_KEYS and rng.randint(1, 100) <= FAKE_ERROR_THRESHOLD:
                    show_fake_error(term, rng)
                    presses = 0
                _render_body(term, text)
            term.sleep_ms(LOOP_PAUSE_MS)

        term.set_color(Color.RESET)
        term.clear()
    return feeder.text


def _report_files(files: Sequence[str]) -> None:
    if len(files) == 1 and os.path.basename(files[0]) == DEFAULT_FILE_NAME:
        print(f"Using default file: {files[0]}")
        return
    for name in files:
        print(f"Found file: {name}")
    print(f"Found files in: {os.path.dirname(files[0])}")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    chars_per_key = parse_chars_per_key(args[0] if args else None)

    try:
        files = find_text_files(default_search_paths())
    except NoTextFilesError:
        print("Error: Cannot find any hackertext files.", file=sys.stderr)
        print(
            "Please make sure hackertext.txt exists in one of the search paths.",
            file=sys.stderr,
        )
        return 1
    _report_files(files)

    rng = random.Random()
    selected = choose_file(files, rng)
    try:
        source = read_text(selected)
    except OSError:
        print(f"Error opening file: {selected}", file=sys.stderr)
        source = ""
    if not source:
        print("Failed to read text file or file is empty.", file=sys.stderr)
        return 1

    run(Terminal(), source, chars_per_key, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())