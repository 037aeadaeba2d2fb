import io
import os
import random
import sys

import pytest

from hackertyper.app import TextFeeder, main, parse_chars_per_key, render_frame, run
from hackertyper.terminal import CLEAR_SCREEN, Color, Terminal


def test_feeder_grows_and_wraps():
    feeder = TextFeeder("abcdefg", 3)
    assert feeder.feed() == "abc"
    assert feeder.feed() == "abcdef"
    assert feeder.feed() == "abcdefg"
    assert feeder.feed() == "abcdefgabc"


def test_feeder_exact_multiple_wraps():
    feeder = TextFeeder("abcd", 2)
    feeder.feed()
    feeder.feed()
    assert feeder.position == 0
    assert feeder.feed() == "abcdab"


def test_feeder_rejects_empty_source():
    with pytest.raises(ValueError):
        TextFeeder("", 5)


def test_feeder_rejects_nonpositive_chunk():
    with pytest.raises(ValueError):
        TextFeeder("abc", 0)


@pytest.mark.parametrize(
    "value, expected",
    [(None, 5), ("3", 3), ("0", 5), ("-2", 5), ("abc", 5), (" 7x", 7), ("12", 12)],
)
def test_parse_chars_per_key(value, expected):
    assert parse_chars_per_key(value) == expected


def test_render_frame_layout():
    out = io.StringIO()
    term = Terminal(stdin=io.StringIO(), stdout=out, sleep=lambda s: None)
    render_frame(term, "line1\nline2")
    assert out.getvalue() == (
        CLEAR_SCREEN
        + Color.GRAY.value
        + "C:\\HACK>DECRYPT.EXE\nSCANNING NETWORK...\n\n"
        + Color.GREEN.value
        + "line1\nline2\n"
        + Color.RESET.value
        + Color.GRAY.value
        + "_\n"
    )


def test_run_reveals_text_until_ctrl_c():
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"ab\x03")
    stdin = os.fdopen(read_fd, "rb")
    out = io.StringIO()
    try:
        term = Terminal(stdin=stdin, stdout=out, sleep=lambda s: None)
        shown = run(term, "hello world", 5, random.Random(4))
    finally:
        stdin.close()
        os.close(write_fd)
    assert shown == "hello world"[:10]
    text = out.getvalue()
    assert text.count("C:\\HACK>DECRYPT.EXE") == 2
    assert "C:\\HACK>" in text
    assert text.endswith(Color.RESET.value + CLEAR_SCREEN)
    last_frame = text.rsplit("SCANNING NETWORK...", 1)[1]
    assert shown in last_frame


def test_main_without_files_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    monkeypatch.setattr("hackertyper.textsource.SYSTEM_DATA_DIRS", ())
    assert main([]) == 1
    assert "Cannot find any hackertext files" in capsys.readouterr().err


def test_main_with_empty_file_fails(tmp_path, monkeypatch, capsys):
    (tmp_path / "hackertext1.txt").write_text("")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    assert main(["3"]) == 1
    captured = capsys.readouterr()
    assert "Failed to read text file or file is empty." in captured.err
    assert "Found file: ./hackertext1.txt" in captured.out