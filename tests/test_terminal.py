import io
import os

import pytest

from hackertyper.terminal import Color, Terminal


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "rb", buffering=0)
    yield reader, write_fd
    reader.close()
    os.close(write_fd)


def _terminal(stdin=None):
    out = io.StringIO()
    sleeps = []
    term = Terminal(stdin=stdin if stdin is not None else io.StringIO(), stdout=out, sleep=sleeps.append)
    return term, out, sleeps


def test_key_pressed_and_read_key(pipe):
    reader, write_fd = pipe
    term, _, _ = _terminal(reader)
    assert term.key_pressed(0.01) is False
    os.write(write_fd, b"ab")
    assert term.key_pressed(0.01) is True
    assert term.read_key() == "a"
    assert term.read_key() == "b"
    assert term.key_pressed(0.01) is False


def test_read_key_at_end_of_input(pipe):
    reader, write_fd = pipe
    term, _, _ = _terminal(reader)
    os.close(write_fd)
    try:
        assert term.key_pressed(0.01) is True
        assert term.read_key() == "\x00"
    finally:
        write_fd = os.open(os.devnull, os.O_WRONLY)


def test_stream_without_descriptor_has_no_keys():
    term, _, _ = _terminal(io.StringIO("abc"))
    assert term.key_pressed(0.0) is False
    assert term.read_key() == "\x00"


def test_exit_key_is_ctrl_c_for_non_console_input():
    term, _, _ = _terminal()
    assert term.is_exit_key("\x03") is True
    assert term.is_exit_key("a") is False


def test_raw_mode_on_non_tty_still_reads(pipe):
    reader, write_fd = pipe
    term, _, _ = _terminal(reader)
    os.write(write_fd, b"z")
    with term.raw_mode() as active:
        assert active is term
        assert term.read_key() == "z"


def test_set_color_writes_sequences():
    term, out, _ = _terminal()
    term.set_color(Color.GREEN)
    term.set_color(Color.GRAY)
    term.set_color(Color.RESET)
    assert out.getvalue() == "\033[32;1m" + "\033[0m\033[37m" + "\033[0m"


def test_write_and_writeline():
    term, out, _ = _terminal()
    term.write("C:\\HACK>")
    term.writeline("DECRYPT.EXE")
    term.writeline()
    assert out.getvalue() == "C:\\HACK>DECRYPT.EXE\n\n"


def test_clear_starts_fresh_screen():
    term, out, _ = _terminal()
    term.clear()
    assert out.getvalue().endswith("\033[2J")


def test_sleep_ms_converts_to_seconds():
    term, _, sleeps = _terminal()
    term.sleep_ms(500)
    term.sleep_ms(10)
    assert sleeps == [0.5, 0.01]