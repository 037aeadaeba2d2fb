"""Screen effects: progress bars, typing, fake errors, matrix rain and scans."""

from __future__ import annotations

import random

from hackertyper.terminal import Color, Terminal

PROGRESS_WIDTH = 30
SCREEN_ROWS = 24
SCREEN_COLUMNS = 80
RAIN_INTERVAL_MS = 50
RAIN_CLEAR_EVERY_MS = 500
RAIN_CHARS_PER_TICK = 10
SCAN_PROBES = 8
VULNERABLE_PROBES = (5, 7)


def show_progress_bar(term: Terminal, label: str, duration_ms: int) -> None:
    """Draw a bar of blocks, one at a time, over ``duration_ms``."""
    term.write(label)
    step = duration_ms // PROGRESS_WIDTH
    for _ in range(PROGRESS_WIDTH):
        term.write("█")
        term.flush()
        term.sleep_ms(step)
    term.writeline(" [COMPLETE]")


def type_text(term: Terminal, text: str, delay_ms: int) -> None:
    """Write ``text`` one character at a time, then end the line."""
    for char in text:
        term.write(char)
        term.flush()
        term.sleep_ms(delay_ms)
    term.writeline()


def show_fake_error(term: Terminal, rng: random.Random) -> None:
    """Print a red, made-up connection failure and its recovery."""
    term.set_color(Color.RED)
    code = rng.randrange(0xFFFF)
    term.writeline(f"\n*** ERROR 0x{code:x}: Connection terminated")
    term.writeline("*** Recalibrating network parameters...")
    term.sleep_ms(1000)
    term.writeline("*** Attempting bypass sequence...")
    term.sleep_ms(800)
    term.writeline("*** Rerouting through secondary node...")
    term.sleep_ms(1200)
    term.writeline("*** Connection reestablished")
    term.writeline()
    term.set_color(Color.RESET)


def show_matrix_rain(term: Terminal, duration_ms: int, rng: random.Random) -> None:
    """Scatter random green characters over the screen for ``duration_ms``."""
    term.clear()
    term.set_color(Color.GREEN)
    for elapsed in range(0, duration_ms, RAIN_INTERVAL_MS):
        if elapsed % RAIN_CLEAR_EVERY_MS == 0:
            term.clear()
        row = (elapsed // 100) % SCREEN_ROWS
        for _ in range(RAIN_CHARS_PER_TICK):
            column = rng.randint(0, SCREEN_COLUMNS - 1)
            char = chr(rng.randint(33, 126))
            term.write(f"\033[{row};{column}H{char}")
        term.flush()
        term.sleep_ms(RAIN_INTERVAL_MS)
    term.clear()
    term.set_color(Color.RESET)


def _random_ip(rng: random.Random) -> str:
    return ".".join(str(rng.randint(1, 255)) for _ in range(4))


def simulate_ip_scan(term: Terminal, rng: random.Random) -> str:
    """Probe a list of random addresses; return the one chosen as target."""
    term.set_color(Color.GREEN)
    term.writeline("\nINITIATING NETWORK SCAN...\n")
    target = ""
    last = SCAN_PROBES - 1
    for probe in range(SCAN_PROBES):
        address = _random_ip(rng)
        term.write(f"Probing {address}... ")
        term.sleep_ms(200)
        if probe in VULNERABLE_PROBES:
            term.writeline("VULNERABLE")
            term.sleep_ms(300)
            term.writeline("  └─ Port 22: OPEN (SSH)")
            term.sleep_ms(100)
            term.writeline("  └─ Port 80: OPEN (HTTP)")
            if probe == last:
                term.sleep_ms(100)
                term.writeline("  └─ Port 3306: OPEN (MySQL)")
                term.sleep_ms(300)
                term.writeline(f"\nTARGET SELECTED: {address}")
                target = address
        else:
            term.writeline("SECURE")
    term.set_color(Color.RESET)
    return target


def show_exit_reminder(term: Terminal) -> None:
    """Print the exit hint on the bottom line, then move the cursor back up."""
    row, column = SCREEN_ROWS - 1, 0
    term.write(f"\033[{row};0H")
    term.set_color(Color.GRAY)
    term.write("[ Press ESC to exit ]")
    term.flush()
    term.write(f"\033[{row - 3};{column}H")
    term.set_color(Color.RESET)


def setup_msdos_style(term: Terminal, rng: random.Random) -> None:
    """Play the start-up sequence and leave the final header on screen."""
    term.clear()
    term.set_color(Color.GRAY)
    term.writeline()
    term.writeline("C:\\>HACK.EXE")
    term.writeline("Microsoft(R) MS-DOS(R) Version 6.22")
    term.writeline("(C)Copyright Microsoft Corp 1981-1994.")
    term.writeline()

    type_text(term, "Initializing system breach protocol...", 30)
    show_progress_bar(term, "Loading encryption modules: ", 1200)
    show_progress_bar(term, "Establishing secure connection: ", 800)

    simulate_ip_scan(term, rng)
    show_matrix_rain(term, 2000, rng)

    term.clear()
    term.set_color(Color.GRAY)
    term.writeline("C:\\>HACK.EXE")
    term.writeline("BREACH PROTOCOL INITIALIZED")
    term.writeline("SYSTEM ACCESS: GRANTED")
    term.writeline()


def display_text(term: Terminal, text: str) -> None:
    """Write ``text`` line by line in bright green."""
    term.set_color(Color.GREEN)
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        term.writeline(line)
    term.set_color(Color.RESET)