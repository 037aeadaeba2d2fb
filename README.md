# hackertyper

Mash any key and watch convincing-looking code scroll across a retro,
MS-DOS styled terminal in bright green.

## Installing

    pip install .

## Running

    hackertyper [CHARS_PER_KEY]

`CHARS_PER_KEY` is how many characters of text appear for each keystroke.
It defaults to 5. A leading whole number is read from the argument; if
there is none, or it is not positive, 5 is used.

On start the program plays a short intro: a typed greeting, two progress
bars, a simulated network scan and a "matrix rain" effect. After that every
key press redraws the screen and reveals the next chunk of text. Once the
end of the text is reached, reading starts over from the beginning while
the text already shown stays on screen.

Press **Ctrl+C** to quit (**Esc** on a Windows console). The screen is
cleared and, on a POSIX terminal, line buffering and echo are restored.

## Text files

The text to type comes from files named `hackertext<digits>.txt`
(for example `hackertext1.txt`, `hackertext42.txt`). These directories are
searched in order, and the first one holding such files is used:

1. the current directory
2. the directory of the running program
3. `/usr/local/share/hackertyper`
4. `/usr/share/hackertyper`

If none of them has a numbered file, the first readable `hackertext.txt`
in the same directories is used. The files found are listed on start, and
when several match, one is picked at random. Files are read as UTF-8, with
undecodable bytes replaced. If no file is found, or the chosen file cannot
be read or is empty, the program prints an error and exits with status 1.

## Using it from Python

    from hackertyper.textsource import default_search_paths, find_text_files
    from hackertyper.app import TextFeeder

    files = find_text_files(default_search_paths())
    feeder = TextFeeder("print('hello')\n", 5)
    feeder.feed()   # "print"
    feeder.feed()   # "print('hel"

`find_text_files` raises `NoTextFilesError` when nothing is found;
`TextFeeder` raises `ValueError` for an empty source or a chunk size that is
not positive.

The modules are:

- `hackertyper.textsource` – finding, choosing and reading text files
  (`list_matching_files`, `read_text`, `find_text_files`, `choose_file`).
- `hackertyper.terminal` – the `Terminal` class (raw key input, ANSI
  colours from `Color`, clearing, pacing) which takes its own input, output
  and sleep function, so it can be driven from tests.
- `hackertyper.effects` – the intro effects and `display_text`.
- `hackertyper.app` – `TextFeeder`, `parse_chars_per_key`, `render_frame`,
  `run` and the `main` command.

## Tests

    pip install .[test]
    pytest