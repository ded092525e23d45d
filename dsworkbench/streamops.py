"""Copy text streams while dropping blank lines, numbering and substituting."""

from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_INPUT = "StreamOperation.cpp"
DEFAULT_OUTPUT = "Output.txt"
SEMI_COLON = ";"
SEMI_COLON_WORD = "SEMI-COLON"


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` in ``text`` with ``new``.

    After each replacement the search resumes one character past the start
    of the inserted text, so a replacement can take part in a later match.
    Raises ValueError when that rule would never finish.
    """
    if not old:
        raise ValueError("the text to replace must not be empty")
    if old in new[1:]:
        raise ValueError(
            f"replacing {old!r} with {new!r} would never finish"
        )
    position = text.find(old)
    while position != -1:
        text = text[:position] + new + text[position + len(old):]
        position = text.find(old, position + 1)
    return text


def count_alpha(text: str) -> int:
    """Count the ASCII letters in ``text``."""
    return sum(1 for char in text if char.isascii() and char.isalpha())


class StreamOperation:
    """Copies a text stream line by line and keeps statistics of the last copy."""

    def __init__(self) -> None:
        self.lines_removed = 0
        self.alpha_count = 0

    def copy(
        self,
        source: TextIO,
        target: TextIO,
        old: str | None = None,
        new: str = "",
        remove_blank_lines: bool = False,
        number_lines: bool = False,
    ) -> None:
        """Copy ``source`` to ``target``.

        Blank lines are dropped and counted when ``remove_blank_lines`` is set,
        every written line is prefixed with its number when ``number_lines`` is
        set, and every ``old`` is replaced by ``new`` when ``old`` is given.
        Letters are counted before any replacement. A trailing newline in the
        source yields one more, empty, line.
        """
        self.lines_removed = 0
        self.alpha_count = 0
        line_number = 1
        for line in source.read().split("\n"):
            if not line and remove_blank_lines:
                self.lines_removed += 1
                continue
            self.alpha_count += count_alpha(line)
            if old is not None:
                line = replace_all(line, old, new)
            if number_lines:
                target.write(f"{line_number} ")
                line_number += 1
            target.write(line + "\n")


def process_file(input_path: str, output_path: str) -> StreamOperation:
    """Copy ``input_path`` to ``output_path`` with every option on, then append the totals."""
    operation = StreamOperation()
    with open(input_path, encoding="utf-8") as source, open(
        output_path, "w", encoding="utf-8"
    ) as target:
        operation.copy(
            source,
            target,
            SEMI_COLON,
            SEMI_COLON_WORD,
            remove_blank_lines=True,
            number_lines=True,
        )
        target.write(f"Lines Removed: {operation.lines_removed}\n")
        target.write(f"Alphabetic Characters: {operation.alpha_count}")
    return operation


def main(argv: list[str] | None = None) -> int:
    """Run with no arguments (default files) or with an input and an output path."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 0:
        input_path, output_path = DEFAULT_INPUT, DEFAULT_OUTPUT
    elif len(args) == 2:
        input_path, output_path = args
    else:
        print("streamops input_file output_file ")
        return 0
    try:
        process_file(input_path, output_path)
    except OSError as error:
        print(f"[X] Error: {error}", file=sys.stderr)
        print("Exit program!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())