#!/usr/bin/env python3
"""Demonstration of TextLineIterable over a file of "value,name" lines."""

import logging
import sys
import tempfile
from pathlib import Path

from text_line_iterable import TextLineIterable

NAMES = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten"]


def main() -> int:
    """Count characters, then pick even values with odd-length names."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "example.txt"
        path.write_text("".join(f"{n},{name}\n" for n, name in enumerate(NAMES, 1)), encoding="utf-8")

        with TextLineIterable.from_file(path, encoding="utf-8") as lines:
            number_of_characters = sum(len(line) for line in lines)
            print(f"Characters (without line endings): {number_of_characters}")

            pairs = (line.split(",") for line in lines)
            names = [name for value, name in pairs if int(value) % 2 == 0 and len(name) % 2 != 0]
            print(f"Even values with odd-length names: {names}")

            # Left open on purpose; closing `lines` releases it
            header = lines.iterator()
            print(f"First line: {next(header)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
