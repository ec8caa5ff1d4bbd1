"""Line-splitting primitive shared by all line iterators."""

from __future__ import annotations

from typing import TextIO

# Longest first so "\r\n" is never mistaken for a bare "\r".
LINE_TERMINATORS: tuple[str, ...] = ("\r\n", "\n", "\r")


def read_line(stream: TextIO) -> str | None:
    """Read the next line from a stream opened with ``newline=""``.

    ``\\n``, ``\\r\\n`` and a bare ``\\r`` all end a line and are stripped. A final
    line without a terminator is still returned.

    Args:
        stream: Text stream that leaves line endings untranslated.

    Returns:
        The line without its terminator, or None at end of input.
    """
    line = stream.readline()
    if not line:
        return None
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line
