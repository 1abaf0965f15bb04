"""Reading and writing plain text files line by line."""

from __future__ import annotations

import os
from collections.abc import Iterable


def read_text_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without line endings; raises OSError on failure."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def write_text_lines(path: str | os.PathLike[str], lines: Iterable[str]) -> None:
    """Replace the contents of a file with the lines, each ended by a newline."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for line in lines:
            handle.write(line + "\n")