"""Opening books and reading line ranges or line numbers out of them."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, IO, TextIO

BOOKS_PATH = "libros/"


def open_book(path: str, base_dir: str | Path = BOOKS_PATH) -> BinaryIO:
    """Open ``base_dir/path`` for binary reading."""
    return open(Path(base_dir) / path, "rb")


def _as_text(line: bytes | str) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


def _check_range(start_line: int, end_line: int) -> None:
    if start_line > end_line or start_line < 0 or end_line < 0:
        raise ValueError(
            f"Invalid range: start_line ({start_line}) should be <= "
            f"end_line ({end_line}) and >= 1."
        )


def _read_range(file: IO, start_line: int, end_line: int) -> tuple[list[str], int]:
    lines: list[str] = []
    current = 0
    for current, line in enumerate(file, 1):
        if current > end_line:
            break
        if current >= start_line:
            lines.append(_as_text(line))
    return lines, current


def get_lines(file: IO, start_line: int, end_line: int) -> list[str]:
    """Return lines ``start_line``..``end_line`` (1-based, inclusive) read from
    the file's current position, line endings kept."""
    _check_range(start_line, end_line)
    lines, _ = _read_range(file, start_line, end_line)
    return lines


def print_lines(
    file: IO, start_line: int, end_line: int, out: TextIO | None = None
) -> None:
    """Write lines ``start_line``..``end_line`` of the file to ``out``."""
    _check_range(start_line, end_line)
    out = sys.stdout if out is None else out
    lines, last = _read_range(file, start_line, end_line)
    out.writelines(lines)
    if last < start_line:
        out.write(f"File has fewer than {start_line} lines.\n")


def find_line_by_position(file: IO, position: int) -> int:
    """Return the 1-based line holding offset ``position``, counted from the
    file's current position."""
    if position < 0:
        raise ValueError(f"Invalid position: {position}")
    chunk = file.read(position + 1)
    if len(chunk) <= position:
        raise ValueError(f"Position {position} exceeds the file's size.")
    newline = b"\n" if isinstance(chunk, bytes) else "\n"
    return chunk[:position].count(newline) + 1