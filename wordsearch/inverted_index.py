"""An inverted index over a handful of text files, searched by word proximity."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from wordsearch.filemanager import BOOKS_PATH, find_line_by_position, get_lines, open_book
from wordsearch.hashtable import HashTable
from wordsearch.occurrence import Occurrence, OccurrenceList

MAX_OPEN_FILES = 5
WORD_MIN_LENGTH = 4
CONTEXT_WINDOW = 100  # max bytes between the first and last matched word

_log = logging.getLogger(__name__)

_WORD = re.compile(rb"[A-Za-z]+")


class TooManyFilesError(RuntimeError):
    """Raised when loading more files than the index can hold."""


@dataclass(frozen=True)
class SearchResult:
    """A document and the line range where the searched words were found."""

    doc_id: int
    first_line: int
    last_line: int


def _ascii_lower(word: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in word)


def normalize_words(words: Iterable[str]) -> list[str]:
    """Return the words with ASCII letters lowered."""
    return [_ascii_lower(word) for word in words]


def _first_window(positions: list[int], needed: int) -> tuple[int, int] | None:
    start = 0
    for end, pos_end in enumerate(positions):
        while start < end and pos_end - positions[start] > CONTEXT_WINDOW:
            start += 1
        if end - start + 1 >= needed:
            return positions[start], pos_end
    return None


class InvertedIndex:
    """Maps words of at least four ASCII letters to their byte offsets."""

    def __init__(self, base_dir: str | Path = BOOKS_PATH) -> None:
        self._base_dir = Path(base_dir)
        self._table = HashTable()
        self._files: list[BinaryIO] = []

    def load_file(self, file_name: str) -> int:
        """Index ``file_name`` (relative to the base directory) and return its id."""
        if len(self._files) >= MAX_OPEN_FILES:
            raise TooManyFilesError(
                f"cannot load more than {MAX_OPEN_FILES} files"
            )
        handle = open_book(file_name, self._base_dir)
        doc_id = len(self._files)
        self._files.append(handle)
        _log.info("Loading file id=%d", doc_id)

        data = handle.read()
        for match in _WORD.finditer(data):
            # A word running up to the end of the file is not indexed.
            if match.end() == len(data):
                continue
            if match.end() - match.start() < WORD_MIN_LENGTH:
                continue
            self._add(match.group().decode("ascii").lower(), doc_id, match.start())
        return doc_id

    def _add(self, word: str, doc_id: int, position: int) -> None:
        if word in self._table:
            self._table[word].add_position(doc_id, position)
        else:
            self._table[word] = OccurrenceList([Occurrence(doc_id, [position])])

    def search(self, words: Iterable[str]) -> list[SearchResult]:
        """Find, per document, the first cluster of the words within the window."""
        terms = normalize_words(words)
        lists = [self._table[term] for term in terms if term in self._table]
        results: list[SearchResult] = []
        for doc_id, handle in enumerate(self._files):
            positions = sorted(
                position
                for occurrences in lists
                for occurrence in occurrences
                if occurrence.doc_id == doc_id
                for position in occurrence.positions
            )
            if len(positions) < len(terms):
                continue
            window = _first_window(positions, len(terms))
            if window is None:
                continue
            first_pos, last_pos = window
            handle.seek(0)
            first_line = find_line_by_position(handle, first_pos)
            handle.seek(0)
            last_line = find_line_by_position(handle, last_pos)
            results.append(SearchResult(doc_id, first_line, last_line))
        return results

    def result_lines(self, result: SearchResult) -> list[str]:
        """Return the text lines a search result covers."""
        handle = self._files[result.doc_id]
        handle.seek(0)
        return get_lines(handle, result.first_line, result.last_line)

    def close(self) -> None:
        """Close every loaded file."""
        for handle in self._files:
            handle.close()

    def __enter__(self) -> InvertedIndex:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()