"""Per-word occurrence records: which documents hold a word and where."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


def _check_position(position: int) -> None:
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")


@dataclass
class Occurrence:
    """The positions of one word inside one document."""

    doc_id: int
    positions: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.positions = list(self.positions)
        for position in self.positions:
            _check_position(position)

    def add_position(self, position: int) -> None:
        """Record another position of the word in this document."""
        _check_position(position)
        self.positions.append(position)


class OccurrenceList:
    """The documents a word appears in, in the order they were added."""

    def __init__(self, occurrences: Iterable[Occurrence] = ()) -> None:
        self._occurrences: list[Occurrence] = list(occurrences)

    def append(self, occurrence: Occurrence) -> None:
        """Add an occurrence at the end of the list."""
        self._occurrences.append(occurrence)

    def find(self, doc_id: int) -> Occurrence | None:
        """Return the first occurrence for ``doc_id``, or None."""
        return next((occ for occ in self._occurrences if occ.doc_id == doc_id), None)

    def add_position(self, doc_id: int, position: int) -> Occurrence:
        """Record ``position`` for ``doc_id``, creating its occurrence if needed."""
        _check_position(position)
        occurrence = self.find(doc_id)
        if occurrence is None:
            occurrence = Occurrence(doc_id, [position])
            self.append(occurrence)
        else:
            occurrence.add_position(position)
        return occurrence

    def position_count(self, doc_id: int) -> int:
        """Number of positions recorded for ``doc_id``; 0 if it is absent."""
        occurrence = self.find(doc_id)
        return 0 if occurrence is None else len(occurrence.positions)

    def merge(self, other: OccurrenceList) -> None:
        """Move every occurrence of ``other`` to the end of this list."""
        if other is self:
            return
        self._occurrences.extend(other._occurrences)
        other._occurrences.clear()

    def __len__(self) -> int:
        return len(self._occurrences)

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self._occurrences)

    def __repr__(self) -> str:
        return f"OccurrenceList({self._occurrences!r})"