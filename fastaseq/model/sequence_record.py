# fastaseq/model/sequence_record.py

"""
Single FASTA record: one identifier paired with one residue sequence.

Both fields are normalized on every mutation, so a :class:`SequenceRecord`
never exposes raw input. The read-only :class:`RecordSnapshot` is what the
collection hands out when callers ask for immutable iteration.
"""
from __future__ import annotations

import string
from functools import total_ordering
from typing import NamedTuple, Optional, Tuple

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from fastaseq.errors import IndexOutOfRangeError


VALID_RESIDUES = frozenset(string.ascii_letters + "-*")

# Biopython's placeholder when a SeqRecord was built without a description.
_UNKNOWN_DESCRIPTION = "<unknown description>"


def normalize_identifier(text: str) -> str:
    """
    Drop non-printable characters, then any leading ``>`` markers and the
    surrounding whitespace.
    """
    printable = "".join(ch for ch in text if ch.isprintable())
    return printable.lstrip(">" + string.whitespace).rstrip()


def normalize_sequence(text: str) -> str:
    """Keep only letters, gaps (``-``) and stops (``*``)."""
    return "".join(ch for ch in text if ch in VALID_RESIDUES)


class RecordSnapshot(NamedTuple):
    identifier: str
    sequence: str


@total_ordering
class SequenceRecord:
    """
    A normalized (identifier, sequence) pair.

    Records compare by identifier first, then by sequence. They are mutable
    and therefore unhashable.
    """

    __slots__ = ("_identifier", "_sequence")

    def __init__(self, identifier: str = "", sequence: str = "") -> None:
        self._identifier: str = normalize_identifier(identifier)
        self._sequence: str = normalize_sequence(sequence)

    @classmethod
    def from_pair(cls, pair: Tuple[str, str]) -> "SequenceRecord":
        identifier, sequence = pair
        return cls(identifier, sequence)

    @classmethod
    def from_seq_record(cls, record: SeqRecord) -> "SequenceRecord":
        """
        Build a record from a Biopython ``SeqRecord``.

        The FASTA parser in Biopython keeps the whole header line in
        ``description``; that line is used as the identifier unless it is
        missing, in which case ``id`` is used.
        """
        description = record.description or ""
        identifier = record.id if description in ("", _UNKNOWN_DESCRIPTION) else description
        return cls(identifier or "", str(record.seq))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def sequence(self) -> str:
        return self._sequence

    def length(self) -> int:
        return len(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._sequence):
            raise IndexOutOfRangeError(index, len(self._sequence))
        return self._sequence[index]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_identifier(self, text: str) -> None:
        self._identifier = normalize_identifier(text)

    def set_sequence(self, text: str) -> None:
        self._sequence = normalize_sequence(text)

    def assign(self, identifier: str, sequence: str) -> None:
        """Replace both fields at once."""
        self._identifier = normalize_identifier(identifier)
        self._sequence = normalize_sequence(sequence)

    def append_residue(self, residue: str, count: int = 1) -> None:
        """
        Append ``residue`` ``count`` times.

        Nothing is appended when ``residue`` is not a single valid residue
        character or ``count`` is not positive.
        """
        if count <= 0 or len(residue) != 1 or residue not in VALID_RESIDUES:
            return
        self._sequence += residue * count

    def append(self, text: str, max_count: Optional[int] = None) -> None:
        """
        Append the valid residues among the first ``max_count`` characters
        of ``text`` (all of ``text`` when ``max_count`` is None).
        """
        if not text or max_count is not None and max_count <= 0:
            return
        limit = len(text) if max_count is None else min(max_count, len(text))
        self._sequence += normalize_sequence(text[:limit])

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def copy(self) -> "SequenceRecord":
        clone = SequenceRecord.__new__(SequenceRecord)
        clone._identifier = self._identifier
        clone._sequence = self._sequence
        return clone

    def snapshot(self) -> RecordSnapshot:
        return RecordSnapshot(self._identifier, self._sequence)

    def to_seq_record(self) -> SeqRecord:
        return SeqRecord(Seq(self._sequence), id=self._identifier, description="")

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _key(self) -> Tuple[str, str]:
        return (self._identifier, self._sequence)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceRecord):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SequenceRecord):
            return NotImplemented
        return self._key() < other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceRecord(identifier={self._identifier!r}, sequence={self._sequence!r})"
