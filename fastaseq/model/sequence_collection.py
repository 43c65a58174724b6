# fastaseq/model/sequence_collection.py

"""
Keyed collection of FASTA records.

Records are grouped by identifier. Iteration walks identifiers in ascending
order and, within one identifier, records in insertion order. File reading
and writing go through :class:`fastaseq.repositories.FastaFileRepository`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Union

from Bio.SeqRecord import SeqRecord

from fastaseq.errors import IdentifierNotFoundError
from fastaseq.model.sequence_record import RecordSnapshot, SequenceRecord
from fastaseq.repositories.file_based_repository import FastaFileRepository
from fastaseq.settings.config import get_settings
from fastaseq.utils.logging import get_logger


logger = get_logger(__name__)

PathLike = Union[str, Path]


class RecordIterable:
    """
    Lazy, restartable view over the records of a collection.

    Each ``iter()`` starts a fresh traversal. The mutable form yields the
    collection's own :class:`SequenceRecord` objects; the read-only form
    yields :class:`RecordSnapshot` tuples.
    """

    def __init__(self, store: Dict[str, List[SequenceRecord]], readonly: bool = False):
        self._store = store
        self.readonly = readonly

    def __iter__(self) -> Iterator[Union[SequenceRecord, RecordSnapshot]]:
        for identifier in sorted(self._store):
            for record in self._store.get(identifier, ()):
                yield record.snapshot() if self.readonly else record

    def __len__(self) -> int:
        return sum(len(records) for records in self._store.values())


class SequenceCollection:
    """
    Multimap from identifier to the records sharing it.

    When duplicates are not allowed every identifier keeps only its first
    record. Inserted records are copied, so the collection owns what it
    stores.
    """

    def __init__(
        self,
        records: Optional[Iterable[SequenceRecord]] = None,
        allow_duplicates: Optional[bool] = None,
    ) -> None:
        if allow_duplicates is None:
            allow_duplicates = get_settings().allow_duplicates
        self._duplicates_allowed: bool = allow_duplicates
        self._store: Dict[str, List[SequenceRecord]] = {}

        if records is not None:
            self.add_sequences(records)

    @classmethod
    def from_file(cls, path: PathLike, allow_duplicates: Optional[bool] = None) -> "SequenceCollection":
        """
        Load a FASTA file into a new collection.

        Raises :class:`fastaseq.errors.FileOpenError` when the file cannot be
        opened.
        """
        collection = cls(allow_duplicates=allow_duplicates)
        collection._ingest(FastaFileRepository(path).list_sequences())
        collection.set_duplicates_allowed(collection._duplicates_allowed)
        return collection

    @classmethod
    def from_seq_records(
        cls,
        seq_records: Iterable[SeqRecord],
        allow_duplicates: Optional[bool] = None,
    ) -> "SequenceCollection":
        return cls(
            (SequenceRecord.from_seq_record(seq_record) for seq_record in seq_records),
            allow_duplicates=allow_duplicates,
        )

    # ------------------------------------------------------------------
    # Duplicate policy
    # ------------------------------------------------------------------

    @property
    def duplicates_allowed(self) -> bool:
        return self._duplicates_allowed

    @duplicates_allowed.setter
    def duplicates_allowed(self, allow: bool) -> None:
        self.set_duplicates_allowed(allow)

    def set_duplicates_allowed(self, allow: bool) -> None:
        """
        Set the duplicate policy.

        Disallowing duplicates drops every record after the first under each
        identifier. Allowing them again does not bring those records back.
        """
        self._duplicates_allowed = allow
        if allow:
            return

        dropped = 0
        for records in self._store.values():
            dropped += len(records) - 1
            del records[1:]
        if dropped:
            logger.debug(f"Dropped {dropped} duplicate records")

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_sequence(self, record: SequenceRecord) -> int:
        return self.add_sequences([record])

    def add_sequences(self, records: Iterable[SequenceRecord]) -> int:
        """
        Insert ``records`` under their identifiers and return how many were
        inserted. Records whose identifier is already present are skipped
        when duplicates are not allowed.
        """
        added = 0
        for record in records:
            if not self._duplicates_allowed and record.identifier in self._store:
                continue
            self._store.setdefault(record.identifier, []).append(record.copy())
            added += 1
        return added

    def _ingest(self, records: Iterable[SequenceRecord]) -> int:
        count = 0
        for record in records:
            self._store.setdefault(record.identifier, []).append(record)
            count += 1
        return count

    def clear(self) -> None:
        self._store.clear()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has_identifier(self, identifier: str) -> bool:
        return identifier in self._store

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._store

    def identifiers(self) -> FrozenSet[str]:
        return frozenset(self._store)

    def lookup(self, identifier: str) -> List[SequenceRecord]:
        """Return the records stored under ``identifier`` in insertion order."""
        try:
            return list(self._store[identifier])
        except KeyError:
            raise IdentifierNotFoundError(identifier) from None

    def __getitem__(self, identifier: str) -> List[SequenceRecord]:
        return self.lookup(identifier)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def records(self, readonly: bool = False) -> RecordIterable:
        return RecordIterable(self._store, readonly=readonly)

    def __iter__(self) -> Iterator[SequenceRecord]:
        return iter(RecordIterable(self._store))

    def __len__(self) -> int:
        return sum(len(records) for records in self._store.values())

    def to_seq_records(self) -> List[SeqRecord]:
        return [record.to_seq_record() for record in self]

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def read_file(self, path: PathLike, allow_duplicates: Optional[bool] = None) -> bool:
        """
        Add the records of a FASTA file, then apply the duplicate policy.

        ``allow_duplicates`` defaults to the configured value. Returns False,
        leaving the collection untouched, when the file cannot be read.
        """
        if allow_duplicates is None:
            allow_duplicates = get_settings().allow_duplicates

        try:
            parsed = FastaFileRepository(path).list_sequences()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Failed to read FASTA file {path}: {exc}")
            return False

        count = self._ingest(parsed)
        self.set_duplicates_allowed(allow_duplicates)
        logger.info(f"Read {count} records from {path}")
        return True

    def write_file(self, path: PathLike, line_width: Optional[int] = None) -> bool:
        """
        Write every record in iteration order, wrapping bodies at
        ``line_width`` residues (0 for one line per sequence).

        Returns False when the file cannot be opened or written, or when an
        identifier cannot be encoded; a failure part way through may leave a
        truncated file.
        """
        if line_width is None:
            line_width = get_settings().line_width
        if line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {line_width}")

        try:
            written = FastaFileRepository(path).save_sequences(self, line_width)
        except (OSError, UnicodeEncodeError) as exc:
            logger.error(f"Failed to write FASTA file {path}: {exc}")
            return False

        logger.info(f"Wrote {written} records to {path}")
        return True

    def __repr__(self) -> str:
        return (
            f"SequenceCollection(identifiers={len(self._store)}, records={len(self)}, "
            f"duplicates_allowed={self._duplicates_allowed})"
        )
