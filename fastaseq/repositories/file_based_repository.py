"""
File-backed repository implementation.

This repository reads FASTA records from a text file and writes them back
with fixed-width body lines. The scanning and formatting steps are exposed as
plain functions so they can be driven by any iterable of lines.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from fastaseq.errors import FileOpenError
from fastaseq.model.sequence_record import SequenceRecord
from fastaseq.repositories.base_repository import AbstractSequenceRepository
from fastaseq.settings.config import get_settings
from fastaseq.utils.logging import get_logger


logger = get_logger(__name__)

HEADER_PREFIX = ">"


def parse_fasta_lines(lines: Iterable[str]) -> Iterator[SequenceRecord]:
    """
    Turn FASTA lines into records.

    A line starting with ``>`` opens a new record; every other line is body
    text for the record currently open. Body text seen while no identifier is
    open is discarded at the next header. At the end of input the open record
    is emitted even when its body is empty, and even when no header was ever
    seen, in which case its identifier is empty. Input without any lines
    yields nothing: an empty file holds no records, unlike a file whose only
    content is sequence text.
    """
    record = SequenceRecord()
    body: List[str] = []
    saw_line = False
    saw_header = False

    for line in lines:
        saw_line = True
        if line.startswith(HEADER_PREFIX):
            if record.identifier:
                record.set_sequence("".join(body))
                yield record
                record = SequenceRecord()
            record.set_identifier(line)
            body = []
            saw_header = True
        else:
            body.append(line.rstrip("\r\n"))

    # empty input, not a header-less record
    if not saw_line:
        return

    if not saw_header:
        logger.warning("FASTA input has no header line; emitting a record with an empty identifier")
    record.set_sequence("".join(body))
    yield record


def format_fasta_record(record: SequenceRecord, line_width: int) -> Iterator[str]:
    """
    Yield the lines (without terminators) for one record.

    The body is cut into chunks of exactly ``line_width`` characters, the last
    one possibly shorter. A width of zero puts the whole sequence on one line.
    """
    if line_width < 0:
        raise ValueError(f"line_width must be >= 0, got {line_width}")

    yield HEADER_PREFIX + record.identifier

    sequence = record.sequence
    if not sequence:
        return

    step = line_width or len(sequence)
    for offset in range(0, len(sequence), step):
        yield sequence[offset:offset + step]


class FastaFileRepository(AbstractSequenceRepository):
    """Repository that reads and writes a single FASTA file."""

    def __init__(self, path: Union[str, Path], encoding: Optional[str] = None):
        self.path = Path(path)
        self.encoding = encoding or get_settings().encoding

    def list_sequences(self) -> List[SequenceRecord]:
        try:
            handle = self.path.open("r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise FileOpenError(self.path, "reading", exc.strerror or str(exc)) from exc

        with handle:
            records = list(parse_fasta_lines(handle))

        logger.debug(f"Parsed {len(records)} records from {self.path}")
        return records

    def save_sequences(self, records: Iterable[SequenceRecord], line_width: int) -> int:
        if line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {line_width}")

        try:
            handle = self.path.open("w", encoding=self.encoding, newline="\n")
        except OSError as exc:
            raise FileOpenError(self.path, "writing", exc.strerror or str(exc)) from exc

        written = 0
        with handle:
            for record in records:
                for line in format_fasta_record(record, line_width):
                    handle.write(line + "\n")
                written += 1

        logger.debug(f"Wrote {written} records to {self.path}")
        return written
