"""Read, normalize and write FASTA sequence records."""

__version__ = "0.1.0"

from .errors import FastaError, FileOpenError, IdentifierNotFoundError, IndexOutOfRangeError
from .model import RecordIterable, RecordSnapshot, SequenceCollection, SequenceRecord
from .repositories import FastaFileRepository
from .settings import FastaSettings, get_settings

__all__ = [
    "FastaError",
    "FastaFileRepository",
    "FastaSettings",
    "FileOpenError",
    "IdentifierNotFoundError",
    "IndexOutOfRangeError",
    "RecordIterable",
    "RecordSnapshot",
    "SequenceCollection",
    "SequenceRecord",
    "get_settings",
]
