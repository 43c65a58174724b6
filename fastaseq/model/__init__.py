from .sequence_record import RecordSnapshot, SequenceRecord, normalize_identifier, normalize_sequence
from .sequence_collection import RecordIterable, SequenceCollection

__all__ = [
    "RecordIterable",
    "RecordSnapshot",
    "SequenceCollection",
    "SequenceRecord",
    "normalize_identifier",
    "normalize_sequence",
]
