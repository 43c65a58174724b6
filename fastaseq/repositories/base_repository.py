"""
Abstract interface for sequence record repositories.

Repositories encapsulate where records come from and where they are written
to, keeping :class:`fastaseq.model.sequence_collection.SequenceCollection`
decoupled from concrete storage.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from fastaseq.model.sequence_record import SequenceRecord


class AbstractSequenceRepository(ABC):
    """Base class for all sequence repositories."""

    @abstractmethod
    def list_sequences(self) -> List[SequenceRecord]:
        """Return every record available in the repository, in source order."""

    @abstractmethod
    def save_sequences(self, records: Iterable[SequenceRecord], line_width: int) -> int:
        """Replace the repository contents with ``records``; return how many were written."""
