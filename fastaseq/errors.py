"""
Exception types raised by the fastaseq package.

Every error derives from :class:`FastaError` and from the built-in exception
callers would already expect (``OSError``, ``KeyError``, ``IndexError``), so
existing ``except`` clauses keep working.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union


class FastaError(Exception):
    """Base class for all fastaseq errors."""


class FileOpenError(FastaError, OSError):
    """A FASTA file could not be opened for reading or writing."""

    def __init__(self, path: Union[str, Path], mode: str, reason: str = ""):
        self.path = Path(path)
        self.mode = mode
        message = f"Cannot open '{self.path}' for {mode}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class IdentifierNotFoundError(FastaError, KeyError):
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(identifier)

    def __str__(self) -> str:
        return f"Identifier '{self.identifier}' not found"


class IndexOutOfRangeError(FastaError, IndexError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for sequence of length {length}")
