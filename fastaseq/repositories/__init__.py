from .base_repository import AbstractSequenceRepository
from .file_based_repository import FastaFileRepository, format_fasta_record, parse_fasta_lines

__all__ = [
    "AbstractSequenceRepository",
    "FastaFileRepository",
    "format_fasta_record",
    "parse_fasta_lines",
]
