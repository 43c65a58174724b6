from pathlib import Path

import pytest

from fastaseq.errors import FileOpenError
from fastaseq.model.sequence_record import SequenceRecord
from fastaseq.repositories import (
    AbstractSequenceRepository,
    FastaFileRepository,
    format_fasta_record,
    parse_fasta_lines,
)


def snapshots(lines):
    return [record.snapshot() for record in parse_fasta_lines(lines)]


def test_parse_fasta_lines_merges_body_lines():
    lines = [">seq1 description here\n", "acgt\n", "TGCA\n", ">seq2\n", "MK*\n"]
    assert snapshots(lines) == [("seq1 description here", "acgtTGCA"), ("seq2", "MK*")]


def test_parse_trims_carriage_returns():
    assert snapshots([">a\r\n", "AC\r\n", "GT\r\n"]) == [("a", "ACGT")]


def test_parse_header_only():
    assert snapshots([">id\n"]) == [("id", "")]


def test_parse_consecutive_headers_keep_empty_records():
    assert snapshots([">a\n", ">b\n", "CC\n"]) == [("a", ""), ("b", "CC")]


def test_parse_empty_input_yields_nothing():
    assert snapshots([]) == []


def test_parse_body_without_header_yields_empty_identifier():
    assert snapshots(["ACGT\n", "TT\n"]) == [("", "ACGTTT")]


def test_parse_blank_file_line_yields_empty_record():
    assert snapshots(["\n"]) == [("", "")]


def test_parse_discards_body_before_first_header():
    assert snapshots(["NNNN\n", ">a\n", "AC\n"]) == [("a", "AC")]


def test_parse_discards_body_under_empty_header():
    assert snapshots([">\n", "GG\n", ">b\n", "AC\n"]) == [("b", "AC")]


def test_parse_indented_header_is_body():
    assert snapshots([">a\n", " >b\n", "AC\n"]) == [("a", "bAC")]


def test_format_wraps_at_line_width():
    record = SequenceRecord("x", "ACGTACG")
    assert list(format_fasta_record(record, 3)) == [">x", "ACG", "TAC", "G"]
    assert list(format_fasta_record(record, 7)) == [">x", "ACGTACG"]
    assert list(format_fasta_record(record, 0)) == [">x", "ACGTACG"]


def test_format_empty_sequence_has_no_body():
    assert list(format_fasta_record(SequenceRecord("x"), 80)) == [">x"]
    assert list(format_fasta_record(SequenceRecord("x"), 0)) == [">x"]


def test_format_rejects_negative_width():
    with pytest.raises(ValueError):
        list(format_fasta_record(SequenceRecord("x", "A"), -5))


def test_repository_is_a_sequence_repository(tmp_path: Path):
    assert isinstance(FastaFileRepository(tmp_path / "a.fasta"), AbstractSequenceRepository)


def test_repository_round_trip(tmp_path: Path):
    repository = FastaFileRepository(tmp_path / "a.fasta")
    records = [SequenceRecord("one", "ACGT" * 10), SequenceRecord("two", "")]
    assert repository.save_sequences(records, 16) == 2
    assert repository.list_sequences() == records


def test_repository_reads_crlf_files(tmp_path: Path):
    path = tmp_path / "crlf.fasta"
    path.write_bytes(b">a desc\r\nAC\r\nGT\r\n")
    assert FastaFileRepository(path).list_sequences() == [SequenceRecord("a desc", "ACGT")]


def test_repository_missing_file(tmp_path: Path):
    with pytest.raises(FileOpenError) as excinfo:
        FastaFileRepository(tmp_path / "missing.fasta").list_sequences()
    assert excinfo.value.path == tmp_path / "missing.fasta"
    assert isinstance(excinfo.value, OSError)


def test_repository_unwritable_path(tmp_path: Path):
    with pytest.raises(FileOpenError):
        FastaFileRepository(tmp_path).save_sequences([SequenceRecord("a", "A")], 80)


def test_repository_uses_configured_encoding(tmp_path: Path, monkeypatch):
    from fastaseq.settings.config import get_settings

    monkeypatch.setenv("FASTASEQ_ENCODING", "latin-1")
    get_settings.cache_clear()
    path = tmp_path / "latin.fasta"
    path.write_bytes(">caf\xe9\nAC\n".encode("latin-1"))

    repository = FastaFileRepository(path)
    assert repository.encoding == "latin-1"
    assert repository.list_sequences()[0].identifier == "café"
