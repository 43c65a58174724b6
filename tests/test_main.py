from pathlib import Path

import pytest

from fastaseq.main import main, parse_args


@pytest.fixture
def fasta_file(tmp_path: Path) -> Path:
    path = tmp_path / "in.fasta"
    path.write_text(">b\nACGTACGT\n>a\nMK\n>b\nTT\n", encoding="utf-8")
    return path


def test_wrap(tmp_path: Path, fasta_file: Path):
    output = tmp_path / "out.fasta"
    assert main(["wrap", str(fasta_file), str(output), "--line-width", "3"]) == 0
    assert output.read_text(encoding="utf-8") == ">a\nMK\n>b\nACG\nTAC\nGT\n>b\nTT\n"


def test_dedup(tmp_path: Path, fasta_file: Path):
    output = tmp_path / "out.fasta"
    assert main(["dedup", str(fasta_file), str(output), "--line-width", "0"]) == 0
    assert output.read_text(encoding="utf-8") == ">a\nMK\n>b\nACGTACGT\n"


def test_ids(fasta_file: Path, capsys):
    assert main(["ids", str(fasta_file)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a", "b"]


def test_missing_input(tmp_path: Path):
    assert main(["ids", str(tmp_path / "missing.fasta")]) == 1


def test_unwritable_output(tmp_path: Path, fasta_file: Path):
    assert main(["wrap", str(fasta_file), str(tmp_path / "no-dir" / "out.fasta")]) == 1


def test_log_file(tmp_path: Path, fasta_file: Path):
    log_file = tmp_path / "logs" / "run.log"
    assert main(["--log-file", str(log_file), "wrap", str(fasta_file), str(tmp_path / "out.fasta")]) == 0
    assert "records written" in log_file.read_text(encoding="utf-8")


def test_negative_line_width_is_rejected(fasta_file: Path, tmp_path: Path):
    with pytest.raises(SystemExit):
        parse_args(["wrap", str(fasta_file), str(tmp_path / "out.fasta"), "--line-width", "-2"])
