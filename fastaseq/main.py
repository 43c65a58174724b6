# fastaseq/main.py

import argparse
import sys
from typing import List, Optional

from fastaseq.model.sequence_collection import SequenceCollection
from fastaseq.settings.config import get_settings
from fastaseq.utils.logging import get_logger, setup_default_logging


logger = get_logger("fastaseq")


def non_negative_int(value: str) -> int:
    """Argparse type for line widths."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a value >= 0, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fastaseq", description="Normalize and rewrite FASTA files")
    parser.add_argument("--log-file", type=str, required=False, help="Also write log output to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    wrap = subparsers.add_parser("wrap", help="Rewrite a FASTA file with a new line width")
    wrap.add_argument("input", type=str, help="Path to the input FASTA file")
    wrap.add_argument("output", type=str, help="Path to the output FASTA file")
    wrap.add_argument("--line-width", type=non_negative_int, default=None, help="Residues per line, 0 for no wrapping")

    dedup = subparsers.add_parser("dedup", help="Keep only the first record of every identifier")
    dedup.add_argument("input", type=str, help="Path to the input FASTA file")
    dedup.add_argument("output", type=str, help="Path to the output FASTA file")
    dedup.add_argument("--line-width", type=non_negative_int, default=None, help="Residues per line, 0 for no wrapping")

    ids = subparsers.add_parser("ids", help="Print the distinct identifiers of a FASTA file")
    ids.add_argument("input", type=str, help="Path to the input FASTA file")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_default_logging(level=get_settings().log_level, filename=args.log_file)

    allow_duplicates = args.command != "dedup"
    try:
        collection = SequenceCollection.from_file(args.input, allow_duplicates=allow_duplicates)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(str(exc))
        return 1

    if args.command == "ids":
        for identifier in sorted(collection.identifiers()):
            print(identifier)
        return 0

    if not collection.write_file(args.output, line_width=args.line_width):
        return 1
    logger.info(f"{args.command}: {len(collection)} records written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
