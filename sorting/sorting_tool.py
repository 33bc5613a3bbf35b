"""Sorting tool CLI: sort numbers, words or lines and report on them.

Features:
- Reads a file or standard input
- Items are longs, words (default) or whole lines
- Natural order, or by number of occurrences with percentages
- Writes the report to a file or standard output

Usage:
    sorting-tool -dataType long -sortingType byCount -inputFile in.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from sorting.common.cli_helpers import open_input, open_output, setup_logging
from sorting.common.exceptions import FileOperationError, UsageError
from sorting.items import get_kind
from sorting.reporter import render
from sorting.sorter import NATURAL, SORTING_TYPES, sort_collection

logger = logging.getLogger(__name__)

# flag -> name used in "No <name> defined!", in the order they are checked
FLAGS = {
    "-dataType": "data type",
    "-sortingType": "sorting type",
    "-inputFile": "input file",
    "-outputFile": "output file",
}


@dataclass(frozen=True)
class RunConfig:
    sorting_type: str = NATURAL
    data_type: Optional[str] = None
    input_file: Optional[Path] = None
    output_file: Optional[Path] = None


def split_parameters(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate flag-like tokens that are not exactly one of `FLAGS`."""
    kept: List[str] = []
    invalid: List[str] = []
    for token in argv:
        if token.startswith("-") and token not in FLAGS:
            invalid.append(token)
        else:
            kept.append(token)
    return kept, invalid


def parse_arguments(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[argparse.Namespace, List[str]]:
    """Parse the recognized flags and return the invalid ones alongside.

    A recognized flag given last, without a value, parses as ``""``.
    Stray values that follow no flag are ignored.
    """
    kept, invalid = split_parameters(sys.argv[1:] if argv is None else argv)

    parser = argparse.ArgumentParser(
        description="Sort numbers, words or lines and print statistics.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-sortingType", nargs="?", const="", help="natural (default) or byCount"
    )
    parser.add_argument(
        "-dataType", nargs="?", const="", help="long, word (default) or line"
    )
    parser.add_argument(
        "-inputFile", nargs="?", const="", help="Input file (default: stdin)"
    )
    parser.add_argument(
        "-outputFile", nargs="?", const="", help="Output file (default: stdout)"
    )
    args, _ = parser.parse_known_args(kept)
    return args, invalid


def report_invalid_parameters(invalid: Sequence[str]) -> None:
    for token in invalid:
        logger.warning(f"{token} isn't a valid parameter. It's skipped.")


def build_config(args: argparse.Namespace) -> RunConfig:
    """Validate parsed flags into a `RunConfig`.

    Raises:
        UsageError: If a recognized flag was given without a value
    """
    for flag, name in FLAGS.items():
        if getattr(args, flag.lstrip("-")) == "":
            raise UsageError(f"No {name} defined!")

    sorting_type = args.sortingType or NATURAL
    if sorting_type not in SORTING_TYPES:
        logger.warning(
            f"{sorting_type} isn't a valid sorting type. It's replaced by {NATURAL}."
        )
        sorting_type = NATURAL

    return RunConfig(
        sorting_type=sorting_type,
        data_type=args.dataType,
        input_file=Path(args.inputFile) if args.inputFile else None,
        output_file=Path(args.outputFile) if args.outputFile else None,
    )


def run(config: RunConfig) -> int:
    """Load, sort and report according to `config`.

    Raises:
        FileOperationError: If the input or output cannot be opened
    """
    kind = get_kind(config.data_type)
    with open_input(config.input_file) as stream:
        collection = kind.load(stream)

    view = sort_collection(collection, config.sorting_type)
    report = render(kind, collection.total, view)

    with open_output(config.output_file) as out:
        out.write(report)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()

    args, invalid = parse_arguments(argv)
    report_invalid_parameters(invalid)

    try:
        config = build_config(args)
    except UsageError as ex:
        logger.error(str(ex))
        return 2

    try:
        return run(config)
    except FileOperationError as ex:
        logger.error(str(ex))
        return 1


if __name__ == "__main__":
    sys.exit(main())
