"""Command-line entry point: ``track paths`` and ``track diagnose``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tracklayout.analysis import (
    export_diagnosis_json,
    export_layouts_json,
    format_diagnosis,
    format_layout,
)
from tracklayout.search.diagnose import diagnose_sequence
from tracklayout.search.explorer import find_layouts
from tracklayout.track.io import load_inventory_yaml, load_sequence_yaml
from tracklayout.utils import configure_logging
from tracklayout.utils.exceptions import TrackLayoutError

logger = logging.getLogger("tracklayout")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per mode.

    Returns:
        Configured top-level parser.
    """
    parser = argparse.ArgumentParser(
        prog="track",
        description="Lay out and diagnose toy train tracks.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    paths = commands.add_parser(
        "paths",
        help="Find all closed, continuous layouts for a set of pieces.",
    )
    paths.add_argument("yaml_file", type=Path, help="YAML mapping of piece label to count.")
    paths.add_argument("--json", type=Path, default=None, help="Also write layouts to this JSON file.")

    diagnose = commands.add_parser(
        "diagnose",
        help="Tell whether a piece sequence closes and how far off it is.",
    )
    diagnose.add_argument("yaml_file", type=Path, help="YAML list of piece labels.")
    diagnose.add_argument("--json", type=Path, default=None, help="Also write the diagnosis to this JSON file.")
    return parser


def _run_paths(args: argparse.Namespace) -> None:
    """Search layouts for an inventory file and print them.

    Args:
        args: Parsed ``paths`` arguments.
    """
    layouts = find_layouts(load_inventory_yaml(args.yaml_file))
    for labels in layouts:
        print(format_layout(labels))
    if args.json is not None:
        export_layouts_json(layouts, args.json)
        logger.info("Layouts written to %s", args.json)


def _run_diagnose(args: argparse.Namespace) -> None:
    """Diagnose a sequence file and print the report.

    Args:
        args: Parsed ``diagnose`` arguments.
    """
    result = diagnose_sequence(load_sequence_yaml(args.yaml_file))
    for line in format_diagnosis(result):
        print(line)
    if args.json is not None:
        export_diagnosis_json(result, args.json)
        logger.info("Diagnosis written to %s", args.json)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``track`` command line.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when
            ``None``.

    Returns:
        Process exit status.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "paths":
            _run_paths(args)
        else:
            _run_diagnose(args)
    except TrackLayoutError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
