"""Find closed layouts for the bundled medium piece set and diagnose a sample path."""

from __future__ import annotations

import logging
from pathlib import Path

from tracklayout.analysis import format_diagnosis, format_layout
from tracklayout.search import diagnose_sequence, find_layouts
from tracklayout.track import load_inventory_yaml, load_sequence_yaml
from tracklayout.utils import configure_logging


def data_root() -> Path:
    """Return the example data directory.

    Returns:
        Path to ``examples/data``.
    """
    return Path(__file__).resolve().parent / "data"


def main() -> None:
    """Run the layout search and the sample diagnosis."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("find_layouts_example")

    layouts = find_layouts(load_inventory_yaml(data_root() / "pieces-medium.yaml"))
    for labels in layouts:
        logger.info("%s", format_layout(labels))

    diagnosis = diagnose_sequence(load_sequence_yaml(data_root() / "path-1.yaml"))
    for line in format_diagnosis(diagnosis):
        logger.info("%s", line)


if __name__ == "__main__":
    main()
