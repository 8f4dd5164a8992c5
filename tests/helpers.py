"""Shared test helpers."""

from __future__ import annotations

from pathlib import Path

MEDIUM_INVENTORY = {"s1": 2, "aR": 12}

MEDIUM_LAYOUTS = (
    "s1 aR aR aR aR s1 aR aR aR aR",
    "s1 aR aR aR aR s1 aR aL aR aR aR aR aR aL",
    "s1 aR aR aR aR s1 aL aR aR aR aR aR aL aR",
    "s1 aR aR aR aR aR aL s1 aR aR aR aR aR aL",
    "s1 aR aR aR aR aL aR s1 aR aR aR aR aL aR",
    "s1 aR aR aR aL aR aR s1 aR aR aR aL aR aR",
    "s1 aR aR aL aR aR aR s1 aR aR aL aR aR aR",
    "s1 aR aL aR aR aR aR s1 aR aL aR aR aR aR",
    "s1 aR aL aL aL aL aL s1 aR aL aL aL aL aL",
    "aR aR aR aR aR aR aR aR",
    "aR aR aR aR aR aL aR aR aR aR aR aL",
)

SAMPLE_SEQUENCE = "s2 aR aR aR aL aR aR aR aL aR s1 aR aR s1 aR".split()


def labels(text: str) -> tuple[str, ...]:
    """Split a space-separated label string.

    Args:
        text: Labels separated by single spaces.

    Returns:
        Label tuple.
    """
    return tuple(text.split())


def examples_data_root() -> Path:
    """Return the bundled example data directory.

    Returns:
        Path to ``examples/data``.
    """
    return Path(__file__).resolve().parents[1] / "examples" / "data"
