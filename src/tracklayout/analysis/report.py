"""Plain-text rendering of search and diagnosis results."""

from __future__ import annotations

from collections.abc import Iterable

from tracklayout.search.diagnose import DiagnosisResult


def format_path(labels: Iterable[str]) -> str:
    """Render a label sequence.

    Args:
        labels: Piece labels in layout order.

    Returns:
        ``"Path: "`` followed by space-separated labels.
    """
    return "Path: " + " ".join(labels)


def format_layout(labels: Iterable[str]) -> str:
    """Render one reported closed layout.

    Args:
        labels: Piece labels in layout order.

    Returns:
        Path line tagged as closed.
    """
    return f"{format_path(labels)}  (closed)"


def format_diagnosis(result: DiagnosisResult) -> list[str]:
    """Render a sequence diagnosis.

    Args:
        result: Diagnosis returned by
            :func:`tracklayout.search.diagnose.diagnose_sequence`.

    Returns:
        Four lines: path, closure verdict, first-last distance and
        first-last minimal angle.
    """
    return [
        format_path(result.labels),
        f"Closed C1?: {'yes' if result.closed else 'no'}",
        f"First-last distance: {result.distance:.15g}",
        f"First-last min angle: {result.angle:.15g}",
    ]
