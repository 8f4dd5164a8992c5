"""Export helpers for search and diagnosis results."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import asdict
from pathlib import Path

from tracklayout.search.diagnose import DiagnosisResult


def export_layouts_json(layouts: Iterable[Sequence[str]], path: str | Path) -> None:
    """Write reported layouts as JSON.

    Args:
        layouts: Label sequences returned by
            :func:`tracklayout.search.explorer.find_layouts`.
        path: Output file path for the JSON document.
    """
    payload = {"layouts": [list(labels) for labels in layouts]}
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def export_diagnosis_json(result: DiagnosisResult, path: str | Path) -> None:
    """Write a sequence diagnosis as JSON.

    Args:
        result: Diagnosis returned by
            :func:`tracklayout.search.diagnose.diagnose_sequence`.
        path: Output file path for the JSON document.
    """
    payload = asdict(result)
    payload["labels"] = list(result.labels)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
