"""Layout search and sequence diagnosis."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tracklayout.search.config import (
    DEFAULT_ANGLE_TOLERANCE,
    DEFAULT_POSITION_TOLERANCE,
    ClosureTolerance,
)

if TYPE_CHECKING:
    from tracklayout.search.diagnose import DiagnosisResult
    from tracklayout.search.explorer import SearchContext
    from tracklayout.search.inventory import Inventory

__all__ = [
    "DEFAULT_ANGLE_TOLERANCE",
    "DEFAULT_POSITION_TOLERANCE",
    "ClosureTolerance",
    "DiagnosisResult",
    "Inventory",
    "SearchContext",
    "diagnose_sequence",
    "explore",
    "find_layouts",
]


def __getattr__(name: str) -> Any:
    """Resolve lazily imported symbols for public package exports.

    Args:
        name: Attribute name requested from the package namespace.

    Returns:
        Exported class or function matching ``name``.

    Raises:
        AttributeError: If ``name`` is not part of the public export surface.
    """
    if name == "Inventory":
        from tracklayout.search.inventory import Inventory

        return Inventory
    if name == "SearchContext":
        from tracklayout.search.explorer import SearchContext

        return SearchContext
    if name == "explore":
        from tracklayout.search.explorer import explore

        return explore
    if name == "find_layouts":
        from tracklayout.search.explorer import find_layouts

        return find_layouts
    if name == "DiagnosisResult":
        from tracklayout.search.diagnose import DiagnosisResult

        return DiagnosisResult
    if name == "diagnose_sequence":
        from tracklayout.search.diagnose import diagnose_sequence

        return diagnose_sequence
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
