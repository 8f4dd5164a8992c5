"""Closure tolerance configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tracklayout.utils.exceptions import ConfigurationError

DEFAULT_POSITION_TOLERANCE = 0.01
DEFAULT_ANGLE_TOLERANCE = 0.001


@dataclass(frozen=True)
class ClosureTolerance:
    """Joint play allowed when deciding whether a path closes.

    Args:
        position: Maximum distance between first start and last end, in
            piece-geometry units (exclusive bound).
        angle: Maximum angular mismatch between first start and last end
            directions [rad] (exclusive bound).
    """

    position: float = DEFAULT_POSITION_TOLERANCE
    angle: float = DEFAULT_ANGLE_TOLERANCE

    def validate(self) -> None:
        """Validate tolerance bounds.

        Raises:
            tracklayout.utils.exceptions.ConfigurationError: If any tolerance
                is not strictly positive.
        """
        if self.position <= 0.0:
            msg = "position tolerance must be positive"
            raise ConfigurationError(msg)
        if self.angle <= 0.0:
            msg = "angle tolerance must be positive"
            raise ConfigurationError(msg)


DEFAULT_TOLERANCE = ClosureTolerance()
