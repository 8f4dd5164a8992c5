"""Custom exceptions for track layout search and diagnosis."""


class TrackLayoutError(Exception):
    """Base exception for track layout errors."""


class ConfigurationError(TrackLayoutError):
    """Raised when a piece catalog or search configuration is invalid."""


class LayoutInputError(TrackLayoutError):
    """Raised when an inventory or piece sequence cannot be parsed or validated."""


class UnknownPieceError(LayoutInputError):
    """Raised when a piece label is not part of the piece catalog."""
