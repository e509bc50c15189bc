"""Exceptions raised by the justification engine."""


class JustifyError(Exception):
    """Base exception for justification errors."""
    pass


class InvalidLineWidthError(JustifyError, ValueError):
    """Exception raised when the requested line width is unusable."""
    pass


class LayoutInvariantError(JustifyError):
    """Exception raised when the fitter/splitter contract is violated.

    This always indicates a programming error, never bad user input.
    """
    pass
