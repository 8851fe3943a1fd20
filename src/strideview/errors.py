"""
Error types for strideview.

Every failure the package reports is one of these. Each concrete error
also derives from the builtin exception a caller would naturally expect,
so `except ValueError` still catches a bad stride.
"""


class StrideError(Exception):
    """Base class for all strideview errors."""
    pass


class InvalidStrideError(StrideError, ValueError):
    """Raised when a stride is not an integer >= 1."""
    pass


class ExhaustedCursorError(StrideError, IndexError):
    """Raised when an exhausted cursor is dereferenced or advanced."""
    pass


class ReadOnlyCursorError(StrideError, TypeError):
    """Raised when writing through a cursor whose storage is not writable."""
    pass


class PipelineParseError(StrideError):
    """Raised when a text pipeline description cannot be parsed."""
    pass
