"""Typed errors raised by the scanner, the path parser and the tessellator."""

from __future__ import annotations


class VectorLoopError(Exception):
    """Base error for everything the library raises on bad input."""


class MalformedMarkup(VectorLoopError):
    """A tag or attribute scan ran past the end of the input, or a quote is unmatched."""


class NotFound(VectorLoopError):
    """A required tag or attribute was never located in the input."""


class MalformedPath(VectorLoopError):
    """Invalid moveto, argument count, numeric token, or closing token."""


class UnsupportedCommand(VectorLoopError):
    """A path command letter outside the supported set."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unsupported path command: {command!r}")
        self.command = command


class UnclosedPath(VectorLoopError):
    """The contour's final point does not return to its starting point."""


class SourceIOError(VectorLoopError, OSError):
    """The source document could not be read."""
