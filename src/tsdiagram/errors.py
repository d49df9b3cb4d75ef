"""Errors raised while turning a source file into a diagram.

Every message is meant to be shown to the user as-is.
"""

from __future__ import annotations


class DiagramError(Exception):
    """Base class for all diagram generation failures."""


class EmptyInput(DiagramError):
    """Raised when the requested path is blank."""

    def __init__(self, message: str = "Please provide a TypeScript file path.") -> None:
        super().__init__(message)


class FetchFailure(DiagramError):
    """Raised when the source text could not be retrieved."""

    def __init__(self, status: int | None, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(f"Unable to load TypeScript file: {status_text}")


class NoSymbolsFound(DiagramError):
    """Raised when the file parsed but had no exported declarations."""

    def __init__(
        self, message: str = "No exported symbols found in the provided file."
    ) -> None:
        super().__init__(message)


class MalformedSource(DiagramError):
    """Raised when the parser cannot produce a syntax tree."""

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path
        super().__init__(f"Unable to parse {file_path}: {reason}")
