"""Exceptions raised by the fontsplit pipeline."""

from typing import Any


class FontSplitError(Exception):
    """Base exception for all fontsplit errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ToolUnavailableError(FontSplitError):
    """An external fontTools command cannot be located."""

    def __init__(self, tool: str, hint: str = 'pip install "fonttools[woff]"'):
        super().__init__(f"{tool} is not available", details=hint)
        self.tool = tool
        self.hint = hint


class DirectoryReadError(FontSplitError):
    """The input directory cannot be enumerated."""


class MetadataExtractionError(FontSplitError):
    """The name table of a font could not be extracted."""


class SubsetExtractionError(FontSplitError):
    """A single subset bucket could not be produced."""


class ArtifactWriteError(FontSplitError):
    """A generated artifact could not be written."""
