"""Errors that abort an analysis run before any output is written."""

from typing import Iterable


class AnalysisError(Exception):
    """Base class for fatal analysis errors."""


class InputReadError(AnalysisError):
    """The input file exists but could not be parsed as a table."""


class MissingColumnsError(AnalysisError):
    """The input table lacks one or more required columns."""

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(
            f"Input is missing required columns: {', '.join(self.missing)}"
        )
