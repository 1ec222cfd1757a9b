"""Exception types for concord."""


class ConcordError(Exception):
    """Base class for all concord errors."""


class SequenceLengthError(ConcordError, ValueError):
    """Label sequences are empty or not aligned to the same length."""

    def __init__(self, lengths, message: str = ""):
        self.lengths = tuple(lengths)
        if not message:
            message = f"Label sequences must be non-empty and of equal length, got lengths {list(self.lengths)}"
        super().__init__(message)
