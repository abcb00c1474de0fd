"""Exceptions raised by the journal models."""


class InvalidIndexError(IndexError):
    """Raised when a journal position is outside [0, length - 1]."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for a journal of {length} matches")
