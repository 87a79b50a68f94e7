from __future__ import annotations


class PaceDrawError(Exception):
    """Base error with a short machine-readable code."""

    def __init__(self, message: str, code: str = "EPACEDRAW") -> None:
        super().__init__(message)
        self.code = code
