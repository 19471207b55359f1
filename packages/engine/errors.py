"""
Error taxonomy for the pruning engine.

Both errors are recoverable: the caller re-prompts and the engine state
(Word Store and guess history) is exactly what it was before the call.
"""

from __future__ import annotations


class PrunerError(Exception):
    """Base class for every error the engine raises."""


class ValidationError(PrunerError, ValueError):
    """
    Raw input could not be turned into a well-formed guess or word.

    `position` is the 1-based slot that failed, when one can be named.
    """

    def __init__(self, message: str, *, position: int | None = None):
        super().__init__(message)
        self.position = position


class RoundLimitError(PrunerError, RuntimeError):
    """A guess was submitted after the puzzle's last round."""

    def __init__(self, max_rounds: int):
        super().__init__(f"all {max_rounds} rounds have already been played")
        self.max_rounds = max_rounds
