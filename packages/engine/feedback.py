"""
Guess feedback types and the Feedback Classifier.

A finalized Guess is N (letter, status) slots. `classify` partitions those
slots into the three structures the Pruning Engine consumes:

  wrong_letters     : letters with at least one Wrong slot
  misplaced_letters : letters with at least one Misplaced slot
  correct_positions : letter -> set of Correct slot indices

Misplaced wins: a letter that is misplaced anywhere is dropped from both
wrong_letters and correct_positions, since it may still appear elsewhere.
Nothing in this module touches a Word Store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Set, Tuple

from .errors import ValidationError


class PositionStatus(Enum):
    UNKNOWN = 0
    WRONG = 1
    MISPLACED = 2
    CORRECT = 3

    @classmethod
    def from_code(cls, code: "str | PositionStatus", position: int | None = None) -> "PositionStatus":
        """
        Map a player status code ('w', 'm', 'c', any case) to a status.

        UNKNOWN is never a valid answer for a finalized slot.
        """
        if isinstance(code, PositionStatus):
            status = code
        else:
            status = _CODES.get(str(code).strip().lower(), cls.UNKNOWN)
        if status is cls.UNKNOWN:
            where = f" for position {position}" if position is not None else ""
            raise ValidationError(f"unknown status{where}: {code!r}", position=position)
        return status

    @property
    def code(self) -> str:
        return _LETTERS[self]


_CODES = {
    "w": PositionStatus.WRONG,
    "m": PositionStatus.MISPLACED,
    "c": PositionStatus.CORRECT,
}
_LETTERS = {v: k for k, v in _CODES.items()}
_LETTERS[PositionStatus.UNKNOWN] = "?"


@dataclass(frozen=True)
class GuessPosition:
    letter: str
    status: PositionStatus


@dataclass(frozen=True)
class Guess:
    """An immutable, ordered row of feedback for one submitted word."""
    positions: Tuple[GuessPosition, ...]
    valid: bool = True

    @property
    def word(self) -> str:
        return "".join(p.letter for p in self.positions)

    @property
    def codes(self) -> str:
        return "".join(p.status.code for p in self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __str__(self) -> str:
        return f"{self.word}:{self.codes}"


@dataclass
class Classification:
    wrong_letters: Set[str] = field(default_factory=set)
    misplaced_letters: Set[str] = field(default_factory=set)
    correct_positions: Dict[str, FrozenSet[int]] = field(default_factory=dict)

    def complete_letters(self) -> Dict[str, FrozenSet[int]]:
        """
        Letters whose whole pattern in this guess is known, mapped to the
        positions they are allowed to occupy (empty = must be absent).
        """
        return {
            letter: self.correct_positions.get(letter, frozenset())
            for letter in sorted(self.wrong_letters)
        }


def classify(guess: Guess) -> Classification:
    wrong: Set[str] = set()
    misplaced: Set[str] = set()
    correct: Dict[str, Set[int]] = {}

    for i, pos in enumerate(guess.positions):
        if pos.status is PositionStatus.WRONG:
            wrong.add(pos.letter)
        elif pos.status is PositionStatus.MISPLACED:
            misplaced.add(pos.letter)
        elif pos.status is PositionStatus.CORRECT:
            correct.setdefault(pos.letter, set()).add(i)

    for letter in misplaced:
        wrong.discard(letter)
        correct.pop(letter, None)

    return Classification(
        wrong_letters=wrong,
        misplaced_letters=misplaced,
        correct_positions={k: frozenset(v) for k, v in correct.items()},
    )
