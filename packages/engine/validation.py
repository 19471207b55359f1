"""
Guess validation.

This module answers the question: "Can this raw input become a Guess?"
A guess is well-formed iff:
  - it has exactly N slots
  - every slot's letter is A–Z (either case; stored uppercase)
  - every slot's status is a recognized code ('w', 'm', 'c')

Whether the word is in the dictionary is NOT checked: players may guess
words the local dictionary does not carry. Nothing here touches engine
state, so a rejected guess leaves the store exactly as it was.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .errors import ValidationError
from .feedback import Guess, GuessPosition, PositionStatus
from .words import PUZZLE_WIDTH, parse_letter, parse_word

RawPosition = Tuple[str, "str | PositionStatus"]  # (letter, status code)


def parse_guess(raw_positions: Iterable[RawPosition], N: int = PUZZLE_WIDTH) -> Guess:
    """
    Build a finalized Guess from (letter, status-code) pairs.

    Raises:
      ValidationError on the first problem found (length, letter or status).
    """
    pairs: Sequence[RawPosition] = list(raw_positions)
    if len(pairs) != N:
        raise ValidationError(f"expected {N} positions, got {len(pairs)}")

    positions = []
    for i, (letter, code) in enumerate(pairs, start=1):
        positions.append(GuessPosition(
            letter=parse_letter(letter, i),
            status=PositionStatus.from_code(code, i),
        ))
    return Guess(positions=tuple(positions))


def parse_feedback(word: str, codes: str, N: int = PUZZLE_WIDTH) -> Guess:
    """
    Convenience form: parse_feedback("argue", "cwwww").

    `codes` is one status character per letter of `word`.
    """
    w = parse_word(word, N)
    c = codes.strip()
    if len(c) != N:
        raise ValidationError(f"expected {N} status codes, got {len(c)}")
    return parse_guess(zip(w, c), N)


def validate_guess(word: str, N: int = PUZZLE_WIDTH) -> bool:
    """Return True if `word` is N Latin letters (no dictionary check)."""
    if not isinstance(word, str):
        return False
    try:
        parse_word(word, N)
    except ValidationError:
        return False
    return True
