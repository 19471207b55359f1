"""
Wordle-style feedback for a single (guess, answer) pair.

Used to replay games against a known answer; the interactive solver never
needs it because the player types the feedback in.

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all CORRECT slots and counts the remaining
     (unmatched) letters from the answer.
  2) Second pass marks MISPLACED only while the letter still has a
     remaining count; everything else is WRONG.
"""

from __future__ import annotations

from collections import Counter
from typing import Tuple

from .feedback import PositionStatus


def score(guess: str, answer: str) -> Tuple[PositionStatus, ...]:
    """
    Compute feedback for `guess` against `answer`.

    Examples:
      codes(score("belle", "level")) -> "wcmmm"
      codes(score("lemon", "level")) -> "ccwww"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError("guess and answer must be the same length")

    pattern = [PositionStatus.WRONG] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = PositionStatus.CORRECT
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] is PositionStatus.CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PositionStatus.MISPLACED
            remaining[g] -= 1

    return tuple(pattern)


def codes(pattern: Tuple[PositionStatus, ...]) -> str:
    """('c', 'm', 'w') string form of a pattern."""
    return "".join(s.code for s in pattern)
