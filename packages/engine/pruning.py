"""
Pruning Engine: turns feedback into Word Store scrubs.

Pruning happens in two phases:

  1) record_position_feedback: one slot at a time, as soon as its status
     is known. A player who abandons a guess halfway still keeps the
     pruning from the slots already entered.
       Wrong     -> letter is not at this slot
       Misplaced -> letter is not at this slot, but is somewhere
       Correct   -> letter is at this slot

  2) finalize_guess: once all N slots are in. Classifies the guess and
     applies the "complete letter" rule to every letter that was Wrong
     somewhere and Misplaced nowhere:
       - never Correct either      -> the letter must be absent
       - Correct at some positions -> it may appear ONLY there

The allowed positions come from the guess being finalized alone; Correct
positions seen in earlier guesses are not merged in.

All rules only ever remove candidates, so the order of application does
not change the end result. It is fixed anyway so log traces are stable.
"""

from __future__ import annotations

import logging

from .feedback import Classification, Guess, PositionStatus, classify
from .store import WordStore

log = logging.getLogger(__name__)


def record_position_feedback(store: WordStore, position: int, letter: str,
                             status: PositionStatus) -> int:
    """
    Apply the single-slot rule for one (position, letter, status).

    Idempotent. UNKNOWN scrubs nothing. Returns the number of records killed.
    """
    if status is PositionStatus.WRONG:
        return store.exclude_position_if(position, letter)
    if status is PositionStatus.MISPLACED:
        # The guessed slot itself is known not to hold the letter.
        return (store.exclude_position_if(position, letter)
                + store.retain_only_containing(letter))
    if status is PositionStatus.CORRECT:
        return store.retain_only_position_if(position, letter)
    return 0


def finalize_guess(store: WordStore, guess: Guess) -> Classification:
    """
    Apply the guess-level rules. Returns the classification it used.
    """
    cls = classify(guess)

    for letter in sorted(cls.misplaced_letters):
        store.retain_only_containing(letter)

    for letter, allowed in cls.complete_letters().items():
        store.retain_only_letter_at_allowed_positions(letter, allowed)

    log.debug("finalized %s: wrong=%s misplaced=%s correct=%s -> %d live",
              guess, sorted(cls.wrong_letters), sorted(cls.misplaced_letters),
              {k: sorted(v) for k, v in sorted(cls.correct_positions.items())},
              store.live_count())
    return cls


def apply_guess(store: WordStore, guess: Guess) -> Classification:
    """Both phases for a whole guess at once (the non-interactive path)."""
    for i, pos in enumerate(guess.positions):
        record_position_feedback(store, i, pos.letter, pos.status)
    return finalize_guess(store, guess)
