"""
Session State: one game in progress.

A Session owns its WordStore (no module-level word list), keeps the
submitted guesses in order, and enforces the puzzle's round budget.
Two sessions never share a store unless the caller hands the same one in.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import List, Tuple

from .errors import RoundLimitError, ValidationError
from .feedback import Guess, GuessPosition, PositionStatus
from .pruning import apply_guess, record_position_feedback
from .store import WordStore
from .words import parse_letter, parse_word

log = logging.getLogger(__name__)

# Single source of truth for the round budget.
MAX_ROUNDS = 5

# How many candidates "show top possibilities" lists.
DEFAULT_TOP_N = 10


class Session:
    def __init__(self, store: WordStore, *, max_rounds: int = MAX_ROUNDS):
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1; got {max_rounds}")
        self._store = store
        self.max_rounds = int(max_rounds)
        self._history: List[Guess] = []

    @property
    def store(self) -> WordStore:
        return self._store

    @property
    def round(self) -> int:
        """Number of guesses accepted so far."""
        return len(self._history)

    @property
    def remaining_rounds(self) -> int:
        return self.max_rounds - self.round

    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    def _check_round_available(self) -> None:
        if self.round >= self.max_rounds:
            raise RoundLimitError(self.max_rounds)

    def record(self, position: int, letter: str, status: PositionStatus) -> int:
        """
        Interactive phase: prune on one slot before the guess is complete.

        Raises RoundLimitError once the budget is spent, so no partial
        feedback is applied after the last round, and ValidationError for a
        slot outside 0..N-1 or a letter outside A–Z.
        """
        if not isinstance(position, int) or not 0 <= position < self._store.N:
            raise ValidationError(f"position {position!r} out of range 0..{self._store.N - 1}")
        letter = parse_letter(letter, position + 1)
        self._check_round_available()
        return record_position_feedback(self._store, position, letter, status)

    def _finalized(self, guess: Guess) -> Guess:
        """Re-check every slot: A–Z letter (stored uppercase), known status."""
        if len(guess) != self._store.N:
            raise ValidationError(
                f"guess has {len(guess)} positions; expected {self._store.N}")
        positions = tuple(
            GuessPosition(parse_letter(p.letter, i), PositionStatus.from_code(p.status, i))
            for i, p in enumerate(guess.positions, start=1)
        )
        return Guess(positions=positions, valid=guess.valid)

    def submit(self, guess: Guess) -> Guess:
        """
        Accept a finalized guess: append it and run the pruning pass.

        Raises RoundLimitError (history and store untouched) when the
        budget is already spent, and ValidationError when the width does not
        match the store or a slot has a non A–Z letter or an UNKNOWN status.
        Lowercase letters are stored uppercased.
        """
        guess = self._finalized(guess)
        self._check_round_available()
        before = self._store.live_count()
        apply_guess(self._store, guess)
        self._history.append(guess)
        log.info("round %d/%d: %s left %d of %d live word(s)",
                 self.round, self.max_rounds, guess, self._store.live_count(), before)
        return guess

    def top_candidates(self, n: int = DEFAULT_TOP_N) -> List[str]:
        """First `n` live words in load order (no likelihood ranking)."""
        return list(islice(self._store.live_words(), max(n, 0)))

    def is_live(self, raw_word: str) -> bool:
        """Raises ValidationError if `raw_word` is not a well-formed word."""
        return self._store.is_live(parse_word(raw_word, self._store.N))
