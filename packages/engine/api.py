"""
Caller-facing entry points.

These are the four operations a front end (CLI, notebook, service) needs;
each one wraps the WordStore / Session types without adding state of its
own. Errors surface as ValidationError / RoundLimitError.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .feedback import Guess
from .session import DEFAULT_TOP_N, Session
from .store import WordStore
from .validation import RawPosition, parse_guess
from .words import PUZZLE_WIDTH, parse_word

log = logging.getLogger(__name__)


def initialize(raw_words: Iterable[str], raw_exclusions: Iterable[str] = (),
               N: int = PUZZLE_WIDTH) -> WordStore:
    """
    Build the Word Store: load the dictionary, then scrub every previously
    used answer listed in `raw_exclusions` (one word per entry).
    """
    store = WordStore.load(raw_words, N=N)
    excluded = 0
    for line in raw_exclusions:
        excluded += store.exclude_exact(line)
    log.info("exclusion list removed %d word(s); %d live", excluded, store.live_count())
    return store


def submit_guess(session: Session, raw_positions: Iterable[RawPosition]) -> Guess:
    """Validate (letter, status-code) pairs and submit them as one guess."""
    guess = parse_guess(raw_positions, session.store.N)
    return session.submit(guess)


def check_candidate(store: WordStore, raw_word: str) -> bool:
    return store.is_live(parse_word(raw_word, store.N))


def top_candidates(store: WordStore, n: int = DEFAULT_TOP_N) -> List[str]:
    return Session(store).top_candidates(n)
