"""
Replay harness.

- run_case:  replay a fixed list of guesses against a known answer through
             a fresh Session, scoring each guess with the engine's scorer.
- run_batch: run_case for many answers with the same opening guesses.

Useful as a soundness check: with honest feedback the answer itself must
never be scrubbed. These functions are UI-agnostic so they can be reused by
a CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence

from packages.engine import (
    MAX_ROUNDS, Guess, Session, codes, initialize, parse_feedback, score,
)


def _feedback(guess: str, answer: str) -> Guess:
    """Honest feedback for `guess`, as a player would type it in."""
    return parse_feedback(guess, codes(score(guess, answer)))


def run_case(
        answer: str,
        guesses: Sequence[str],
        *,
        words: Iterable[str],
        exclusions: Iterable[str] = (),
        max_rounds: int = MAX_ROUNDS,
) -> Dict:
    """
    Replay `guesses` (in order) until one equals the answer or they run out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(word, codes)]), live_counts (list[int]),
            answer_live (bool, answer still live after the last round)
    """
    answer = answer.strip().upper()
    session = Session(initialize(words, exclusions), max_rounds=max_rounds)

    live_counts: List[int] = []
    success = False

    t0 = time.time()
    for g in guesses[:max_rounds]:
        guess = session.submit(_feedback(g, answer))
        live_counts.append(session.store.live_count())
        if guess.word == answer:
            success = True
            break
    dt = (time.time() - t0) * 1000.0

    return {
        "answer": answer,
        "success": success,
        "guesses": session.round,
        "time_ms": dt,
        "history": [(g.word, g.codes) for g in session.history()],
        "live_counts": live_counts,
        "answer_live": session.store.is_live(answer),
    }


def run_batch(
        answers: Iterable[str],
        guesses: Sequence[str],
        *,
        words: Sequence[str],
        exclusions: Sequence[str] = (),
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K
    answers are replayed.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(a, guesses, words=words, exclusions=exclusions) for a in pool]
