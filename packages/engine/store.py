"""
Word Store: the candidate dictionary and its liveness flags.

Records are kept column-wise:
  - `_words`   : list of the normalized words, in load order
  - `_letters` : (n, N) uint8 array of ASCII codes, one row per record
  - `_live`    : (n,) bool mask, True while a record is still possible

Every scrub computes a "keep" mask over ALL records and ANDs it into
`_live`. A flag that is False can therefore never come back, which is the
monotonicity every caller relies on.

Typical use:
    store = WordStore.load(read_lines("/usr/share/dict/words"))
    store.exclude_exact("CRANE")
    store.retain_only_position_if(0, "S")
    list(store.live_words())
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Iterator, List

import numpy as np

from .words import PUZZLE_WIDTH, normalize_word

log = logging.getLogger(__name__)


def _codes(word: str) -> np.ndarray:
    return np.frombuffer(word.encode("ascii"), dtype=np.uint8)


class WordStore:
    """Fixed-length candidate words with a one-way liveness flag each."""

    def __init__(self, words: Iterable[str] = (), *, N: int = PUZZLE_WIDTH):
        self.N = int(N)

        # Wrong length / non A–Z entries are dropped here, silently.
        self._words: List[str] = [
            w for w in (normalize_word(raw, self.N) for raw in words) if w is not None
        ]

        if self._words:
            self._letters = _codes("".join(self._words)).reshape(-1, self.N)
        else:
            self._letters = np.zeros((0, self.N), dtype=np.uint8)
        self._live = np.ones(len(self._words), dtype=bool)

    @classmethod
    def load(cls, words: Iterable[str], *, N: int = PUZZLE_WIDTH) -> "WordStore":
        store = cls(words, N=N)
        log.info("loaded %d word(s) of length %d", len(store), store.N)
        return store

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordStore(N={self.N}, live={self.live_count()}/{len(self)})"

    def live_count(self) -> int:
        return int(self._live.sum())

    # -----------------------------
    # Scrubs
    # -----------------------------

    def _scrub(self, keep: np.ndarray, rule: str) -> int:
        """AND `keep` into the live mask; return how many records died."""
        before = self.live_count()
        self._live &= keep
        after = self.live_count()
        log.debug("%s: scrubbed %d word(s), %d live", rule, before - after, after)
        return before - after

    def exclude_exact(self, word: str) -> int:
        """
        Mark every record equal to `word` as dead.

        A word of the wrong shape, or one that is absent or already dead,
        is a no-op.
        """
        w = normalize_word(word, self.N)
        if w is None:
            return 0
        same = np.all(self._letters == _codes(w), axis=1)
        return self._scrub(~same, f"exclude {w}")

    def exclude_position_if(self, position: int, letter: str) -> int:
        """Kill live records holding `letter` at `position`."""
        code = ord(letter.upper())
        return self._scrub(self._letters[:, position] != code,
                           f"not {letter.upper()}@{position}")

    def retain_only_position_if(self, position: int, letter: str) -> int:
        """Kill live records NOT holding `letter` at `position`."""
        code = ord(letter.upper())
        return self._scrub(self._letters[:, position] == code,
                           f"only {letter.upper()}@{position}")

    def retain_only_containing(self, letter: str) -> int:
        """Kill live records in which `letter` appears nowhere."""
        code = ord(letter.upper())
        return self._scrub(np.any(self._letters == code, axis=1),
                           f"contains {letter.upper()}")

    def retain_only_letter_at_allowed_positions(
            self, letter: str, allowed_positions: AbstractSet[int]) -> int:
        """
        Complete-letter rule: every occurrence of `letter` must sit at one of
        `allowed_positions`.

        - allowed_positions non-empty: the letter must also be present.
        - allowed_positions empty: no position is allowed, so the letter
          must be absent altogether.
        """
        code = ord(letter.upper())
        has = self._letters == code                      # (n, N)
        allowed = np.zeros(self.N, dtype=bool)
        for p in allowed_positions:
            allowed[p] = True

        keep = ~np.any(has & ~allowed, axis=1)
        if allowed_positions:
            keep &= np.any(has, axis=1)

        where = ",".join(str(p) for p in sorted(allowed_positions)) or "-"
        return self._scrub(keep, f"{letter.upper()} only @{where}")

    # -----------------------------
    # Queries
    # -----------------------------

    def live_words(self) -> Iterator[str]:
        """
        Yield live words in load order.

        Each call starts a fresh iteration; nothing is consumed.
        """
        for i in np.flatnonzero(self._live):
            yield self._words[i]

    def is_live(self, word: str) -> bool:
        w = normalize_word(word, self.N)
        if w is None:
            return False
        same = np.all(self._letters == _codes(w), axis=1)
        return bool(np.any(same & self._live))
