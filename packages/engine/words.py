"""
Letters and words.

A Letter is one of the 26 Latin letters, uppercased. A Word is a str of
exactly N Letters (N is the puzzle width, 5). Anything outside A–Z is
rejected instead of being case-folded through the locale, so "ß" or "é"
never sneak into the store as something else.
"""

from __future__ import annotations

from typing import Optional

from .errors import ValidationError

PUZZLE_WIDTH = 5
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Both cases are accepted on input; storage is uppercase only.
_ACCEPTED = frozenset(ALPHABET + ALPHABET.lower())


def is_letter(ch: str) -> bool:
    return isinstance(ch, str) and len(ch) == 1 and ch in _ACCEPTED


def normalize_word(word: str, N: int = PUZZLE_WIDTH) -> Optional[str]:
    """
    Return `word` uppercased if it is exactly N Latin letters, else None.

    Used on dictionary and exclusion lines, where a non-conforming entry is
    simply skipped rather than reported.
    """
    w = word.strip()
    if len(w) != N or not all(ch in _ACCEPTED for ch in w):
        return None
    return w.upper()


def parse_letter(raw: str, position: int | None = None) -> str:
    """
    Validate one guessed character and return it uppercased.

    Raises ValidationError naming the (1-based) position when given.
    """
    if not is_letter(raw):
        where = f" for position {position}" if position is not None else ""
        raise ValidationError(f"invalid character{where}: {raw!r}", position=position)
    return raw.upper()


def parse_word(raw: str, N: int = PUZZLE_WIDTH) -> str:
    """
    Validate a word typed by the player.

    Returns:
      the uppercased word

    Raises:
      ValidationError if the length is not N or a character is not A–Z.
    """
    if not isinstance(raw, str):
        raise ValidationError(f"invalid guess {raw!r}: expected a string")
    w = raw.strip()
    if len(w) != N:
        raise ValidationError(f"invalid guess {w!r}: expected {N} letters, got {len(w)}")
    return "".join(parse_letter(ch, i) for i, ch in enumerate(w, start=1))
