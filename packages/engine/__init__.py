from .errors import PrunerError, ValidationError, RoundLimitError
from .words import PUZZLE_WIDTH, ALPHABET, normalize_word, parse_word
from .store import WordStore
from .feedback import PositionStatus, GuessPosition, Guess, Classification, classify
from .pruning import record_position_feedback, finalize_guess, apply_guess
from .session import Session, MAX_ROUNDS, DEFAULT_TOP_N
from .validation import parse_guess, parse_feedback, validate_guess
from .scoring import score, codes
from .api import initialize, submit_guess, check_candidate, top_candidates

__all__ = [
    "PrunerError", "ValidationError", "RoundLimitError",
    "PUZZLE_WIDTH", "ALPHABET", "normalize_word", "parse_word",
    "WordStore",
    "PositionStatus", "GuessPosition", "Guess", "Classification", "classify",
    "record_position_feedback", "finalize_guess", "apply_guess",
    "Session", "MAX_ROUNDS", "DEFAULT_TOP_N",
    "parse_guess", "parse_feedback", "validate_guess",
    "score", "codes",
    "initialize", "submit_guess", "check_candidate", "top_candidates",
]
