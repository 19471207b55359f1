# apps/cli/run.py
"""
Interactive front end for the candidate-pruning solver.

This script:
  1) Reports on the word lists (counts, dropped lines, SHA, unknown exclusions).
  2) Loads the dictionary and scrubs previously used answers.
  3) Runs a command loop:
       h  help                      b  show board
       c  check a possible guess    p  show top possibilities
       g  make a guess              q  quit
     While a guess is entered, each letter's status is asked for in turn
     (w = wrong, m = misplaced, c = correct) and pruning starts right away.

Usage:
    python -m apps.cli.run --words /usr/share/dict/words --exclusions answers.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from colors import color  # pip install ansicolors

from packages.datasets import pretty_summary, read_lines, report_wordlists
from packages.engine import (
    DEFAULT_TOP_N, PUZZLE_WIDTH, Guess, PositionStatus, RoundLimitError, Session,
    ValidationError, initialize, parse_guess, parse_word,
)

log = logging.getLogger(__name__)

# Board colours, via the ansicolors package
STATUS_STYLES = {
    PositionStatus.WRONG: dict(fg="white", bg="black", style="bold"),
    PositionStatus.MISPLACED: dict(fg="white", bg="yellow", style="bold"),
    PositionStatus.CORRECT: dict(fg="white", bg="green", style="bold"),
}

HELP = """Commands
  h: help
  b: show board
  c: check possible guess
  p: show top possibilities
  g: make guess
  q: quit
Position Statuses
  h: help (convenience helper)
  w: wrong
  m: misplaced
  c: correct
  q: quit (convenience helper)"""

Ask = Callable[[str], str]


class _Quit(Exception):
    """Raised by any prompt when the player types 'q' (or input ends)."""


def render_guess(guess: Guess) -> str:
    return "".join(color(p.letter, **STATUS_STYLES[p.status]) for p in guess.positions)


def _ask(ask: Ask, prompt: str) -> str:
    try:
        answer = ask(prompt).strip()
    except EOFError:
        raise _Quit() from None
    if answer == "q":
        raise _Quit()
    return answer


def _prompt_word(ask: Ask, label: str) -> str:
    while True:
        raw = _ask(ask, f"> Enter guess {label}: ")
        if raw == "h":
            print(HELP)
            continue
        try:
            return parse_word(raw, PUZZLE_WIDTH)
        except ValidationError as e:
            print(f"\n{e}\n")


def prompt_guess(session: Session, ask: Ask) -> Guess:
    """
    Read a word, then one status per letter. Each status is applied to the
    store as soon as it is typed; the compound rules run on submit.
    """
    word = _prompt_word(ask, str(session.round + 1))
    pairs = []
    for i, letter in enumerate(word):
        while True:
            raw = _ask(ask, f"> Enter status for position {i + 1}; character {letter}: ")
            if raw == "h":
                print(HELP)
                continue
            try:
                status = PositionStatus.from_code(raw, i + 1)
            except ValidationError:
                print(f"\nUnknown status: {raw}\n")
                continue
            session.record(i, letter, status)
            pairs.append((letter, status))
            break
    return session.submit(parse_guess(pairs, PUZZLE_WIDTH))


def show_board(session: Session) -> None:
    history = session.history()
    if not history:
        print("No guesses logged yet")
        return
    for guess in history:
        print(render_guess(guess))


def check_possibility(session: Session, ask: Ask) -> None:
    word = _prompt_word(ask, "possibility")
    verdict = "a valid" if session.is_live(word) else "an invalid"
    print(f"\n{word} is {verdict} guess")


def show_top(session: Session, n: int) -> None:
    top = session.top_candidates(n)
    if not top:
        print("No possibilities left")
    for word in top:
        print(word)


def command_loop(session: Session, *, ask: Ask = input, top_n: int = DEFAULT_TOP_N) -> int:
    """Run until 'q' or end of input. Returns the process exit code."""
    print(HELP)
    try:
        while True:
            command = _ask(ask, "\n> Enter command: ")
            print()
            if command == "h":
                print(HELP)
            elif command == "b":
                show_board(session)
            elif command == "c":
                check_possibility(session, ask)
            elif command == "p":
                show_top(session, top_n)
            elif command == "g":
                if session.remaining_rounds <= 0:
                    print(RoundLimitError(session.max_rounds))
                    continue
                prompt_guess(session, ask)
            else:
                print(f"Unknown command: {command}")
    except _Quit:
        print("Quitting")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Prune a word list from guess feedback")
    ap.add_argument("--words", default="/usr/share/dict/words",
                    help="dictionary to draw candidates from (one word per line)")
    ap.add_argument("--exclusions", default="answers.txt",
                    help="previously used answers to scrub at startup (optional file)")
    ap.add_argument("--top", type=int, default=DEFAULT_TOP_N,
                    help="how many possibilities 'p' shows")
    ap.add_argument("--verbose", action="store_true", help="debug logging of every scrub")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(pretty_summary(report_wordlists(PUZZLE_WIDTH, args.words, args.exclusions)))

    try:
        words = read_lines(args.words)
    except FileNotFoundError as e:
        print(f"Cannot read dictionary: {e}", file=sys.stderr)
        return 1
    exclusions = read_lines(args.exclusions, missing_ok=True)

    session = Session(initialize(words, exclusions))
    log.debug("session ready: %r", session.store)
    return command_loop(session, top_n=args.top)


if __name__ == "__main__":
    sys.exit(main())
