"""
Build the exclusion list: previously used answers, one per line.

What it does:
- Downloads a page listing historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- De-duplicates while preserving calendar order and writes the file the
  solver scrubs at startup (`--exclusions`, default answers.txt).
- With --merge, words already in the output file are kept, so answers
  added by hand are not lost.

Usage:
    python -m script.fetch_used_answers --out answers.txt
    python -m script.fetch_used_answers --merge --out answers.txt
"""

import argparse
import logging
import re
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import read_lines, write_lines
from packages.engine import PUZZLE_WIDTH, normalize_word

log = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(
    rf"(\d{{4}}-\d{{2}}-\d{{2}})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{{{PUZZLE_WIDTH}}})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> List[str]:
    """Extract answers (uppercase, calendar order, no duplicates) from a page."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2) for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    answers = parse_answers(r.text)
    log.info("fetched %d answer(s) from %s", len(answers), url)
    return answers


def merge(existing: Iterable[str], fetched: Iterable[str]) -> List[str]:
    """Existing entries first (normalized), then newly fetched ones."""
    kept = [w for w in (normalize_word(x) for x in existing) if w is not None]
    return unique_preserve_order(kept + list(fetched))


def main():
    ap = argparse.ArgumentParser(description="Fetch previously used answers for the exclusion list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="answers.txt")
    ap.add_argument("--merge", action="store_true",
                    help="keep words already present in --out")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    answers = fetch_answers(args.url)
    if args.merge:
        answers = merge(read_lines(args.out, missing_ok=True), answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
