"""
Word-list report for the solver's two inputs.

What this module does:
- Inspect the dictionary (candidate source, e.g. /usr/share/dict/words) and
  the exclusion list (previously used answers, one per line).
- Count lines, usable N-letter words, duplicates and dropped lines; compute
  SHA-256 of the raw files.
- Flag exclusions that the dictionary does not contain (they scrub nothing).
- Return a machine-readable dict and provide a pretty one-line summary.

Dropped dictionary lines are expected (a system dictionary holds words of
every length), so they are counted but are not a failure. The report only
fails when the dictionary is missing or yields no usable word.

Typical use:
    from packages.datasets import report_wordlists, pretty_summary
    rep = report_wordlists(5, "/usr/share/dict/words", "answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.words import normalize_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # raw line count
    count: int           # usable N-letter words (duplicates included)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique usable words
    dropped_lines: int   # lines that are not N Latin letters


@dataclass
class WordlistReport:
    """Top-level result for the (dictionary, exclusions) pair."""
    N: int
    words: FileReport
    exclusions: FileReport
    unknown_exclusions: int   # exclusions the dictionary does not contain
    passed: bool
    issues: List[str]         # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (usable_words, line_count, dropped_count)
    """
    usable: List[str] = []
    lines = dropped = 0
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            lines += 1
            w = normalize_word(raw, N)
            if w is None:
                dropped += 1
            else:
                usable.append(w)
    return usable, lines, dropped


def _file_report(path: Path, N: int) -> Tuple[FileReport, List[str]]:
    if not path.exists():
        return FileReport(str(path), False, 0, 0, "", 0, 0), []
    words, lines, dropped = _load(path, N)
    rep = FileReport(
        path=str(path),
        exists=True,
        lines=lines,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        dropped_lines=dropped,
    )
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def report_wordlists(N: int, words_path: str, exclusions_path: str) -> Dict:
    """
    Inspect the dictionary/exclusion pair for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is True iff the dictionary exists and yields at least one word.
    """
    issues: List[str] = []

    words_rep, words = _file_report(Path(words_path), N)
    excl_rep, exclusions = _file_report(Path(exclusions_path), N)

    if not words_rep.exists:
        issues.append(f"dictionary not found: {words_path}")
    elif words_rep.count == 0:
        issues.append(f"dictionary contains 0 words of length {N}")

    if not excl_rep.exists:
        issues.append(f"exclusion list not found: {exclusions_path}")
    elif excl_rep.dropped_lines:
        issues.append(f"exclusion list has {excl_rep.dropped_lines} unusable line(s)")

    unknown = sorted(set(exclusions) - set(words))
    if unknown and words_rep.exists:
        # A few examples are enough to debug a casing or path mix-up
        issues.append(f"{len(unknown)} exclusion(s) not in dictionary (e.g., {unknown[:5]})")

    if words_rep.count != words_rep.unique_count:
        issues.append("dictionary contains duplicate words")

    rep = WordlistReport(
        N=N,
        words=words_rep,
        exclusions=excl_rep,
        unknown_exclusions=len(unknown),
        passed=words_rep.exists and words_rep.count > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=4594 (uniq=4550, dropped=230381, sha=abc123...) | exclusions=512 (unknown=3) | OK
    """
    N = report["N"]
    a = report["words"]
    b = report["exclusions"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    return (
        f"N={N} | words={a['count']} (uniq={a['unique_count']}, "
        f"dropped={a['dropped_lines']}, sha={a_sha}) "
        f"| exclusions={b['count']} (unknown={report['unknown_exclusions']}) "
        f"| {status}"
    )
