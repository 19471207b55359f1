from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

log = logging.getLogger(__name__)


def read_lines(p: Path | str, *, missing_ok: bool = False) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.

    Raises FileNotFoundError if the path doesn't exist, unless `missing_ok`,
    in which case an empty list is returned (used for the optional
    exclusion list of previously used answers).
    """
    p = Path(p)
    if not p.exists():
        if missing_ok:
            log.warning("%s not found; treating it as empty", p)
            return []
        raise FileNotFoundError(p)
    # System dictionaries are not always clean UTF-8.
    text = p.read_text(encoding="utf-8", errors="replace")
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline), creating parent
    directories. This is the format read_lines and the solver expect for
    the exclusion list; the fetch script writes answers.txt with it.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
