from .validator import report_wordlists, pretty_summary
from .io import read_lines, write_lines

__all__ = ["report_wordlists", "pretty_summary", "read_lines", "write_lines"]
