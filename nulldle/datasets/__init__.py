from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_words
from .words import WordSource

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "read_words", "write_words",
           "WordSource"]
