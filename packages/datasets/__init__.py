from .validator import validate_wordlist, pretty_summary
from .io import (read_lines, write_lines, load_words, unique_preserve_order,
                 default_start_words_path, default_dictionary_path)

__all__ = [
    "validate_wordlist",
    "pretty_summary",
    "read_lines",
    "write_lines",
    "load_words",
    "unique_preserve_order",
    "default_start_words_path",
    "default_dictionary_path",
]
