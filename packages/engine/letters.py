"""
Letter-pool feasibility: can `word` be spelled from the letters of `root`?

Treat the root as a bag of letters. Each letter of the candidate must take
one instance out of the bag; if a letter has nothing left, the word is not
possible. That is exactly multiset inclusion:

    for every letter c: count(c in word) <= count(c in root)

Examples:
  is_possible("silk", "silkworm")   -> True
  is_possible("listens", "listen")  -> False  ('s' twice vs once)
  is_possible("xyz", "listen")      -> False
"""

from collections import Counter


def letter_counts(word: str) -> Counter:
    """Lowercased letter multiplicities of `word`."""
    return Counter(word.lower())


def is_possible(word: str, root: str) -> bool:
    """
    Return True if every letter of `word` can be drawn from `root`,
    respecting multiplicities. Comparison is case-insensitive.
    """
    available = letter_counts(root)
    for ch in word.lower():
        if available[ch] <= 0:
            return False
        available[ch] -= 1  # consume one instance
    return True
