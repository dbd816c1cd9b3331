"""
Streak-weighted scoring for an accepted word.

    points = POINTS_PER_LETTER x len(word) x streak

`streak` is the streak value AFTER counting this acceptance, so the first
word of a fresh streak scores 10 points per letter, the second 20, and so on.
Rejected words score nothing.
"""

POINTS_PER_LETTER = 10


def points_for(word: str, streak: int) -> int:
    """
    Points earned by `word` when accepted as the `streak`-th consecutive word.

    Examples:
      points_for("silk", 1) -> 40
      points_for("worm", 2) -> 80
    """
    if streak < 1:
        raise ValueError(f"streak must be >= 1 for an accepted word; got {streak}")
    return POINTS_PER_LETTER * len(word) * streak
