"""Grading — derived score presentation."""

SCORE_MIN = 0
SCORE_MAX = 100


def average_score(
    assignment: int | None, exam: int | None, final: int | None,
) -> float:
    """(assignment + exam + final) / 3, missing scores counted as 0."""
    total = (assignment or 0) + (exam or 0) + (final or 0)
    return round(total / 3, 2)
