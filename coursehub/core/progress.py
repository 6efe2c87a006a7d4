"""
Course progress arithmetic.

Dependencies: None (pure domain layer)
System role: Percentage computation shared by services
"""


def compute_progress(completed: int, total: int) -> int:
    """
    Percentage of completed lessons, rounded half up.

    Integer arithmetic keeps .5 cases exact (1/8 -> 13, 1/200 -> 1).

    Args:
        completed: Number of completed lessons
        total: Number of lessons in the course

    Returns:
        int: 0-100; 0 when the course has no lessons
    """
    if total <= 0:
        return 0
    completed = max(0, min(completed, total))
    return (200 * completed + total) // (2 * total)
