def completion_percentage(completed: int, total: int) -> int:
    """Whole-number share of completed lessons, halves rounded up; 0 for an empty curriculum.

    >>> completion_percentage(3, 4)
    75
    >>> completion_percentage(1, 8)
    13
    """
    if total <= 0:
        return 0
    completed = max(0, min(completed, total))
    return (200 * completed + total) // (2 * total)
