"""Greedy scheduling problems."""

from collections import Counter
from collections.abc import Iterable


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the minimum number of CPU intervals needed to run ``tasks``.

    Each task is labelled with a letter from ``A`` to ``Z``. Two tasks with
    the same label must be separated by at least ``n`` intervals. Intervals
    in which nothing can run are spent idle.
    """
    labels = list(tasks)
    for label in labels:
        if not (isinstance(label, str) and len(label) == 1 and "A" <= label <= "Z"):
            raise ValueError(f"task label must be a letter A-Z, got {label!r}")
    if not labels:
        return 0

    counts = Counter(labels)
    top = max(counts.values())
    # Labels sharing the top frequency, besides the one that frames the schedule.
    ties = sum(1 for count in counts.values() if count == top) - 1

    gaps = top - 1
    slots = gaps * n
    others = len(labels) - top - ties * top
    idle = slots - ties * gaps - others
    return len(labels) + max(idle, 0)