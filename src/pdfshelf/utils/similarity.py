"""Edit distance used to spot duplicate or near-duplicate name parts."""

from pdfshelf.utils.constants import MAX_EDIT_DISTANCE_INPUT


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance with unit-cost insert, delete and substitute.

    Inputs longer than MAX_EDIT_DISTANCE_INPUT characters are truncated, which
    keeps the table bounded; callers only compare short name parts.
    """
    a = a[:MAX_EDIT_DISTANCE_INPUT]
    b = b[:MAX_EDIT_DISTANCE_INPUT]
    if a == b:
        return 0
    if not a or not b:
        return len(a) or len(b)

    # Single rolling row of the DP table
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]
