"""Edit-distance based similarity for free-text fields such as names."""


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum single-character insertions, deletions and substitutions
    needed to turn *first* into *second*."""
    if len(first) < len(second):
        first, second = second, first
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, char_a in enumerate(first, start=1):
        current = [i]
        for j, char_b in enumerate(second, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    """Return a score in ``[0, 1]`` where ``1.0`` means identical.

    Comparison ignores case and surrounding whitespace.  The distance is
    normalised by the length of the longer string.
    """
    a = first.strip().lower()
    b = second.strip().lower()
    if a == b:
        return 1.0

    distance = levenshtein_distance(a, b)
    longest = max(len(a), len(b))
    return max(0.0, 1.0 - distance / longest)
