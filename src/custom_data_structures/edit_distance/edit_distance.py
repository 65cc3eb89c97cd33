"""Bounded Levenshtein distance used by the trie's fuzzy search."""

# Length gap beyond which two strings are treated as too different
LENGTH_GAP_THRESHOLD = 2


def bounded_edit_distance(
    first: str,
    second: str,
    max_gap: int = LENGTH_GAP_THRESHOLD,
) -> int:
    """Compute the Levenshtein distance between two strings.

    Insertions, deletions and substitutions all cost 1. When the lengths of
    the two strings differ by more than `max_gap`, the full computation is
    skipped and `max_gap + 1` is returned instead.

    Args:
        first (str): The first string.
        second (str): The second string.
        max_gap (int): The largest length difference that is still
        computed exactly.

    Returns:
        int: The edit distance, or `max_gap + 1` when the length gap
        alone exceeds `max_gap`.

    """
    if abs(len(first) - len(second)) > max_gap:
        return max_gap + 1

    # Keep the shorter string on the columns so the rows stay small
    if len(first) < len(second):
        first, second = second, first

    previous_row = list(range(len(second) + 1))
    for i, first_char in enumerate(first, start=1):
        current_row = [i]
        for j, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current_row.append(previous_row[j - 1])
            else:
                current_row.append(
                    1
                    + min(
                        previous_row[j],  # deletion
                        current_row[j - 1],  # insertion
                        previous_row[j - 1],  # substitution
                    ),
                )
        previous_row = current_row

    return previous_row[-1]
