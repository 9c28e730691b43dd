"""Deterministic character-level string similarity for product tokens."""

from __future__ import annotations


_WINKLER_PREFIX_LIMIT = 4
_WINKLER_SCALING = 0.1


def jaro_winkler_similarity(left: str, right: str) -> float:
    """Return the Jaro-Winkler similarity of two strings in [0, 1]."""

    if left == right:
        return 1.0

    left_len = len(left)
    right_len = len(right)
    if left_len == 0 or right_len == 0:
        return 0.0

    match_window = max(left_len, right_len) // 2 - 1
    if match_window < 0:
        return 0.0

    left_matched = [False] * left_len
    right_matched = [False] * right_len
    matches = 0

    for i, char in enumerate(left):
        start = max(0, i - match_window)
        end = min(i + match_window + 1, right_len)
        for j in range(start, end):
            if right_matched[j] or right[j] != char:
                continue
            left_matched[i] = True
            right_matched[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    out_of_order = 0
    k = 0
    for i, char in enumerate(left):
        if not left_matched[i]:
            continue
        while not right_matched[k]:
            k += 1
        if char != right[k]:
            out_of_order += 1
        k += 1
    transpositions = out_of_order / 2

    jaro = (
        matches / left_len
        + matches / right_len
        + (matches - transpositions) / matches
    ) / 3.0

    prefix = 0
    for left_char, right_char in zip(left[:_WINKLER_PREFIX_LIMIT], right[:_WINKLER_PREFIX_LIMIT]):
        if left_char != right_char:
            break
        prefix += 1

    return jaro + _WINKLER_SCALING * prefix * (1 - jaro)
