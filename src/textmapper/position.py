from __future__ import annotations
import math

from .markup import strip_markup
from .normalize import normalize


def map_normalized_index_to_column(original_line: str, start_column: int, normalized_index: int) -> int:
    """
    Translate an index into normalize(original_line[start_column:]) back to a
    column of the original line.

    Walk the original suffix counting the characters the normalizer keeps:
    every non-whitespace character, plus the first whitespace character of a
    run. Leading whitespace is trimmed by the normalizer, so it is skipped
    without counting, and a stop inside a whitespace run moves past the rest
    of the run onto the next kept character.
    """
    suffix = original_line[start_column:]
    n = len(suffix)

    walked = 0
    while walked < n and suffix[walked].isspace():
        walked += 1

    consumed = 0
    in_space = False
    while consumed < normalized_index and walked < n:
        if suffix[walked].isspace():
            if not in_space:
                consumed += 1
            in_space = True
        else:
            consumed += 1
            in_space = False
        walked += 1

    if in_space:
        while walked < n and suffix[walked].isspace():
            walked += 1

    return start_column + walked


def estimate_stripped_column(original_line: str, start_column: int, normalized_index: int) -> int:
    """
    Proportional estimate for hits found in markup-stripped text.

    Removed markup leaves no character-level trail back to the source, so the
    index is scaled by len(original suffix) / len(stripped text). Approximate.
    """
    suffix = original_line[start_column:]
    stripped = normalize(strip_markup(suffix))
    if not stripped:
        return start_column
    offset = math.floor(normalized_index / len(stripped) * len(suffix))
    return start_column + min(offset, len(suffix))
