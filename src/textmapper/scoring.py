from __future__ import annotations
from typing import List

from . import config as CFG
from .models import AlignmentResult


def smith_waterman(
    query: str,
    source: str,
    *,
    match: int = CFG.MATCH_REWARD,
    mismatch: int = CFG.MISMATCH_PENALTY,
    gap: int = CFG.GAP_PENALTY,
) -> AlignmentResult:
    """
    Best local alignment of `query` inside `source`.

    Cells are floored at 0; the highest cell (first one in row-major order on
    ties) ends the alignment. The traceback walks back while the cell stays
    positive, replaying the step the forward pass took: diagonal first, then
    up (gap in source), then left (gap in query).
    """
    m, n = len(query), len(source)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    best = 0
    best_i = best_j = 0
    for i in range(1, m + 1):
        qc = query[i - 1]
        prev, row = dp[i - 1], dp[i]
        for j in range(1, n + 1):
            diag = prev[j - 1] + (match if qc == source[j - 1] else mismatch)
            cell = max(0, diag, prev[j] + gap, row[j - 1] + gap)
            row[j] = cell
            if cell > best:
                best, best_i, best_j = cell, i, j

    i, j, length = best_i, best_j, 0
    while i > 0 and j > 0 and dp[i][j] > 0:
        length += 1
        step = match if query[i - 1] == source[j - 1] else mismatch
        if dp[i][j] == dp[i - 1][j - 1] + step:
            i -= 1
            j -= 1
        elif dp[i][j] == dp[i - 1][j] + gap:
            i -= 1
        else:
            j -= 1

    return AlignmentResult(score=best, query_start=i, source_start=j, length=length)


def alignment_confidence(score: int, query_len: int, match: int = CFG.MATCH_REWARD) -> float:
    """Score relative to a perfect alignment of the whole query, clamped to [0, 1]."""
    if query_len <= 0:
        return 0.0
    return max(0.0, min(1.0, score / (match * query_len)))


def levenshtein_distance(a: str, b: str) -> int:
    """Classic unit-cost edit distance (substitute / insert / delete)."""
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j], cur[j - 1], prev[j - 1])
        prev = cur
    return prev[-1]


def similarity(a: str, b: str) -> float:
    """1 - distance / longer length; two empty strings are identical (1.0)."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def longest_common_subsequence(a: str, b: str) -> str:
    m, n = len(a), len(b)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    # walk back; on ties move left in `b`
    out: List[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            out.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(out))


def lcs_ratio(a: str, b: str) -> tuple[float, str]:
    """(len(LCS) / longer length, LCS); 0.0 for two empty strings."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0, ""
    lcs = longest_common_subsequence(a, b)
    return len(lcs) / longest, lcs
