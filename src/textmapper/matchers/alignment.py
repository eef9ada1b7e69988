from __future__ import annotations
from typing import List, Optional

from .. import config as CFG
from ..models import MatchResult, SearchAnchor
from ..normalize import normalize
from ..position import map_normalized_index_to_column
from ..scoring import smith_waterman, alignment_confidence
from .base import iter_candidate_lines


class LocalAlignmentMatcher:
    """
    Smith-Waterman over a few lines below the anchor.

    Each line contributes one slice of at most slice_factor * len(query)
    characters from its start column. The highest raw alignment score across
    the window wins; confidence is score / (match reward * len(query)).
    """

    name = "alignment"

    def __init__(
        self,
        *,
        window: int = CFG.ALIGNMENT_WINDOW_LINES,
        slice_factor: int = CFG.ALIGNMENT_SLICE_FACTOR,
        floor: float = CFG.ALIGNMENT_FLOOR,
        accept_above: Optional[float] = CFG.ALIGNMENT_ACCEPT,
        min_slice_ratio: float = CFG.MIN_SLICE_RATIO,
    ) -> None:
        self.window = window
        self.slice_factor = slice_factor
        self.floor = floor
        self.accept_above = accept_above
        self.min_slice_ratio = min_slice_ratio

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
        qn = len(query)
        if qn == 0:
            return None

        best: Optional[MatchResult] = None
        best_score = 0
        for idx, line, start_col in iter_candidate_lines(lines, anchor, self.window):
            candidate = normalize(line[start_col:start_col + qn * self.slice_factor])
            if len(candidate) < qn * self.min_slice_ratio:
                continue

            al = smith_waterman(query, candidate)
            conf = alignment_confidence(al.score, qn)
            if al.score > best_score and conf > self.floor:
                best_score = al.score
                best = MatchResult(
                    line=idx,
                    column=map_normalized_index_to_column(line, start_col, al.source_start),
                    text=query,
                    confidence=conf,
                    matcher=self.name,
                )
        return best


def find_local_alignment(query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
    return LocalAlignmentMatcher().attempt(query, lines, anchor)
