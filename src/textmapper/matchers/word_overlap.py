from __future__ import annotations
import math
from typing import List, Optional

from .. import config as CFG
from ..models import MatchResult, SearchAnchor
from ..normalize import normalize
from ..position import map_normalized_index_to_column
from .base import iter_candidate_lines


def required_words(total: int, ratio: float = CFG.WORD_OVERLAP_RATIO) -> int:
    """ceil(ratio * total), immune to float noise such as 10 * 0.7 == 7.000000000000001."""
    return math.ceil(round(total * ratio, 9))


class WordOverlapMatcher:
    """
    Legacy coarse fallback: the first line (anchor to end of document) that
    contains enough of the query's words, each looked up on its own.
    """

    name = "word_overlap"
    accept_above = None

    def __init__(self, *, ratio: float = CFG.WORD_OVERLAP_RATIO) -> None:
        self.ratio = ratio

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
        words = query.split()
        if not words:
            return None
        need = required_words(len(words), self.ratio)

        for idx, line, start_col in iter_candidate_lines(lines, anchor):
            candidate = normalize(line[start_col:])
            hits = [pos for pos in (candidate.find(w) for w in words) if pos != -1]
            if hits and len(hits) >= need:
                return MatchResult(
                    line=idx,
                    column=map_normalized_index_to_column(line, start_col, min(hits)),
                    text=query,
                    confidence=CFG.WORD_OVERLAP_CONFIDENCE,
                    matcher=self.name,
                )
        return None


def find_by_word_overlap(query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
    return WordOverlapMatcher().attempt(query, lines, anchor)
