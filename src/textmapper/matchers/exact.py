from __future__ import annotations
from typing import List, Optional

from .. import config as CFG
from ..models import MatchResult, SearchAnchor
from ..normalize import normalize
from ..position import map_normalized_index_to_column
from .base import iter_candidate_lines


class ExactMatcher:
    """Plain substring search of the normalized query, anchor to end of document."""

    name = "exact"
    accept_above = None

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
        if not query:
            return None
        for idx, line, start_col in iter_candidate_lines(lines, anchor):
            pos = normalize(line[start_col:]).find(query)
            if pos == -1:
                continue
            return MatchResult(
                line=idx,
                column=map_normalized_index_to_column(line, start_col, pos),
                text=query,
                confidence=CFG.EXACT_CONFIDENCE,
                matcher=self.name,
            )
        return None


def find_exact(query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
    return ExactMatcher().attempt(query, lines, anchor)
