from __future__ import annotations
from typing import List, Optional

from .. import config as CFG
from ..markup import strip_markup
from ..models import MatchResult, SearchAnchor
from ..position import estimate_stripped_column
from .base import iter_candidate_lines


class MarkupStrippedMatcher:
    """Last resort: exact search in each line after its LaTeX markup is stripped."""

    name = "stripped"
    accept_above = None

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
        if not query:
            return None
        for idx, line, start_col in iter_candidate_lines(lines, anchor):
            # strip_markup() already returns normalized text
            pos = strip_markup(line[start_col:]).find(query)
            if pos == -1:
                continue
            return MatchResult(
                line=idx,
                column=estimate_stripped_column(line, start_col, pos),
                text=query,
                confidence=CFG.STRIPPED_CONFIDENCE,
                matcher=self.name,
            )
        return None


def find_without_markup(query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
    return MarkupStrippedMatcher().attempt(query, lines, anchor)
