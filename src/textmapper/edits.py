"""
Caller-side replacement policy on top of the locator.

The engine only says where a fragment probably is. Deciding what to do with a
weak match or with no match belongs to the caller; this module is the policy
the editor integration uses:

  * match found      -> replace len(old_text) characters from the match column
  * low confidence   -> same range, but flagged and logged as a warning
  * no match         -> naive positional replacement at the anchor
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, asdict
from typing import List, Optional

from . import config as CFG
from .engine import Locator, locate
from .models import MatchResult, SearchAnchor
from .normalize import split_lines

log = logging.getLogger(__name__)

_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ReplacementPlan:
    line: int
    start_column: int
    end_column: int                     # exclusive, clamped to the line
    match: Optional[MatchResult]        # None when the positional fallback was used
    low_confidence: bool = False

    @property
    def fallback(self) -> bool:
        return self.match is None

    def to_dict(self) -> dict:
        out = asdict(self)
        out["fallback"] = self.fallback
        return out


def plan_replacement(
    source_text: str,
    old_text: str,
    line: int,
    column: int,
    *,
    locator: Optional[Locator] = None,
) -> ReplacementPlan:
    lines = split_lines(source_text)
    find = locator.locate if locator is not None else locate
    match = find(old_text, source_text, line, column)

    if match is None:
        anchor = SearchAnchor(line, column).clamp(lines)
        line_len = len(lines[anchor.line])
        log.info("No match for replacement, using anchor (%d,%d)", anchor.line, anchor.column)
        return ReplacementPlan(
            line=anchor.line,
            start_column=anchor.column,
            end_column=min(anchor.column + len(old_text), line_len),
            match=None,
        )

    low = match.confidence < CFG.LOW_CONFIDENCE
    if low:
        log.warning("Low confidence match (%.2f) for text replacement", match.confidence)
    line_len = len(lines[match.line])
    start = min(match.column, line_len)
    return ReplacementPlan(
        line=match.line,
        start_column=start,
        end_column=min(start + len(old_text), line_len),
        match=match,
        low_confidence=low,
    )


def _line_starts(text: str) -> List[int]:
    """Offset of every line start, agreeing with split_lines() on \\r\\n, \\r and \\n."""
    return [0] + [m.end() for m in _BREAK.finditer(text)]


def apply_replacement(source_text: str, plan: ReplacementPlan, new_text: str) -> str:
    """Splice `new_text` over the planned range; line endings elsewhere are untouched."""
    starts = _line_starts(source_text)
    if plan.line >= len(starts):
        raise ValueError(f"line {plan.line} is outside a {len(starts)}-line document")
    base = starts[plan.line]
    return source_text[:base + plan.start_column] + new_text + source_text[base + plan.end_column:]
