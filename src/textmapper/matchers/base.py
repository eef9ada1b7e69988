# textmapper/matchers/base.py
from __future__ import annotations
from typing import Iterator, List, Optional, Protocol

from ..models import MatchResult, SearchAnchor


class Matcher(Protocol):
    """
    One rung of the locate ladder.

    name          short label reported in MatchResult.matcher
    accept_above  the ladder takes a result only when confidence > accept_above;
                  None means any result is taken as-is
    attempt()     normalized query + document lines + clamped anchor -> result or None
    """
    name: str
    accept_above: Optional[float]

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]: ...


def iter_candidate_lines(
    lines: List[str], anchor: SearchAnchor, window: Optional[int] = None
) -> Iterator[tuple[int, str, int]]:
    """Yield (line_idx, line, start_col) from the anchor forward; `window` caps the line count."""
    end = len(lines) if window is None else min(len(lines), anchor.line + window)
    for idx in range(anchor.line, end):
        yield idx, lines[idx], anchor.start_column(idx)


def width_ladder(query_len: int, factor: int, step: int) -> range:
    """Candidate slice widths len(q), len(q)+step, ... up to factor * len(q)."""
    return range(query_len, factor * query_len + 1, max(1, step))
