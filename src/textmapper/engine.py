# textmapper/engine.py
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from .matchers import (
    Matcher,
    ExactMatcher,
    LocalAlignmentMatcher,
    EditDistanceMatcher,
    SubsequenceMatcher,
    WordOverlapMatcher,
    MarkupStrippedMatcher,
)
from .models import MatchResult, SearchAnchor
from .normalize import normalize, split_lines

log = logging.getLogger(__name__)


def default_ladder() -> tuple[Matcher, ...]:
    """Exact, then alignment-based, then similarity, then the coarse fallbacks."""
    return (
        ExactMatcher(),
        LocalAlignmentMatcher(),
        EditDistanceMatcher(),
        SubsequenceMatcher(),
        WordOverlapMatcher(),
        MarkupStrippedMatcher(),
    )


class Locator:
    """
    Thin orchestration layer over an ordered ladder of matchers.

    The first rung whose result clears its own acceptance rule wins; this is
    a priority ladder, not a search for the globally best score. A Locator
    only holds its (immutable) ladder, so one instance can serve any number
    of concurrent callers.

    Public API:
      * locate(query, source_text, anchor_line, anchor_column) -> MatchResult | None
    """

    def __init__(self, matchers: Optional[Iterable[Matcher]] = None) -> None:
        self.matchers: Sequence[Matcher] = tuple(matchers) if matchers is not None else default_ladder()
        if not self.matchers:
            raise ValueError("Locator(): at least one matcher is required")

    # /* ~~~ Find where a rendered-text fragment came from in the source ~~~ */
    def locate(
        self,
        query: str,
        source_text: str,
        anchor_line: int = 0,
        anchor_column: int = 0,
    ) -> Optional[MatchResult]:
        q_norm = normalize(query)
        if not q_norm:
            return None

        lines = split_lines(source_text)
        anchor = SearchAnchor(anchor_line, anchor_column).clamp(lines)

        for matcher in self.matchers:
            result = matcher.attempt(q_norm, lines, anchor)
            if result is None:
                continue
            if matcher.accept_above is not None and not result.confidence > matcher.accept_above:
                log.debug("%s: %.3f not above %.2f, falling through",
                          matcher.name, result.confidence, matcher.accept_above)
                continue
            log.debug("%s accepted: line=%d col=%d conf=%.3f",
                      matcher.name, result.line, result.column, result.confidence)
            return result

        log.info("No match for %r from (%d,%d)", q_norm[:40], anchor.line, anchor.column)
        return None


_default = Locator()


def locate(
    query: str,
    source_text: str,
    anchor_line: int = 0,
    anchor_column: int = 0,
) -> Optional[MatchResult]:
    """Module-level convenience using the default ladder."""
    return _default.locate(query, source_text, anchor_line, anchor_column)
