"""
Rendered-text to LaTeX-source locator.

Given a fragment of text lifted from a rendered document (typically a PDF
selection), a LaTeX source and an approximate anchor, find the line/column the
fragment came from and say how sure we are.

Main entry points:
    locate(query, source_text, anchor_line, anchor_column) -> MatchResult | None
    Locator(matchers)       custom ladders
    normalize(text)         whitespace-canonical form used for every comparison
    strip_markup(text)      approximate visible text of a LaTeX fragment

Example:
    from textmapper import locate

    hit = locate("The quick brown fox", tex_source, 12, 0)
    if hit is not None:
        print(hit.line, hit.column, hit.confidence)
"""
from __future__ import annotations

from .engine import Locator, locate, default_ladder
from .models import MatchResult, AlignmentResult, SearchAnchor
from .normalize import normalize, split_lines
from .markup import strip_markup
from .position import map_normalized_index_to_column, estimate_stripped_column
from .context import get_text_context
from .edits import ReplacementPlan, plan_replacement, apply_replacement

__version__ = "1.0.0"
__all__ = [
    "Locator",
    "locate",
    "default_ladder",
    "MatchResult",
    "AlignmentResult",
    "SearchAnchor",
    "normalize",
    "split_lines",
    "strip_markup",
    "map_normalized_index_to_column",
    "estimate_stripped_column",
    "get_text_context",
    "ReplacementPlan",
    "plan_replacement",
    "apply_replacement",
]
