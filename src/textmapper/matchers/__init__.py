"""The locate ladder rungs, cheapest and most precise first."""
from __future__ import annotations

from .base import Matcher, iter_candidate_lines, width_ladder
from .exact import ExactMatcher, find_exact
from .alignment import LocalAlignmentMatcher, find_local_alignment
from .edit_distance import EditDistanceMatcher, find_by_edit_distance
from .subsequence import SubsequenceMatcher, find_by_lcs
from .word_overlap import WordOverlapMatcher, find_by_word_overlap
from .stripped import MarkupStrippedMatcher, find_without_markup

__all__ = [
    "Matcher",
    "iter_candidate_lines",
    "width_ladder",
    "ExactMatcher",
    "LocalAlignmentMatcher",
    "EditDistanceMatcher",
    "SubsequenceMatcher",
    "WordOverlapMatcher",
    "MarkupStrippedMatcher",
    "find_exact",
    "find_local_alignment",
    "find_by_edit_distance",
    "find_by_lcs",
    "find_by_word_overlap",
    "find_without_markup",
]
