from __future__ import annotations
from typing import List, Optional

from .. import config as CFG
from ..models import MatchResult, SearchAnchor
from ..normalize import normalize
from ..position import map_normalized_index_to_column
from ..scoring import similarity
from .base import iter_candidate_lines, width_ladder


class EditDistanceMatcher:
    """Normalized Levenshtein similarity over a ladder of slice widths per line."""

    name = "edit_distance"

    def __init__(
        self,
        *,
        window: int = CFG.SIMILARITY_WINDOW_LINES,
        width_factor: int = CFG.WIDTH_FACTOR,
        width_step: int = CFG.WIDTH_STEP,
        accept_above: Optional[float] = CFG.EDIT_DISTANCE_ACCEPT,
        min_slice_ratio: float = CFG.MIN_SLICE_RATIO,
    ) -> None:
        self.window = window
        self.width_factor = width_factor
        self.width_step = width_step
        self.accept_above = accept_above
        self.min_slice_ratio = min_slice_ratio

    def attempt(self, query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
        qn = len(query)
        if qn == 0:
            return None
        floor = self.accept_above or 0.0
        head = query[:CFG.COLUMN_ANCHOR_CHARS]

        best: Optional[MatchResult] = None
        best_conf = 0.0
        for idx, line, start_col in iter_candidate_lines(lines, anchor, self.window):
            previous = None
            for width in width_ladder(qn, self.width_factor, self.width_step):
                candidate = normalize(line[start_col:start_col + width])
                if len(candidate) < qn * self.min_slice_ratio:
                    continue
                # widths past the line end give the same slice again
                if candidate == previous:
                    continue
                previous = candidate

                conf = similarity(query, candidate)
                if conf > best_conf and conf > floor:
                    best_conf = conf
                    # the distance tolerates internal edits, so pin only the query head
                    pos = candidate.find(head)
                    column = map_normalized_index_to_column(line, start_col, pos) if pos != -1 else start_col
                    best = MatchResult(idx, column, query, conf, self.name)
        return best


def find_by_edit_distance(query: str, lines: List[str], anchor: SearchAnchor) -> Optional[MatchResult]:
    return EditDistanceMatcher().attempt(query, lines, anchor)
