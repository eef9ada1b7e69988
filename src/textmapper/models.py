from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List


@dataclass(frozen=True)
class SearchAnchor:
    line: int                 # 0-based
    column: int               # 0-based, within `line`

    def clamp(self, lines: List[str]) -> "SearchAnchor":
        """Pull the anchor into the document: non-negative, inside the last line, inside its line."""
        line = max(0, self.line)
        if lines:
            line = min(line, len(lines) - 1)
            column = min(max(0, self.column), len(lines[line]))
        else:
            column = 0
        return SearchAnchor(line, column)

    def start_column(self, line_idx: int) -> int:
        # the column offset applies on the anchor's own line only
        return self.column if line_idx == self.line else 0


@dataclass(frozen=True)
class MatchResult:
    line: int                 # 0-based line in the source
    column: int               # 0-based column in the ORIGINAL (unnormalized) line
    text: str                 # normalized query that was located
    confidence: float         # 0..1, 1.0 only for exact matches
    matcher: str = ""         # ladder rung that produced the result

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AlignmentResult:
    score: int
    query_start: int          # index into the normalized query
    source_start: int         # index into the normalized candidate slice
    length: int               # traceback steps
