# Confidence reported by the rungs that do not score themselves
EXACT_CONFIDENCE: float = 1.0
WORD_OVERLAP_CONFIDENCE: float = 0.6
STRIPPED_CONFIDENCE: float = 0.5

# Smith-Waterman scoring
MATCH_REWARD: int = 2
MISMATCH_PENALTY: int = -1
GAP_PENALTY: int = -1

# Local alignment window: lines searched from the anchor, slice = factor * len(query)
ALIGNMENT_WINDOW_LINES: int = 5
ALIGNMENT_SLICE_FACTOR: int = 3
ALIGNMENT_FLOOR: float = 0.6          # matcher reports nothing at or below this
ALIGNMENT_ACCEPT: float = 0.8         # ladder accepts only above this

# Edit distance / LCS window: widths len(q) .. WIDTH_FACTOR * len(q) in WIDTH_STEP steps
SIMILARITY_WINDOW_LINES: int = 10
WIDTH_FACTOR: int = 2
WIDTH_STEP: int = 5
EDIT_DISTANCE_ACCEPT: float = 0.7
LCS_ACCEPT: float = 0.7

# Slices whose normalized length is below this fraction of the query are skipped
MIN_SLICE_RATIO: float = 0.5

# /* ~~~ number of leading characters used to pin a fuzzy hit to a column ~~~ */
COLUMN_ANCHOR_CHARS: int = 10

# Fraction of query words that must occur in a line for the word-overlap fallback
WORD_OVERLAP_RATIO: float = 0.7

# Markup stripping is a bounded fixed point
MARKUP_MAX_ROUNDS: int = 10

# Inline formatting commands whose single braced argument is rendered text.
# Every other command is dropped together with its arguments.
VISIBLE_ARGUMENT_COMMANDS: frozenset[str] = frozenset({
    "emph",
    "textbf",
    "textit",
    "textmd",
    "textnormal",
    "textrm",
    "textsc",
    "textsf",
    "textsl",
    "texttt",
    "textup",
    "underline",
    "mbox",
    "text",
})

# Caller-side policy: matches below this are applied with a warning
LOW_CONFIDENCE: float = 0.7

# Lines shown on each side by get_text_context()
CONTEXT_LINES: int = 2
