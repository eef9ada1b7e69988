from __future__ import annotations
from typing import List, Union

from . import config as CFG
from .normalize import split_lines


def get_text_context(
    source: Union[str, List[str]],
    line: int,
    context_lines: int = CFG.CONTEXT_LINES,
) -> str:
    """Lines line-context_lines .. line+context_lines of `source` joined by '\\n' (bounds clamped)."""
    lines = split_lines(source) if isinstance(source, str) else source
    if not lines:
        return ""
    context_lines = max(0, context_lines)
    line = min(max(0, line), len(lines) - 1)
    start = max(0, line - context_lines)
    end = min(len(lines) - 1, line + context_lines)
    return "\n".join(lines[start:end + 1])
