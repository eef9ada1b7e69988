from __future__ import annotations
import re
from typing import List

_WS = re.compile(r"\s+")


def _unify_breaks(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize(text: str) -> str:
    """
    Canonical comparable form of a piece of text:
      * \\r\\n and \\r become \\n
      * any whitespace run (newlines included) collapses to one ASCII space
      * leading/trailing whitespace is trimmed
    Pure and idempotent; used on both the query and every candidate slice.
    """
    return _WS.sub(" ", _unify_breaks(text)).strip()


def split_lines(text: str) -> List[str]:
    """Split a document into 0-indexed lines, accepting \\r\\n, \\r and \\n."""
    return _unify_breaks(text).split("\n")
