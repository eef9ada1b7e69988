"""
Approximate the text a LaTeX renderer would show for a source fragment.

This is deliberately not a parser. A handful of regular-expression passes are
applied to a bounded fixed point:

  * comments (`%` to end of line, unless escaped) are removed once, up front
  * paired `\\begin{name} ... \\end{name}` blocks are removed wholesale
  * inline formatting commands from config.VISIBLE_ARGUMENT_COMMANDS are
    unwrapped to their argument (`\\emph{quick}` -> `quick`)
  * every other command is removed together with its `[...]` and `{...}` groups
  * single-character escapes lose their backslash (`\\%` -> `%`)
  * leftover brace groups keep their content if it holds a letter
  * whitespace is normalized

Dropping arguments is lossy on purpose: `\\section{Title}` loses "Title".
"""
from __future__ import annotations
import re
from typing import Iterable

from . import config as CFG
from .normalize import normalize

_OPT_ARGS = r"\*?(?:\[[^\]]*\])*"

# a `%` after an even run of backslashes (`\\%`: line break, then comment) starts a comment
_COMMENT = re.compile(r"(?<!\\)((?:\\\\)*)%.*$", re.MULTILINE)
_ENVIRONMENT = re.compile(r"\\begin\{([^{}]*)\}.*?\\end\{\1\}", re.DOTALL)
_ESCAPE = re.compile(r"\\([^a-zA-Z@\s])")
_GROUP = re.compile(r"\{([^{}]*)\}")


def _names(commands: Iterable[str]) -> str:
    return "|".join(re.escape(c) for c in sorted(commands))


def _compile_visible(commands: Iterable[str]) -> re.Pattern:
    return re.compile(rf"\\(?:{_names(commands)})(?![a-zA-Z@]){_OPT_ARGS}\{{([^{{}}]*)\}}")


def _compile_command(commands: Iterable[str]) -> re.Pattern:
    # allow-listed commands with a closable argument are left for the unwrap pass
    keep = rf"(?!(?:{_names(commands)})(?![a-zA-Z@]){_OPT_ARGS}\{{[^}}]*\}})"
    return re.compile(rf"\\{keep}[a-zA-Z@]+{_OPT_ARGS}(?:\{{[^}}]*\}})*")


_VISIBLE = _compile_visible(CFG.VISIBLE_ARGUMENT_COMMANDS)
_COMMAND = _compile_command(CFG.VISIBLE_ARGUMENT_COMMANDS)


def _drop_commands(text: str) -> str:
    # each pass only shortens the text, so this settles
    while True:
        out = _COMMAND.sub("", _VISIBLE.sub(r"\1", text))
        if out == text:
            return out
        text = out


def _visible_group(m: re.Match) -> str:
    inner = m.group(1)
    return inner if any(ch.isalpha() for ch in inner) else ""


def _strip_round(text: str) -> str:
    text = _ENVIRONMENT.sub("", text)
    text = _drop_commands(text)
    text = _ESCAPE.sub(r"\1", text)
    text = _GROUP.sub(_visible_group, text)
    return normalize(text)


def strip_markup(text: str, max_rounds: int = CFG.MARKUP_MAX_ROUNDS) -> str:
    """Return the visible text of `text`, whitespace-normalized. Never raises."""
    # Comments go first and only once: later rounds see `\%` already unescaped.
    result = _COMMENT.sub(r"\1", text)
    rounds = 0
    while rounds < max_rounds:
        rounds += 1
        before = result
        result = _strip_round(result)
        if result == before:
            break
    return result
