"""
Normalization and tokenization of raw Ucen text.

normalize() strips syllable separators, shad-family punctuation and
whitespace from a segment and leaves every other codepoint untouched, in
order.  It is idempotent and never fails.

Usage:
    from dzongkha_roman.normalize import normalize, split_tokens

    normalize("\u0f56\u0f5f\u0f44\u0f0b\u0f54\u0f7c\u0f0d")   # 'བཟངཔོ'
    list(split_tokens("\u0f40\u0f0b\u0f41\u0f0d"))              # ['ཀ', 'ཁ', '།']
"""

from __future__ import annotations

import re
from typing import Iterator

from dzongkha_roman.tables import NON_BREAKING_TSHEG, NYIS_SHAD, SHAD, TSHEG


# Sentence-terminal marks: these become punctuation markers in the output
TERMINAL_MARKS = frozenset({SHAD, NYIS_SHAD})

# Everything normalize() removes besides whitespace
STRIPPED_MARKS = frozenset({
    TSHEG,
    NON_BREAKING_TSHEG,
    SHAD,
    NYIS_SHAD,
    "\u0f0f",  # ༏ tsheg shad
    "\u0f10",  # ༐ nyis tsheg shad
    "\u0f11",  # ༑ rin chen spungs shad
    "\u0f14",  # ༔ gter tsheg
})

_STRIP_RE = re.compile(
    "[\\s" + "".join(sorted(STRIPPED_MARKS)) + "]+"
)

# A token is a run of anything but separators, whitespace and terminal
# marks; each terminal mark is yielded on its own.
_TOKEN_RE = re.compile(
    "[^\\s" + TSHEG + NON_BREAKING_TSHEG + SHAD + NYIS_SHAD + "]+"
    "|[" + SHAD + NYIS_SHAD + "]"
)


def normalize(text: str) -> str:
    """Remove separators, shad marks and whitespace; keep the rest verbatim."""
    if not text:
        return ""
    return _STRIP_RE.sub("", text)


def split_tokens(text: str) -> Iterator[str]:
    """Yield syllable pieces and terminal marks in source order.

    Pieces are not normalized; a piece may still hold minor punctuation
    (e.g. a gter tsheg) that normalize() removes.
    """
    if not text:
        return
    for m in _TOKEN_RE.finditer(text):
        yield m.group()


def is_terminal_mark(piece: str) -> bool:
    return piece in TERMINAL_MARKS


def trailing_terminal_marks(text: str) -> str:
    """The run of terminal marks ending `text`, skipping separators and spaces."""
    marks = []
    for ch in reversed(text):
        if ch in TERMINAL_MARKS:
            marks.append(ch)
        elif not (ch.isspace() or ch in (TSHEG, NON_BREAKING_TSHEG)):
            break
    return "".join(reversed(marks))


def ends_with_terminal_mark(text: str) -> bool:
    """True if the last non-space, non-separator character is a terminal mark."""
    return bool(trailing_terminal_marks(text))
