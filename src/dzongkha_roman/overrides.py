"""
Literal exception overrides for Ucen -> Roman Dzongkha.

Many Dzongkha spellings are not pronounced compositionally, so a table of
literal mappings (single syllables, phrases, whole utterances) is consulted
before any rule runs.  Keys are stored normalized (no tsheg, shad or
whitespace), and the longest match wins.

Entries whose Roman form disagrees with what the rules would produce carry
a `note` saying so; they are kept as data, never special-cased in code.

Usage:
    from dzongkha_roman.overrides import ExceptionResolver

    resolver = ExceptionResolver()
    resolver.resolve_whole("...")                 # 'gä' or None
    resolver.resolve_window(tokens, 0, 3)         # ('zangpo', 2) or None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from dzongkha_roman.normalize import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExceptionEntry:
    """A literal spelling and its fixed Roman form."""
    spelling: str   # Ucen, separators allowed
    roman: str
    note: str = ""  # set when the rules would produce something else


# ── Exception table ─────────────────────────────────────────────────────────
# Sample mappings from the Guide to Roman Dzongkha appendices and sample
# texts.  Spellings are written as \u escapes with the Ucen in a comment.

EXCEPTIONS: tuple[ExceptionEntry, ...] = (
    # single syllables
    ExceptionEntry("\u0f56\u0f62\u0f92\u0fb1\u0f51", "gä"),           # བརྒྱད
    ExceptionEntry("\u0f62\u0f92\u0f66\u0f54", "gep",
                   note="medial sa colours the vowel; rules give gap"),  # རྒསཔ
    ExceptionEntry("\u0f66\u0f90\u0f74", "ku"),                       # སྐུ
    ExceptionEntry("\u0f40\u0f74\u0f5d", "kû",
                   note="final wa marks length; rules give ku"),      # ཀུཝ
    ExceptionEntry("\u0f40\u0f7a\u0f54", "kep"),                      # ཀེཔ
    ExceptionEntry("\u0f62\u0f92\u0f7a\u0f53", "gen"),                # རྒེན
    ExceptionEntry("\u0f62\u0f92\u0f7a\u0f54", "gep"),                # རྒེཔ
    ExceptionEntry("\u0f62\u0f92\u0f7c\u0f54", "gop"),                # རྒོཔ
    ExceptionEntry("\u0f40\u0fb2\u0f7c", "tro"),                      # ཀྲོ
    ExceptionEntry("\u0f66\u0fa1\u0f7c\u0f51", "dö"),                 # སྡོད
    ExceptionEntry("\u0f51\u0f40\u0f62", "kâ"),                       # དཀར
    ExceptionEntry("\u0f60\u0f56\u0fb2\u0f74\u0f42", "’druk",
                   note="high-register apostrophe; rules give druk"), # འབྲུག

    # words and phrases
    ExceptionEntry("\u0f66\u0fb3\u0f7c\u0f66\u0f0b\u0f62\u0fa6\u0f7c\u0f66", "’löbö"),  # སློས་རྦོས
    ExceptionEntry("\u0f56\u0f40\u0fb2\u0f0b\u0f64\u0f72\u0f66", "Trashi"),       # བཀྲ་ཤིས
    ExceptionEntry("\u0f56\u0f5f\u0f7c\u0f0b\u0f62\u0f72\u0f42", "Zori"),         # བཟོ་རིག
    ExceptionEntry("\u0f56\u0f5f\u0f44\u0f0b\u0f60\u0f56\u0fb2\u0f7a\u0f63", "zangdre"),  # བཟང་འབྲེལ
    ExceptionEntry("\u0f61\u0f62\u0f0b\u0f60\u0f51\u0fb2\u0f7a\u0f53", "yâdren"),  # ཡར་འདྲེན
    ExceptionEntry("\u0f62\u0f92\u0fb1\u0f63\u0f0b\u0f58\u0f5a\u0f53", "gätshe"),  # རྒྱལ་མཚན
    ExceptionEntry("\u0f46\u0f7c\u0f66\u0f0b\u0f66\u0f92\u0fb2", "Chödra"),       # ཆོས་སྒྲ
    ExceptionEntry("\u0f62\u0fa3\u0f58\u0f0b\u0f62\u0f92\u0f74\u0f66\u0f44", "'namgüng"),  # རྣམ་རྒུསང
    ExceptionEntry("\u0f51\u0f40\u0f62\u0f0b\u0f54\u0f7c", "kâp"),               # དཀར་པོ
    ExceptionEntry("\u0f56\u0f5f\u0fb3\u0f7c\u0f42\u0f0b\u0f50\u0f56\u0f66", "dokthap"),  # བཟློག་ཐབས
    ExceptionEntry("\u0f56\u0f5f\u0f44\u0f0b\u0f54\u0f7c", "zangpo"),            # བཟང་པོ
)


class ExceptionResolver:
    """
    Longest-match lookup over normalized literal keys.

    Lookups happen at three granularities: the whole input text, a window
    of consecutive tokens (widest first), and a single token.
    """

    def __init__(self, entries: Iterable[ExceptionEntry] = EXCEPTIONS):
        table: dict[str, str] = {}
        notes: dict[str, str] = {}
        for entry in entries:
            key = normalize(entry.spelling)
            if not key:
                raise ValueError(f"Exception entry has an empty key: {entry!r}")
            existing = table.get(key)
            if existing is not None and existing != entry.roman:
                raise ValueError(
                    f"Conflicting exceptions for {key!r}: {existing!r} vs {entry.roman!r}"
                )
            table[key] = entry.roman
            if entry.note:
                notes[key] = entry.note
        self.table: Mapping[str, str] = MappingProxyType(table)
        self.notes: Mapping[str, str] = MappingProxyType(notes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> ExceptionResolver:
        """Build a resolver from a plain {spelling: roman} mapping."""
        return cls(ExceptionEntry(spelling, roman) for spelling, roman in mapping.items())

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, text: str) -> bool:
        return normalize(text) in self.table

    # ── Lookups ──────────────────────────────────────────────────────────

    def resolve_whole(self, text: str) -> str | None:
        """Exact match on the whole normalized text."""
        key = normalize(text)
        if not key:
            return None
        roman = self.table.get(key)
        if roman is not None:
            logger.debug("Whole-text exception %r -> %r", key, roman)
        return roman

    def resolve_token(self, token: str) -> str | None:
        """Exact match on a single token."""
        key = normalize(token)
        return self.table.get(key) if key else None

    def resolve_window(
        self, tokens: Sequence[str], start: int, max_width: int,
    ) -> tuple[str, int] | None:
        """Match `max_width` down to 2 tokens starting at `start`.

        Returns (roman, width) for the widest match, or None.
        """
        for width in range(min(max_width, len(tokens) - start), 1, -1):
            key = normalize("".join(tokens[start:start + width]))
            roman = self.table.get(key)
            if roman is not None:
                logger.debug("Window exception %r (%d tokens) -> %r", key, width, roman)
                return roman, width
        return None

    def summary(self) -> str:
        lines = ["Exception table"]
        lines.append(f"  Entries:      {len(self.table):,}")
        lines.append(f"  Flagged:      {len(self.notes):,}")
        return "\n".join(lines)
