"""
Decomposition of a normalized Ucen syllable into grapheme roles.

The decomposer classifies every codepoint of one syllable as long-vowel
mark, vowel sign, dropped prefix, head, subjoined letter or final, in a
fixed order:

    1. long-vowel mark anywhere (precomposed long vowels count too)
    2. first vowel sign, left to right; later vowel signs are ignored
    3. prefix rules (rules.py) drop silent prefix/superscript letters
    4. head: first remaining root letter; none means "unrecognized"
    5. subjoined letters, in order; they are consumed before step 6
    6. final: right-most remaining final letter after the head

Usage:
    from dzongkha_roman.syllable import SyllableDecomposer

    dec = SyllableDecomposer()
    syl = dec.decompose("...")
    syl.head, syl.subjoined, syl.vowel, syl.final, syl.has_prefix
"""

from __future__ import annotations

from dataclasses import dataclass

from dzongkha_roman.rules import PREFIX_RULES, PrefixRule, apply_prefix_rules
from dzongkha_roman.tables import DEFAULT_TABLES, GraphemeTables


@dataclass(frozen=True, slots=True)
class DecomposedSyllable:
    """Grapheme roles of one syllable.

    `vowel` is the phoneme category of the vowel sign (None: inherent a).
    A record with head=None is the sentinel for an unrecognized syllable.
    """

    source: str
    head: str | None = None
    subjoined: tuple[str, ...] = ()
    vowel: str | None = None
    long_vowel: bool = False
    final: str | None = None
    has_prefix: bool = False

    # Diagnostics
    dropped: tuple[str, ...] = ()
    prefix_rule: str | None = None
    unmapped: tuple[str, ...] = ()

    @property
    def recognized(self) -> bool:
        return self.head is not None

    def describe(self) -> str:
        """One-line human-readable breakdown, used by the CLI."""
        if not self.recognized:
            return f"{self.source}: unrecognized"
        parts = [f"head={self.head}"]
        if self.dropped:
            parts.append(f"dropped={''.join(self.dropped)} ({self.prefix_rule})")
        if self.subjoined:
            parts.append(f"subjoined={''.join(self.subjoined)}")
        parts.append(f"vowel={self.vowel or 'a'}{' long' if self.long_vowel else ''}")
        if self.final:
            parts.append(f"final={self.final}")
        if self.unmapped:
            parts.append(f"unmapped={''.join(self.unmapped)}")
        return f"{self.source}: " + ", ".join(parts)


class SyllableDecomposer:
    """Classifies the codepoints of a normalized syllable."""

    def __init__(
        self,
        tables: GraphemeTables = DEFAULT_TABLES,
        rules: tuple[PrefixRule, ...] = PREFIX_RULES,
    ):
        self.tables = tables
        self.rules = rules

    def decompose(self, syllable: str) -> DecomposedSyllable:
        t = self.tables

        # 1. Long-vowel mark
        long_vowel = False
        stack: list[str] = []
        for ch in syllable:
            if ch == t.long_vowel_mark:
                long_vowel = True
            elif ch in t.composite_vowels:
                long_vowel = True
                stack.append(t.composite_vowels[ch])
            else:
                stack.append(ch)

        # 2. Vowel: first occurrence only
        vowel_sign = next((ch for ch in stack if ch in t.vowels), None)
        vowel = t.vowels[vowel_sign] if vowel_sign is not None else None

        # 3. Prefix rules see the vowel sign still in place, so they can tell
        #    whether the second letter carries it.
        stack, dropped, rule = apply_prefix_rules(stack, t, self.rules)
        has_prefix = any(ch in t.hardening for ch in dropped)
        if vowel_sign is not None:
            stack.remove(vowel_sign)

        # 4. Head
        head_index = next((i for i, ch in enumerate(stack) if ch in t.roots), None)
        if head_index is None:
            return DecomposedSyllable(
                source=syllable,
                vowel=vowel,
                long_vowel=long_vowel,
                has_prefix=has_prefix,
                dropped=dropped,
                prefix_rule=rule,
            )
        head = stack[head_index]

        # 5. Subjoined letters, consumed before the final scan
        consumed = {
            i for i, ch in enumerate(stack)
            if i != head_index and ch in t.subjoined
        }
        subjoined = tuple(stack[i] for i in sorted(consumed))

        # 6. Final, right to left
        final_index = None
        for i in range(len(stack) - 1, head_index, -1):
            if i not in consumed and stack[i] in t.finals:
                final_index = i
                break
        if final_index is not None:
            # A second suffix (sa/da after another final) is not the coda
            before = final_index - 1
            if (
                stack[final_index] in t.second_suffixes
                and before > head_index
                and before not in consumed
                and stack[before] in t.finals
            ):
                final_index = before
        final = stack[final_index] if final_index is not None else None

        unmapped = tuple(
            ch for i, ch in enumerate(stack)
            if i != head_index and i not in consumed and i != final_index
            and not t.is_mapped(ch)
        )

        return DecomposedSyllable(
            source=syllable,
            head=head,
            subjoined=subjoined,
            vowel=vowel,
            long_vowel=long_vowel,
            final=final,
            has_prefix=has_prefix,
            dropped=dropped,
            prefix_rule=rule,
            unmapped=unmapped,
        )
