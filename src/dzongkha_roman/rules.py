"""
Prefix-dropping rules for Ucen syllables.

Dzongkha does not pronounce prefix letters (ga, da, ba, ma, 'a) or the
superscribed ra/la/sa, but their presence hardens the initial: a voiced head
standing behind one is not devoiced.  These rules find such letters at the
front of a syllable, drop them, and report what was dropped so the
decomposer can record `has_prefix`.

The rules are an explicit ordered list.  They are tried top to bottom, the
first whose predicate matches rewrites the syllable, and no other rule runs:

    1. prefix+superscript   བ + ར/ལ/ས + subjoined      brgya, bsgrub
    2. superscript          ར/ལ/ས + subjoined          rga, sku, sdod
    3. prefix               prefix + root it may take  bzang, dkar, dgu

A second list, NON_INITIAL_RULES, rewrites a syllable that is not the first
of its word, e.g. the -bo of bzang-bo is pronounced po.

Usage:
    from dzongkha_roman.rules import apply_prefix_rules

    stack, dropped, rule = apply_prefix_rules(list("..."), DEFAULT_TABLES)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from dzongkha_roman.tables import DEFAULT_TABLES, GraphemeTables


@dataclass(frozen=True, slots=True)
class PrefixRule:
    """One (predicate, rewrite) pair over the leading codepoints of a syllable.

    `matches(stack, tables)` inspects the stack; `rewrite(stack, tables)`
    returns (new_stack, dropped_codepoints).
    """
    name: str
    matches: Callable[[Sequence[str], GraphemeTables], bool]
    rewrite: Callable[[Sequence[str], GraphemeTables], tuple[list[str], tuple[str, ...]]]


# ── Predicates ──────────────────────────────────────────────────────────────

def _is_superscript_stack(stack: Sequence[str], i: int, t: GraphemeTables) -> bool:
    return (
        len(stack) > i + 1
        and stack[i] in t.superscripts
        and stack[i] + stack[i + 1] in t.superscript_stacks
    )


def _may_precede(prefix: str, letter: str, t: GraphemeTables) -> bool:
    return letter in t.prefix_combinations.get(prefix, frozenset())


def _match_prefix_superscript(stack: Sequence[str], t: GraphemeTables) -> bool:
    return (
        len(stack) >= 3
        and stack[0] in t.prefixes
        and _may_precede(stack[0], stack[1], t)
        and _is_superscript_stack(stack, 1, t)
    )


def _match_superscript(stack: Sequence[str], t: GraphemeTables) -> bool:
    return _is_superscript_stack(stack, 0, t)


def _match_prefix(stack: Sequence[str], t: GraphemeTables) -> bool:
    if len(stack) < 3:
        return False
    first, second = stack[0], stack[1]
    if first not in t.prefixes or second not in t.roots:
        return False
    if not _may_precede(first, second, t):
        return False
    # The second letter must be the real root: it carries a subjoined
    # letter or vowel sign, or at least one more full letter follows it.
    # Bare two-letter syllables (bag, dang) keep the first letter as root.
    after = stack[2]
    if after in t.subjoined or after in t.vowels:
        return True
    return any(ch in t.roots for ch in stack[2:])


# ── Rewrites ────────────────────────────────────────────────────────────────

def _unstack(stack: Sequence[str], drop: int, t: GraphemeTables) -> tuple[list[str], tuple[str, ...]]:
    """Drop `drop` leading letters and turn the subjoined letter after them
    into its full form, so it becomes the head."""
    dropped = tuple(stack[:drop])
    rest = list(stack[drop:])
    rest[0] = t.subjoined_roots.get(rest[0], rest[0])
    return rest, dropped


def _rewrite_prefix_superscript(stack, t):
    return _unstack(stack, 2, t)


def _rewrite_superscript(stack, t):
    return _unstack(stack, 1, t)


def _rewrite_prefix(stack, t):
    return list(stack[1:]), (stack[0],)


PREFIX_RULES: tuple[PrefixRule, ...] = (
    PrefixRule("prefix+superscript", _match_prefix_superscript, _rewrite_prefix_superscript),
    PrefixRule("superscript", _match_superscript, _rewrite_superscript),
    PrefixRule("prefix", _match_prefix, _rewrite_prefix),
)


def apply_prefix_rules(
    stack: Sequence[str],
    tables: GraphemeTables = DEFAULT_TABLES,
    rules: Sequence[PrefixRule] = PREFIX_RULES,
) -> tuple[list[str], tuple[str, ...], str | None]:
    """Apply the first matching rule.

    Returns (stack, dropped, rule_name).  When nothing matches the stack is
    returned as a new list, `dropped` is empty and `rule_name` is None.
    """
    for rule in rules:
        if rule.matches(stack, tables):
            new_stack, dropped = rule.rewrite(stack, tables)
            return new_stack, dropped, rule.name
    return list(stack), (), None


# ── Non-initial syllable rules ──────────────────────────────────────────────
# A second or later syllable of a word can surface differently from the same
# syllable standing alone.  Each rule replaces the whole Roman form; the
# first match wins and exceptions are consulted before any of these.

@dataclass(frozen=True, slots=True)
class SyllableRule:
    """(predicate, Roman form) for a syllable that follows another one.

    `matches(syllable, tables)` sees the normalized syllable.
    """
    name: str
    matches: Callable[[str, GraphemeTables], bool]
    roman: str


def _match_bo(syllable: str, t: GraphemeTables) -> bool:
    # བོ: ba with o and nothing else
    return syllable == "\u0f56\u0f7c"


NON_INITIAL_RULES: tuple[SyllableRule, ...] = (
    SyllableRule("bo->po", _match_bo, "po"),
)


def apply_non_initial_rules(
    syllable: str,
    tables: GraphemeTables = DEFAULT_TABLES,
    rules: Sequence[SyllableRule] = NON_INITIAL_RULES,
) -> SyllableRule | None:
    """First rule matching a non-initial syllable, or None."""
    for rule in rules:
        if rule.matches(syllable, tables):
            return rule
    return None
