"""Tests for syllable decomposition (syllable.py)."""

from dzongkha_roman.syllable import DecomposedSyllable, SyllableDecomposer


# ── Basic roles ───────────────────────────────────────────────────────────────

def test_bare_root(decomposer):
    syl = decomposer.decompose("\u0f40")  # ཀ
    assert syl.recognized
    assert syl.head == "\u0f40"
    assert syl.subjoined == ()
    assert syl.vowel is None
    assert syl.final is None
    assert not syl.has_prefix
    assert not syl.long_vowel


def test_vowel_and_final(decomposer):
    syl = decomposer.decompose("\u0f40\u0f7c\u0f42")  # ཀོག
    assert syl.head == "\u0f40"
    assert syl.vowel == "o"
    assert syl.final == "\u0f42"


def test_only_first_vowel_counts(decomposer):
    syl = decomposer.decompose("\u0f40\u0f72\u0f74")  # ཀ + ི + ུ
    assert syl.vowel == "i"


def test_subjoined_duplicates_kept(decomposer):
    syl = decomposer.decompose("\u0f40\u0fb2\u0fb2")
    assert syl.subjoined == ("\u0fb2", "\u0fb2")


# ── Long vowels ───────────────────────────────────────────────────────────────

def test_long_vowel_mark(decomposer):
    syl = decomposer.decompose("\u0f40\u0f71")  # ཀཱ
    assert syl.long_vowel
    assert syl.vowel is None


def test_precomposed_long_vowel(decomposer):
    syl = decomposer.decompose("\u0f40\u0f73")  # ཀཱི precomposed
    assert syl.long_vowel
    assert syl.vowel == "i"


# ── Prefixes ──────────────────────────────────────────────────────────────────

def test_superscript_sets_has_prefix(decomposer):
    syl = decomposer.decompose("\u0f66\u0fa1\u0f7c\u0f51")  # སྡོད
    assert syl.head == "\u0f51"
    assert syl.has_prefix
    assert syl.dropped == ("\u0f66",)
    assert syl.prefix_rule == "superscript"
    assert syl.vowel == "o"
    assert syl.final == "\u0f51"


def test_prefix_sets_has_prefix(decomposer):
    syl = decomposer.decompose("\u0f51\u0f40\u0f62")  # དཀར
    assert syl.head == "\u0f40"
    assert syl.has_prefix
    assert syl.final == "\u0f62"


def test_lha_keeps_subjoined_ha(decomposer):
    syl = decomposer.decompose("\u0f63\u0fb7")  # ལྷ
    assert syl.head == "\u0f63"
    assert syl.subjoined == ("\u0fb7",)
    assert not syl.has_prefix


def test_brgyad(decomposer):
    syl = decomposer.decompose("\u0f56\u0f62\u0f92\u0fb1\u0f51")  # བརྒྱད
    assert syl.head == "\u0f42"
    assert syl.subjoined == ("\u0fb1",)
    assert syl.final == "\u0f51"
    assert syl.prefix_rule == "prefix+superscript"


# ── Finals ────────────────────────────────────────────────────────────────────

def test_second_suffix_is_not_the_final(decomposer):
    syl = decomposer.decompose("\u0f50\u0f56\u0f66")  # ཐབས
    assert syl.head == "\u0f50"
    assert syl.final == "\u0f56"


def test_lone_sa_is_the_final(decomposer):
    syl = decomposer.decompose("\u0f40\u0f66")  # ཀས
    assert syl.final == "\u0f66"


def test_rightmost_final(decomposer):
    syl = decomposer.decompose("\u0f40\u0fb1\u0f44")  # ཀྱང
    assert syl.subjoined == ("\u0fb1",)
    assert syl.final == "\u0f44"


# ── Unrecognized ──────────────────────────────────────────────────────────────

def test_no_head_is_sentinel(decomposer):
    syl = decomposer.decompose("abc")
    assert not syl.recognized
    assert syl.source == "abc"


def test_lone_vowel_sign_is_sentinel(decomposer):
    assert not decomposer.decompose("\u0f72").recognized


def test_unmapped_collected(decomposer):
    syl = decomposer.decompose("\u0f40\u0f35")  # ཀ + ༵
    assert syl.recognized
    assert syl.unmapped == ("\u0f35",)


def test_no_rules_means_no_prefix():
    dec = SyllableDecomposer(rules=())
    syl = dec.decompose("\u0f56\u0f5f\u0f44")  # བཟང
    assert syl.head == "\u0f56"
    assert not syl.has_prefix


# ── describe ──────────────────────────────────────────────────────────────────

def test_describe(decomposer):
    text = decomposer.decompose("\u0f51\u0f40\u0f62").describe()
    assert "head=\u0f40" in text
    assert "(prefix)" in text
    assert "final=\u0f62" in text


def test_describe_sentinel():
    assert DecomposedSyllable("x").describe() == "x: unrecognized"
