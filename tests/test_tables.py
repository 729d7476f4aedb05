"""Tests for the grapheme tables (tables.py)."""

import dataclasses

import pytest
from dzongkha_roman.tables import (
    DEFAULT_TABLES,
    ClusterEntry,
    GraphemeTables,
)


# ── Lookups ───────────────────────────────────────────────────────────────────

def test_root_phonemes():
    t = DEFAULT_TABLES
    assert t.roots["\u0f40"] == "k"     # ཀ
    assert t.roots["\u0f5a"] == "tsh"   # ཚ
    assert t.roots["\u0f60"] == ""      # འ carries a vowel only


def test_roles_of_multi_role_letter():
    """ག is both a root and a final; roles come back in lookup order."""
    assert DEFAULT_TABLES.roles_of("\u0f42") == ("root", "final")


def test_roles_of_long_vowel_mark():
    assert DEFAULT_TABLES.roles_of("\u0f71") == ("long_vowel",)       # ཱ
    assert DEFAULT_TABLES.roles_of("\u0f73") == ("long_vowel",)       # ཱི precomposed


def test_roles_of_unknown():
    assert DEFAULT_TABLES.roles_of("x") == ()
    assert not DEFAULT_TABLES.is_mapped("\u0f35")


def test_every_subjoined_letter_has_a_full_form():
    t = DEFAULT_TABLES
    assert set(t.subjoined_roots) == set(t.subjoined)
    assert t.subjoined_roots["\u0f92"] == "\u0f42"   # ྒ -> ག
    assert t.subjoined_roots["\u0fb7"] == "\u0f67"   # ྷ -> ཧ


def test_hardening_is_prefixes_and_superscripts():
    t = DEFAULT_TABLES
    assert t.hardening == t.prefixes | t.superscripts
    assert "\u0f62" in t.hardening   # ར


def test_lha_is_not_a_superscript_stack():
    assert "\u0f63\u0fb7" not in DEFAULT_TABLES.superscript_stacks   # ལྷ


# ── Clusters ──────────────────────────────────────────────────────────────────

def test_find_cluster_prefers_longest():
    """བརྒྱད contains བརྒྱ, བརྒ and རྒྱ; the four-letter whole entry wins."""
    entry = DEFAULT_TABLES.find_cluster("\u0f56\u0f62\u0f92\u0fb1\u0f51")
    assert entry.roman == "gä"
    assert entry.whole


def test_find_cluster_partial():
    entry = DEFAULT_TABLES.find_cluster("\u0f62\u0f92\u0fb1\u0f63")  # རྒྱལ
    assert entry.roman == "gy"
    assert not entry.whole


def test_find_cluster_none():
    assert DEFAULT_TABLES.find_cluster("\u0f40") is None   # ཀ


def test_clusters_sorted_longest_first():
    lengths = [len(e.key) for e in DEFAULT_TABLES.clusters]
    assert lengths == sorted(lengths, reverse=True)


def _tables_with(*entries):
    return dataclasses.replace(DEFAULT_TABLES, clusters=entries)


def test_equal_length_clusters_first_registered_wins():
    """ཀྲུ contains both ཀྲ and ྲུ; equal length, so registration order decides."""
    text = "\u0f40\u0fb2\u0f74"
    first = ClusterEntry("\u0f40\u0fb2", "first")
    second = ClusterEntry("\u0fb2\u0f74", "second")

    assert _tables_with(first, second).find_cluster(text).roman == "first"
    assert _tables_with(second, first).find_cluster(text).roman == "second"


def test_replace_resorts_clusters():
    short = ClusterEntry("\u0f40\u0fb2", "short")
    longer = ClusterEntry("\u0f40\u0fb2\u0fb1", "long")
    t = _tables_with(short, longer)
    assert t.clusters[0] is longer


# ── Immutability ──────────────────────────────────────────────────────────────

def test_tables_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TABLES.roots = {}


def test_table_mappings_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TABLES.roots["x"] = "x"


def test_custom_mapping_is_wrapped():
    t = GraphemeTables(roots={"\u0f40": "q"})
    with pytest.raises(TypeError):
        t.roots["\u0f41"] = "kh"
    assert t.roots["\u0f40"] == "q"


def test_summary():
    s = DEFAULT_TABLES.summary()
    assert "Grapheme tables" in s
    assert "Clusters:" in s
