"""Tests for the exception table and resolver (overrides.py)."""

import pytest
from dzongkha_roman.normalize import normalize
from dzongkha_roman.overrides import EXCEPTIONS, ExceptionEntry, ExceptionResolver


def _make_resolver(mapping):
    return ExceptionResolver.from_mapping(mapping)


# ── Table ─────────────────────────────────────────────────────────────────────

def test_default_table_loads():
    resolver = ExceptionResolver()
    assert len(resolver) == len({normalize(e.spelling) for e in EXCEPTIONS})


def test_notes_flag_entries():
    resolver = ExceptionResolver()
    assert "\u0f40\u0f74\u0f5d" in resolver.notes   # ཀུཝ
    assert "\u0f56\u0f5f\u0f44" + "\u0f54\u0f7c" not in resolver.notes


def test_contains_normalizes():
    resolver = ExceptionResolver()
    assert "\u0f56\u0f5f\u0f44\u0f0b\u0f54\u0f7c\u0f0d" in resolver   # བཟང་པོ།


# ── Construction errors ───────────────────────────────────────────────────────

def test_conflicting_duplicates_raise():
    with pytest.raises(ValueError, match="Conflicting"):
        ExceptionResolver([
            ExceptionEntry("\u0f40", "ka"),
            ExceptionEntry("\u0f40\u0f0b", "qa"),
        ])


def test_identical_duplicates_collapse():
    resolver = ExceptionResolver([
        ExceptionEntry("\u0f40", "ka"),
        ExceptionEntry("\u0f40\u0f0d", "ka"),
    ])
    assert len(resolver) == 1


def test_empty_key_raises():
    with pytest.raises(ValueError, match="empty key"):
        ExceptionResolver([ExceptionEntry("\u0f0b ", "x")])


# ── Lookups ───────────────────────────────────────────────────────────────────

def test_resolve_whole():
    resolver = ExceptionResolver()
    assert resolver.resolve_whole("\u0f56\u0f5f\u0f44\u0f0b\u0f54\u0f7c") == "zangpo"
    assert resolver.resolve_whole("") is None
    assert resolver.resolve_whole("\u0f40") is None


def test_resolve_token():
    resolver = ExceptionResolver()
    assert resolver.resolve_token("\u0f66\u0f90\u0f74") == "ku"   # སྐུ
    assert resolver.resolve_token("") is None


def test_resolve_window_widest_first():
    resolver = _make_resolver({
        "\u0f40\u0f0b\u0f41": "pair",
        "\u0f40\u0f0b\u0f41\u0f0b\u0f42": "triple",
    })
    tokens = ["\u0f40", "\u0f41", "\u0f42", "\u0f44"]
    assert resolver.resolve_window(tokens, 0, 3) == ("triple", 3)
    assert resolver.resolve_window(tokens, 0, 2) == ("pair", 2)


def test_resolve_window_respects_end_of_tokens():
    resolver = _make_resolver({"\u0f41\u0f0b\u0f42": "pair"})
    tokens = ["\u0f40", "\u0f41", "\u0f42"]
    assert resolver.resolve_window(tokens, 1, 3) == ("pair", 2)
    assert resolver.resolve_window(tokens, 2, 3) is None


def test_resolve_window_never_single_token():
    resolver = _make_resolver({"\u0f40": "single"})
    assert resolver.resolve_window(["\u0f40", "\u0f41"], 0, 3) is None


def test_summary():
    s = ExceptionResolver().summary()
    assert "Exception table" in s
    assert "Flagged:" in s
