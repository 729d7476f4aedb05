"""
Grapheme tables for Ucen (Tibetan-script) Dzongkha.

Static lookup data used by the decomposer and the assembler: root letters,
subjoined letters, vowel signs, finals, prefix and superscript letters, the
devoicing set and the cluster-override table.  Everything is built once at
import time into a frozen GraphemeTables and never mutated afterwards.

Usage:
    from dzongkha_roman.tables import DEFAULT_TABLES

    DEFAULT_TABLES.roots["\u0f40"]            # 'k'
    DEFAULT_TABLES.roles_of("\u0f42")         # ('root', 'final')
    DEFAULT_TABLES.find_cluster("\u0f63\u0fb7")  # ClusterEntry('lh', ...)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


# ── Special codepoints ──────────────────────────────────────────────────────

TSHEG = "\u0f0b"              # ་ syllable separator
NON_BREAKING_TSHEG = "\u0f0c"  # ༌
SHAD = "\u0f0d"               # །
NYIS_SHAD = "\u0f0e"          # ༎
LONG_VOWEL_MARK = "\u0f71"    # ཱ a-chung subscript
NASAL_VELAR = "\u0f44"        # ང as a final

INHERENT_VOWEL = "a"

# Vowel effects a silent final has on the nucleus
UMLAUT = "umlaut"
LENGTHEN = "lengthen"

UMLAUTS: Mapping[str, str] = MappingProxyType({"a": "ä", "o": "ö", "u": "ü"})
CIRCUMFLEXES: Mapping[str, str] = MappingProxyType({
    "a": "â", "e": "ê", "i": "î", "o": "ô", "u": "û",
})

# Role lookup order for codepoints that can play more than one role.
# The decomposer applies the roles in exactly this order.
ROLE_ORDER: tuple[str, ...] = ("long_vowel", "vowel", "root", "subjoined", "final")


# ── Letter tables ───────────────────────────────────────────────────────────

_ROOTS: dict[str, str] = {
    "\u0f40": "k",    # ཀ
    "\u0f41": "kh",   # ཁ
    "\u0f42": "g",    # ག
    "\u0f44": "ng",   # ང
    "\u0f45": "c",    # ཅ
    "\u0f46": "ch",   # ཆ
    "\u0f47": "j",    # ཇ
    "\u0f49": "ny",   # ཉ
    "\u0f4f": "t",    # ཏ
    "\u0f50": "th",   # ཐ
    "\u0f51": "d",    # ད
    "\u0f53": "n",    # ན
    "\u0f54": "p",    # པ
    "\u0f55": "ph",   # ཕ
    "\u0f56": "b",    # བ
    "\u0f58": "m",    # མ
    "\u0f59": "ts",   # ཙ
    "\u0f5a": "tsh",  # ཚ
    "\u0f5b": "dz",   # ཛ
    "\u0f5d": "w",    # ཝ
    "\u0f5e": "zh",   # ཞ
    "\u0f5f": "z",    # ཟ
    "\u0f60": "",     # འ vowel carrier
    "\u0f61": "y",    # ཡ
    "\u0f62": "r",    # ར
    "\u0f63": "l",    # ལ
    "\u0f64": "sh",   # ཤ
    "\u0f66": "s",    # ས
    "\u0f67": "h",    # ཧ
    "\u0f68": "",     # ཨ vowel carrier
}

_SUBJOINED: dict[str, str] = {
    "\u0f90": "k",    # ྐ
    "\u0f91": "kh",   # ྑ
    "\u0f92": "g",    # ྒ
    "\u0f94": "ng",   # ྔ
    "\u0f95": "c",    # ྕ
    "\u0f96": "ch",   # ྖ
    "\u0f97": "j",    # ྗ
    "\u0f99": "ny",   # ྙ
    "\u0f9f": "t",    # ྟ
    "\u0fa0": "th",   # ྠ
    "\u0fa1": "d",    # ྡ
    "\u0fa3": "n",    # ྣ
    "\u0fa4": "p",    # ྤ
    "\u0fa5": "ph",   # ྥ
    "\u0fa6": "b",    # ྦ
    "\u0fa8": "m",    # ྨ
    "\u0fa9": "ts",   # ྩ
    "\u0faa": "tsh",  # ྪ
    "\u0fab": "dz",   # ྫ
    "\u0fad": "w",    # ྭ wazur
    "\u0fb1": "y",    # ྱ
    "\u0fb2": "r",    # ྲ
    "\u0fb3": "l",    # ླ
    "\u0fb4": "sh",   # ྴ
    "\u0fb6": "s",    # ྶ
    "\u0fb7": "h",    # ྷ
}

_VOWELS: dict[str, str] = {
    "\u0f72": "i",    # ི
    "\u0f74": "u",    # ུ
    "\u0f7a": "e",    # ེ
    "\u0f7c": "o",    # ོ
    "\u0f7b": "ai",   # ཻ
    "\u0f7d": "au",   # ཽ
    "\u0f80": "i",    # ྀ reversed gigu
}

# Precomposed long vowels: treated as long-vowel mark + vowel sign
_COMPOSITE_VOWELS: dict[str, str] = {
    "\u0f73": "\u0f72",  # ཱི
    "\u0f75": "\u0f74",  # ཱུ
    "\u0f81": "\u0f80",  # ཱྀ
}

# Finals as pronounced in modern Dzongkha.  Silent finals map to "" and may
# carry a vowel effect in _FINAL_EFFECTS.
_FINALS: dict[str, str] = {
    "\u0f42": "k",    # ག
    "\u0f44": "ng",   # ང
    "\u0f51": "",     # ད
    "\u0f53": "n",    # ན
    "\u0f56": "p",    # བ
    "\u0f58": "m",    # མ
    "\u0f60": "",     # འ
    "\u0f62": "",     # ར
    "\u0f63": "",     # ལ
    "\u0f66": "",     # ས
    # phonetic spellings found in Dzongkha texts
    "\u0f40": "k",    # ཀ
    "\u0f4f": "t",    # ཏ
    "\u0f54": "p",    # པ
    "\u0f64": "sh",   # ཤ
}

_FINAL_EFFECTS: dict[str, str] = {
    "\u0f51": UMLAUT,    # ད
    "\u0f66": UMLAUT,    # ས
    "\u0f63": UMLAUT,    # ལ
    "\u0f62": LENGTHEN,  # ར
}

_PREFIXES = frozenset("\u0f42\u0f51\u0f56\u0f58\u0f60")  # ག ད བ མ འ
_SUPERSCRIPTS = frozenset("\u0f62\u0f63\u0f66")           # ར ལ ས
_SECOND_SUFFIXES = frozenset("\u0f66\u0f51")              # ས ད

# Voiced initials that are devoiced when nothing hardens them
_VOICED = frozenset("\u0f42\u0f47\u0f51\u0f56\u0f5b\u0f5e\u0f5f")  # ག ཇ ད བ ཛ ཞ ཟ

# Which root letters each prefix may precede
_PREFIX_COMBINATIONS: dict[str, frozenset[str]] = {
    # ག: ཅ ཉ ཏ ད ན ཙ ཞ ཟ ཡ ཤ ས
    "\u0f42": frozenset("\u0f45\u0f49\u0f4f\u0f51\u0f53\u0f59\u0f5e\u0f5f\u0f61\u0f64\u0f66"),
    # ད: ཀ ག ང པ བ མ
    "\u0f51": frozenset("\u0f40\u0f42\u0f44\u0f54\u0f56\u0f58"),
    # བ: ཀ ག ཅ ཏ ད ཙ ཞ ཟ ཤ ས ར ལ
    "\u0f56": frozenset("\u0f40\u0f42\u0f45\u0f4f\u0f51\u0f59\u0f5e\u0f5f\u0f64\u0f66\u0f62\u0f63"),
    # མ: ཁ ག ང ཆ ཇ ཉ ཐ ད ན ཚ ཛ
    "\u0f58": frozenset("\u0f41\u0f42\u0f44\u0f46\u0f47\u0f49\u0f50\u0f51\u0f53\u0f5a\u0f5b"),
    # འ: ཁ ག ཆ ཇ ཐ ད ཕ བ ཚ ཛ
    "\u0f60": frozenset("\u0f41\u0f42\u0f46\u0f47\u0f50\u0f51\u0f55\u0f56\u0f5a\u0f5b"),
}

# Superscript + subjoined pairs (ra-mgo, la-mgo, sa-mgo).  ལྷ is deliberately
# absent: its ha is pronounced and it stays head ལ + subjoined ྷ.
_SUPERSCRIPT_STACKS = frozenset({
    # ར: རྐ རྒ རྔ རྗ རྙ རྟ རྡ རྣ རྦ རྨ རྩ རྫ
    "\u0f62\u0f90", "\u0f62\u0f92", "\u0f62\u0f94", "\u0f62\u0f97",
    "\u0f62\u0f99", "\u0f62\u0f9f", "\u0f62\u0fa1", "\u0f62\u0fa3",
    "\u0f62\u0fa6", "\u0f62\u0fa8", "\u0f62\u0fa9", "\u0f62\u0fab",
    # ལ: ལྐ ལྒ ལྔ ལྕ ལྗ ལྟ ལྡ ལྤ ལྦ
    "\u0f63\u0f90", "\u0f63\u0f92", "\u0f63\u0f94", "\u0f63\u0f95",
    "\u0f63\u0f97", "\u0f63\u0f9f", "\u0f63\u0fa1", "\u0f63\u0fa4",
    "\u0f63\u0fa6",
    # ས: སྐ སྒ སྔ སྙ སྟ སྡ སྣ སྤ སྦ སྨ སྩ
    "\u0f66\u0f90", "\u0f66\u0f92", "\u0f66\u0f94", "\u0f66\u0f99",
    "\u0f66\u0f9f", "\u0f66\u0fa1", "\u0f66\u0fa3", "\u0f66\u0fa4",
    "\u0f66\u0fa6", "\u0f66\u0fa8", "\u0f66\u0fa9",
})

# Subjoined consonants sit exactly 0x50 above their full forms
_SUBJOINED_ROOTS: dict[str, str] = {
    ch: chr(ord(ch) - 0x50) for ch in _SUBJOINED if chr(ord(ch) - 0x50) in _ROOTS
}


# ── Cluster overrides ───────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ClusterEntry:
    """A literal Ucen substring with a non-compositional pronunciation.

    whole=True replaces the entire syllable; otherwise `roman` replaces the
    initial and hardens it (no devoicing).
    """
    key: str
    roman: str
    whole: bool = False


_CLUSTERS: tuple[ClusterEntry, ...] = (
    ClusterEntry("\u0f56\u0f62\u0f92\u0fb1", "gä", whole=True),  # བརྒྱ
    ClusterEntry("\u0f56\u0f62\u0f92", "g"),          # བརྒ
    ClusterEntry("\u0f62\u0f92\u0fb1", "gy"),         # རྒྱ
    ClusterEntry("\u0f66\u0f92\u0fb2", "dr"),         # སྒྲ
    ClusterEntry("\u0f66\u0fa6\u0fb1", "j"),          # སྦྱ
    ClusterEntry("\u0f66\u0fa4\u0fb1", "c"),          # སྤྱ
    ClusterEntry("\u0f42\u0fb1", "j"),                # གྱ
    ClusterEntry("\u0f40\u0fb2", "tr"),               # ཀྲ
    ClusterEntry("\u0f4f\u0fb2", "tr"),               # ཏྲ
    ClusterEntry("\u0f54\u0fb2", "tr"),               # པྲ
    ClusterEntry("\u0f41\u0fb2", "thr"),              # ཁྲ
    ClusterEntry("\u0f50\u0fb2", "thr"),              # ཐྲ
    ClusterEntry("\u0f55\u0fb2", "thr"),              # ཕྲ
    ClusterEntry("\u0f42\u0fb2", "dr"),               # གྲ
    ClusterEntry("\u0f51\u0fb2", "dr"),               # དྲ
    ClusterEntry("\u0f56\u0fb2", "dr"),               # བྲ
    ClusterEntry("\u0f66\u0fb2", "s"),                # སྲ
    ClusterEntry("\u0f67\u0fb2", "hr"),               # ཧྲ
    ClusterEntry("\u0f54\u0fb1", "c"),                # པྱ
    ClusterEntry("\u0f55\u0fb1", "ch"),               # ཕྱ
    ClusterEntry("\u0f56\u0fb1", "j"),                # བྱ
    ClusterEntry("\u0f58\u0fb1", "ny"),               # མྱ
    ClusterEntry("\u0f63\u0fb7", "lh"),               # ལྷ
    ClusterEntry("\u0f66\u0fb3", "l"),                # སླ
    ClusterEntry("\u0f40\u0fb3", "l"),                # ཀླ
    ClusterEntry("\u0f42\u0fb3", "l"),                # གླ
    ClusterEntry("\u0f56\u0fb3", "l"),                # བླ
    ClusterEntry("\u0f62\u0fb3", "l"),                # རླ
    ClusterEntry("\u0f5f\u0fb3", "d"),                # ཟླ
)


def _sort_clusters(entries) -> tuple[ClusterEntry, ...]:
    # sorted() is stable: equal-length keys keep registration order
    return tuple(sorted(entries, key=lambda e: len(e.key), reverse=True))


# ── Table set ───────────────────────────────────────────────────────────────

def _frozen(mapping: Mapping) -> Mapping:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class GraphemeTables:
    """Immutable lookup tables shared by every conversion.

    Build variants with dataclasses.replace(); mappings are re-wrapped
    read-only and clusters re-sorted longest-first on construction.
    """

    roots: Mapping[str, str] = field(default_factory=lambda: _ROOTS)
    subjoined: Mapping[str, str] = field(default_factory=lambda: _SUBJOINED)
    vowels: Mapping[str, str] = field(default_factory=lambda: _VOWELS)
    finals: Mapping[str, str] = field(default_factory=lambda: _FINALS)
    final_effects: Mapping[str, str] = field(default_factory=lambda: _FINAL_EFFECTS)
    composite_vowels: Mapping[str, str] = field(default_factory=lambda: _COMPOSITE_VOWELS)
    prefix_combinations: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: _PREFIX_COMBINATIONS
    )
    subjoined_roots: Mapping[str, str] = field(default_factory=lambda: _SUBJOINED_ROOTS)
    prefixes: frozenset[str] = _PREFIXES
    superscripts: frozenset[str] = _SUPERSCRIPTS
    superscript_stacks: frozenset[str] = _SUPERSCRIPT_STACKS
    second_suffixes: frozenset[str] = _SECOND_SUFFIXES
    voiced: frozenset[str] = _VOICED
    clusters: tuple[ClusterEntry, ...] = _CLUSTERS
    long_vowel_mark: str = LONG_VOWEL_MARK
    nasal_velar: str = NASAL_VELAR

    def __post_init__(self) -> None:
        for name in ("roots", "subjoined", "vowels", "finals", "final_effects",
                     "composite_vowels", "prefix_combinations", "subjoined_roots"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        object.__setattr__(self, "clusters", _sort_clusters(self.clusters))

    @property
    def hardening(self) -> frozenset[str]:
        """Letters that, standing before the head, suppress devoicing."""
        return self.prefixes | self.superscripts

    def roles_of(self, ch: str) -> tuple[str, ...]:
        """Every role `ch` can take, in ROLE_ORDER."""
        roles = []
        for role in ROLE_ORDER:
            if role == "long_vowel":
                hit = ch == self.long_vowel_mark or ch in self.composite_vowels
            elif role == "vowel":
                hit = ch in self.vowels
            elif role == "root":
                hit = ch in self.roots
            elif role == "subjoined":
                hit = ch in self.subjoined
            else:
                hit = ch in self.finals
            if hit:
                roles.append(role)
        return tuple(roles)

    def is_mapped(self, ch: str) -> bool:
        return bool(self.roles_of(ch))

    def find_cluster(self, text: str) -> ClusterEntry | None:
        """Longest cluster key occurring in `text`; first registered on ties."""
        for entry in self.clusters:
            if entry.key in text:
                return entry
        return None

    def summary(self) -> str:
        lines = ["Grapheme tables"]
        lines.append(f"  Roots:        {len(self.roots)}")
        lines.append(f"  Subjoined:    {len(self.subjoined)}")
        lines.append(f"  Vowels:       {len(self.vowels)}")
        lines.append(f"  Finals:       {len(self.finals)}")
        lines.append(f"  Clusters:     {len(self.clusters)}")
        return "\n".join(lines)


DEFAULT_TABLES = GraphemeTables()
