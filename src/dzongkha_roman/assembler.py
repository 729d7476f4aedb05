"""
Assembly of a Roman Dzongkha syllable from its decomposition.

Rules run in a fixed order: cluster override, devoicing, subjoined letters,
vowel, final-consonant vowel effects, vowel length, final.  The cluster
override runs before devoicing, so a hard cluster always suppresses the
devoicing marker.
"""

from __future__ import annotations

from dzongkha_roman.syllable import DecomposedSyllable
from dzongkha_roman.tables import (
    CIRCUMFLEXES,
    DEFAULT_TABLES,
    INHERENT_VOWEL,
    LENGTHEN,
    UMLAUT,
    UMLAUTS,
    GraphemeTables,
)

DEFAULT_DEVOICING_MARKER = "’"  # ’


class RomanAssembler:
    """Builds the phonemic Roman string for a DecomposedSyllable."""

    def __init__(
        self,
        tables: GraphemeTables = DEFAULT_TABLES,
        devoicing_marker: str = DEFAULT_DEVOICING_MARKER,
    ):
        self.tables = tables
        self.devoicing_marker = devoicing_marker

    def assemble(self, syl: DecomposedSyllable) -> str:
        """Return the Roman form.  Never raises; the sentinel yields its source."""
        if not syl.recognized:
            return syl.source

        t = self.tables
        initial = t.roots[syl.head]
        force_hard = False
        covered: frozenset[str] = frozenset()

        # Cluster override: matched against the whole syllable as written
        cluster = t.find_cluster(syl.source)
        if cluster is not None:
            if cluster.whole:
                return cluster.roman
            initial = cluster.roman
            force_hard = True
            covered = frozenset(cluster.key)

        # Devoicing
        if (
            syl.head in t.voiced
            and not syl.has_prefix
            and not force_hard
            and not initial.endswith(self.devoicing_marker)
        ):
            initial += self.devoicing_marker

        # Subjoined letters not already spelled by the cluster
        for ch in syl.subjoined:
            if ch in covered:
                continue
            phoneme = t.subjoined[ch]
            if phoneme and not initial.endswith(phoneme):
                initial += phoneme

        vowel = syl.vowel or INHERENT_VOWEL
        long_vowel = syl.long_vowel

        effect = t.final_effects.get(syl.final) if syl.final else None
        if effect == UMLAUT:
            vowel = UMLAUTS.get(vowel, vowel)
        elif effect == LENGTHEN:
            long_vowel = True

        # Length before -ng is never written
        if long_vowel and syl.final != t.nasal_velar:
            vowel = CIRCUMFLEXES.get(vowel, vowel)

        final = t.finals.get(syl.final, "") if syl.final else ""
        return f"{initial}{vowel}{final}"
