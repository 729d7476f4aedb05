"""
Text-level conversion: Ucen Dzongkha in, Roman Dzongkha out.

A conversion walks a fixed sequence of states:

    Start -> WholeTextCheck -> TokenScan -> Done

WholeTextCheck looks the whole normalized text up in the exception table.
TokenScan splits the text into syllables and, at each position, tries the
widest exception window that does not cross a shad, then a single-syllable
exception, then (after the first syllable of a segment) the non-initial
syllable rules, then the decomposer and assembler, and finally passes the
syllable through unchanged.  Every shad or nyis shad yields one punctuation
marker.

Usage:
    from dzongkha_roman.pipeline import TextPipeline, convert_text

    convert_text("...")                       # 'zangpo'

    pipeline = TextPipeline.from_config()     # reads dzongkha_roman.toml
    result = pipeline.convert("...")
    result.text, result.tokens, result.issues
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dzongkha_roman.assembler import RomanAssembler
from dzongkha_roman.config import ConverterConfig, load_config
from dzongkha_roman.normalize import (
    is_terminal_mark,
    normalize,
    split_tokens,
    trailing_terminal_marks,
)
from dzongkha_roman.overrides import ExceptionResolver
from dzongkha_roman.rules import (
    NON_INITIAL_RULES,
    PREFIX_RULES,
    SyllableRule,
    apply_non_initial_rules,
)
from dzongkha_roman.syllable import DecomposedSyllable, SyllableDecomposer
from dzongkha_roman.tables import DEFAULT_TABLES, TSHEG, GraphemeTables

logger = logging.getLogger(__name__)


class IssueKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    UNRECOGNIZED_SYLLABLE = "unrecognized_syllable"
    UNMAPPED_GRAPHEME = "unmapped_grapheme"


@dataclass(frozen=True, slots=True)
class ConversionIssue:
    kind: IssueKind
    token: str = ""
    detail: str = ""

    def __str__(self) -> str:
        text = self.kind.value
        if self.token:
            text += f" {self.token!r}"
        if self.detail:
            text += f": {self.detail}"
        return text


@dataclass(slots=True)
class RomanToken:
    """One output unit and where it came from.

    origin is "whole", "exception", "rules", "passthrough" or "punctuation".
    A window exception covers several source syllables, joined here by
    tsheg.  A "punctuation" token holds shad marks that open the text.
    """

    source: str
    roman: str
    origin: str
    marker: str = ""  # one punctuation marker per following shad

    @property
    def text(self) -> str:
        return self.roman + self.marker


@dataclass(slots=True)
class ConversionResult:
    tokens: list[RomanToken] = field(default_factory=list)
    issues: list[ConversionIssue] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(tok.text for tok in self.tokens if tok.text)

    @property
    def ok(self) -> bool:
        return not self.issues

    def __str__(self) -> str:
        return self.text


class TextPipeline:
    """Ucen -> Roman converter built from tables, exceptions and config.

    All components are read-only after construction, so one pipeline may be
    shared freely.
    """

    def __init__(
        self,
        tables: GraphemeTables = DEFAULT_TABLES,
        resolver: ExceptionResolver | None = None,
        config: ConverterConfig | None = None,
        non_initial_rules: tuple[SyllableRule, ...] = NON_INITIAL_RULES,
    ):
        self.tables = tables
        self.resolver = resolver if resolver is not None else ExceptionResolver()
        self.config = config if config is not None else ConverterConfig()
        self.non_initial_rules = non_initial_rules
        self.decomposer = SyllableDecomposer(tables, PREFIX_RULES)
        self.assembler = RomanAssembler(tables, self.config.devoicing_marker)

    @classmethod
    def from_config(cls, config_path: str | Path | None = None) -> TextPipeline:
        """Build a pipeline from a TOML config (see config.load_config)."""
        return cls(config=load_config(config_path))

    # ── Syllables ────────────────────────────────────────────────────────

    def explain(self, syllable: str) -> DecomposedSyllable:
        """Decomposition of one syllable, without consulting exceptions."""
        return self.decomposer.decompose(normalize(syllable))

    def _convert_token(
        self, token: str, issues: list[ConversionIssue], word_initial: bool = True,
    ) -> RomanToken:
        roman = self.resolver.resolve_token(token)
        if roman is not None:
            return RomanToken(token, roman, "exception")

        if not word_initial:
            rule = apply_non_initial_rules(token, self.tables, self.non_initial_rules)
            if rule is not None:
                logger.debug("Rule %s rewrote %r as %r", rule.name, token, rule.roman)
                return RomanToken(token, rule.roman, "rules")

        syl = self.decomposer.decompose(token)
        if not syl.recognized:
            logger.debug("Passing through unrecognized syllable %r", token)
            issues.append(ConversionIssue(IssueKind.UNRECOGNIZED_SYLLABLE, token))
            return RomanToken(token, token, "passthrough")

        if syl.prefix_rule:
            logger.debug("Rule %s dropped %r from %r",
                         syl.prefix_rule, "".join(syl.dropped), token)
        for ch in syl.unmapped:
            issues.append(ConversionIssue(
                IssueKind.UNMAPPED_GRAPHEME, token, f"U+{ord(ch):04X}",
            ))
        return RomanToken(token, self.assembler.assemble(syl), "rules")

    def convert_syllable(self, text: str) -> str:
        """Convert a single syllable or short unit; "" for empty input.

        The whole input is normalized into one unit.  It may match a
        multi-syllable exception, but otherwise only one syllable is
        decomposed: letters after the first syllable that are not its final
        are dropped.  Use convert_text() for running text.
        """
        if not isinstance(text, str):
            return ""
        token = normalize(text)
        if not token:
            return ""
        pieces = sum(1 for piece in split_tokens(text) if not is_terminal_mark(piece))
        if pieces > 1:
            logger.debug("convert_syllable got %d syllables in %r; treating them as one",
                         pieces, text)
        return self._convert_token(token, []).roman

    # ── Text ─────────────────────────────────────────────────────────────

    def tokenize(self, text: str) -> list[tuple[list[str], str]]:
        """Split text into segments of normalized syllables.

        Each segment is (syllables, marks): the syllables up to a shad or nyis
        shad, and every terminal mark that follows them, in order.  Marks
        that open the text form a segment with no syllables.
        """
        segments: list[tuple[list[str], str]] = []
        current: list[str] = []
        for piece in split_tokens(text):
            if is_terminal_mark(piece):
                if current or not segments:
                    segments.append((current, piece))
                    current = []
                else:
                    syllables, marks = segments[-1]
                    segments[-1] = (syllables, marks + piece)
                continue
            token = normalize(piece)
            if token:
                current.append(token)
        if current:
            segments.append((current, ""))
        return segments

    def convert(self, text: str) -> ConversionResult:
        result = ConversionResult()

        # Start
        if not isinstance(text, str) or not normalize(text):
            result.issues.append(ConversionIssue(IssueKind.EMPTY_INPUT))
            return result

        marker = self.config.punctuation_marker

        # WholeTextCheck
        roman = self.resolver.resolve_whole(text)
        if roman is not None:
            result.tokens.append(RomanToken(
                normalize(text), roman, "whole",
                marker * len(trailing_terminal_marks(text)),
            ))
            return result

        # TokenScan
        for syllables, marks in self.tokenize(text):
            if not syllables:
                result.tokens.append(RomanToken(marks, "", "punctuation"))
            i = 0
            while i < len(syllables):
                window = None
                if self.config.max_window > 1:
                    window = self.resolver.resolve_window(
                        syllables, i, self.config.max_window,
                    )
                if window is not None:
                    roman, width = window
                    result.tokens.append(RomanToken(
                        TSHEG.join(syllables[i:i + width]), roman, "exception",
                    ))
                    i += width
                    continue
                result.tokens.append(
                    self._convert_token(syllables[i], result.issues, word_initial=i == 0)
                )
                i += 1
            result.tokens[-1].marker = marker * len(marks)

        # Done
        return result

    def convert_text(self, text: str) -> str:
        """Convert arbitrary text; "" for empty or non-string input."""
        return self.convert(text).text

    def summary(self) -> str:
        lines = ["Ucen -> Roman Dzongkha pipeline"]
        lines.append(f"  Max window:   {self.config.max_window}")
        lines.append(f"  Devoicing:    {self.config.devoicing_marker}")
        lines.append(f"  Punctuation:  {self.config.punctuation_marker!r}")
        lines.append(self.tables.summary())
        lines.append(self.resolver.summary())
        return "\n".join(lines)


# ── Module-level convenience ────────────────────────────────────────────────

_DEFAULT_PIPELINE = TextPipeline()


def convert_syllable(text: str) -> str:
    return _DEFAULT_PIPELINE.convert_syllable(text)


def convert_text(text: str) -> str:
    return _DEFAULT_PIPELINE.convert_text(text)
