"""dzongkha-roman: Ucen (Tibetan-script) Dzongkha to Roman Dzongkha transliteration."""

from dzongkha_roman.tables import DEFAULT_TABLES, GraphemeTables, ClusterEntry
from dzongkha_roman.normalize import normalize, split_tokens
from dzongkha_roman.rules import NON_INITIAL_RULES, SyllableRule, apply_non_initial_rules
from dzongkha_roman.syllable import SyllableDecomposer, DecomposedSyllable
from dzongkha_roman.assembler import RomanAssembler
from dzongkha_roman.overrides import ExceptionResolver, ExceptionEntry, EXCEPTIONS
from dzongkha_roman.config import ConverterConfig, load_config
from dzongkha_roman.pipeline import (
    TextPipeline, ConversionResult, ConversionIssue, IssueKind, RomanToken,
    convert_syllable, convert_text,
)

__all__ = [
    "DEFAULT_TABLES", "GraphemeTables", "ClusterEntry",
    "normalize", "split_tokens",
    "NON_INITIAL_RULES", "SyllableRule", "apply_non_initial_rules",
    "SyllableDecomposer", "DecomposedSyllable",
    "RomanAssembler",
    "ExceptionResolver", "ExceptionEntry", "EXCEPTIONS",
    "ConverterConfig", "load_config",
    "TextPipeline", "ConversionResult", "ConversionIssue", "IssueKind", "RomanToken",
    "convert_syllable", "convert_text",
]
