#!/usr/bin/env python3
"""
Ucen Dzongkha -> Roman Dzongkha CLI.

Reads dzongkha_roman.toml from the working directory if present, or the
file given with --config:

    python -m dzongkha_roman.cli "TEXT"
    python -m dzongkha_roman.cli --syllable "SYLLABLE"
    python -m dzongkha_roman.cli --explain "SYLLABLE"
    python -m dzongkha_roman.cli --summary
    cat text.txt | python -m dzongkha_roman.cli
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Ucen Dzongkha to Roman Dzongkha transliteration"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to convert (default: read lines from stdin)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect dzongkha_roman.toml)",
    )
    parser.add_argument(
        "--syllable",
        action="store_true",
        help="Treat the input as a single syllable",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show the grapheme breakdown of each syllable",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print table and configuration statistics",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log exception hits and rule firings",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # ── Build pipeline ───────────────────────────────────────────────────

    from dzongkha_roman.pipeline import TextPipeline

    try:
        pipeline = TextPipeline.from_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    if args.summary:
        print(pipeline.summary())
        print()
        if args.text is None:
            return 0

    lines = [args.text] if args.text is not None else [ln.rstrip("\n") for ln in sys.stdin]

    # ── Convert ──────────────────────────────────────────────────────────

    for line in lines:
        if args.explain:
            for segment, _ in pipeline.tokenize(line):
                for syllable in segment:
                    print(pipeline.explain(syllable).describe())
            continue

        if args.syllable:
            print(pipeline.convert_syllable(line))
            continue

        result = pipeline.convert(line)
        for issue in result.issues:
            logging.getLogger(__name__).info("%s", issue)
        print(result.text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
