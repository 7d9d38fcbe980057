#!/usr/bin/env python3
"""Word frequency report CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .config import ReportConfig
from .ranking import rank_text
from .report import OUTPUT_FORMATS, format_report
from .source import InputUnavailableError, read_text


def main() -> int:
    """Print the most frequent words of a text."""
    parser = argparse.ArgumentParser(
        description="Report the most frequent words in a text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                        # Top 10 words
  %(prog)s book.txt --top 25               # Top 25 words
  %(prog)s book.txt --format json -o top.json
  %(prog)s https://example.com/book.txt    # Fetch text over HTTP
  cat book.txt | %(prog)s -                # Read standard input
  %(prog)s book.txt --config report.yml    # Settings from YAML
        """,
    )

    parser.add_argument("source", help="Text file path, URL, or '-' for standard input")

    parser.add_argument(
        "--top", type=int, metavar="N", help="Number of words to report (default: 10)"
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default: text)")
    parser.add_argument("--config", type=Path, metavar="FILE", help="Path to report YAML config")
    parser.add_argument("--encoding", metavar="ENC", help="Input text encoding (default: utf-8)")
    parser.add_argument(
        "--timeout", type=float, metavar="SECONDS", help="Timeout for URL sources (default: 30)"
    )
    parser.add_argument("-o", "--output", type=Path, help="Write the report to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show diagnostic logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Load config
    if args.config is not None and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = ReportConfig.from_yaml(args.config) if args.config else ReportConfig()
        config.override(
            {
                "top": args.top,
                "format": args.format,
                "encoding": args.encoding,
                "timeout": args.timeout,
            }
        )
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        text = read_text(args.source, encoding=config.encoding, timeout=config.timeout)
    except InputUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = rank_text(text, config.top)
    report = format_report(result, config.format)

    if args.output is None:
        print(report)
        return 0

    try:
        args.output.write_text(report + "\n")
    except OSError as e:
        print(f"Error: Cannot write {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Top {result.returned} words -> {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
