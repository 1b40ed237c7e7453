"""
Extract inline sources from text files and print a references table.

Every file is parsed with the same extractor, so reference numbers keep
increasing from one file to the next.

Usage:
    python scripts/extract_sources.py notes.txt chapter2.txt
    python scripts/extract_sources.py --html article.txt
    python scripts/extract_sources.py            # runs on a built-in sample
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.extractor.src.sources import (
    SourcesExtractor,
    html_source_format,
    identity_source_format,
)
from shared.utils import LoggerAdapter, get_settings, setup_logging

SAMPLE_TEXTS = [
    "This is some dummy text. Source: a nice book. Here is more text.",
    "Another paragraph with a second reference (source: the second volume).",
]


def plain_reference_marker(reference: int) -> str:
    return f" ({reference})"


def plain_reference_prefix(reference: int) -> str:
    return f"({reference}) "


def load_texts(files: List[Path]) -> List[Tuple[str, str]]:
    """
    Read input texts.

    Args:
        files: Paths to read; the built-in sample is used when empty

    Returns:
        List of (name, text) pairs

    Raises:
        OSError: If a file cannot be read
        UnicodeDecodeError: If a file is not valid UTF-8
    """
    if not files:
        return [(f"sample-{i}", text) for i, text in enumerate(SAMPLE_TEXTS, 1)]
    return [(str(path), path.read_text(encoding="utf-8")) for path in files]


def run(texts: List[Tuple[str, str]], html_output: bool, delimiter: str, heading: str, logger) -> str:
    """
    Parse every text with one extractor and render the output.

    Returns:
        Rewritten texts followed by the references table
    """
    extractor = SourcesExtractor()

    if html_output:
        marker = SourcesExtractor.html_reference_format
        prefix = SourcesExtractor.html_reference_format
        source_formatter = html_source_format
    else:
        marker = plain_reference_marker
        prefix = plain_reference_prefix
        source_formatter = identity_source_format

    blocks = []
    for name, text in texts:
        before = len(extractor.get_sources())
        blocks.append(extractor.parse(text, marker))
        LoggerAdapter(logger, {"input": name}).info(
            f"Found {len(extractor.get_sources()) - before} sources in {name}"
        )

    table = extractor.format_sources(prefix, source_formatter, delimiter)
    if extractor.get_sources():
        blocks.append(f"{heading}:\n{table}")
    else:
        blocks.append(f"{heading}: none")
    return "\n\n".join(blocks)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Replace inline sources with numbered references")
    parser.add_argument("files", nargs="*", type=Path, help="Text files to process")
    parser.add_argument(
        "--html",
        action=argparse.BooleanOptionalAction,
        default=settings.sources_html_output,
        help="Use <sup>n</sup> markers and HTML-escaped sources",
    )
    parser.add_argument(
        "--delimiter",
        default=settings.sources_join_delimiter,
        help="Delimiter between sources in the references table",
    )
    args = parser.parse_args(argv)

    logger = setup_logging(
        service_name="extract_sources",
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_output=settings.log_output,
    )

    try:
        texts = load_texts(args.files)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read input: {e}")
        return 1

    print(run(texts, args.html, args.delimiter, settings.sources_heading, logger))
    return 0


if __name__ == "__main__":
    sys.exit(main())
