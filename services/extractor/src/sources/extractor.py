"""
Inline source extraction and formatting.

Finds "Source: ..." citations written inline in free text, replaces them with
numbered reference markers and keeps the citation text for a references table.
"""

import html
import re
from typing import Callable, List, Tuple

from shared.utils import get_logger

logger = get_logger(__name__)

ReferenceFormatter = Callable[[int], str]
SourceFormatter = Callable[[str], str]

# ASCII flag keeps \s and case folding limited to plain ASCII.
SOURCE_PATTERN = re.compile(
    r"(?:^|[\s.(]+)sources?\s*:\s*([^.\n]*)",
    re.IGNORECASE | re.ASCII,
)


def _require_callable(name: str, value: object) -> None:
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


def identity_source_format(text: str) -> str:
    """Keep source text as it is."""
    return text


def html_source_format(text: str) -> str:
    """Escape source text for inclusion in HTML."""
    return html.escape(text)


class SourcesExtractor:
    """
    Extract inline source citations from text.

    The same extractor can parse several texts to build one references table
    with increasing numbers:

        extractor = SourcesExtractor()
        edited = extractor.parse("Some text. Source: my own code.", lambda n: f" ({n})")
        table = extractor.format_sources(lambda n: f"({n}) ", identity_source_format, "\\n")
    """

    def __init__(self):
        """Initialize an extractor with an empty source list."""
        self._sources: List[str] = []

    @property
    def sources(self) -> Tuple[str, ...]:
        """Sources extracted so far, in discovery order."""
        return tuple(self._sources)

    def get_sources(self) -> Tuple[str, ...]:
        """
        Get the sources parsed by this extractor.

        Returns:
            Read-only snapshot of every extracted source, in discovery order
        """
        return self.sources

    def parse(self, text: str, reference_formatter: ReferenceFormatter) -> str:
        """
        Replace inline sources in text with formatted reference numbers.

        Args:
            text: Text to process
            reference_formatter: Builds the marker for a source number (starting at 1)

        Returns:
            Text with every source replaced by its reference marker

        Raises:
            TypeError: If text is not a string or the formatter is not callable
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        _require_callable("reference_formatter", reference_formatter)

        first_index = len(self._sources) + 1
        edited: List[str] = []
        last_end = 0

        for match in SOURCE_PATTERN.finditer(text):
            edited.append(text[last_end:match.start()])
            edited.append(reference_formatter(len(self._sources) + 1))
            last_end = match.end()

            # The pattern swallows a leading "(" but not the closing one
            self._sources.append(match.group(1).replace(")", ""))

        edited.append(text[last_end:])

        found = len(self._sources) - first_index + 1
        if found:
            logger.debug(
                f"Extracted {found} sources (references {first_index}-{len(self._sources)})"
            )

        return "".join(edited)

    def format_sources(
        self,
        reference_formatter: ReferenceFormatter,
        source_formatter: SourceFormatter,
        join_delimiter: str,
    ) -> str:
        """
        Build a formatted references table from the parsed sources.

        Args:
            reference_formatter: Builds the prefix for a source number (starting at 1)
            source_formatter: Transforms each source text, e.g. identity_source_format
            join_delimiter: Inserted between consecutive sources

        Returns:
            All sources formatted and joined, or an empty string if none were parsed
        """
        _require_callable("reference_formatter", reference_formatter)
        _require_callable("source_formatter", source_formatter)

        return join_delimiter.join(
            f"{reference_formatter(i)}{source_formatter(source)}"
            for i, source in enumerate(self._sources, 1)
        )

    @staticmethod
    def html_reference_format(reference: int) -> str:
        """Format a reference number as an HTML exponent."""
        return f"<sup>{reference}</sup>"
