"""
Inline source extraction service.

Replaces "Source: ..." citations in text with reference markers and renders
the collected sources as a references table.
"""

from .extractor import (
    SOURCE_PATTERN,
    SourcesExtractor,
    html_source_format,
    identity_source_format,
)

__all__ = [
    "SOURCE_PATTERN",
    "SourcesExtractor",
    "html_source_format",
    "identity_source_format",
]
