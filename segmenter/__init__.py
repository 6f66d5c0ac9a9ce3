"""Split model responses into the documents a tool profile expects."""

from .segmenter import (  # noqa: F401
    EXTRACTORS,
    DocumentSet,
    default_documents,
    extract_fenced_block,
    extract_open_section,
    extract_section,
    find_heading,
    segment,
)

__all__ = [
    "EXTRACTORS",
    "DocumentSet",
    "default_documents",
    "extract_fenced_block",
    "extract_open_section",
    "extract_section",
    "find_heading",
    "segment",
]
