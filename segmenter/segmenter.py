"""
Response segmentation.

Splits the single block of text returned by the model into the named
documents a tool profile expects. Every section runs through an ordered chain
of extractors; the first one that yields content wins. Sections nobody could
find get the profile's boilerplate, and a response with no recognizable
structure at all becomes the main prompt verbatim.

segment() never raises: the model's formatting cannot be controlled, so every
path ends in a complete document set.
"""
import logging
import re
from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple

from profiles import SectionSpec, ToolProfile

logger = logging.getLogger(__name__)

DocumentSet = Dict[str, str]
Extractor = Callable[[str, SectionSpec, ToolProfile], Optional[str]]

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]*(.*?)[ \t]*$")
# A fence line: ``` optionally followed by an info string (language)
_FENCE_LINE_RE = re.compile(r"^[ \t]*```[ \t]*([\w.+#-]*)[ \t]*$")
_LEADING_FENCE_RE = re.compile(r"^```[ \t]*([\w.+#-]*)[ \t]*(?:\n|$)")

_UNWRAPPABLE_FENCES = {"", "markdown", "md"}


class _Heading(NamedTuple):
    level: int
    text: str
    start: int
    end: int


def _fenced_lines(lines: List[str]) -> Set[int]:
    """Indexes of lines belonging to a closed fenced block, delimiters included.

    An opener that is never closed does not count as a fence.
    """
    fenced: Set[int] = set()
    index = 0
    while index < len(lines):
        if _FENCE_LINE_RE.match(lines[index]):
            close = _find_fence_close(lines, index + 1)
            if close is not None:
                fenced.update(range(index, close + 1))
                index = close + 1
                continue
        index += 1
    return fenced


def _iter_headings(text: str, pos: int = 0) -> Iterator[_Heading]:
    # Fence state is tracked from the start of text, so "# comment" lines
    # inside code blocks are never headings whatever pos is.
    lines = text.split("\n")
    fenced = _fenced_lines(lines)
    offset = 0
    for index, line in enumerate(lines):
        start = offset
        offset += len(line) + 1
        if start < pos or index in fenced:
            continue
        match = _HEADING_RE.match(line)
        if match:
            yield _Heading(len(match.group(1)), match.group(2), start, start + len(line))


def _matches_label(heading_text: str, labels: Sequence[str]) -> bool:
    # Headings like "**Main Prompt**" or "Custom Instructions (.github/...)" still count
    candidate = heading_text.strip().strip("*_").strip().lower()
    for label in labels:
        label = label.lower()
        if candidate.startswith(label):
            rest = candidate[len(label):]
            if not rest or not rest[0].isalnum():
                return True
    return False


def find_heading(text: str, labels: Sequence[str], pos: int = 0) -> Optional[_Heading]:
    """First heading at or after pos whose text starts with one of labels."""
    for heading in _iter_headings(text, pos):
        if _matches_label(heading.text, labels):
            return heading
    return None


def _find_fence_close(lines: List[str], start: int) -> Optional[int]:
    """Index of the line closing a fence whose body begins at lines[start].

    Fences opened with an info string inside the body are balanced, so an
    embedded ```ts example does not end the block early.
    """
    depth = 0
    for index in range(start, len(lines)):
        match = _FENCE_LINE_RE.match(lines[index])
        if not match:
            continue
        if match.group(1):
            depth += 1
        elif depth:
            depth -= 1
        else:
            return index
    return None


def extract_fenced_block(text: str, section: SectionSpec, profile: ToolProfile) -> Optional[str]:
    """Primary extraction: heading followed by a fenced block of the declared type."""
    if not section.fence:
        return None
    heading = find_heading(text, section.labels)
    if heading is None:
        return None

    lines = text[heading.end:].split("\n")
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1
    if index >= len(lines):
        return None

    opener = _FENCE_LINE_RE.match(lines[index])
    if not opener or opener.group(1).lower() != section.fence.lower():
        return None

    close = _find_fence_close(lines, index + 1)
    if close is None:
        logger.debug(f"Unclosed ```{section.fence} fence under '{heading.text}'")
        return None
    return "\n".join(lines[index + 1:close]).strip()


def _unwrap_fence(content: str, fence: Optional[str]) -> str:
    """Remove a fence the model put around a section's content.

    A closed fence yields only its body. Text after the close is dropped for
    fenced sections and kept verbatim (fence included) for unfenced ones,
    where a leading code block is part of the prose. An unclosed fence loses
    just its opener.
    """
    opener = _LEADING_FENCE_RE.match(content)
    if not opener:
        return content
    info = opener.group(1).lower()
    if info not in _UNWRAPPABLE_FENCES and info != (fence or "").lower():
        return content

    lines = content[opener.end():].split("\n")
    close = _find_fence_close(lines, 0)
    if close is None:
        return "\n".join(lines).strip()
    trailing = "\n".join(lines[close + 1:]).strip()
    if trailing and not fence:
        return content
    if trailing:
        logger.debug(f"Dropping {len(trailing)} characters after the ```{info} fence")
    return "\n".join(lines[:close]).strip()


def extract_open_section(text: str, section: SectionSpec, profile: ToolProfile) -> Optional[str]:
    """Secondary extraction: everything from the heading to the next recognized heading.

    Any label of the profile ends the section, whatever its heading level.
    A fence wrapping the content is removed.
    """
    heading = find_heading(text, section.labels)
    if heading is None:
        return None
    boundary = find_heading(text, profile.labels, heading.end)
    end = boundary.start if boundary is not None else len(text)
    return _unwrap_fence(text[heading.end:end].strip(), section.fence)


EXTRACTORS: Tuple[Extractor, ...] = (extract_fenced_block, extract_open_section)


def extract_section(text: str, section: SectionSpec, profile: ToolProfile) -> Optional[str]:
    """Run the extractor chain for one section.

    Returns the first non-empty result, "" when a section was found but is
    explicitly empty, or None when no extractor located it.
    """
    found_empty = False
    for extractor in EXTRACTORS:
        result = extractor(text, section, profile)
        if result is None:
            continue
        if result:
            logger.debug(f"{section.key}: {extractor.__name__} matched ({len(result)} characters)")
            return result
        found_empty = True
    return "" if found_empty else None


def default_documents(text: str, profile: ToolProfile) -> DocumentSet:
    """Whole response as the main document, boilerplate for the rest."""
    documents = {section.key: section.default for section in profile.sections}
    documents[profile.primary.key] = text.strip() or profile.primary.default
    return documents


def _strip_outer_fence(text: str) -> str:
    """Body of a ```markdown fence that wraps the entire response, else text."""
    stripped = text.strip()
    opener = _LEADING_FENCE_RE.match(stripped)
    if not opener or opener.group(1).lower() not in _UNWRAPPABLE_FENCES:
        return text
    lines = stripped[opener.end():].split("\n")
    if _find_fence_close(lines, 0) != len(lines) - 1:
        return text
    logger.debug("Response is wrapped in a single fence, unwrapping")
    return "\n".join(lines[:-1])


def segment(raw: Optional[str], profile: ToolProfile) -> DocumentSet:
    text = raw.replace("\r\n", "\n") if isinstance(raw, str) else ""
    logger.debug(f"Segmenting {len(text)} characters for profile '{profile.tool_id}'")

    try:
        body = _strip_outer_fence(text)
        extracted = {section.key: extract_section(body, section, profile) for section in profile.sections}
    except Exception:
        logger.exception(f"Segmentation failed for profile '{profile.tool_id}', using fallback")
        return default_documents(text, profile)

    if not any(extracted.values()):
        logger.debug("No structured content found, using fallback")
        return default_documents(text, profile)

    documents: DocumentSet = {}
    for section in profile.sections:
        content = extracted[section.key]
        if content is None:
            logger.debug(f"{section.key}: not found, using default content")
            content = section.default
        documents[section.key] = content
    return documents
