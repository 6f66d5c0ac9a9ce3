from typing import Mapping, Optional, Sequence

from profiles import SectionSpec, ToolProfile, resolve

from .models import GenerateRequest
from .prompts import PART_COUNT_WORDS, PROMPT_ENHANCEMENT_PROMPTS, PROMPT_GENERATION_TEMPLATE


def build_generate_prompt(title: str, stack: Sequence[str], requirements: str, profile: ToolProfile) -> str:
    return PROMPT_GENERATION_TEMPLATE.format(
        tool_name=profile.display_name,
        title=title,
        stack=", ".join(stack),
        requirements=requirements,
        tool_instructions=profile.instructions,
        output_format=profile.output_format,
    )


def _section_bullet(section: SectionSpec) -> str:
    suffix = f" (in {section.fence} code block)" if section.fence else ""
    return f"- ## {section.heading} section{suffix}"


def build_enhance_prompt(previous: str, profile: ToolProfile) -> str:
    """Ask the model to improve a previous result, keeping its section layout."""
    if not profile.is_multi_document:
        return PROMPT_ENHANCEMENT_PROMPTS['single'].format(
            tool_name=profile.display_name,
            previous=previous,
        )

    part_count = len(profile.sections)
    return PROMPT_ENHANCEMENT_PROMPTS['structured'].format(
        tool_name=profile.display_name,
        part_count=PART_COUNT_WORDS.get(part_count, str(part_count)),
        previous=previous,
        section_list="\n".join(_section_bullet(section) for section in profile.sections),
    )


def build_prompt(req: GenerateRequest) -> str:
    profile = resolve(req.selectedAiTool)
    if req.action == "enhance":
        return build_enhance_prompt(req.requirements, profile)
    return build_generate_prompt(req.title, req.stack, req.requirements, profile)


def _render_section(section: SectionSpec, content: str) -> str:
    if section.fence:
        return f"## {section.heading}\n```{section.fence}\n{content}\n```"
    return f"## {section.heading}\n{content}"


def render_document_set(files: Mapping[str, str], profile: ToolProfile, fallback: Optional[str] = None) -> str:
    """Turn a document set back into the sectioned text an enhance request resubmits.

    The main document falls back to the raw previous result when it is empty.
    Single-document tools resubmit the main document as plain text.
    """
    primary = files.get(profile.primary.key) or fallback or ""
    if not profile.is_multi_document:
        return primary

    parts = [_render_section(profile.primary, primary)]
    for section in profile.sections[1:]:
        parts.append(_render_section(section, files.get(section.key) or ""))
    return "\n\n".join(parts)
