"""
Static registry of the AI coding assistants a prompt can be generated for.

Each profile bundles the text injected into the generation request with the
sections the segmenter expects back. Adding a tool means adding an entry to
TOOL_PROFILES; no code paths branch on tool ids.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from . import defaults
from .templates import OUTPUT_FORMATS, TOOL_INSTRUCTIONS

logger = logging.getLogger(__name__)

GENERIC_TOOL_ID = "general"
PRIMARY_KEY = "mainPrompt"


@dataclass(frozen=True)
class SectionSpec:
    """One logical document expected in a model response."""

    key: str
    labels: Tuple[str, ...]
    default: str
    fence: Optional[str] = None
    filename: Optional[str] = None

    @property
    def heading(self) -> str:
        """Canonical heading text used when the section is written back out."""
        return self.labels[0]


@dataclass(frozen=True)
class ToolProfile:
    tool_id: str
    display_name: str
    instructions: str
    output_format: str
    sections: Tuple[SectionSpec, ...]

    @property
    def primary(self) -> SectionSpec:
        return self.sections[0]

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(section.key for section in self.sections)

    @property
    def labels(self) -> Tuple[str, ...]:
        """Every header label recognized for this profile, in section order."""
        return tuple(label for section in self.sections for label in section.labels)

    @property
    def is_multi_document(self) -> bool:
        return len(self.sections) > 1


MAIN_PROMPT_SECTION = SectionSpec(
    key=PRIMARY_KEY,
    labels=("Main Prompt",),
    default=defaults.MAIN_PROMPT_DEFAULT,
    filename="prompt.md",
)


def _profile(tool_id: str, display_name: str, *extra_sections: SectionSpec) -> ToolProfile:
    return ToolProfile(
        tool_id=tool_id,
        display_name=display_name,
        instructions=TOOL_INSTRUCTIONS[tool_id],
        output_format=OUTPUT_FORMATS[tool_id],
        sections=(MAIN_PROMPT_SECTION,) + extra_sections,
    )


_PROFILES = (
    _profile(
        "github-copilot",
        "GitHub Copilot (VS Code)",
        SectionSpec(
            key="copilotInstructions",
            labels=("Custom Instructions", "GitHub Copilot Instructions"),
            default=defaults.COPILOT_INSTRUCTIONS_DEFAULT,
            fence="markdown",
            filename=".github/copilot-instructions.md",
        ),
        SectionSpec(
            key="workspaceInstructions",
            labels=("Workspace Instructions",),
            default=defaults.COPILOT_WORKSPACE_DEFAULT,
            fence="markdown",
            filename=".github/instructions/project.instructions.md",
        ),
    ),
    # Cursor shares the Copilot document keys so clients render both the same way
    _profile(
        "cursor",
        "Cursor AI",
        SectionSpec(
            key="copilotInstructions",
            labels=("Cursor Rules",),
            default=defaults.CURSOR_RULES_DEFAULT,
            fence="markdown",
            filename=".cursor/rules/project-rules.mdc",
        ),
        SectionSpec(
            key="workspaceInstructions",
            labels=("Code Generation Rules",),
            default=defaults.CURSOR_CODE_GENERATION_DEFAULT,
            fence="markdown",
            filename=".cursor/rules/code-generation.mdc",
        ),
    ),
    _profile(
        "windsurf",
        "Windsurf",
        SectionSpec(
            key="windsurfConfiguration",
            labels=("Windsurf-Specific Configuration", "Windsurf Configuration"),
            default=defaults.WINDSURF_CONFIGURATION_DEFAULT,
            filename=".windsurfrules",
        ),
    ),
    _profile(
        "v0",
        "v0 by Vercel",
        SectionSpec(
            key="componentGuidelines",
            labels=("Component Guidelines",),
            default=defaults.V0_COMPONENT_GUIDELINES_DEFAULT,
        ),
    ),
    _profile(
        "claude",
        "Claude (Anthropic)",
        SectionSpec(
            key="additionalContext",
            labels=("Additional Context",),
            default=defaults.CLAUDE_ADDITIONAL_CONTEXT_DEFAULT,
        ),
    ),
    _profile(
        "chatgpt",
        "ChatGPT",
        SectionSpec(
            key="followUpInstructions",
            labels=("Follow-up Instructions", "Follow up Instructions"),
            default=defaults.CHATGPT_FOLLOW_UP_DEFAULT,
        ),
    ),
    _profile(GENERIC_TOOL_ID, "General AI Assistant"),
)

TOOL_PROFILES: Dict[str, ToolProfile] = {profile.tool_id: profile for profile in _PROFILES}


def resolve(tool_id: Optional[str]) -> ToolProfile:
    """Return the profile for tool_id, falling back to the generic profile."""
    normalized = str(tool_id or "").strip().lower()
    profile = TOOL_PROFILES.get(normalized)
    if profile is None:
        logger.info(f"Unknown AI tool '{tool_id}', using '{GENERIC_TOOL_ID}' profile")
        return TOOL_PROFILES[GENERIC_TOOL_ID]
    return profile


def display_name(tool_id: Optional[str]) -> str:
    return resolve(tool_id).display_name


def list_profiles() -> List[ToolProfile]:
    return list(TOOL_PROFILES.values())
