"""Tool profile registry: per-assistant templates, expected sections and defaults."""

from .registry import (
    GENERIC_TOOL_ID,
    PRIMARY_KEY,
    TOOL_PROFILES,
    SectionSpec,
    ToolProfile,
    display_name,
    list_profiles,
    resolve,
)

__all__ = [
    "GENERIC_TOOL_ID",
    "PRIMARY_KEY",
    "TOOL_PROFILES",
    "SectionSpec",
    "ToolProfile",
    "display_name",
    "list_profiles",
    "resolve",
]
