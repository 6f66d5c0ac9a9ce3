import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from generate.composer import (
    build_enhance_prompt,
    build_generate_prompt,
    build_prompt,
    render_document_set,
)
from generate.models import GenerateRequest
from profiles import list_profiles, resolve
from segmenter import segment


def make_request(**overrides) -> GenerateRequest:
    base = dict(
        title="Task Manager",
        stack=["react", "fastapi", "postgresql"],
        requirements="Users can create and assign tasks.",
        selectedAiTool="github-copilot",
        action="generate",
    )
    base.update(overrides)
    return GenerateRequest(**base)


def test_generate_prompt_includes_fields_and_tool_text():
    profile = resolve("cursor")
    prompt = build_generate_prompt("Task Manager", ["react", "vite"], "Kanban board", profile)
    assert "optimized for Cursor AI" in prompt
    assert "Title: Task Manager" in prompt
    assert "Technology Stack: react, vite" in prompt
    assert "Requirements: Kanban board" in prompt
    assert profile.instructions in prompt
    assert prompt.endswith(profile.output_format)


def test_output_format_braces_survive_formatting():
    prompt = build_generate_prompt("T", ["go"], "R", resolve("cursor"))
    assert 'globs: "**/*.{js,ts,jsx,tsx,py,java,cpp,go,rs}"' in prompt


def test_enhance_prompt_lists_every_section():
    profile = resolve("github-copilot")
    prompt = build_enhance_prompt("previous text", profile)
    assert "enhance the following three-part prompt structure" in prompt
    assert "specifically GitHub Copilot (VS Code)" in prompt
    assert "- ## Main Prompt section\n" in prompt
    assert "- ## Custom Instructions section (in markdown code block)" in prompt
    assert "- ## Workspace Instructions section (in markdown code block)" in prompt
    assert "previous text" in prompt


def test_enhance_prompt_for_two_section_tool():
    prompt = build_enhance_prompt("p", resolve("windsurf"))
    assert "two-part prompt structure" in prompt
    assert "- ## Windsurf-Specific Configuration section\n" in prompt


def test_enhance_prompt_for_single_document_tool():
    prompt = build_enhance_prompt("improve me", resolve("general"))
    assert "more effective for General AI Assistant" in prompt
    assert "Maintain the exact same structure" not in prompt
    assert "improve me" in prompt


def test_build_prompt_dispatches_on_action():
    assert "Title: Task Manager" in build_prompt(make_request())
    enhance = build_prompt(make_request(action="enhance", requirements="## Main Prompt\nold"))
    assert "## Main Prompt\nold" in enhance
    assert "Title: Task Manager" not in enhance


def test_build_prompt_unknown_tool_uses_generic_profile():
    prompt = build_prompt(make_request(selectedAiTool="mystery-ide"))
    assert "optimized for General AI Assistant" in prompt


def test_rendered_documents_segment_back_to_the_same_files():
    profile = resolve("github-copilot")
    files = {
        "mainPrompt": "Build the app.",
        "copilotInstructions": "# Instructions\n\n## Overview\nText.",
        "workspaceInstructions": "---\napplyTo: \"**\"\n---\n\n# Workspace",
    }
    rendered = render_document_set(files, profile)
    assert rendered.startswith("## Main Prompt\nBuild the app.\n\n## Custom Instructions\n```markdown\n")
    assert segment(rendered, profile) == files


def test_render_uses_fallback_for_empty_main_prompt():
    profile = resolve("cursor")
    rendered = render_document_set({"mainPrompt": ""}, profile, fallback="raw result")
    assert rendered.startswith("## Main Prompt\nraw result")
    assert "## Code Generation Rules\n```markdown\n\n```" in rendered


def test_render_single_document_tool_is_plain_text():
    assert render_document_set({"mainPrompt": "Just this"}, resolve("general")) == "Just this"
    assert render_document_set({}, resolve("general"), fallback="raw") == "raw"


def test_default_documents_survive_an_enhance_round_trip():
    for profile in list_profiles():
        if not profile.is_multi_document:
            continue
        defaults = {section.key: section.default for section in profile.sections}
        assert segment(render_document_set(defaults, profile), profile) == defaults, profile.tool_id
