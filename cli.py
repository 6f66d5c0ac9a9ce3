"""
Terminal client for the prompt generator API.

Mirrors the web form: fields are edited with `set` (or inline on `generate`),
saved to the local session file after every change, and the last generated
documents can be shown, enhanced or exported into a project directory.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import config
from generate.composer import render_document_set
from profiles import ToolProfile, list_profiles, resolve
from profiles.stack import add_tech, remove_tech
from session import SessionState, SessionStore

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate prompt. Please try again."
MISSING_FIELDS_MESSAGE = (
    "Please fill in the title, select an AI tool, at least one technology, and requirements."
)


def apply_form_arguments(state: SessionState, args: argparse.Namespace) -> SessionState:
    updates: Dict[str, Any] = {}
    if getattr(args, "title", None) is not None:
        updates["title"] = args.title
    if getattr(args, "requirements", None) is not None:
        updates["requirements"] = args.requirements
    if getattr(args, "tool", None) is not None:
        updates["selectedAiTool"] = args.tool

    stack = list(state.stack)
    if getattr(args, "stack", None) is not None:
        stack = []
        for entry in args.stack.split(","):
            stack = add_tech(stack, entry)
    for entry in getattr(args, "tech", None) or []:
        stack = add_tech(stack, entry)
    for entry in getattr(args, "remove_tech", None) or []:
        stack = remove_tech(stack, entry.strip().lower())
    if stack != state.stack:
        updates["stack"] = stack

    return state.model_copy(update=updates) if updates else state


def build_payload(state: SessionState, action: str) -> Dict[str, Any]:
    requirements = state.requirements
    if action == "enhance":
        profile = resolve(state.selectedAiTool)
        requirements = render_document_set(state.generatedFiles, profile, fallback=state.generatedPrompt)
    return {
        "title": state.title,
        "stack": state.stack,
        "requirements": requirements,
        "selectedAiTool": state.selectedAiTool,
        "action": action,
    }


def apply_generation_result(state: SessionState, data: Dict[str, Any], action: str) -> SessionState:
    profile = resolve(state.selectedAiTool)
    result = data.get("result") or ""
    files = data.get("files")
    primary_key = profile.primary.key

    if profile.is_multi_document and isinstance(files, dict):
        generated_files = {key: files.get(key) or "" for key in profile.keys}
        generated_prompt = generated_files[primary_key] or result
    else:
        generated_files = {primary_key: result}
        generated_prompt = result

    updates: Dict[str, Any] = {"generatedPrompt": generated_prompt, "generatedFiles": generated_files}
    if action == "generate":
        updates["currentStep"] = 2
    return state.model_copy(update=updates)


def request_generation(client: httpx.Client, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = client.post("/api/generate", json=payload)
    response.raise_for_status()
    return response.json()


def _documents(state: SessionState, profile: ToolProfile) -> List[tuple]:
    docs = []
    for section in profile.sections:
        content = state.generatedFiles.get(section.key) or ""
        if section is profile.primary and not content:
            content = state.generatedPrompt
        docs.append((section, content))
    return docs


def cmd_tools(args, store, client) -> int:
    for profile in list_profiles():
        keys = ", ".join(profile.keys)
        print(f"{profile.tool_id:16s} {profile.display_name:28s} [{keys}]")
    return 0


def cmd_set(args, store, client) -> int:
    state = apply_form_arguments(store.load() or SessionState(), args)
    store.save(state)
    print("Saved.")
    return 0


def cmd_generate(args, store, client) -> int:
    action = args.command
    state = apply_form_arguments(store.load() or SessionState(), args)
    store.save(state)

    if state.missing_fields():
        print(MISSING_FIELDS_MESSAGE, file=sys.stderr)
        return 2
    if action == "enhance" and not (state.generatedPrompt or any(state.generatedFiles.values())):
        print("Nothing to enhance yet. Run `generate` first.", file=sys.stderr)
        return 2

    try:
        data = request_generation(client, build_payload(state, action))
    except (httpx.HTTPError, ValueError) as exc:
        logger.error(f"Generation request failed: {exc}")
        print(GENERATION_FAILED_MESSAGE, file=sys.stderr)
        return 1

    state = store.save(apply_generation_result(state, data, action))
    print("Prompt generated successfully!" if action == "generate" else "Prompt enhanced successfully!")
    _print_documents(state, resolve(state.selectedAiTool), None)
    return 0


def _print_documents(state: SessionState, profile: ToolProfile, key: Optional[str]) -> None:
    for section, content in _documents(state, profile):
        if key and section.key != key:
            continue
        target = f" ({section.filename})" if section.filename else ""
        print(f"===== {section.heading}{target} =====")
        print(content)
        print()


def cmd_show(args, store, client) -> int:
    state = store.load()
    if state is None or not state.generatedPrompt:
        print("No generated prompt yet.", file=sys.stderr)
        return 1
    profile = resolve(state.selectedAiTool)
    if args.document and args.document not in profile.keys:
        print(f"Unknown document '{args.document}'. Available: {', '.join(profile.keys)}", file=sys.stderr)
        return 2
    _print_documents(state, profile, args.document)
    return 0


def export_documents(state: SessionState, directory: Path) -> List[Path]:
    """Write each document to its conventional location under directory."""
    profile = resolve(state.selectedAiTool)
    written = []
    for section, content in _documents(state, profile):
        if not content:
            continue
        target = directory / (section.filename or f"{section.key}.md")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content.rstrip() + "\n", encoding="utf-8")
        written.append(target)
    return written


def cmd_export(args, store, client) -> int:
    state = store.load()
    if state is None or not state.generatedPrompt:
        print("No generated prompt yet.", file=sys.stderr)
        return 1
    for path in export_documents(state, Path(args.dir)):
        print(f"Wrote {path}")
    return 0


def cmd_clear(args, store, client) -> int:
    store.clear()
    print("All data cleared successfully!")
    return 0


def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", help="Project title")
    parser.add_argument("--requirements", help="Free-text requirements")
    parser.add_argument("--tool", help="Target AI tool id (see `tools`)")
    parser.add_argument("--stack", help="Replace the stack with a comma-separated list")
    parser.add_argument("--tech", action="append", help="Add a technology (prefix-completed)")
    parser.add_argument("--remove-tech", action="append", help="Remove a technology")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate prompts and config files for AI coding assistants.")
    parser.add_argument("--api-url", default=config.PROMPT_API_URL, help="Prompt generator API base URL")
    parser.add_argument("--session", default=str(config.PROMPT_SESSION_PATH), help="Session file path")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Logging level to use (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("tools", help="List supported AI tools").set_defaults(func=cmd_tools)

    set_parser = sub.add_parser("set", help="Update form fields")
    _add_form_arguments(set_parser)
    set_parser.set_defaults(func=cmd_set)

    for name, help_text in (("generate", "Generate a prompt"), ("enhance", "Improve the last generated prompt")):
        action_parser = sub.add_parser(name, help=help_text)
        _add_form_arguments(action_parser)
        action_parser.set_defaults(func=cmd_generate)

    show_parser = sub.add_parser("show", help="Print the generated documents")
    show_parser.add_argument("--document", help="Only print this document key")
    show_parser.set_defaults(func=cmd_show)

    export_parser = sub.add_parser("export", help="Write the generated documents into a project directory")
    export_parser.add_argument("--dir", default=".", help="Project directory (default: current)")
    export_parser.set_defaults(func=cmd_export)

    sub.add_parser("clear", help="Discard the saved session").set_defaults(func=cmd_clear)
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[httpx.Client] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    store = SessionStore(args.session)
    if client is not None:
        return args.func(args, store, client)
    with httpx.Client(base_url=args.api_url, timeout=None) as http_client:
        return args.func(args, store, http_client)


if __name__ == "__main__":
    sys.exit(main())
