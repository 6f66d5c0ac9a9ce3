import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query

from profiles import list_profiles, resolve
from profiles.stack import suggest
from segmenter import segment

from .composer import build_prompt
from .llm import GenerationError, complete
from .models import (
    DocumentInfo,
    GenerateRequest,
    GenerateResponse,
    StackSuggestionResponse,
    ToolInfo,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])

GENERATION_FAILED_DETAIL = "Failed to generate prompt"


@router.post("/generate", response_model=GenerateResponse, response_model_exclude_none=True)
async def generate_prompt(req: GenerateRequest) -> GenerateResponse:
    """Compose the request for the selected tool, call the model and segment the answer."""
    profile = resolve(req.selectedAiTool)
    prompt = build_prompt(req)
    logger.info(f"{req.action} request for '{profile.tool_id}' ({len(prompt)} prompt characters)")

    try:
        text = await complete(prompt)
    except GenerationError as exc:
        logger.error(f"Error generating prompt: {exc}")
        raise HTTPException(status_code=500, detail=GENERATION_FAILED_DETAIL)

    if not profile.is_multi_document:
        return GenerateResponse(result=text)

    files = segment(text, profile)
    return GenerateResponse(result=text, files=files)


@router.get("/tools", response_model=List[ToolInfo])
async def get_tools() -> List[ToolInfo]:
    return [
        ToolInfo(
            id=profile.tool_id,
            name=profile.display_name,
            documents=[
                DocumentInfo(key=section.key, heading=section.heading, filename=section.filename)
                for section in profile.sections
            ],
        )
        for profile in list_profiles()
    ]


@router.get("/stack/suggest", response_model=StackSuggestionResponse)
async def suggest_stack(
    prefix: str = Query(..., description="Partially typed technology"),
    selected: Optional[List[str]] = Query(None, description="Technologies already in the stack"),
) -> StackSuggestionResponse:
    return StackSuggestionResponse(prefix=prefix, suggestion=suggest(prefix, selected or []))
