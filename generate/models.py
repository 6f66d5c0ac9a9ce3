from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    title: str = ""
    stack: List[str] = Field(default_factory=list)
    requirements: str = ""
    selectedAiTool: str = ""
    action: Literal["generate", "enhance"] = "generate"


class GenerateResponse(BaseModel):
    """Raw model output plus, for multi-document tools, the segmented files"""
    result: str
    files: Optional[Dict[str, str]] = None


class DocumentInfo(BaseModel):
    key: str
    heading: str
    filename: Optional[str] = None


class ToolInfo(BaseModel):
    id: str
    name: str
    documents: List[DocumentInfo]


class StackSuggestionResponse(BaseModel):
    prefix: str
    suggestion: Optional[str] = None
