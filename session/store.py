"""
Client-side session persistence.

The form fields and the last generated documents are mirrored into a small
JSON file so an interrupted session can be picked up again. The server keeps
no session state; an enhance request resends everything it needs.
"""
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    title: str = ""
    stack: List[str] = Field(default_factory=list)
    requirements: str = ""
    selectedAiTool: str = ""
    generatedPrompt: str = ""
    generatedFiles: Dict[str, str] = Field(default_factory=dict)
    currentStep: int = 1
    timestamp: Optional[str] = None

    def has_content(self) -> bool:
        """Only sessions with something the user typed or generated are worth restoring."""
        return bool(
            self.title
            or self.requirements
            or self.generatedPrompt
            or self.stack
            or any(self.generatedFiles.values())
        )

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.title.strip():
            missing.append("title")
        if not self.selectedAiTool:
            missing.append("AI tool")
        if not self.stack:
            missing.append("technology stack")
        if not self.requirements.strip():
            missing.append("requirements")
        return missing


class SessionStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[SessionState]:
        """Restore the saved session; corrupted data is discarded, never raised."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.error(f"Failed to read saved session {self.path}: {exc}")
            return None

        try:
            state = SessionState.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as exc:
            logger.warning(f"Failed to parse saved session, discarding it: {exc}")
            self.clear()
            return None

        return state if state.has_content() else None

    def save(self, state: SessionState) -> SessionState:
        state = state.model_copy(update={"timestamp": datetime.now(timezone.utc).isoformat()})
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(state.model_dump(), ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
        return state

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.error(f"Failed to clear saved session {self.path}: {exc}")
