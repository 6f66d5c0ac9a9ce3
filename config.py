import os
from pathlib import Path
from typing import List

# API server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def _split_origins(value: str) -> List[str]:
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "*"))

# Client (CLI) settings
PROMPT_API_URL = os.getenv("PROMPT_API_URL", "http://localhost:8000")
PROMPT_SESSION_PATH = Path(
    os.getenv("PROMPT_SESSION_PATH", str(Path.home() / ".prompt_generator" / "session.json"))
).expanduser()
