import os
import asyncio
import logging
from typing import Any, Dict, List, Optional

from groq import Groq

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT_SECONDS = 60.0


class GenerationError(Exception):
    """The completion service failed or returned nothing usable."""


# Helper function to call Groq API with timeout
async def call_groq_with_timeout(
    client: Groq,
    model: str,
    temperature: float,
    messages: List[Dict[str, Any]],
    max_tokens: Optional[int] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
):
    """Call Groq API in executor with timeout protection."""
    loop = asyncio.get_event_loop()

    def _call_groq():
        kwargs = {
            "model": model,
            "temperature": temperature,
            "messages": messages,
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        return client.chat.completions.create(**kwargs)

    try:
        completion = await asyncio.wait_for(
            loop.run_in_executor(None, _call_groq),
            timeout=timeout
        )
        return completion
    except asyncio.TimeoutError as exc:
        logger.error(f"Groq API call timed out after {timeout} seconds")
        raise GenerationError(f"Groq API request timed out after {timeout} seconds") from exc
    except Exception as exc:
        logger.error(f"Groq API error: {exc}", exc_info=True)
        raise GenerationError(f"Groq API error: {exc}") from exc


async def complete(prompt: str) -> str:
    """Send one composed prompt and return the completion text."""
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        logger.error("GROQ_API_KEY not configured")
        raise GenerationError("GROQ_API_KEY not configured")

    client = Groq(api_key=api_key)

    completion = await call_groq_with_timeout(
        client=client,
        model=os.getenv("GROQ_MODEL", DEFAULT_MODEL),
        temperature=float(os.getenv("GROQ_TEMPERATURE", DEFAULT_TEMPERATURE)),
        messages=[{"role": "user", "content": prompt}],
        timeout=float(os.getenv("GROQ_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
    )

    try:
        content = completion.choices[0].message.content or ""
    except (AttributeError, IndexError) as exc:
        logger.error(f"Unexpected Groq completion shape: {exc}")
        raise GenerationError("Malformed completion from Groq API") from exc

    if not content.strip():
        logger.error("Groq API returned an empty completion")
        raise GenerationError("Empty completion from Groq API")
    return content
